"""
Humanization Pipeline

Renders the prompt for a mode and drives the generation calls. All modes make
one call except stealth, which extracts the core ideas first and then writes a
new text from that extraction only.
"""
import logging
from typing import Protocol

from app.config.settings import settings
from app.core.humanizer.errors import GenerationError, OrchestrationError
from app.core.humanizer.generation_client import GenerationClient, GenerationConfig
from app.prompts.humanizer import (
    HumanizationMode,
    StealthTemplates,
    get_templates,
    render_template
)


logger = logging.getLogger(__name__)


STAGE_SINGLE = "single"
STAGE_STEALTH_EXTRACT = "stealth:extract"
STAGE_STEALTH_REWRITE = "stealth:rewrite"


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


class HumanizerPipeline:
    """Runs single-stage and two-stage (stealth) humanization"""

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    async def _run_stage(self, stage: str, prompt: str) -> str:
        try:
            return await self.generator.generate(prompt)
        except GenerationError as e:
            raise OrchestrationError(stage, e) from e

    async def humanize(self, text: str, mode: HumanizationMode) -> str:
        """
        Humanize `text` with the given mode.

        Raises:
            InvalidModeError: If the mode is unknown
            OrchestrationError: If any generation call fails; nothing partial is returned
        """
        templates = get_templates(mode)

        if isinstance(templates, StealthTemplates):
            return await self._humanize_stealth(text, templates)

        logger.debug("Humanizing %d characters with mode=%s", len(text), HumanizationMode(mode).value)
        return await self._run_stage(STAGE_SINGLE, render_template(templates, text))

    async def _humanize_stealth(self, text: str, templates: StealthTemplates) -> str:
        logger.debug("Humanizing %d characters with the stealth pipeline", len(text))

        # Stage 1: bullet-point extraction of the original text
        core_ideas = await self._run_stage(
            STAGE_STEALTH_EXTRACT,
            render_template(templates.extract, text)
        )

        # Stage 2: rewrite from the extraction, never from the original text
        return await self._run_stage(
            STAGE_STEALTH_REWRITE,
            render_template(templates.rewrite, core_ideas)
        )


humanizer_pipeline = HumanizerPipeline(
    GenerationClient(GenerationConfig.from_settings(settings))
)


def get_humanizer_pipeline() -> HumanizerPipeline:
    """FastAPI dependency returning the process-wide pipeline"""
    return humanizer_pipeline
