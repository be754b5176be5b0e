"""
Humanizer Prompts

Prompt templates for every humanization mode. Each template holds exactly one
`{{text}}` marker; the stealth mode is a two-stage pipeline with an
extraction template followed by a rewrite template.
"""
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple, Union

from app.core.humanizer.errors import InvalidModeError


TEXT_MARKER = "{{text}}"


class HumanizationMode(str, Enum):
    """Humanization mode options"""
    SUBTLE = "subtle"
    BALANCED = "balanced"
    STRONG = "strong"
    STEALTH = "stealth"


DEFAULT_MODE = HumanizationMode.BALANCED


class StealthTemplates(NamedTuple):
    """Ordered pair of templates for the stealth pipeline"""
    extract: str
    rewrite: str


SUBTLE_PROMPT = """Rewrite the following text to make it sound slightly more natural and conversational. Make only minor changes to improve flow and readability.

Original text:
"{{text}}"

Humanized text:"""

BALANCED_PROMPT = """Rewrite the following text to make it sound more natural, conversational, and human-like. Fix any grammatical errors, improve the flow, and make it less robotic. Do not add any new information.

Original text:
"{{text}}"

Humanized text:"""

STRONG_PROMPT = """Rewrite the following text to be much more casual, conversational, and engaging. Take creative liberties to make it sound like a real person wrote it, even if it means significantly changing the sentence structure and vocabulary.

Original text:
"{{text}}"

Humanized text:"""

STEALTH_EXTRACT_PROMPT = """Analyze the following text and extract the core ideas and key information into a list of bullet points. Do not rewrite or paraphrase, just extract the essential information.

Original text:
"{{text}}"

Core ideas:"""

STEALTH_REWRITE_PROMPT = """Write a new article from the following bullet points. The article should be well-structured, coherent, and engaging. It is crucial that you write in a style that has high perplexity and burstiness. This means you should vary sentence structure dramatically, mixing short, declarative sentences with longer, more complex ones. Use a natural, slightly informal tone, and incorporate contractions (like 'don't', 'isn't', 'it's') where they feel appropriate. Avoid overly formal or obscure words. The goal is to produce a text that is indistinguishable from human writing.

Core ideas:
"{{text}}"

New article:"""


PROMPT_TEMPLATES = MappingProxyType({
    HumanizationMode.SUBTLE: SUBTLE_PROMPT,
    HumanizationMode.BALANCED: BALANCED_PROMPT,
    HumanizationMode.STRONG: STRONG_PROMPT,
    HumanizationMode.STEALTH: StealthTemplates(
        extract=STEALTH_EXTRACT_PROMPT,
        rewrite=STEALTH_REWRITE_PROMPT,
    ),
})


def get_templates(mode: Union[HumanizationMode, str]) -> Union[str, StealthTemplates]:
    """
    Get the template(s) for a mode.

    Returns a single template string for subtle/balanced/strong and a
    `StealthTemplates` pair for stealth.

    Raises:
        InvalidModeError: If the mode is not one of the known modes
    """
    try:
        mode = HumanizationMode(mode)
    except ValueError:
        raise InvalidModeError(mode, allowed=[m.value for m in HumanizationMode]) from None
    return PROMPT_TEMPLATES[mode]


def render_template(template: str, text: str) -> str:
    """Substitute the text marker with `text` verbatim"""
    return template.replace(TEXT_MARKER, text, 1)
