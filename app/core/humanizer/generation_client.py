"""
Generation Client

Wraps a single call to Google Gemini: submit a rendered prompt, get text back.
No retry and no caching; every failure surfaces as a GenerationError.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from google import genai
from google.genai import types

from app.config.settings import Settings
from app.core.humanizer.errors import GenerationError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationConfig:
    """Credentials and model settings, fixed for the process lifetime"""
    api_key: Optional[str]
    model: str
    temperature: Optional[float] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationConfig":
        return cls(
            api_key=settings.GOOGLE_API_KEY,
            model=settings.HUMANIZER_MODEL,
            temperature=settings.HUMANIZER_TEMPERATURE,
        )


class GenerationClient:
    """Client for generating text with Google Gemini"""

    def __init__(self, config: GenerationConfig, client: Optional[genai.Client] = None):
        """
        Initialize the generation client.

        Args:
            config: Credentials and model identifier
            client: Pre-built `genai.Client`; built from `config.api_key` when omitted
        """
        self.config = config
        self.api_key_configured = bool(config.api_key) or client is not None

        if client is not None:
            self.client = client
        elif self.api_key_configured:
            self.client = genai.Client(api_key=config.api_key)
        else:
            self.client = None
            logger.warning("GOOGLE_API_KEY not configured. Humanization will not work.")

    @property
    def model(self) -> str:
        return self.config.model

    def _build_generation_config(self) -> Optional[types.GenerateContentConfig]:
        if self.config.temperature is None:
            return None
        return types.GenerateContentConfig(temperature=self.config.temperature)

    async def generate(self, prompt: str) -> str:
        """
        Make exactly one generation call for `prompt`.

        Returns:
            The generated text

        Raises:
            GenerationError: On missing credentials, transport, auth, quota or
                service errors, or an empty response
        """
        if self.client is None:
            raise GenerationError(
                "Google API key not configured. Please set GOOGLE_API_KEY environment variable."
            )

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._build_generation_config()
            )
        except Exception as e:
            raise GenerationError(f"Generation request failed: {e}", cause=e) from e

        try:
            text = response.text
        except Exception as e:
            raise GenerationError(f"Malformed generation response: {e}", cause=e) from e

        if not text or not text.strip():
            raise GenerationError("Empty response from generation service")

        return text
