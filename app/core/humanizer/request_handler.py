"""
Humanize Request Handler

Parses the raw request payload into a `HumanizationRequest`, runs the pipeline
and maps failures to client or generic server errors.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from app.config.settings import settings
from app.core.humanizer.diff_service import text_stats
from app.core.humanizer.errors import (
    GENERIC_FAILURE_MESSAGE,
    HumanizerError,
    InvalidModeError,
    OrchestrationError,
    ValidationError
)
from app.core.humanizer.pipeline import HumanizerPipeline
from app.dto.schemas import (
    HumanizeErrorResponse,
    HumanizeResponse,
    HumanizeStats,
    TextStats
)
from app.prompts.humanizer import DEFAULT_MODE, HumanizationMode


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HumanizationRequest:
    text: str
    mode: HumanizationMode = DEFAULT_MODE


def parse_humanize_request(payload: Any, max_chars: Optional[int] = None) -> HumanizationRequest:
    """
    Validate an untyped payload into a `HumanizationRequest`.

    Raises:
        ValidationError: If the payload is not an object or `text` is missing/empty/too long
        InvalidModeError: If `mode` is present but not a known mode
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object", error_code="INVALID_PAYLOAD")

    text = payload.get("text")
    if text is None or text == "":
        raise ValidationError("Text is required", error_code="EMPTY_TEXT")
    if not isinstance(text, str):
        raise ValidationError("Text must be a string", error_code="INVALID_PAYLOAD")

    max_chars = max_chars if max_chars is not None else settings.HUMANIZER_MAX_INPUT_CHARS
    if len(text) > max_chars:
        raise ValidationError(
            f"Text is too long ({len(text)} characters, maximum is {max_chars})",
            error_code="TEXT_TOO_LONG"
        )

    mode = payload.get("mode")
    if mode is None:
        return HumanizationRequest(text=text)

    if not isinstance(mode, str):
        raise InvalidModeError(mode, allowed=[m.value for m in HumanizationMode])
    try:
        return HumanizationRequest(text=text, mode=HumanizationMode(mode))
    except ValueError:
        raise InvalidModeError(mode, allowed=[m.value for m in HumanizationMode]) from None


def build_stats(original: str, humanized: str) -> HumanizeStats:
    original_stats = text_stats(original)
    humanized_stats = text_stats(humanized)
    return HumanizeStats(
        original=TextStats(words=original_stats.words, characters=original_stats.characters),
        humanized=TextStats(words=humanized_stats.words, characters=humanized_stats.characters)
    )


async def handle_humanize(payload: Any, pipeline: HumanizerPipeline) -> HumanizeResponse:
    """
    Validate `payload`, humanize it and build the success response.

    Raises:
        HumanizerError: Any validation or generation failure
    """
    request = parse_humanize_request(payload)
    humanized_text = await pipeline.humanize(request.text, request.mode)
    logger.info(
        "Humanized %d characters into %d characters (mode=%s)",
        len(request.text), len(humanized_text), request.mode.value
    )
    return HumanizeResponse(
        humanizedText=humanized_text,
        mode=request.mode,
        stats=build_stats(request.text, humanized_text)
    )


def build_error_response(error: HumanizerError) -> Tuple[int, HumanizeErrorResponse]:
    """
    Map a humanizer error to a status code and response body.

    Server-side failures are logged with full detail and answered with a
    generic message only.
    """
    if error.status_code < 500:
        return error.status_code, HumanizeErrorResponse(
            success=False,
            error=error.message,
            error_code=error.error_code
        )

    stage = error.stage if isinstance(error, OrchestrationError) else None
    logger.error(
        "Humanization failed: %s", error.message,
        exc_info=error,
        extra={"stage": stage}
    )
    return 500, HumanizeErrorResponse(
        success=False,
        error=GENERIC_FAILURE_MESSAGE,
        error_code=error.error_code
    )
