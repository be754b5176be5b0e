from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from app.config.settings import settings
from app.core.humanizer.diff_service import compute_diff, render_diff_html
from app.core.humanizer.errors import HumanizerError, ValidationError
from app.core.humanizer.pipeline import HumanizerPipeline, get_humanizer_pipeline
from app.core.humanizer.request_handler import build_error_response, build_stats, handle_humanize
from app.dto.schemas import (
    DiffRequest,
    DiffResponse,
    DiffSpanSchema,
    HumanizeErrorResponse,
    HumanizeModesResponse,
    HumanizeRequest,
    HumanizeResponse,
    ModeInfo
)
from app.prompts.humanizer import DEFAULT_MODE, PROMPT_TEMPLATES, StealthTemplates

router = APIRouter(prefix="/humanize", tags=["Humanizer"])


def _error_json(error: HumanizerError) -> JSONResponse:
    status_code, error_response = build_error_response(error)
    return JSONResponse(status_code=status_code, content=error_response.model_dump())


@router.post(
    "",
    response_model=HumanizeResponse,
    responses={400: {"model": HumanizeErrorResponse}, 500: {"model": HumanizeErrorResponse}},
    summary="Humanize text",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": HumanizeRequest.model_json_schema(ref_template="#/components/schemas/{model}")
                }
            }
        }
    }
)
async def humanize_text(
    raw_request: Request,
    pipeline: HumanizerPipeline = Depends(get_humanizer_pipeline)
):
    """
    Rewrite text so it reads more naturally.

    Modes:
    - subtle: minor changes to flow and readability
    - balanced (default): natural, conversational rewrite without new information
    - strong: casual rewrite with creative liberties
    - stealth: extract the core ideas, then write a new text from them (two calls)

    Any generation failure returns a generic 500 error.
    """
    # The raw body is validated here so that empty text and unknown modes
    # get the same error shape as every other humanizer error
    try:
        payload = await raw_request.json()
    except ValueError:
        return _error_json(ValidationError("Request body must be valid JSON", error_code="INVALID_PAYLOAD"))

    try:
        return await handle_humanize(payload, pipeline)
    except HumanizerError as e:
        return _error_json(e)


@router.get("/modes", response_model=HumanizeModesResponse, summary="Get available humanization modes")
async def get_humanize_modes():
    """List the humanization modes and how many generation calls each makes."""
    modes = [
        ModeInfo(
            id=mode,
            name=mode.value.capitalize(),
            stages=len(templates) if isinstance(templates, StealthTemplates) else 1
        )
        for mode, templates in PROMPT_TEMPLATES.items()
    ]
    return HumanizeModesResponse(modes=modes, default_mode=DEFAULT_MODE)


@router.post("/diff", response_model=DiffResponse, summary="Diff original and humanized text")
async def diff_texts(request: DiffRequest):
    """
    Compute the word-level diff between the original and the humanized text.

    Returns the tagged spans (equal / insert / delete) and their HTML rendering.
    """
    spans = compute_diff(request.original, request.result)
    return DiffResponse(
        spans=[DiffSpanSchema(op=span.op, text=span.text) for span in spans],
        html=render_diff_html(spans),
        stats=build_stats(request.original, request.result)
    )


@router.get("/health", summary="Humanizer service health check")
async def humanize_health_check():
    """
    Check if the humanizer is configured with a Google API key.
    """
    if not settings.GOOGLE_API_KEY:
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "message": "Google API key not configured",
                "details": "Please set GOOGLE_API_KEY in environment variables",
                "model": settings.HUMANIZER_MODEL
            }
        )

    return {"status": "healthy", "model": settings.HUMANIZER_MODEL}
