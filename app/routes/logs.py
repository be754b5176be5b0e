from typing import Optional
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from app.logging_config import get_recent_logs, clear_logs

router = APIRouter(prefix="/logs", tags=["Logs"])

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@router.get("", summary="Get recent server logs")
async def get_server_logs(
    count: int = 100,
    level: Optional[str] = None
):
    """
    Get the most recent server logs.

    Args:
        count: Number of log entries to return (default: 100, max: 1000)
        level: Filter by log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        List of recent log entries with timestamp, level, logger, and message
    """
    count = max(1, min(count, 1000))

    logs = get_recent_logs(count)

    if level:
        level = level.upper()
        if level in VALID_LEVELS:
            logs = [log for log in logs if log.get("level") == level]

    return JSONResponse(
        status_code=200,
        content={
            "total_logs": len(logs),
            "requested_count": count,
            "level_filter": level,
            "logs": logs
        }
    )


@router.get("/errors", summary="Get recent error logs")
async def get_error_logs(count: int = 50, stage: Optional[str] = None):
    """
    Get only ERROR and CRITICAL level logs.

    Args:
        count: Number of log entries to return (default: 50, max: 500)
        stage: Only failures of this pipeline stage (single, stealth:extract, stealth:rewrite)
    """
    count = max(1, min(count, 500))

    error_logs = [
        log for log in get_recent_logs(1000)
        if log.get("level") in ["ERROR", "CRITICAL"]
        and (stage is None or log.get("stage") == stage)
    ]
    error_logs = error_logs[-count:]

    return JSONResponse(
        status_code=200,
        content={
            "total_errors": len(error_logs),
            "stage_filter": stage,
            "logs": error_logs
        }
    )


@router.delete("", summary="Clear server logs")
async def clear_server_logs():
    """Clear the in-memory log buffer."""
    clear_logs()

    return JSONResponse(
        status_code=200,
        content={
            "success": True,
            "message": "Log buffer cleared"
        }
    )
