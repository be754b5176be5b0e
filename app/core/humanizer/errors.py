"""
Humanizer Errors

Every failure of a humanize request is terminal: no partial output, no retry.
"""
from typing import Iterable, Optional


GENERIC_FAILURE_MESSAGE = "Failed to humanize text"


class HumanizerError(Exception):
    """Base class for humanizer errors"""

    error_code = "HUMANIZER_ERROR"
    status_code = 500

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code


class ValidationError(HumanizerError):
    """Missing, empty or malformed request input"""

    error_code = "INVALID_PAYLOAD"
    status_code = 400


class InvalidModeError(HumanizerError):
    """Mode outside the known set of humanization modes"""

    error_code = "INVALID_MODE"
    status_code = 400

    def __init__(self, mode, allowed: Iterable[str] = ()):
        self.mode = mode
        self.allowed = tuple(allowed)
        message = f"Invalid mode '{mode}'"
        if self.allowed:
            message += f". Must be one of: {', '.join(self.allowed)}"
        super().__init__(message)


class GenerationError(HumanizerError):
    """Any failure of a single call to the generation service"""

    error_code = "HUMANIZE_FAILED"
    status_code = 500

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class OrchestrationError(HumanizerError):
    """A generation failure during one pipeline stage"""

    error_code = "HUMANIZE_FAILED"
    status_code = 500

    def __init__(self, stage: str, error: GenerationError):
        super().__init__(f"Stage '{stage}' failed: {error.message}")
        self.stage = stage
        self.error = error
