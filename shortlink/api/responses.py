import traceback

from fastapi.responses import JSONResponse

from shortlink.core.config import settings
from shortlink.schemas import ErrorResponse


def error_response(status_code: int, error: str, **extra) -> JSONResponse:
    body = ErrorResponse(error=error, **extra)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def internal_error_response(exc: Exception) -> JSONResponse:
    """500 body carrying the failure message, plus the traceback in development."""
    details = None
    if settings.is_development:
        details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return error_response(500, "Internal server error", message=str(exc) or type(exc).__name__, details=details)
