"""
Domain Exception Handler.

Translates ``PinkNailError`` subclasses raised by the service layer into
HTTP responses carrying the exception's status code and message.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from pinknail.core.exceptions import PinkNailError
from pinknail.core.logging_config import get_logger

logger = get_logger(__name__)


async def domain_exception_handler(request: Request, exc: PinkNailError) -> JSONResponse:
    """
    Return ``{"detail": message}`` with the status code of the domain error.

    Args:
        request: The HTTP request that caused the exception
        exc: The domain exception that was raised

    Returns:
        JSONResponse with the error message
    """
    logger.warning(
        f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}",
        extra={"status_code": exc.status_code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})
