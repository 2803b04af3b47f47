from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError, HTTPException
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from nexushub.utils.logger import logger
from nexushub.utils.exceptions import BaseAPIException


def failure_response(
    status_code: int,
    message: str,
    error: dict | None = None,
    headers: dict | None = None,
) -> JSONResponse:
    """Failure envelope shared by every handler below."""
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "failure",
            "status_code": status_code,
            "message": message,
            "error": error or {},
        },
        headers=headers,
    )


async def base_api_exception_handler(request: Request, exc: BaseAPIException):
    """Domain errors are expected outcomes: log at warning, not error."""
    logger.warning(
        f"{exc.__class__.__name__}: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return failure_response(exc.status_code, exc.detail)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    errors = jsonable_encoder(exc.errors())
    logger.warning(
        f"Validation error on {request.method} {request.url.path}",
        extra={"errors": errors},
    )
    return failure_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation error",
        error={"details": errors},
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    logger.error(
        f"HTTP {exc.status_code}: {exc.detail}",
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )
    return failure_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded):
    """slowapi raises this when the suggestion endpoint is hammered."""
    logger.warning(f"Rate limit exceeded on {request.url.path}: {exc.detail}")
    return failure_response(
        status.HTTP_429_TOO_MANY_REQUESTS,
        f"Rate limit exceeded: {exc.detail}",
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions and log them."""
    logger.exception(
        f"Unhandled exception on {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc,
    )
    return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
