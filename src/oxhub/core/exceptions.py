"""Domain error taxonomy and the handlers that render the failure envelope."""

from datetime import UTC, datetime
from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.oxhub.core.logging import get_logger

logger = get_logger(__name__)


class AppError(Exception):
    """Base class for errors that cross the service boundary."""

    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str, *, code: str | None = None, **details: Any):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = details


class InvalidInput(AppError):
    status_code = 400
    code = "invalid_input"


class Unauthenticated(AppError):
    status_code = 401
    code = "unauthenticated"


class Forbidden(AppError):
    status_code = 403
    code = "forbidden"


class NotFound(AppError):
    status_code = 404
    code = "not_found"


class Conflict(AppError):
    """Uniqueness or state violation. Reported as 400 by convention."""

    status_code = 400
    code = "conflict"


class AlreadyMember(Conflict):
    code = "already_member"


class AlreadyExists(Conflict):
    code = "already_exists"


RETRYABLE_UPSTREAM_CODES = frozenset(
    {"ox_timeout", "ox_server_error", "ox_unavailable", "email_unavailable"}
)


class ExternalDependencyFailure(AppError):
    """An upstream (the OX API or the email provider) failed or rejected the call.

    The status stays 400; callers tell the failure modes apart by ``code``
    (``ox_unauthorized``, ``ox_forbidden``, ``ox_not_found``, ``ox_timeout``,
    ``ox_server_error``, ``ox_unavailable``, ``email_unavailable``).
    """

    status_code = 400
    code = "ox_unavailable"

    @property
    def retryable(self) -> bool:
        return self.code in RETRYABLE_UPSTREAM_CODES


class ExternalValidationFailed(ExternalDependencyFailure):
    """Token validation against the OX API failed during company registration."""


def _timestamp() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def error_envelope(
    request: Request,
    status_code: int,
    message: str,
    error: dict[str, Any] | None,
) -> JSONResponse:
    """Build the uniform failure body and log the failure."""
    logger.warning(
        "Request failed",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        message=message,
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "statusCode": status_code,
            "message": message,
            "error": error,
            "timestamp": _timestamp(),
            "path": request.url.path,
            "requestId": correlation_id.get(),
        },
    )


def _validation_message(msg: str) -> str:
    prefix = "Value error, "
    return msg[len(prefix) :] if msg.startswith(prefix) else msg


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that render every failure as an envelope."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return error_envelope(
            request,
            exc.status_code,
            exc.message,
            {"code": exc.code, **exc.details},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors: list[dict[str, str]] = []
        for err in exc.errors():
            entry = {
                "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
                "message": _validation_message(str(err.get("msg", ""))),
            }
            # A path parameter shared by a guard and its route is reported twice
            if entry not in errors:
                errors.append(entry)
        message = "; ".join(e["message"] for e in errors) or "Validation failed"
        return error_envelope(
            request, 400, message, {"code": InvalidInput.code, "fields": errors}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_envelope(
            request, exc.status_code, str(exc.detail), {"code": "http_error"}
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        return error_envelope(
            request, 429, f"Rate limit exceeded: {exc.detail}", {"code": "rate_limited"}
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            path=request.url.path,
        )
        return error_envelope(request, 500, "Internal server error", {"code": "internal_error"})
