"""Per-request log context and access logging."""

import time

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.oxhub.core.logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)

# No access line for these
_QUIET_PATHS = frozenset({"/health", "/metrics"})


async def logging_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind the request id, method and path, then log the outcome.

    The user id is bound later by the session guard, once the caller is known.
    """
    clear_request_context()
    bind_request_context(
        correlation_id.get(), method=request.method, path=request.url.path
    )
    started = time.perf_counter()
    try:
        response = await call_next(request)
        if request.url.path not in _QUIET_PATHS:
            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        return response
    finally:
        clear_request_context()
