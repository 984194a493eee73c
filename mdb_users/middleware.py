"""
Request correlation middleware.

Every request gets a correlation ID (taken from X-Request-ID when the client
sends one) that is attached to log records and echoed on the response.
"""

import logging
import time
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .constants import REQUEST_ID_HEADER
from .observability import (
    clear_correlation_id,
    clear_request_context,
    get_logger,
    set_correlation_id,
    set_request_context,
)

logger = logging.getLogger(__name__)
contextual_logger = get_logger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        correlation_id = set_correlation_id(request.headers.get(REQUEST_ID_HEADER))
        set_request_context(method=request.method, path=request.url.path)
        start_time = time.time()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = correlation_id
            contextual_logger.info(
                "Request completed",
                extra={
                    "status_code": response.status_code,
                    "duration_ms": round((time.time() - start_time) * 1000, 2),
                },
            )
            return response
        finally:
            clear_request_context()
            clear_correlation_id()
