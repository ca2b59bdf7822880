"""Request logging middleware with correlation ID"""

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("catalog-api.middleware.logging")

CORRELATION_ID_HEADER = "X-Correlation-ID"


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with a correlation ID and its duration.

    An incoming X-Correlation-ID header is reused, otherwise a new one
    is generated. The ID is echoed back in the response headers; for
    unhandled errors the 500 handler adds it from request.state.
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        start_time = time.perf_counter()
        extra = {
            "correlation_id": correlation_id,
            "method": request.method,
            "path": request.url.path,
        }

        logger.info(f"Request started: {request.method} {request.url.path}", extra=extra)

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            logger.error(
                f"Request failed: {request.method} {request.url.path} - {e}",
                extra={**extra, "error": str(e), "duration_ms": duration_ms},
                exc_info=True,
            )
            raise

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.info(
            f"Request completed: {request.method} {request.url.path} - {response.status_code}",
            extra={**extra, "status_code": response.status_code, "duration_ms": duration_ms},
        )

        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
