"""
Request logging middleware.

Every request gets an id, taken from the request id header when the client
sends one and generated otherwise. The id is echoed in the response header
and attached to the access log line together with method, path, status and
duration.
"""

import time
import uuid
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from storefront.logging import Logger, ensure_logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware assigning request ids and logging each request.

    The id is stored on ``request.state.request_id`` for handlers that want
    to include it in their own log records.
    """

    def __init__(
        self,
        app: ASGIApp,
        header_name: str = "X-Request-ID",
        logger: Optional[Logger] = None,
    ):
        super().__init__(app)
        self.header_name = header_name
        self.logger = ensure_logger(logger, __name__)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self.logger.exception(
                f"{request.method} {request.url.path} failed after {duration_ms:.2f}ms",
                extra={"request_id": request_id},
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers[self.header_name] = request_id
        self.logger.info(
            f"{request.method} {request.url.path} {response.status_code} {duration_ms:.2f}ms",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response
