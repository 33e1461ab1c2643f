from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger("track_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Writes one access log line per request.

    Any exception escaping the application is logged with its traceback and
    answered with a plain 500 so a single failing request never takes the
    worker down with it.
    """

    def __init__(self, app, *, slow_request_ms: float = 1000.0):
        super().__init__(app)
        self.slow_request_ms = slow_request_ms

    @staticmethod
    def _client(request: Request) -> str:
        client = request.client
        return client.host if client else "unknown"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception(
                f"{self._client(request)} {request.method} {request.url.path} "
                f"500 {elapsed_ms:.1f}ms unhandled error"
            )
            return JSONResponse({"detail": "Internal Server Error"}, status_code=500)

        elapsed_ms = (time.perf_counter() - started) * 1000
        message = (
            f"{self._client(request)} {request.method} {request.url.path} "
            f"{response.status_code} {elapsed_ms:.1f}ms"
        )
        if elapsed_ms >= self.slow_request_ms:
            logger.warning(f"{message} (slow)")
        else:
            logger.info(message)
        return response
