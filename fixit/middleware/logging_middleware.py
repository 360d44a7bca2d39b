"""
Request logging middleware

One access log line per HTTP request with method, path, status, timing and
the session user when a valid bearer token was sent. The processing time is
also returned in the X-Process-Time header.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from fixit.core.logging_config import get_logger
from fixit.core.security import decode_access_token

logger = get_logger(__name__)


def request_operator(request: Request) -> str:
    """Username from the Authorization header, "anonymous" otherwise"""
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        return "anonymous"
    try:
        return decode_access_token(token).username
    except ValueError:
        return "anonymous"


class LoggingMiddleware(BaseHTTPMiddleware):
    """HTTP request/response logging"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        extra = {
            "client_ip": request.client.host if request.client else "unknown",
            "query": str(request.query_params) if request.query_params else "",
            "request_id": request.headers.get("X-Request-ID", ""),
            "operator": request_operator(request),
            "operationType": "http.request",
        }

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception("HTTP %s %s failed: %s", request.method, request.url.path, e,
                             extra={**extra, "result": "failed"})
            raise

        elapsed = time.time() - start_time
        response.headers["X-Process-Time"] = f"{elapsed:.3f}"
        if extra["request_id"]:
            response.headers["X-Request-ID"] = extra["request_id"]

        logger.info(
            "HTTP %s %s -> %s (%.3fs)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
            extra={**extra, "operationObject": request.url.path},
        )
        return response
