"""Request logging middleware.

Logs every HTTP request with method, path, status code, latency, the calling
profile id (from the ``profile_id`` header, if any) and a short request ID.
The request ID is stored on request.state for exception handlers and echoed
back in the ``X-Request-ID`` response header.

Log format:
    INFO [POST] /jobs/3/pay → 200 (23ms) profile=1 req_a1b2c3d4e5f6
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("mp.request")

REQUEST_ID_HEADER = "X-Request-ID"


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = new_request_id()

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        logger.info(
            "[%s] %s → %d (%.0fms) profile=%s %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request.headers.get("profile_id", "-"),
            request.state.request_id,
        )
        return response
