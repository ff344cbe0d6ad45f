"""
Middleware shared by every catalog route: request ids, access logging and
response security headers
"""
import time
import uuid
import logging
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each catalog call with a request id and log its outcome and duration.

    The id is kept on ``request.state.request_id`` so the exception handlers
    in ``main`` can quote it in their logs and in 500 envelopes.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"[{request_id}] {request.method} {request.url.path} raised "
                f"{e.__class__.__name__} after {time.perf_counter() - started:.3f}s"
            )
            raise

        elapsed = time.perf_counter() - started
        log = logger.warning if response.status_code >= 400 else logger.info
        log(
            f"[{request_id}] {request.method} {request.url.path} -> "
            f"{response.status_code} in {elapsed:.3f}s"
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.3f}"
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Catalog responses are JSON only; forbid sniffing and framing"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        return response
