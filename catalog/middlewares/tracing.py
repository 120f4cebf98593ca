"""
Request tracing middleware
Assigns a trace ID to every request and logs its duration
"""
import time
import logging
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

class TracingMiddleware(BaseHTTPMiddleware):
    """
    Reuses the incoming trace header or generates one, exposes it on
    `request.state.trace_id` and echoes it on the response.
    """

    def __init__(self, app: ASGIApp, trace_header: str = "X-Trace-ID"):
        super().__init__(app)
        self.trace_header = trace_header

    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get(self.trace_header) or str(uuid.uuid4())
        request.state.trace_id = trace_id

        start_time = time.perf_counter()
        logger.info(
            "Request started",
            extra={"trace_id": trace_id, "method": request.method, "path": request.url.path}
        )

        try:
            response = await call_next(request)
        except Exception:
            process_time = time.perf_counter() - start_time
            logger.exception(
                "Request failed",
                extra={
                    "trace_id": trace_id,
                    "method": request.method,
                    "path": request.url.path,
                    "process_time_ms": round(process_time * 1000, 2)
                }
            )
            raise

        process_time = time.perf_counter() - start_time
        logger.info(
            "Request completed",
            extra={
                "trace_id": trace_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "process_time_ms": round(process_time * 1000, 2)
            }
        )
        response.headers[self.trace_header] = trace_id
        return response
