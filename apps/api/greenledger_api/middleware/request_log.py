"""Request logging middleware."""

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from greenledger_api.utils.metrics import request_duration

logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log each request with its status and duration, tagged by correlation ID."""

    async def dispatch(self, request: Request, call_next):
        """Process request and log the outcome."""
        correlation_id = request.headers.get("x-correlation-id") or str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        start = time.perf_counter()
        response: Response = await call_next(request)
        duration = time.perf_counter() - start

        response.headers["x-correlation-id"] = correlation_id
        request_duration.labels(method=request.method, status=str(response.status_code)).observe(duration)

        user_agent = request.headers.get("user-agent", "Unknown")
        client_ip = request.client.host if request.client else "unknown"
        logger.info(
            f"{request.method} {request.url.path} - {response.status_code} - {duration * 1000:.0f}ms "
            f"[{correlation_id}] ip={client_ip} ua={user_agent}"
        )
        return response
