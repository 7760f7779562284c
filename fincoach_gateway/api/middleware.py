"""FastAPI middleware for request tracing and metrics"""

import re
import uuid
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from fincoach_gateway.infrastructure.observability.metrics import request_duration_histogram

REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Propagate a caller's X-Request-ID when well-formed, otherwise mint one"""

    async def dispatch(self, request: Request, call_next):
        incoming = request.headers.get("X-Request-ID", "")
        request_id = incoming if REQUEST_ID_PATTERN.match(incoming) else str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


UNMATCHED_ENDPOINT = "unmatched"


def route_template(request: Request) -> str:
    """Matched route path ("/v1/progress"), so label cardinality stays bounded by the route table"""
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ENDPOINT)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record HTTP latency per route template; unrouted paths share one label"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        duration = time.perf_counter() - start_time
        request_duration_histogram.labels(
            method=request.method,
            endpoint=route_template(request),
            status=response.status_code,
        ).observe(duration)

        return response
