"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from fincoach_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from fincoach_gateway.api.dependencies import get_request_id
from fincoach_gateway.api.v1 import expenses, savings, health, progress
from fincoach_gateway.domain.exceptions import DomainException
from fincoach_gateway.infrastructure.observability.logging import setup_logging
from fincoach_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="FinCoach Gateway",
        description="Savings simulation, financial health scoring and XP progression service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        logging.warning(f"Domain error: {exc}", extra={"request_id": get_request_id(request)})
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(Exception)
    async def unexpected_exception_handler(request: Request, exc: Exception):
        logging.error(f"Unexpected error: {exc}", extra={"request_id": get_request_id(request)})
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(expenses.router, prefix="/v1", tags=["expenses"])
    app.include_router(savings.router, prefix="/v1", tags=["savings"])
    app.include_router(health.router, prefix="/v1", tags=["health"])
    app.include_router(progress.router, prefix="/v1", tags=["progress"])

    return app


app = create_app()
