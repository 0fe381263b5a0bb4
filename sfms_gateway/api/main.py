"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from sfms_gateway.api.errors import register_error_handlers
from sfms_gateway.api.middleware import CORSHeadersMiddleware, RequestIDMiddleware, MetricsMiddleware
from sfms_gateway.api.v1 import tax_tips
from sfms_gateway.infrastructure.observability.logging import setup_logging
from sfms_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="SFMS Gateway",
        description="Tax relief tips and debt affordability analysis",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(CORSHeadersMiddleware)

    register_error_handlers(app)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(tax_tips.router, prefix="/v1", tags=["tax-tips"])

    return app


app = create_app()
