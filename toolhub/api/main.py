"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from toolhub.api.middleware import RequestIDMiddleware, MetricsMiddleware
from toolhub.api.v1 import convert, interest, ip_info, loan, personal, tax
from toolhub.infrastructure.observability.logging import setup_logging
from toolhub.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Tool Hub Calculators",
        description="Tax, loan, interest and everyday calculators plus IP lookup and CSV conversion",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(tax.router, prefix="/v1", tags=["tax"])
    app.include_router(loan.router, prefix="/v1", tags=["loans"])
    app.include_router(interest.router, prefix="/v1", tags=["interest"])
    app.include_router(personal.router, prefix="/v1", tags=["personal"])
    app.include_router(ip_info.router, prefix="/v1", tags=["network"])
    app.include_router(convert.router, prefix="/v1", tags=["converters"])

    return app


app = create_app()
