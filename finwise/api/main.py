"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from finwise.api.middleware import MetricsMiddleware, RequestIDMiddleware
from finwise.api.v1 import analysis, recommendations, stats
from finwise.config import settings
from finwise.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Finwise Engine",
        description="Rule-based financial analysis and recommendations grounded in three personal-finance books",
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

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(analysis.router, prefix="/v1", tags=["analysis"])
    app.include_router(recommendations.router, prefix="/v1", tags=["recommendations"])
    app.include_router(stats.router, prefix="/v1", tags=["stats"])

    return app


app = create_app()
