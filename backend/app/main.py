"""
FastAPI application entry point.

Uses structured logging from synapse.logging and the shared database
manager from synapse.db.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from synapse import __version__
from synapse.config import get_settings
from synapse.db import db
from synapse.logging import RequestLoggingMiddleware, configure_logging, get_logger

from .error_handlers import register_exception_handlers
from .middleware.request_id import RequestIDMiddleware
from .routers import synapse as synapse_router

settings = get_settings()
configure_logging(level="DEBUG" if settings.debug else settings.log_level)
logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize the database on startup. Already-initialized managers are kept."""
    logger.info("app_startup", app_name=settings.app_name, version=__version__)
    db.initialize(settings.database_url)
    yield
    logger.info("app_shutdown")


def create_app() -> FastAPI:
    api_prefix = f"{settings.api_prefix}/v1"

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
    )

    # Request ID middleware (for tracing)
    app.add_middleware(RequestIDMiddleware)

    # Structured request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health_check():
        """Liveness probe."""
        return {"status": "ok"}

    @app.get("/health/ready", tags=["health"])
    def readiness_check():
        """Readiness probe: 503 until the database answers."""
        result = db.health_check()
        if not result["healthy"]:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not_ready", "checks": {"database": False}},
            )
        return {"status": "ready", "checks": {"database": True}}

    app.include_router(synapse_router.router, prefix=api_prefix)

    return app


app = create_app()
