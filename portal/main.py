"""
FastAPI application setup with dependency injection.
Wires translation, push notification and admin session routers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from sqlalchemy import text

from portal.config.settings import get_settings
from portal.core.db import db_session, init_db
from portal.core.dependencies import service_container
from portal.core.error_handlers import error_handler, setup_error_handlers
from portal.core.logging import configure_logging
from portal.core.metrics import snapshot_latency_stats, snapshot_outcomes
from portal.middleware import RequestContextMiddleware

settings = get_settings()

configure_logging(settings.log_level.value, settings.log_format)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management with service container.
    Creates the tables and provider clients on startup, closes them on shutdown.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    try:
        init_db()
        # Tests may install their own container before startup
        container = getattr(app.state, "service_container", None) or service_container
        await container.initialize_services()
        app.state.service_container = container

        logger.info("Application startup complete")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise

    finally:
        logger.info("Shutting down application")
        try:
            if hasattr(app.state, "service_container"):
                await app.state.service_container.cleanup_services()
            logger.info("Application shutdown complete")
        except Exception as e:
            logger.error(f"Application shutdown failed: {e}", exc_info=True)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from portal.api import (
        auth_router,
        notification_router,
        service_worker_router,
        translation_router,
    )
    app.include_router(translation_router)
    app.include_router(notification_router)
    app.include_router(auth_router)
    app.include_router(service_worker_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic health check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Health check with service, database and metrics status."""
        container = getattr(app.state, "service_container", None)
        if container is None:
            return {
                "status": "unhealthy",
                "message": "Service container not initialized",
                "version": settings.app_version,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }

        try:
            with db_session() as session:
                session.execute(text("SELECT 1"))
            database = {"status": "healthy", "connection": "ok"}
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            database = {"status": "unhealthy", "error": str(e)}

        services = container.get_status()
        overall_status = "healthy" if database["status"] == "healthy" and services["initialized"] else "degraded"

        return {
            "status": overall_status,
            "version": settings.app_version,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "details": {
                "database": database,
                "services": services,
                "translation_latency": snapshot_latency_stats(),
                "outcomes": snapshot_outcomes(),
            },
            "error_statistics": error_handler.get_error_statistics(),
        }

    return app


# Create application instance
app = create_app()
