"""
Main FastAPI application entry point.

`create_app()` builds the application; `app` is the instance served by
uvicorn (`uvicorn credential_service.main:app`).
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from credential_service.core.config import get_settings
from credential_service.core.container import get_database, get_logger
from credential_service.presentation.routers import auth_router, system_router
from credential_service.presentation.routers.errors import (
    register_exception_handlers,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: create missing tables when AUTO_CREATE_SCHEMA is set
    - Shutdown: dispose of the connection pool
    """
    settings = get_settings()
    logger = get_logger()
    database = get_database()

    if settings.auto_create_schema:
        await database.create_all()

    logger.info(
        "Application started",
        app_name=settings.app_name,
        environment=settings.environment.value,
        email_backend=settings.email_backend.value,
    )

    yield

    await database.close()
    logger.info("Application stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application from current settings."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Registration, login, password reset and email verification",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    app.include_router(system_router)
    app.include_router(auth_router)
    return app


app = create_app()
