"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from vacancies_service.api.admin import router as admin_router
from vacancies_service.api.errors import validation_exception_handler
from vacancies_service.api.public import router as public_router
from vacancies_service.config import Settings, get_settings
from vacancies_service.context import AppContext
from vacancies_service.models.base import Base

logger = logging.getLogger(__name__)

PUBLIC_METHODS = ["GET", "POST", "OPTIONS"]
ADMIN_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


def _create_group(context: AppContext, name: str, router: APIRouter, **cors_options) -> FastAPI:
    """Build a mounted sub-application so each route group gets its own CORS policy."""
    group = FastAPI(
        title=f"{context.settings.app_name} ({name})",
        exception_handlers={RequestValidationError: validation_exception_handler},
    )
    group.state.context = context
    group.include_router(router)
    group.add_middleware(CORSMiddleware, allow_headers=["Content-Type"], **cors_options)
    return group


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    context = AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application startup and shutdown."""
        logger.info("Starting %s...", settings.app_name)
        async with context.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables verified")
        yield
        logger.info("Shutting down...")
        await context.engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Job vacancies and candidate applications",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.context = context

    app.mount(
        "/api",
        _create_group(context, "public", public_router, allow_origins=["*"], allow_methods=PUBLIC_METHODS),
    )
    app.mount(
        "/admin",
        _create_group(
            context,
            "admin",
            admin_router,
            allow_origins=settings.admin_allowed_origins,
            allow_methods=ADMIN_METHODS,
            allow_credentials=True,
        ),
    )

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "app": settings.app_name}

    return app
