"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from teacher_api.api import create_api_router
from teacher_api.config import settings
from teacher_api.utils.db import close_db, init_db
from teacher_api.utils.exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    await init_db()
    yield
    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.API_TITLE,
        description="CRUD service for teacher records",
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    app.include_router(create_api_router())

    return app
