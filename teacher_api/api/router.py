"""API router factory with core endpoints."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from teacher_api.utils.db import verify_db_connection

logger = logging.getLogger(__name__)


def create_health_router() -> APIRouter:
    """Create router with health check endpoints.

    Returns:
        APIRouter with /health and /health/db.
    """
    router = APIRouter(tags=["Health"])

    @router.get("/health", status_code=status.HTTP_200_OK)
    async def health_check() -> dict:
        """Health check endpoint - basic application health."""
        return {"status": "healthy"}

    @router.get("/health/db", status_code=status.HTTP_200_OK, response_model=None)
    async def health_check_db() -> JSONResponse:
        """Deep health check - includes database connectivity check."""
        try:
            await verify_db_connection()
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "database": "disconnected"},
            )
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"status": "healthy", "database": "connected"},
        )

    return router


def create_api_router() -> APIRouter:
    """Create router with every public endpoint.

    Returns:
        APIRouter with health and teachers routes.
    """
    from teacher_api.api.teachers import router as teachers_router

    router = APIRouter()
    router.include_router(create_health_router())
    router.include_router(teachers_router)
    return router
