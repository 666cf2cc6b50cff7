"""API endpoints package."""

from teacher_api.api.router import create_api_router, create_health_router

__all__ = ["create_api_router", "create_health_router"]
