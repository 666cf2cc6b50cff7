"""Dependency injection functions for FastAPI routes.

Uses descriptor pattern to create one dependency function per service,
so the same function object can be used with dependency_overrides.
"""

from typing import Any, Type, TypeVar

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from teacher_api.services.base import EntityStore
from teacher_api.services.teacher_service import TeacherService, TeacherStore
from teacher_api.utils.db import get_db_session

T = TypeVar("T")


class ServiceDependency:
    """Descriptor that creates a dependency injection function for a service.

    The service is built around a store bound to the request session.
    Caches the dependency function to ensure the same function object is
    returned each time, enabling proper use of FastAPI's dependency_overrides.
    """

    def __init__(
        self, service_class: Type[T], store_class: Type[EntityStore]
    ) -> None:
        """Initialize service dependency descriptor.

        Args:
            service_class: The service class to create instances of.
            store_class: The store class handed to the service.
        """
        self.service_class = service_class
        self.store_class = store_class
        self._cached_func: Any = None

    def __get__(self, instance: Any, owner: type) -> Any:
        """Create and return cached dependency function when accessed."""
        if self._cached_func is None:

            def dependency_func(
                db: AsyncSession = Depends(get_db_session),
            ) -> T:
                """Get service instance for dependency injection."""
                return self.service_class(self.store_class(db))

            self._cached_func = dependency_func
        return self._cached_func


class ServiceDependencies:
    """Container for all service dependency injection functions."""

    teacher = ServiceDependency(TeacherService, TeacherStore)


# Create singleton instance for easy access
dependencies = ServiceDependencies()
