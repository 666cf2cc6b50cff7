"""Generic id-keyed entity store over an async SQLAlchemy session."""

import enum
import logging
from typing import Generic, List, Optional, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from teacher_api.exceptions import StoreError
from teacher_api.models.base import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class SaveResult(enum.Enum):
    """Outcome of committing pending changes."""

    COMMITTED = "committed"
    # A row targeted by an UPDATE or DELETE was gone at commit time
    CONFLICT = "conflict"


class EntityStore(Generic[T]):
    """Collection of records of one model keyed by integer id.

    Staging operations (add, remove, attribute changes on loaded records)
    are only persisted by save(). Read operations don't commit.

    Usage:
        class UserStore(EntityStore[User]):
            model = User

        store = UserStore(db_session)
        store.add(User(name="John"))
        result = await store.save()

    Attributes:
        db: Database session for operations
        model: Model class this store manages
    """

    model: type[T]

    def __init__(self, db: AsyncSession) -> None:
        """Initialize store with database session.

        Args:
            db: Database session for operations
        """
        self.db = db

    def add(self, instance: T) -> None:
        """Stage a new record; its id is assigned on save."""
        self.db.add(instance)
        logger.debug(
            f"Staged new {self.model.__name__}", extra={"model": self.model.__name__}
        )

    async def remove(self, instance: T) -> None:
        """Stage deletion of a loaded record."""
        await self.db.delete(instance)
        logger.debug(
            f"Staged removal of {self.model.__name__}",
            extra={"model": self.model.__name__, "id": instance.id},
        )

    async def get_by_id(self, record_id: int) -> Optional[T]:
        """Retrieve a record by its primary key ID.

        Args:
            record_id: Primary key ID

        Returns:
            Model instance or None if not found

        Raises:
            StoreError: If database operation fails
        """
        try:
            return await self.db.get(self.model, record_id)
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to get {self.model.__name__} by id",
                extra={"model": self.model.__name__, "id": record_id, "error": str(e)},
                exc_info=True,
            )
            raise StoreError(f"Database error during get: {str(e)}") from e

    async def get_all(self) -> List[T]:
        """Retrieve all records in the store's natural order.

        Raises:
            StoreError: If database operation fails
        """
        try:
            result = await self.db.execute(select(self.model))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to get all {self.model.__name__}",
                extra={"model": self.model.__name__, "error": str(e)},
                exc_info=True,
            )
            raise StoreError(f"Database error during get_all: {str(e)}") from e

    async def exists(self, record_id: int) -> bool:
        """Check whether a record with the given id is stored.

        Always asks the database, never the session identity map.

        Raises:
            StoreError: If database operation fails
        """
        try:
            result = await self.db.execute(
                select(self.model.id).where(self.model.id == record_id).limit(1)
            )
            return result.first() is not None
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to check {self.model.__name__} existence",
                extra={"model": self.model.__name__, "id": record_id, "error": str(e)},
                exc_info=True,
            )
            raise StoreError(f"Database error during exists: {str(e)}") from e

    async def count(self) -> int:
        """Count stored records.

        Raises:
            StoreError: If database operation fails
        """
        try:
            result = await self.db.execute(select(func.count(self.model.id)))
            return result.scalar_one()
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to count {self.model.__name__}",
                extra={"model": self.model.__name__, "error": str(e)},
                exc_info=True,
            )
            raise StoreError(f"Database error during count: {str(e)}") from e

    async def save(self) -> SaveResult:
        """Flush and commit pending changes.

        Returns:
            SaveResult.COMMITTED on success, SaveResult.CONFLICT when a row
            vanished between being loaded and being written. The transaction
            is rolled back on conflict.

        Raises:
            StoreError: On any other database failure, after rollback
        """
        try:
            await self.db.flush()
            await self.db.commit()
        except StaleDataError as e:
            await self.db.rollback()
            logger.warning(
                f"Concurrent change detected while saving {self.model.__name__}",
                extra={"model": self.model.__name__, "error": str(e)},
            )
            return SaveResult.CONFLICT
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Failed to save {self.model.__name__}",
                extra={"model": self.model.__name__, "error": str(e)},
                exc_info=True,
            )
            raise StoreError(f"Database error during save: {str(e)}") from e
        logger.debug(f"Saved {self.model.__name__}", extra={"model": self.model.__name__})
        return SaveResult.COMMITTED
