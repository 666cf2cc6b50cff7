"""Teacher service handling the CRUD operations on teacher records.

Each operation is one unit of work against the injected store: validate the
identifiers, look up or stage changes, save, and map the entity to its
public view. Failures are reported with InvalidArgumentError and
RecordNotFoundError; store failures propagate as StoreError.
"""

import logging
from typing import List

from teacher_api.exceptions import (
    InvalidArgumentError,
    RecordNotFoundError,
    StoreError,
)
from teacher_api.models.teacher import Teacher
from teacher_api.schemas.teacher import TeacherView, apply_view, to_view
from teacher_api.services.base import EntityStore, SaveResult

logger = logging.getLogger(__name__)


class TeacherStore(EntityStore[Teacher]):
    """Entity store for Teacher records."""

    model = Teacher


class TeacherService:
    """Service for managing Teacher records.

    Usage:
        service = TeacherService(TeacherStore(db_session))

        view = await service.create_teacher(TeacherView(name="Tanya"))
        await service.delete_teacher(view.id)

    Attributes:
        store: Store the service reads and writes through
    """

    def __init__(self, store: TeacherStore) -> None:
        self.store = store

    async def list_teachers(self) -> List[TeacherView]:
        """Return every stored teacher as a view."""
        teachers = await self.store.get_all()
        return [to_view(teacher) for teacher in teachers]

    async def get_teacher(self, teacher_id: int) -> TeacherView:
        """Return one teacher.

        Raises:
            InvalidArgumentError: If teacher_id is not positive.
            RecordNotFoundError: If no teacher has that id.
        """
        if teacher_id < 1:
            raise InvalidArgumentError(f"Invalid teacher id: {teacher_id}")
        teacher = await self._get_or_fail(teacher_id)
        return to_view(teacher)

    async def update_teacher(self, teacher_id: int, view: TeacherView) -> None:
        """Overwrite name, address and working flag of a teacher.

        Raises:
            InvalidArgumentError: If teacher_id differs from view.id.
            RecordNotFoundError: If the teacher is absent, including when it
                was deleted between lookup and save.
            StoreError: On any other store failure.
        """
        if teacher_id != view.id:
            raise InvalidArgumentError(
                f"Path id {teacher_id} does not match body id {view.id}"
            )

        teacher = await self._get_or_fail(teacher_id)
        apply_view(view, teacher)

        result = await self.store.save()
        if result is SaveResult.CONFLICT:
            if not await self.teacher_exists(teacher_id):
                logger.warning(
                    "Teacher deleted during update",
                    extra={"teacher_id": teacher_id},
                )
                raise RecordNotFoundError(Teacher.__name__, teacher_id)
            raise StoreError(f"Concurrent update conflict on teacher {teacher_id}")

        logger.info("Updated teacher", extra={"teacher_id": teacher_id})

    async def create_teacher(self, view: TeacherView) -> TeacherView:
        """Store a new teacher and return it with its assigned id.

        The id carried by the view is ignored and the secret starts empty.
        """
        teacher = Teacher()
        apply_view(view, teacher)

        self.store.add(teacher)
        await self._save_or_fail()

        logger.info("Created teacher", extra={"teacher_id": teacher.id})
        return to_view(teacher)

    async def delete_teacher(self, teacher_id: int) -> None:
        """Remove a teacher permanently.

        Raises:
            RecordNotFoundError: If no teacher has that id.
        """
        teacher = await self._get_or_fail(teacher_id)
        await self.store.remove(teacher)

        result = await self.store.save()
        if result is SaveResult.CONFLICT:
            raise RecordNotFoundError(Teacher.__name__, teacher_id)

        logger.info("Deleted teacher", extra={"teacher_id": teacher_id})

    async def teacher_exists(self, teacher_id: int) -> bool:
        """Whether a teacher with the given id is currently stored."""
        return await self.store.exists(teacher_id)

    async def _get_or_fail(self, teacher_id: int) -> Teacher:
        teacher = await self.store.get_by_id(teacher_id)
        if teacher is None:
            raise RecordNotFoundError(Teacher.__name__, teacher_id)
        return teacher

    async def _save_or_fail(self) -> None:
        if await self.store.save() is SaveResult.CONFLICT:
            raise StoreError("Unexpected conflict while inserting")
