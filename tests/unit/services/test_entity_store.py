"""Unit tests for EntityStore backed by the in-memory database."""

import logging
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from teacher_api.exceptions import StoreError
from teacher_api.models.teacher import Teacher
from teacher_api.services.base import SaveResult
from teacher_api.services.teacher_service import TeacherStore


@pytest.mark.asyncio
async def test_add_and_save_assigns_id(db_session: AsyncSession):
    """Saving a staged record commits it and assigns an id."""
    # Arrange
    store = TeacherStore(db_session)
    teacher = Teacher(name="Vanya", address="Kyiv", is_working=True)

    # Act
    store.add(teacher)
    result = await store.save()

    # Assert
    assert result is SaveResult.COMMITTED
    assert teacher.id == 1
    assert await store.count() == 1


@pytest.mark.asyncio
async def test_get_by_id(seeded_session: AsyncSession):
    """get_by_id returns the record or None."""
    store = TeacherStore(seeded_session)

    found = await store.get_by_id(2)

    assert found is not None
    assert found.name == "Tanya"
    assert await store.get_by_id(10) is None


@pytest.mark.asyncio
async def test_get_all_in_insertion_order(seeded_session: AsyncSession):
    """get_all returns every record."""
    store = TeacherStore(seeded_session)

    teachers = await store.get_all()

    assert [t.name for t in teachers] == ["Vanya", "Tanya", "Sanya", "Danya", "Jenya"]


@pytest.mark.asyncio
async def test_exists(seeded_session: AsyncSession):
    """exists reflects stored ids."""
    store = TeacherStore(seeded_session)

    assert await store.exists(5) is True
    assert await store.exists(6) is False
    assert await store.exists(-1) is False


@pytest.mark.asyncio
async def test_remove_and_save(seeded_session: AsyncSession):
    """Removed records are gone after save."""
    store = TeacherStore(seeded_session)
    teacher = await store.get_by_id(1)

    await store.remove(teacher)
    result = await store.save()

    assert result is SaveResult.COMMITTED
    assert await store.exists(1) is False
    assert await store.count() == 4


@pytest.mark.asyncio
async def test_save_reports_conflict_when_row_vanished(seeded_session: AsyncSession):
    """Updating a row deleted behind the session's back yields CONFLICT."""
    # Arrange
    store = TeacherStore(seeded_session)
    teacher = await store.get_by_id(3)
    await seeded_session.execute(text("DELETE FROM teachers WHERE id = 3"))
    await seeded_session.commit()

    # Act
    teacher.name = "SanyaNew"
    result = await store.save()

    # Assert
    assert result is SaveResult.CONFLICT
    assert await store.exists(3) is False


@pytest.mark.asyncio
async def test_save_wraps_other_failures(db_session: AsyncSession):
    """Other database errors roll back and raise StoreError."""
    store = TeacherStore(db_session)
    db_session.flush = AsyncMock(
        side_effect=OperationalError("flush failed", None, Exception("boom"))
    )
    db_session.rollback = AsyncMock()

    with pytest.raises(StoreError):
        await store.save()

    db_session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_read_failures_raise_store_error(db_session: AsyncSession):
    """Read errors surface as StoreError."""
    store = TeacherStore(db_session)
    db_session.execute = AsyncMock(
        side_effect=OperationalError("select failed", None, Exception("boom"))
    )

    with pytest.raises(StoreError):
        await store.get_all()
    with pytest.raises(StoreError):
        await store.exists(1)
    with pytest.raises(StoreError):
        await store.count()


@pytest.mark.asyncio
async def test_staging_is_logged(seeded_session: AsyncSession, caplog):
    """add and remove emit debug records."""
    store = TeacherStore(seeded_session)
    teacher = await store.get_by_id(2)

    with caplog.at_level(logging.DEBUG, logger="teacher_api.services.base"):
        store.add(Teacher(name="Svetlana"))
        await store.remove(teacher)

    messages = [record.getMessage() for record in caplog.records]
    assert "Staged new Teacher" in messages
    assert "Staged removal of Teacher" in messages
