"""Teacher schemas for API request/response models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from teacher_api.models.base import MAX_ID
from teacher_api.models.teacher import Teacher


class TeacherView(BaseModel):
    """Public representation of a teacher.

    Serialized with camelCase keys: ``{id, name, address, isWorking}``.
    The internal secret has no counterpart here.

    Attributes:
        id: Teacher ID, ignored on create and checked against the path on update.
        name: Teacher name.
        address: Teacher address.
        is_working: Employment flag.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(default=0, ge=-MAX_ID - 1, le=MAX_ID)
    name: Optional[str] = None
    address: Optional[str] = ""
    is_working: bool = Field(default=False)


def to_view(teacher: Teacher) -> TeacherView:
    """Project a stored teacher onto its public view."""
    return TeacherView(
        id=teacher.id,
        name=teacher.name,
        address=teacher.address,
        isWorking=teacher.is_working,
    )


def apply_view(view: TeacherView, teacher: Teacher) -> None:
    """Copy the writable fields of a view onto a teacher in place.

    ``id`` and ``secret`` are never touched.
    """
    teacher.name = view.name
    teacher.address = view.address or ""
    teacher.is_working = view.is_working
