"""Teacher model representing a teacher record."""

from typing import Optional

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from teacher_api.models.base import BaseModel

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
ADDRESS_MAX_LENGTH = 200


class Teacher(BaseModel):
    """Teacher model for storing teacher records.

    The secret column is internal and never leaves the service; the public
    projection is TeacherView.

    Attributes:
        name: Full name of the teacher (e.g., "Tanya")
        address: Postal address, empty string when unknown
        is_working: Whether the teacher is currently employed
        secret: Internal value, null for records created over HTTP
    """

    __tablename__ = "teachers"

    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    address: Mapped[str] = mapped_column(
        String(ADDRESS_MAX_LENGTH), nullable=False, default=""
    )
    is_working: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    secret: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    def __repr__(self) -> str:
        """String representation without the secret."""
        return (
            f"Teacher(id={self.id}, name={self.name!r}, "
            f"address={self.address!r}, is_working={self.is_working})"
        )
