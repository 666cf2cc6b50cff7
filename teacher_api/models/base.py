"""Base model class shared by all mapped entities."""

from typing import Any, Dict

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column

from teacher_api.utils.db import Base

# Largest id the BIGINT column can hold
MAX_ID = 2**63 - 1

# SQLite only autoincrements an INTEGER PRIMARY KEY
IdType = BigInteger().with_variant(Integer(), "sqlite")


class BaseModel(Base):
    """Abstract base class for SQLAlchemy models.

    Provides a store-assigned integer primary key and dict/repr helpers.

    Usage:
        class User(BaseModel):
            __tablename__ = "users"

            name: Mapped[str] = mapped_column(String(100))
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert model instance to dictionary.

        Returns:
            Dictionary representation of the model
        """
        return {
            column.name: getattr(self, column.name) for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        """String representation of the model."""
        attrs = ", ".join(
            f"{key}={repr(value)}"
            for key, value in self.to_dict().items()
            if key != "id"
        )
        return f"{self.__class__.__name__}(id={self.id}, {attrs})"
