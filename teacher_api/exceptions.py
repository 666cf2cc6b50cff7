"""Application exceptions."""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from teacher_api.schemas.validation import FieldViolation


class AppError(Exception):
    """Base exception for application errors."""


class InvalidArgumentError(AppError):
    """Raised when request identifiers are malformed or contradict each other."""


class PayloadValidationError(InvalidArgumentError):
    """Raised when an incoming payload breaks the Teacher field rules."""

    def __init__(self, violations: List["FieldViolation"]):
        self.violations = violations
        fields = ", ".join(v.field for v in violations)
        super().__init__(f"Invalid fields: {fields}")


class ModelError(AppError):
    """Base exception for model/database operations."""


class RecordNotFoundError(ModelError):
    """Raised when a record is not found in the database."""

    def __init__(self, model_name: str, record_id: int):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} with id={record_id} not found")


class StoreError(ModelError):
    """Raised when the underlying store fails for any reason but a lost row."""
