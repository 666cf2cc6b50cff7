"""Pydantic schemas for API request/response models."""

from teacher_api.schemas.teacher import TeacherView, apply_view, to_view
from teacher_api.schemas.validation import FieldViolation, validate_teacher

__all__ = ["TeacherView", "apply_view", "to_view", "FieldViolation", "validate_teacher"]
