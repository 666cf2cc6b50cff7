"""Data models package."""

from teacher_api.models.base import BaseModel
from teacher_api.models.teacher import Teacher

__all__ = ["BaseModel", "Teacher"]
