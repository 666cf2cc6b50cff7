"""Business logic services package."""

from teacher_api.services.base import EntityStore, SaveResult
from teacher_api.services.teacher_service import TeacherService, TeacherStore

__all__ = ["EntityStore", "SaveResult", "TeacherService", "TeacherStore"]
