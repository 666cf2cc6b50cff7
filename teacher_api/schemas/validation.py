"""Field rules for incoming teacher payloads."""

import re
from dataclasses import dataclass
from typing import List

from teacher_api.models.teacher import (
    ADDRESS_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
)
from teacher_api.schemas.teacher import TeacherView

# No digits, no '.', nothing in the '!'..')' range and no '-'
NAME_PATTERN = re.compile(r"[^\d.!-)\-]*")


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """A single broken rule on a payload field."""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


def validate_teacher(view: TeacherView) -> List[FieldViolation]:
    """Check a payload against the Teacher field rules.

    Args:
        view: Incoming payload.

    Returns:
        Violations found, empty when the payload is acceptable.
    """
    violations: List[FieldViolation] = []

    name = view.name
    if name is None or not name.strip():
        violations.append(FieldViolation("name", "The name field is required."))
    else:
        if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
            violations.append(
                FieldViolation(
                    "name",
                    f"name length must be between {NAME_MIN_LENGTH} "
                    f"and {NAME_MAX_LENGTH}.",
                )
            )
        if NAME_PATTERN.fullmatch(name) is None:
            violations.append(
                FieldViolation(
                    "name",
                    "Name cannot contain digits and special symbols "
                    "except whitespaces",
                )
            )

    address = view.address or ""
    if len(address) > ADDRESS_MAX_LENGTH:
        violations.append(
            FieldViolation(
                "address",
                f"address length must be at most {ADDRESS_MAX_LENGTH}.",
            )
        )

    return violations
