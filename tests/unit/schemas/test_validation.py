"""Unit tests for teacher payload validation."""

import pytest

from teacher_api.schemas.teacher import TeacherView
from teacher_api.schemas.validation import FieldViolation, validate_teacher


def _fields(violations: list[FieldViolation]) -> list[str]:
    return [v.field for v in violations]


@pytest.mark.parametrize(
    "name",
    ["Svetlana", "Anna Maria", "Jo", "O Brien, Jr", "Олександр", "a" * 100],
)
def test_valid_names_pass(name):
    """Letters, whitespace and other punctuation are accepted."""
    assert validate_teacher(TeacherView(name=name)) == []


@pytest.mark.parametrize("name", [None, "", "   "])
def test_name_is_required(name):
    """Missing or blank names are rejected."""
    violations = validate_teacher(TeacherView(name=name))

    assert _fields(violations) == ["name"]
    assert "required" in violations[0].message


@pytest.mark.parametrize("name", ["A", "a" * 101])
def test_name_length_bounds(name):
    """Names must be between 2 and 100 characters."""
    violations = validate_teacher(TeacherView(name=name))

    assert _fields(violations) == ["name"]
    assert "length" in violations[0].message


@pytest.mark.parametrize(
    "name",
    ["Agent 007", "Dr. Who", "Hey!", "Anna-Maria", "Smith (jr)", "Tom's", "A#B", "50%"],
)
def test_name_rejects_digits_and_excluded_symbols(name):
    """Digits, '.', '-' and the '!'..')' symbols are not allowed."""
    violations = validate_teacher(TeacherView(name=name))

    assert _fields(violations) == ["name"]
    assert "digits" in violations[0].message


def test_name_can_break_several_rules():
    """Every broken rule is reported."""
    violations = validate_teacher(TeacherView(name="1"))

    assert _fields(violations) == ["name", "name"]


def test_address_max_length():
    """Addresses longer than 200 characters are rejected."""
    assert validate_teacher(TeacherView(name="Tanya", address="x" * 200)) == []

    violations = validate_teacher(TeacherView(name="Tanya", address="x" * 201))

    assert _fields(violations) == ["address"]


def test_null_address_is_allowed():
    """Address is optional."""
    assert validate_teacher(TeacherView(name="Tanya", address=None)) == []


def test_violation_to_dict():
    """Violations serialize to field/message pairs."""
    violation = FieldViolation("name", "bad")

    assert violation.to_dict() == {"field": "name", "message": "bad"}
