"""Record models: students, instructors and the grade scale."""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class HasRole(Protocol):
    """Anything that can be listed as a campus record."""

    id: str
    full_name: str

    def role(self) -> str: ...


def describe(record: HasRole) -> str:
    """Render a one-line profile, e.g. ``Student [ID: S001, Name: Alice]``."""
    return f"{record.role()} [ID: {record.id}, Name: {record.full_name}]"


class Student(BaseModel):
    """A student record.

    Identity fields are frozen. ``enrolled_courses`` cannot be reassigned and
    only grows through ``add_course``; ``current_gpa`` is set by callers and
    validated on assignment.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., min_length=1, frozen=True)
    full_name: str = Field(..., min_length=1, frozen=True)
    registration_number: str | None = Field(default=None, frozen=True)
    enrollment_date: date = Field(default_factory=date.today, frozen=True)
    enrolled_courses: list[str] = Field(default_factory=list, frozen=True)
    current_gpa: float = Field(default=0.0, ge=0.0)

    def role(self) -> str:
        return "Student"

    def add_course(self, course_code: str) -> None:
        """Append a course code to the enrollment list.

        Raises:
            ValueError: If course_code is empty or None.
        """
        if not course_code:
            raise ValueError("Course code cannot be empty for enrollment")
        self.enrolled_courses.append(course_code)

    def __str__(self) -> str:
        return describe(self)


class Instructor(BaseModel):
    """An instructor record. Not held by the Record Store."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1)
    department: str | None = None

    def role(self) -> str:
        return "Instructor"

    def __str__(self) -> str:
        return describe(self)


class Grade(StrEnum):
    """Letter grade symbols."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def grade_point(self) -> float:
        return GRADE_POINTS[self]


GRADE_POINTS: dict[Grade, float] = {
    Grade.S: 10.0,
    Grade.A: 9.0,
    Grade.B: 8.0,
    Grade.C: 7.0,
    Grade.D: 6.0,
    Grade.F: 0.0,
}


def grade_point(symbol: str) -> float:
    """Look up the grade point for a letter grade (case-insensitive).

    Raises:
        ValueError: If the symbol is not a known grade.
    """
    try:
        grade = Grade(symbol.strip().upper())
    except ValueError as e:
        raise ValueError(f"Unknown grade symbol: {symbol!r}") from e
    return GRADE_POINTS[grade]
