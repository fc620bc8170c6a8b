"""Data models for enrollment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnrollmentResult:
    """Outcome of a committed enrollment.

    Attributes:
        student_id: The enrolled student.
        course_code: The course that was appended.
        credit_load: Credit load that was checked against the ceiling.
    """

    student_id: str
    course_code: str
    credit_load: int
