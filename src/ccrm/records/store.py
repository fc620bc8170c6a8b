"""RecordStore - in-memory keyed collection of students."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ccrm.records.exceptions import DuplicateIdentifierError, UnknownStudentError
from ccrm.records.models import Student

logger = logging.getLogger(__name__)


class RecordStore:
    """Main API for student records.

    Students are kept in insertion order for the lifetime of the store.
    There is no delete operation.
    """

    def __init__(self) -> None:
        self._students: dict[str, Student] = {}

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, student_id: object) -> bool:
        return student_id in self._students

    def add_student(self, student: Student) -> Student:
        """Add a new student.

        Args:
            student: The student to register.

        Returns:
            The stored Student.

        Raises:
            DuplicateIdentifierError: If a student with the same id already exists
        """
        if student.id in self._students:
            raise DuplicateIdentifierError(student.id)
        self._students[student.id] = student
        logger.info("Student added: %s (%s)", student.full_name, student.id)
        return student

    def get_student(self, student_id: str) -> Student:
        """Get student by ID.

        Raises:
            UnknownStudentError: If the student doesn't exist
        """
        student = self._students.get(student_id)
        if student is None:
            raise UnknownStudentError(student_id)
        return student

    def filter_students(self, predicate: Callable[[Student], bool]) -> list[Student]:
        """Return every student matching ``predicate``, in insertion order.

        The returned list is new; changing it does not affect the store.
        """
        return [student for student in self._students.values() if predicate(student)]

    def list_students(self) -> list[Student]:
        """List all students in insertion order."""
        return self.filter_students(lambda _student: True)

    def average_gpa(self) -> float | None:
        """Mean of ``current_gpa`` across all students.

        Returns:
            The average, or None when the store is empty.
        """
        if not self._students:
            return None
        total = sum(student.current_gpa for student in self._students.values())
        return total / len(self._students)
