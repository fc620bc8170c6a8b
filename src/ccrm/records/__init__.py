"""Record Store - in-memory storage for student records."""

from ccrm.records.exceptions import (
    DuplicateIdentifierError,
    RecordStoreError,
    UnknownStudentError,
)
from ccrm.records.models import (
    GRADE_POINTS,
    Grade,
    HasRole,
    Instructor,
    Student,
    describe,
    grade_point,
)
from ccrm.records.store import RecordStore

__all__ = [
    "GRADE_POINTS",
    "DuplicateIdentifierError",
    "Grade",
    "HasRole",
    "Instructor",
    "RecordStore",
    "RecordStoreError",
    "Student",
    "UnknownStudentError",
    "describe",
    "grade_point",
]
