"""Custom exceptions for the Record Store."""

from ccrm.exceptions import CcrmError


class RecordStoreError(CcrmError):
    """Base exception for Record Store errors."""


class DuplicateIdentifierError(RecordStoreError):
    """Student with given ID already exists."""

    def __init__(self, student_id: str) -> None:
        super().__init__(f"Student with id '{student_id}' already exists")
        self.student_id = student_id


class UnknownStudentError(RecordStoreError):
    """Student with given ID does not exist."""

    def __init__(self, student_id: str) -> None:
        super().__init__(f"Student with id '{student_id}' not found")
        self.student_id = student_id
