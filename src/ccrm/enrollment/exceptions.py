"""Exceptions for the enrollment rule checker."""

from ccrm.exceptions import CcrmError


class EnrollmentError(CcrmError):
    """Base exception for enrollment errors."""


class CreditLimitExceededError(EnrollmentError):
    """Enrollment would push the student past the credit ceiling."""

    def __init__(
        self, student_id: str, course_code: str, prospective_load: int, limit: int
    ) -> None:
        super().__init__(
            f"Max credit limit exceeded ({limit} credits): enrolling '{student_id}' "
            f"in {course_code} would bring the load to {prospective_load}"
        )
        self.student_id = student_id
        self.course_code = course_code
        self.prospective_load = prospective_load
        self.limit = limit
