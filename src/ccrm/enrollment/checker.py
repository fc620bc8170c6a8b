"""EnrollmentRuleChecker - credit ceiling enforcement."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ccrm.enrollment.exceptions import CreditLimitExceededError
from ccrm.enrollment.models import EnrollmentResult

if TYPE_CHECKING:
    from ccrm.records import RecordStore, Student

logger = logging.getLogger(__name__)

MAX_CREDITS = 15
# Every course already on the list counts as this many credits,
# whatever it was actually worth when enrolled.
ASSUMED_CREDITS_PER_COURSE = 3


class EnrollmentRuleChecker:
    """Validates enrollments against the credit ceiling before committing them."""

    def __init__(self, store: RecordStore) -> None:
        """Initialize the checker.

        Args:
            store: RecordStore holding the students to enroll.
        """
        self.store = store

    def prospective_load(self, student: Student, credits: int) -> int:
        """Credit load the student would carry after taking ``credits`` more."""
        return len(student.enrolled_courses) * ASSUMED_CREDITS_PER_COURSE + credits

    def enroll(self, student_id: str, course_code: str, credits: int) -> EnrollmentResult:
        """Enroll a student in a course.

        Args:
            student_id: The student's unique ID
            course_code: Course to append to the student's list
            credits: Credit value of the requested course

        Returns:
            EnrollmentResult describing the committed enrollment

        Raises:
            ValueError: If course_code is empty or None
            UnknownStudentError: If the student doesn't exist
            CreditLimitExceededError: If the prospective load exceeds MAX_CREDITS
        """
        if not course_code:
            raise ValueError("Course code cannot be empty for enrollment")

        student = self.store.get_student(student_id)

        load = self.prospective_load(student, credits)
        if load > MAX_CREDITS:
            logger.warning(
                "Rejected enrollment of %s in %s (load %d > %d)",
                student_id,
                course_code,
                load,
                MAX_CREDITS,
            )
            raise CreditLimitExceededError(student_id, course_code, load, MAX_CREDITS)

        student.add_course(course_code)
        logger.info("%s enrolled in %s (load %d)", student.full_name, course_code, load)
        return EnrollmentResult(student_id=student_id, course_code=course_code, credit_load=load)
