"""Enrollment package - credit ceiling rule checking."""

from ccrm.enrollment.checker import (
    ASSUMED_CREDITS_PER_COURSE,
    MAX_CREDITS,
    EnrollmentRuleChecker,
)
from ccrm.enrollment.exceptions import CreditLimitExceededError, EnrollmentError
from ccrm.enrollment.models import EnrollmentResult

__all__ = [
    "ASSUMED_CREDITS_PER_COURSE",
    "MAX_CREDITS",
    "CreditLimitExceededError",
    "EnrollmentError",
    "EnrollmentResult",
    "EnrollmentRuleChecker",
]
