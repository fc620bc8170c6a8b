"""Text reports over the Record Store."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ccrm.records import RecordStore, Student

HIGH_ACHIEVER_GPA = 3.5
NO_DATA_MESSAGE = "No student data available to compute average GPA."


def gpa_report(store: RecordStore) -> str:
    """Average GPA line, or the no-data message for an empty store."""
    average = store.average_gpa()
    if average is None:
        return NO_DATA_MESSAGE
    return f"Average CCRM Student GPA: {average:.2f}"


def high_achievers(store: RecordStore, threshold: float = HIGH_ACHIEVER_GPA) -> list[Student]:
    return store.filter_students(lambda s: s.current_gpa >= threshold)
