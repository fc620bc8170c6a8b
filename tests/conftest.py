"""Shared pytest fixtures and configuration."""

import pytest

from ccrm.enrollment import EnrollmentRuleChecker
from ccrm.records import RecordStore, Student


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def store() -> RecordStore:
    """Create an empty RecordStore."""
    return RecordStore()


@pytest.fixture
def checker(store: RecordStore) -> EnrollmentRuleChecker:
    """Create a rule checker bound to the store fixture."""
    return EnrollmentRuleChecker(store)


@pytest.fixture
def alice(store: RecordStore) -> Student:
    """Alice, already registered in the store with no courses."""
    return store.add_student(
        Student(id="S001", full_name="Alice Johnson", registration_number="R1001")
    )
