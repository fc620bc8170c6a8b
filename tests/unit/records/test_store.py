"""Unit tests for RecordStore operations."""

import pytest

from ccrm.records import (
    DuplicateIdentifierError,
    RecordStore,
    RecordStoreError,
    Student,
    UnknownStudentError,
)


@pytest.mark.unit
class TestAddStudent:
    """Tests for add_student."""

    def test_add_and_get_returns_same_student(self, store: RecordStore) -> None:
        """Each added student is retrievable by id."""
        students = [Student(id=f"S00{i}", full_name=f"Student {i}") for i in range(1, 5)]
        for student in students:
            store.add_student(student)

        for student in students:
            assert store.get_student(student.id) is student
        assert len(store) == 4

    def test_duplicate_id_raises(self, store: RecordStore) -> None:
        """DuplicateIdentifierError on reused id, first student untouched."""
        first = store.add_student(Student(id="S001", full_name="Alice Johnson", current_gpa=3.2))

        with pytest.raises(DuplicateIdentifierError) as exc_info:
            store.add_student(Student(id="S001", full_name="Imposter", current_gpa=4.0))

        assert exc_info.value.student_id == "S001"
        assert "S001" in str(exc_info.value)
        assert isinstance(exc_info.value, RecordStoreError)
        assert store.get_student("S001") is first
        assert first.full_name == "Alice Johnson"
        assert len(store) == 1
        assert store.average_gpa() == pytest.approx(3.2)

    def test_contains(self, store: RecordStore, alice: Student) -> None:
        """Membership checks by student id."""
        assert "S001" in store
        assert "S999" not in store


@pytest.mark.unit
class TestGetStudent:
    """Tests for get_student."""

    def test_unknown_id_raises(self, store: RecordStore) -> None:
        """UnknownStudentError for an id that was never added."""
        with pytest.raises(UnknownStudentError) as exc_info:
            store.get_student("nonexistent-id")

        assert exc_info.value.student_id == "nonexistent-id"
        assert "nonexistent-id" in str(exc_info.value)


@pytest.mark.unit
class TestFilterStudents:
    """Tests for filter_students and list_students."""

    def test_filter_preserves_insertion_order(self, store: RecordStore) -> None:
        """Matches come back in the order students were added."""
        for sid, gpa in [("S3", 3.9), ("S1", 2.0), ("S2", 3.6), ("S4", 3.5), ("S5", 1.0)]:
            store.add_student(Student(id=sid, full_name=sid, current_gpa=gpa))

        result = store.filter_students(lambda s: s.current_gpa >= 3.5)

        assert [s.id for s in result] == ["S3", "S2", "S4"]

    def test_filter_no_match(self, store: RecordStore, alice: Student) -> None:
        """A predicate matching nothing gives an empty list."""
        assert store.filter_students(lambda s: False) == []

    def test_filter_result_is_independent_copy(self, store: RecordStore, alice: Student) -> None:
        """Mutating the returned list does not affect the store."""
        result = store.filter_students(lambda s: True)
        result.clear()

        assert len(store) == 1
        assert store.list_students() == [alice]

    def test_list_students_empty(self, store: RecordStore) -> None:
        """Empty store lists nothing."""
        assert store.list_students() == []

    def test_list_students_all_in_order(self, store: RecordStore) -> None:
        """list_students returns everyone in insertion order."""
        ids = ["B", "A", "C"]
        for sid in ids:
            store.add_student(Student(id=sid, full_name=sid))

        assert [s.id for s in store.list_students()] == ids


@pytest.mark.unit
class TestAverageGpa:
    """Tests for average_gpa."""

    def test_empty_store_reports_no_data(self, store: RecordStore) -> None:
        """Empty store gives None, not a number."""
        assert store.average_gpa() is None

    def test_average_of_two(self, store: RecordStore) -> None:
        """GPAs 3.0 and 4.0 average to 3.5."""
        store.add_student(Student(id="S001", full_name="A", current_gpa=3.0))
        store.add_student(Student(id="S002", full_name="B", current_gpa=4.0))

        assert store.average_gpa() == 3.5

    def test_reflects_later_gpa_updates(self, store: RecordStore, alice: Student) -> None:
        """GPA changes made after adding are reflected in the average."""
        assert store.average_gpa() == 0.0

        alice.current_gpa = 3.85

        assert store.average_gpa() == pytest.approx(3.85)
