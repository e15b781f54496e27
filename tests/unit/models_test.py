"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from import_attr_migrator.models import FileOutcome, MigrationResult, Occurrence


class TestOccurrence:
    def test_rejects_negative_offsets(self) -> None:
        with pytest.raises(ValidationError):
            Occurrence(start=-1, end=3)

    def test_rejects_end_before_start(self) -> None:
        with pytest.raises(ValidationError):
            Occurrence(start=5, end=4)

    def test_is_frozen(self) -> None:
        occurrence = Occurrence(start=1, end=7)
        with pytest.raises(ValidationError):
            occurrence.start = 2  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert Occurrence(start=1, end=7) == Occurrence(start=1, end=7)


def test_migration_result_rejects_negative_count() -> None:
    with pytest.raises(ValidationError):
        MigrationResult(output=b"", replacements=-1)


def test_file_outcome_serializes() -> None:
    outcome = FileOutcome(path="a.js", status="changed", replacements=2)

    assert outcome.model_dump() == {"path": "a.js", "status": "changed", "replacements": 2, "error": None}


def test_file_outcome_rejects_unknown_status() -> None:
    with pytest.raises(ValidationError):
        FileOutcome(path="a.js", status="exploded")  # type: ignore[arg-type]
