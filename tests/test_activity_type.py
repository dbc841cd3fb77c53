"""Tests for the activity type enumeration."""

import pytest

from fitness_tracker.domain.trainings import ActivityType


def test_display_names() -> None:
    assert ActivityType.RUNNING.display_name == "Running"
    assert ActivityType.TENNIS.display_name == "Tennis"
    assert ActivityType.TABLE_TENNIS.display_name == "Table Tennis"


@pytest.mark.parametrize("raw", ["TABLE_TENNIS", "table_tennis", "TableTennis"])
def test_parses_table_tennis_spellings(raw: str) -> None:
    assert ActivityType(raw) is ActivityType.TABLE_TENNIS


def test_rejects_unknown_value() -> None:
    with pytest.raises(ValueError):
        ActivityType("Rowing")
