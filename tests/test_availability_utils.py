from datetime import date

from availability_api.models.availability import Availability
from availability_api.utils.availability import (
    default_day,
    find_next_available,
    to_store,
    to_wire,
)


def _row(day, status="available", message=None, time_slots=None):
    return Availability(date=day, status=status, message=message, time_slots=time_slots)


def test_to_store_renames_time_slots():
    values = to_store({"date": "2024-01-01", "status": "available", "message": "hi", "timeSlots": ["9am"]})
    assert values == {
        "date": "2024-01-01",
        "status": "available",
        "message": "hi",
        "time_slots": ["9am"],
    }


def test_to_store_missing_fields_become_none():
    assert to_store({"date": "2024-01-01"}) == {
        "date": "2024-01-01",
        "status": None,
        "message": None,
        "time_slots": None,
    }


def test_to_wire_renames_time_slots():
    row = _row("2024-01-02", status="unavailable", message="closed", time_slots=[])
    assert to_wire(row) == {
        "date": "2024-01-02",
        "status": "unavailable",
        "message": "closed",
        "timeSlots": [],
    }


def test_default_day_is_open():
    assert default_day("2030-05-05") == {
        "date": "2030-05-05",
        "status": "available",
        "message": None,
        "timeSlots": [],
    }


class TestFindNextAvailable:
    def test_picks_first_available_on_or_after_today(self):
        rows = [
            _row("2024-01-01", time_slots=["past"]),
            _row("2024-01-05", status="unavailable"),
            _row("2024-01-06", time_slots=["9am"]),
            _row("2024-01-07", time_slots=["later"]),
        ]
        assert find_next_available(rows, today=date(2024, 1, 3)) == {
            "date": "2024-01-06",
            "timeSlots": ["9am"],
        }

    def test_today_counts(self):
        rows = [_row("2024-01-03", time_slots=["noon"])]
        assert find_next_available(rows, today=date(2024, 1, 3)) == {
            "date": "2024-01-03",
            "timeSlots": ["noon"],
        }

    def test_none_when_nothing_qualifies(self):
        rows = [
            _row("2024-01-01"),
            _row("2024-02-01", status="unavailable"),
        ]
        assert find_next_available(rows, today=date(2024, 1, 15)) is None

    def test_empty(self):
        assert find_next_available([], today=date(2024, 1, 1)) is None

    def test_unparseable_dates_are_skipped(self):
        rows = [_row("someday"), _row("2024-03-01")]
        assert find_next_available(rows, today=date(2024, 1, 1))["date"] == "2024-03-01"

    def test_scenario_before_first_row(self):
        rows = [
            _row("2024-01-01", time_slots=["9am"]),
            _row("2024-01-02", status="unavailable", message="closed", time_slots=[]),
        ]
        assert find_next_available(rows, today=date(2023, 12, 31)) == {
            "date": "2024-01-01",
            "timeSlots": ["9am"],
        }
