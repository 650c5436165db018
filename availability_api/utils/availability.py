from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, Optional

from availability_api.models.availability import Availability

AVAILABLE = "available"


def to_store(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Map a wire payload (camelCase) onto store column values."""
    return {
        "date": payload.get("date"),
        "status": payload.get("status"),
        "message": payload.get("message"),
        "time_slots": payload.get("timeSlots"),
    }


def to_wire(row: Availability) -> Dict[str, Any]:
    """Map a stored row onto the wire shape, time slots verbatim."""
    return {
        "date": row.date,
        "status": row.status,
        "message": row.message,
        "timeSlots": row.time_slots,
    }


def default_day(day: str) -> Dict[str, Any]:
    """Record reported for a date nothing has been stored for."""
    return {
        "date": day,
        "status": AVAILABLE,
        "message": None,
        "timeSlots": [],
    }


def day_entry(row: Availability) -> Dict[str, Any]:
    return {
        "status": row.status,
        "message": row.message,
        "timeSlots": row.time_slots,
    }


def _parse_day(value: Any) -> Optional[date]:
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def find_next_available(
    rows: Iterable[Availability], today: Optional[date] = None
) -> Optional[Dict[str, Any]]:
    """
    First row, in the given (ascending) order, that is available on or
    after `today`. Rows whose date does not parse are never picked.
    """
    if today is None:
        today = utc_now().date()
    for row in rows:
        if row.status != AVAILABLE:
            continue
        day = _parse_day(row.date)
        if day is not None and day >= today:
            return {"date": row.date, "timeSlots": row.time_slots}
    return None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
