import logging
from typing import Any
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from availability_api.api import deps
from availability_api.core.errors import STORE_ERRORS, StoreFailure
from availability_api.crud.availability import availability as crud_availability
from availability_api.schemas.availability import (
    AvailabilityDay,
    AvailabilityOverview,
    AvailabilitySave,
    DeleteResult,
    SaveResult,
)
from availability_api.utils.availability import (
    day_entry,
    default_day,
    find_next_available,
    to_store,
    to_wire,
    utc_now,
)

logger = logging.getLogger("uvicorn.error")

router = APIRouter()

@router.get("", response_model=AvailabilityOverview)
@router.get("/", response_model=AvailabilityOverview, include_in_schema=False)
async def read_availability(
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Get all availability.

    - `days` maps each stored date to its status, message and time slots
    - `nextAvailable` is the earliest available date from today on, or null
    """
    try:
        rows = await crud_availability.get_all_by_date(db)
    except STORE_ERRORS as e:
        logger.error(f"Error fetching availability: {e}")
        raise StoreFailure("Failed to fetch availability")

    now = utc_now()
    return {
        "days": {row.date: day_entry(row) for row in rows},
        "nextAvailable": find_next_available(rows, today=now.date()),
        "lastUpdated": now.isoformat(),
    }

@router.get("/{date}", response_model=AvailabilityDay)
async def read_availability_date(
    date: str,
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Get availability for a specific date.

    Dates nothing has been stored for are open: they come back as
    available with no message and no time slots.
    """
    try:
        row = await crud_availability.get(db, id=date)
    except STORE_ERRORS as e:
        logger.error(f"Error fetching date {date}: {e}")
        raise StoreFailure("Failed to fetch date")

    if not row:
        return default_day(date)

    day = to_wire(row)
    if day["timeSlots"] is None:
        day["timeSlots"] = []
    return day

@router.post("", response_model=SaveResult)
@router.post("/", response_model=SaveResult, include_in_schema=False)
async def save_availability(
    *,
    db: AsyncSession = Depends(deps.get_db),
    day_in: AvailabilitySave,
) -> Any:
    """
    Save or overwrite the availability of one date.
    """
    try:
        row = await crud_availability.upsert(db, values=to_store(day_in.model_dump()))
    except STORE_ERRORS as e:
        logger.error(f"Error saving availability: {e}")
        raise StoreFailure("Failed to save availability")

    return {"success": True, "data": to_wire(row)}

@router.delete("/{date}", response_model=DeleteResult)
async def delete_availability(
    date: str,
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Delete availability for a date. Deleting a date with no record succeeds.
    """
    try:
        await crud_availability.remove(db, id=date)
    except STORE_ERRORS as e:
        logger.error(f"Error deleting availability for {date}: {e}")
        raise StoreFailure("Failed to delete availability")

    return {"success": True}
