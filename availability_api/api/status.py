import logging
from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from availability_api.api import deps
from availability_api.core.errors import STORE_ERRORS
from availability_api.crud.availability import availability as crud_availability
from availability_api.schemas.availability import StoreStatus

logger = logging.getLogger("uvicorn.error")

router = APIRouter()

@router.get("", response_model=StoreStatus, response_model_exclude_none=True)
async def read_status(
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Check that the availability table can be queried.

    A missing table is reported as disconnected, not created.
    """
    try:
        await crud_availability.exists_check(db)
    except STORE_ERRORS as e:
        logger.error(f"Database connection error: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "disconnected", "error": str(e)},
        )
    return {"status": "connected"}
