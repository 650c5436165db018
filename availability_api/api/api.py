from fastapi import APIRouter
from availability_api.api import (
    availability,
    status
)

api_router = APIRouter()
api_router.include_router(availability.router, prefix="/availability", tags=["availability"])
api_router.include_router(status.router, prefix="/status", tags=["status"])
