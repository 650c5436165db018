from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict

# Wire contract is camelCase; utils.availability maps it to store columns.
# Field types stay loose: values are neither validated on the way in nor
# on the way out.

# Properties to receive on save
class AvailabilitySave(BaseModel):
    model_config = ConfigDict(extra="ignore")

    date: Any = None
    status: Any = None
    message: Any = None
    timeSlots: Any = None

# Properties to return to client
class AvailabilityDay(BaseModel):
    date: Any = None
    status: Any = None
    message: Any = None
    timeSlots: Any = []

class DayEntry(BaseModel):
    status: Any = None
    message: Any = None
    timeSlots: Any = None

class NextAvailable(BaseModel):
    date: Any
    timeSlots: Any = None

class AvailabilityOverview(BaseModel):
    days: Dict[str, DayEntry]
    nextAvailable: Optional[NextAvailable] = None
    lastUpdated: str

class SaveResult(BaseModel):
    success: bool = True
    data: Optional[Dict[str, Any]] = None

class DeleteResult(BaseModel):
    success: bool = True

class StoreStatus(BaseModel):
    status: str
    error: Optional[str] = None
