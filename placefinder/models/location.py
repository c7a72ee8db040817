from pydantic import BaseModel, Field
from typing import Optional, List
from enum import Enum

from .general import AlertState, LocationFix, Region
from .places import PlaceRecord


class CoordinatorPhase(str, Enum):
    UNKNOWN = "unknown"
    AWAITING_FIX = "awaiting_fix"
    FIX_ACQUIRED = "fix_acquired"


# --- Platform callback payloads ---
class LocationUpdateBatch(BaseModel):
    fixes: List[LocationFix] = Field(default_factory=list)  # newest last


class LocationFailure(BaseModel):
    message: str = Field(..., min_length=1, max_length=500)


# --- Responses ---
class LocationStatus(BaseModel):
    phase: CoordinatorPhase
    updates_active: bool
    last_fix: Optional[LocationFix] = None
    region: Region


class CoordinatorState(BaseModel):
    phase: CoordinatorPhase
    updates_active: bool
    region: Region
    last_fix: Optional[LocationFix] = None
    places: List[PlaceRecord]
    alert: AlertState
