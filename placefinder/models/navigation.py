from pydantic import BaseModel
from typing import Optional, List
from enum import Enum

from .places import PlaceRecord


class NavigationTarget(str, Enum):
    APPLE_MAPS = "apple_maps"
    GOOGLE_MAPS = "google_maps"
    WAZE = "waze"


class NavigationLink(BaseModel):
    """Driving-directions handoff to an external map app."""

    target: NavigationTarget
    label: str
    app_url: str
    fallback_url: str


class PlaceDetail(BaseModel):
    place: PlaceRecord
    distance_m: Optional[float] = None
    distance_text: Optional[str] = None
    navigation: List[NavigationLink]
