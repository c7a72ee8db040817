# placefinder/models/__init__.py

from .general import (
    REGION_SPAN_DEGREES,
    Coordinate,
    Region,
    LocationFix,
    AlertState,
)
from .places import (
    UNKNOWN_NAME,
    NO_ADDRESS,
    Placemark,
    PlaceRecord,
    SearchRequest,
    SearchResponse,
)
from .navigation import NavigationTarget, NavigationLink, PlaceDetail
from .location import (
    CoordinatorPhase,
    LocationUpdateBatch,
    LocationFailure,
    LocationStatus,
    CoordinatorState,
)

__all__ = [
    "REGION_SPAN_DEGREES",
    "Coordinate",
    "Region",
    "LocationFix",
    "AlertState",
    "UNKNOWN_NAME",
    "NO_ADDRESS",
    "Placemark",
    "PlaceRecord",
    "SearchRequest",
    "SearchResponse",
    "NavigationTarget",
    "NavigationLink",
    "PlaceDetail",
    "CoordinatorPhase",
    "LocationUpdateBatch",
    "LocationFailure",
    "LocationStatus",
    "CoordinatorState",
]
