from pydantic import BaseModel, Field
from typing import Optional, Tuple
from datetime import datetime

# Every region shown or searched uses the same fixed viewport.
REGION_SPAN_DEGREES = 0.05


class Coordinate(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class Region(BaseModel):
    """Map viewport: a center point and an angular span in degrees."""

    center: Coordinate
    latitude_delta: float = REGION_SPAN_DEGREES
    longitude_delta: float = REGION_SPAN_DEGREES

    @classmethod
    def around(cls, center: Coordinate) -> "Region":
        return cls(
            center=center,
            latitude_delta=REGION_SPAN_DEGREES,
            longitude_delta=REGION_SPAN_DEGREES,
        )

    def bounds(self) -> Tuple[Coordinate, Coordinate]:
        """
        Return the (south_west, north_east) corners of the viewport.

        Corners are clamped to valid coordinates rather than wrapped, so a
        region touching a pole or the antimeridian yields a smaller box on
        that side.
        """
        half_lat = self.latitude_delta / 2
        half_lon = self.longitude_delta / 2
        south_west = Coordinate(
            latitude=max(self.center.latitude - half_lat, -90.0),
            longitude=max(self.center.longitude - half_lon, -180.0),
        )
        north_east = Coordinate(
            latitude=min(self.center.latitude + half_lat, 90.0),
            longitude=min(self.center.longitude + half_lon, 180.0),
        )
        return south_west, north_east


class LocationFix(BaseModel):
    """A single resolved device position."""

    coordinate: Coordinate
    horizontal_accuracy_m: Optional[float] = Field(None, ge=0)
    timestamp: Optional[datetime] = None


class AlertState(BaseModel):
    """The one user-visible error channel: a message and whether it is shown."""

    message: str = ""
    visible: bool = False
