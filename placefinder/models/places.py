import uuid
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from .general import AlertState, Coordinate

UNKNOWN_NAME = "Unknown"
NO_ADDRESS = "No address available"


# --- Raw provider record ---
class Placemark(BaseModel):
    """A geocoded search result as returned by the search provider."""

    name: Optional[str] = None
    coordinate: Coordinate
    sub_thoroughfare: Optional[str] = None  # e.g. house number
    thoroughfare: Optional[str] = None  # street
    locality: Optional[str] = None  # city
    administrative_area: Optional[str] = None  # state / province
    postal_code: Optional[str] = None
    country: Optional[str] = None


# --- Display model ---
class PlaceRecord(BaseModel):
    """Flattened, display-ready place built from one placemark."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str
    coordinate: Coordinate
    address_line: str
    full_address: str
    postal_code: Optional[str] = None
    locality: Optional[str] = None
    administrative_area: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_placemark(cls, placemark: Placemark) -> "PlaceRecord":
        full_address = ", ".join(
            part
            for part in [
                placemark.sub_thoroughfare,
                placemark.thoroughfare,
                placemark.locality,
                placemark.administrative_area,
                placemark.postal_code,
                placemark.country,
            ]
            if part is not None
        )
        return cls(
            name=placemark.name if placemark.name is not None else UNKNOWN_NAME,
            coordinate=placemark.coordinate,
            address_line=(
                placemark.thoroughfare
                if placemark.thoroughfare is not None
                else NO_ADDRESS
            ),
            full_address=full_address,
            postal_code=placemark.postal_code,
            locality=placemark.locality,
            administrative_area=placemark.administrative_area,
            country=placemark.country,
        )


# --- API request / response models ---
class SearchRequest(BaseModel):
    query: Optional[str] = Field(None, max_length=200)


class SearchResponse(BaseModel):
    places: List[PlaceRecord]
    alert: AlertState
