import uuid
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from placefinder.models.navigation import PlaceDetail
from placefinder.models.places import PlaceRecord, SearchRequest, SearchResponse
from placefinder.services.coordinator import LocationCoordinator
from placefinder.services.navigation import build_place_detail
from placefinder.dependencies import get_coordinator
from placefinder.core.config import logger

router = APIRouter(prefix="/api/v1/places", tags=["API - Places"])


@router.post("/search", response_model=SearchResponse)
async def search_places_api(
    search_in: SearchRequest,
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    """Search around the last location fix. Failures are reported in `alert`."""
    logger.info(f"API Search request: '{search_in.query or ''}'")
    await coordinator.search(search_in.query)
    return SearchResponse(places=coordinator.places, alert=coordinator.alert)


@router.get("/", response_model=List[PlaceRecord])
async def list_places_api(
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    """Results of the most recent successful search, in provider order."""
    return coordinator.places


@router.get("/{place_id}", response_model=PlaceDetail)
async def get_place_api(
    place_id: uuid.UUID,
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    """A place from the current results with distance and directions links."""
    place = coordinator.find_place(place_id)
    if place is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Place not found in the current results.",
        )
    return build_place_detail(place, coordinator.last_fix)
