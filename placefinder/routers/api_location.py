from fastapi import APIRouter, Depends

from placefinder.models.general import AlertState
from placefinder.models.location import (
    LocationFailure,
    LocationStatus,
    LocationUpdateBatch,
)
from placefinder.services.coordinator import LocationCoordinator
from placefinder.dependencies import get_coordinator
from placefinder.core.config import logger

router = APIRouter(prefix="/api/v1/location", tags=["API - Location"])


def _status(coordinator: LocationCoordinator) -> LocationStatus:
    return LocationStatus(
        phase=coordinator.phase,
        updates_active=coordinator.updates_active,
        last_fix=coordinator.last_fix,
        region=coordinator.region,
    )


@router.post("/permission", response_model=LocationStatus)
async def request_location_permission_api(
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    """Start a permission/update cycle. The client should begin watching its position."""
    logger.info("API Location permission request.")
    coordinator.request_permission()
    return _status(coordinator)


@router.post("/updates", response_model=LocationStatus)
async def post_location_updates_api(
    batch: LocationUpdateBatch,
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    """
    Deliver one burst of positions, newest last.
    Once `updates_active` is False the client should stop sending.
    """
    logger.debug(f"API Location update with {len(batch.fixes)} fix(es).")
    coordinator.on_location_update(batch.fixes)
    return _status(coordinator)


@router.post("/failure", response_model=AlertState)
async def post_location_failure_api(
    failure: LocationFailure,
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    """Report that the client could not obtain a position."""
    coordinator.on_location_failure(failure.message)
    return coordinator.alert
