from fastapi import APIRouter, Depends, status

from placefinder.models.general import AlertState
from placefinder.models.location import CoordinatorState
from placefinder.services.coordinator import LocationCoordinator
from placefinder.dependencies import get_coordinator
from placefinder.core.config import logger

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Health Check",
)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok"}


@router.get("/api/v1/state", response_model=CoordinatorState, summary="Current State")
async def get_state_endpoint(
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    """Everything the map view renders: region, fix, results and alert."""
    return coordinator.snapshot()


@router.delete("/api/v1/alert", response_model=AlertState, summary="Dismiss Alert")
async def dismiss_alert_endpoint(
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    logger.debug("API Alert dismissed.")
    coordinator.dismiss_alert()
    return coordinator.alert
