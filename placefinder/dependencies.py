from fastapi import HTTPException, Request, status

from placefinder.core.config import logger
from placefinder.services.coordinator import LocationCoordinator


async def get_coordinator(request: Request) -> LocationCoordinator:
    """
    Dependency returning the coordinator held on the application state.
    Raises 503 if the application was started without one.
    """
    coordinator = getattr(request.app.state, "coordinator", None)
    if coordinator is None:
        logger.critical("No LocationCoordinator configured on app.state.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Location service is not available.",
        )
    return coordinator
