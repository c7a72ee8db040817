from fastapi import APIRouter, Depends, Request, Form, status
from fastapi.responses import RedirectResponse
from typing import Optional

from placefinder.services.coordinator import LocationCoordinator
from placefinder.dependencies import get_coordinator
from placefinder.core.config import logger

# Using APIRouter even for non-API endpoints allows for better organization
router = APIRouter(tags=["Forms"])


@router.post("/search", status_code=status.HTTP_303_SEE_OTHER)
async def handle_search_form(
    request: Request,
    query: Optional[str] = Form(None),
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    """Handles the search box on the map page. Errors show up as the page alert."""
    logger.info(f"FORM Search received: '{query or ''}'")
    await coordinator.search(query)
    return RedirectResponse(
        url=request.url_for("serve_root_page"), status_code=status.HTTP_303_SEE_OTHER
    )


@router.post("/alert/dismiss", status_code=status.HTTP_303_SEE_OTHER)
async def handle_dismiss_alert_form(
    request: Request,
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    coordinator.dismiss_alert()
    return RedirectResponse(
        url=request.url_for("serve_root_page"), status_code=status.HTTP_303_SEE_OTHER
    )
