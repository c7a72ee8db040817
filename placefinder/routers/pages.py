import uuid
from pathlib import Path
from fastapi import APIRouter, Depends, Request, Query, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from placefinder.core.config import logger, settings
from placefinder.models.location import CoordinatorPhase
from placefinder.models.navigation import NavigationTarget
from placefinder.services.coordinator import LocationCoordinator
from placefinder.services.mapping import generate_map_html
from placefinder.services.navigation import (
    build_place_detail,
    navigation_link,
    resolve_handoff_url,
)
from placefinder.dependencies import get_coordinator

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse, name="serve_root_page")
async def serve_root_page(
    request: Request,
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    logger.info(
        f"Request root page. Phase: {coordinator.phase.value}, places: {len(coordinator.places)}"
    )

    map_html_content = '<p style="color: red; text-align: center; padding: 20px;">Map could not be loaded.</p>'
    try:
        map_html_content = generate_map_html(
            places=coordinator.places,
            region=coordinator.region,
            user_location=coordinator.last_fix,
            request=request,
        )
    except Exception as page_load_error:
        logger.error(
            f"Critical error generating map page: {page_load_error}", exc_info=True
        )

    context = {
        "map_html": map_html_content,
        "places": coordinator.places,
        "alert": coordinator.alert,
        "watch_location": (
            coordinator.phase is not CoordinatorPhase.FIX_ACQUIRED
            and not coordinator.alert.visible
        ),
        "has_fix": coordinator.last_fix is not None,
        "default_query": settings.DEFAULT_SEARCH_TERM,
    }
    return templates.TemplateResponse(request, "index.html", context)


@router.get(
    "/places/{place_id}", response_class=HTMLResponse, name="serve_place_detail_page"
)
async def serve_place_detail_page(
    request: Request,
    place_id: uuid.UUID,
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    place = coordinator.find_place(place_id)
    if place is None:
        # Results are replaced on every search, so old links go stale.
        logger.info(f"Detail page for unknown place {place_id}; redirecting to map.")
        return RedirectResponse(
            url=request.url_for("serve_root_page"),
            status_code=status.HTTP_303_SEE_OTHER,
        )
    detail = build_place_detail(place, coordinator.last_fix)
    return templates.TemplateResponse(
        request, "place_detail.html", {"detail": detail, "place": place}
    )


@router.get("/places/{place_id}/directions/{target}", name="handoff_directions")
async def handoff_directions(
    request: Request,
    place_id: uuid.UUID,
    target: NavigationTarget,
    app_installed: bool = Query(False),
    coordinator: LocationCoordinator = Depends(get_coordinator),
):
    """Redirect to the chosen navigation app, or its website when the app is not installed."""
    place = coordinator.find_place(place_id)
    if place is None:
        return RedirectResponse(
            url=request.url_for("serve_root_page"),
            status_code=status.HTTP_303_SEE_OTHER,
        )
    link = navigation_link(place.coordinate, target)
    url = resolve_handoff_url(link, lambda _url: app_installed)
    logger.info(f"Directions handoff to {link.label} for '{place.name}'")
    return RedirectResponse(url=url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
