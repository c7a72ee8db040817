from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from placefinder.core.config import settings, logger
from placefinder.routers import api_location, api_places, forms, pages, system
from placefinder.services.coordinator import LocationCoordinator
from placefinder.services.geocoding import OpenCageSearchProvider
from placefinder.services.location import BrowserLocationSource

# --- App Initialization ---
app = FastAPI(
    title="Place Finder",
    description="Find places near you on a map and get driving directions.",
    version="1.0.0",
)

# --- Add Middleware ---
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin).strip() for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(f"CORS enabled for origins: {settings.BACKEND_CORS_ORIGINS}")
else:
    logger.warning("CORS is not configured. BACKEND_CORS_ORIGINS is empty.")


# --- Coordinator (process-local UI state, injected via get_coordinator) ---
app.state.coordinator = LocationCoordinator(
    search_provider=OpenCageSearchProvider(settings.OPENCAGE_API_KEY),
    location_source=BrowserLocationSource(),
)
logger.info("LocationCoordinator attached to app state.")


# --- Include Routers ---
app.include_router(api_location.router)
app.include_router(api_places.router)
app.include_router(system.router)
app.include_router(pages.router)
app.include_router(forms.router)

logger.info("All application routers included.")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("placefinder.main:app", host="0.0.0.0", port=8000, reload=True)
