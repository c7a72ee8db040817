import uuid
from typing import List, Optional, Sequence

from placefinder.core.config import settings, logger
from placefinder.models.general import AlertState, Coordinate, LocationFix, Region
from placefinder.models.location import CoordinatorPhase, CoordinatorState
from placefinder.models.places import PlaceRecord
from placefinder.services.geocoding import SearchProvider, SearchProviderError
from placefinder.services.location import BrowserLocationSource, LocationSource

UNABLE_TO_LOCATE = "Unable to get your location."
DEFAULT_CENTER = Coordinate(latitude=37.7749, longitude=-122.4194)  # San Francisco


class LocationCoordinator:
    """
    Ties the device location to place searches.

    Holds the state the map page renders: the displayed region, the last
    fix, the current search results and the alert. All mutation happens
    from platform callbacks and search completions on the event loop.
    """

    def __init__(
        self,
        search_provider: SearchProvider,
        location_source: Optional[LocationSource] = None,
        default_query: Optional[str] = None,
    ):
        self._provider = search_provider
        self.location_source = location_source or BrowserLocationSource()
        self.default_query = default_query or settings.DEFAULT_SEARCH_TERM

        self.phase = CoordinatorPhase.UNKNOWN
        self.region = Region.around(DEFAULT_CENTER)
        self.last_fix: Optional[LocationFix] = None
        self.places: List[PlaceRecord] = []
        self.alert = AlertState()

    # --- Location lifecycle ---

    def request_permission(self) -> None:
        """Ask for location access and start listening for a fix."""
        self.location_source.request_authorization()
        self.location_source.start_updates()
        self.phase = CoordinatorPhase.AWAITING_FIX
        logger.info("Location permission requested; awaiting first fix.")

    def on_location_update(self, fixes: Sequence[LocationFix]) -> None:
        """Accept the newest fix of the first burst after a permission request."""
        if not fixes:
            return
        if self.phase is not CoordinatorPhase.AWAITING_FIX:
            logger.debug(
                f"Ignoring {len(fixes)} location update(s) in phase {self.phase.value}"
            )
            return

        # The first fix is the only one used.
        self.location_source.stop_updates()
        fix = fixes[-1]
        self.last_fix = fix
        self.region = Region.around(fix.coordinate)
        self.phase = CoordinatorPhase.FIX_ACQUIRED
        logger.info(
            f"Location fix acquired at ({fix.coordinate.latitude}, {fix.coordinate.longitude})"
        )

    def on_location_failure(self, message: str) -> None:
        """Surface a location error. A new permission request is needed to retry."""
        logger.warning(f"Location update failed: {message}")
        self.location_source.stop_updates()
        self.phase = CoordinatorPhase.UNKNOWN
        self._show_alert(f"Failed to get your location: {message}")

    # --- Search ---

    async def search(
        self, query: Optional[str] = None, default_query: Optional[str] = None
    ) -> None:
        """
        Search around the last fix and replace the results.

        A blank query falls back to the default term. Failures land in the
        alert and leave the previous results in place.
        """
        term = (query or "").strip() or default_query or self.default_query

        if self.last_fix is None:
            logger.warning(f"Search for '{term}' requested before a location fix.")
            self._show_alert(UNABLE_TO_LOCATE)
            return

        region = Region.around(self.last_fix.coordinate)
        logger.info(f"Searching for '{term}' around the last fix.")
        try:
            placemarks = await self._provider.search(term, region)
        except SearchProviderError as e:
            self._show_alert(str(e))
            return

        # Overlapping searches are not sequenced: whichever completes last wins.
        self.places = [PlaceRecord.from_placemark(p) for p in placemarks]
        self.region = region
        logger.info(f"Search for '{term}' produced {len(self.places)} places.")

    def find_place(self, place_id: uuid.UUID) -> Optional[PlaceRecord]:
        return next((p for p in self.places if p.id == place_id), None)

    # --- Alert ---

    def dismiss_alert(self) -> None:
        self.alert = AlertState()

    def _show_alert(self, message: str) -> None:
        self.alert = AlertState(message=message, visible=True)

    # --- Rendering ---

    @property
    def updates_active(self) -> bool:
        return bool(getattr(self.location_source, "updates_active", False))

    def snapshot(self) -> CoordinatorState:
        return CoordinatorState(
            phase=self.phase,
            updates_active=self.updates_active,
            region=self.region,
            last_fix=self.last_fix,
            places=list(self.places),
            alert=self.alert,
        )
