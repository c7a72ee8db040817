import asyncio
from typing import Any, Dict, List, Optional, Protocol
from opencage.geocoder import (
    NotAuthorizedError,
    OpenCageGeocode,
    OpenCageGeocodeError,
    RateLimitExceededError,
)
from pydantic import ValidationError

from placefinder.core.config import settings, logger
from placefinder.models.general import Coordinate, Region
from placefinder.models.places import Placemark


class SearchProviderError(Exception):
    """A place search failed; the message is meant to be shown to the user."""


class SearchProvider(Protocol):
    async def search(self, query: str, region: Region) -> List[Placemark]: ...


def _component_name(components: Dict[str, Any]) -> Optional[str]:
    # OpenCage names the result under the key given by "_type",
    # e.g. {"_type": "restaurant", "restaurant": "Taco Bell"}.
    result_type = components.get("_type")
    if not result_type:
        return None
    name = components.get(result_type)
    return name if isinstance(name, str) else None


def _component_text(components: Dict[str, Any], *keys: str) -> Optional[str]:
    # First present key wins. House numbers and postcodes can arrive as ints.
    for key in keys:
        value = components.get(key)
        if value is not None:
            return str(value)
    return None


def placemark_from_result(result: Dict[str, Any]) -> Optional[Placemark]:
    """Map one OpenCage result to a Placemark, or None if it has no geometry."""
    components = result.get("components", {})
    geometry = result.get("geometry", {})
    if not geometry or "lat" not in geometry or "lng" not in geometry:
        return None

    return Placemark(
        name=_component_name(components),
        coordinate=Coordinate(latitude=geometry["lat"], longitude=geometry["lng"]),
        sub_thoroughfare=_component_text(components, "house_number"),
        thoroughfare=_component_text(components, "road"),
        locality=_component_text(
            components, "city", "town", "village", "state_district"
        ),
        administrative_area=_component_text(components, "state"),
        postal_code=_component_text(components, "postcode"),
        country=_component_text(components, "country"),
    )


class OpenCageSearchProvider:
    """Free-text place search bounded to a map region, backed by OpenCage."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        limit: Optional[int] = None,
        language: Optional[str] = None,
    ):
        self._limit = limit or settings.SEARCH_RESULT_LIMIT
        self._language = language or settings.GEOCODER_LANGUAGE
        self.geocoder: Optional[OpenCageGeocode] = None
        if not api_key:
            logger.warning(
                "OPENCAGE_API_KEY is not set. Place search will be unavailable."
            )
        else:
            try:
                self.geocoder = OpenCageGeocode(api_key)
                logger.info("OpenCage Geocoder initialized.")
            except Exception as e:
                logger.error(
                    f"Failed to initialize OpenCage Geocoder: {e}", exc_info=True
                )

    async def search(self, query: str, region: Region) -> List[Placemark]:
        """Search for *query* inside *region*. Raises SearchProviderError on failure."""
        if not self.geocoder:
            logger.error("Search skipped: OpenCage Geocoder not initialized.")
            raise SearchProviderError(
                "Search service is not configured or API key missing."
            )

        south_west, north_east = region.bounds()
        bounds = (
            f"{south_west.longitude},{south_west.latitude},"
            f"{north_east.longitude},{north_east.latitude}"
        )
        proximity = f"{region.center.latitude},{region.center.longitude}"
        try:
            logger.debug(f"Searching OpenCage for '{query}' within {bounds}")
            # Run synchronous geocode call in a separate thread
            results = await asyncio.to_thread(
                self.geocoder.geocode,
                query,
                bounds=bounds,
                proximity=proximity,
                language=self._language,
                limit=self._limit,
                no_annotations=1,
            )
        except RateLimitExceededError:
            logger.error("OpenCage API rate limit exceeded.")
            raise SearchProviderError("Search limit reached. Please try again later.")
        except NotAuthorizedError:
            logger.error("OpenCage rejected the configured API key.")
            raise SearchProviderError("Search service rejected the API key.")
        except OpenCageGeocodeError as e:
            logger.warning(f"OpenCage search failed for '{query}': {e}")
            raise SearchProviderError(str(e) or "Search failed.")
        except Exception as e:
            logger.error(
                f"OpenCage search unexpected error for '{query}': {e}", exc_info=True
            )
            raise SearchProviderError("An internal error occurred during search.")

        placemarks: List[Placemark] = []
        for result in results or []:
            try:
                placemark = placemark_from_result(result)
            except ValidationError as e:
                logger.warning(f"Skipping malformed OpenCage result for '{query}': {e}")
                continue
            if placemark is None:
                logger.warning(
                    f"OpenCage result missing geometry for '{query}'. Data: {result}"
                )
                continue
            placemarks.append(placemark)
        logger.debug(f"OpenCage search for '{query}' returned {len(placemarks)} places")
        return placemarks
