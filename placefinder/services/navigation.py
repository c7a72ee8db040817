"""Distance to a place and driving-directions handoff to external map apps."""

import math
from typing import Callable, List, Optional

from placefinder.core.config import settings, logger
from placefinder.models.general import Coordinate, LocationFix
from placefinder.models.navigation import NavigationLink, NavigationTarget, PlaceDetail
from placefinder.models.places import PlaceRecord

EARTH_RADIUS_M = 6371000
METERS_PER_FOOT = 0.3048
METERS_PER_MILE = 1609.344


def distance_m(a: Coordinate, b: Coordinate) -> float:
    """Great-circle (haversine) distance between two coordinates, in meters."""
    phi1, phi2 = math.radians(a.latitude), math.radians(b.latitude)
    dphi = math.radians(b.latitude - a.latitude)
    dlam = math.radians(b.longitude - a.longitude)
    h = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def _number(value: float) -> str:
    # At most two fraction digits, no trailing zeros.
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def format_distance(meters: float, units: Optional[str] = None) -> str:
    """
    Format a distance in natural units.

    Metric switches from meters to kilometers at 1000 m; imperial from feet
    to miles at 1000 ft. The unit is chosen on the value as displayed, so
    999.996 m reads "1 km" rather than "1,000 m".
    """
    units = units or settings.DISTANCE_UNITS
    if units == "imperial":
        feet = meters / METERS_PER_FOOT
        if round(feet, 2) < 1000:
            return f"{_number(feet)} ft"
        return f"{_number(meters / METERS_PER_MILE)} mi"
    if round(meters, 2) < 1000:
        return f"{_number(meters)} m"
    return f"{_number(meters / 1000)} km"


def build_navigation_links(coordinate: Coordinate) -> List[NavigationLink]:
    """Driving-directions links for every supported app, in display order."""
    lat, lon = coordinate.latitude, coordinate.longitude
    return [
        NavigationLink(
            target=NavigationTarget.APPLE_MAPS,
            label="Apple Maps",
            app_url=f"maps://?daddr={lat},{lon}&dirflg=d",
            fallback_url=f"https://maps.apple.com/?daddr={lat},{lon}&dirflg=d",
        ),
        NavigationLink(
            target=NavigationTarget.GOOGLE_MAPS,
            label="Google Maps",
            app_url=f"comgooglemaps://?daddr={lat},{lon}&directionsmode=driving",
            fallback_url=f"https://maps.google.com/?daddr={lat},{lon}&directionsmode=driving",
        ),
        NavigationLink(
            target=NavigationTarget.WAZE,
            label="Waze",
            app_url=f"waze://?ll={lat},{lon}&navigate=yes",
            fallback_url=f"https://www.waze.com/ul?ll={lat},{lon}&navigate=yes",
        ),
    ]


def navigation_link(coordinate: Coordinate, target: NavigationTarget) -> NavigationLink:
    return next(
        link for link in build_navigation_links(coordinate) if link.target == target
    )


def resolve_handoff_url(link: NavigationLink, can_open: Callable[[str], bool]) -> str:
    """Return the app URL if it can be opened, otherwise the web fallback."""
    if can_open(link.app_url):
        return link.app_url
    logger.debug(f"{link.label} app not available, using web fallback.")
    return link.fallback_url


def build_place_detail(
    place: PlaceRecord, user_location: Optional[LocationFix]
) -> PlaceDetail:
    meters: Optional[float] = None
    text: Optional[str] = None
    if user_location is not None:
        meters = distance_m(user_location.coordinate, place.coordinate)
        text = format_distance(meters)
    return PlaceDetail(
        place=place,
        distance_m=meters,
        distance_text=text,
        navigation=build_navigation_links(place.coordinate),
    )
