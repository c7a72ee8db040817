import folium
import html
from typing import List, Optional
from fastapi import Request
from branca.element import Element

from placefinder.models.general import LocationFix, Region
from placefinder.models.places import PlaceRecord
from placefinder.core.config import logger

POPUP_STYLE = """
<style>
    .map-popup-container { font-family: 'Poppins', sans-serif; font-size: 14px; line-height: 1.6; color: #212529; }
    .map-popup-container h4 { margin: 0 0 8px 0; padding-bottom: 6px; font-size: 1.2em; font-weight: 600; color: #b71c1c; border-bottom: 1px solid #eee; }
    .map-popup-container p { margin: 0 0 6px 0; font-size: 0.95em; }
    .popup-actions { margin-top: 10px; padding-top: 10px; border-top: 1px solid #eee; }
    .popup-actions a { padding: 5px 10px; font-size: 0.85em; font-weight: 500; border-radius: 5px; color: white; background-color: #0288d1; text-decoration: none; }
    .popup-actions a:hover { background-color: #0277bd; }
</style>
"""


def _detail_url(place: PlaceRecord, request: Optional[Request]) -> str:
    if request is None:
        return f"/places/{place.id}"
    return str(request.url_for("serve_place_detail_page", place_id=str(place.id)))


def _popup_html(place: PlaceRecord, request: Optional[Request]) -> str:
    place_name = html.escape(place.name)
    popup_parts = [
        "<div class='map-popup-container'>",
        f"<h4>{place_name}</h4>",
        f"<p>{html.escape(place.full_address or place.address_line)}</p>",
        "<div class='popup-actions'>",
        # The map renders inside an iframe; navigate the whole page.
        f'<a href="{html.escape(_detail_url(place, request), quote=True)}" target="_top">Details</a>',
        "</div>",
        "</div>",
    ]
    return "".join(popup_parts)


def build_map(
    places: List[PlaceRecord],
    region: Region,
    user_location: Optional[LocationFix] = None,
    request: Optional[Request] = None,
) -> folium.Map:
    """Folium map fitted to *region* with one pin per place."""
    logger.info(
        f"Building map for {len(places)} places around "
        f"({region.center.latitude}, {region.center.longitude})"
    )

    m = folium.Map(
        location=[region.center.latitude, region.center.longitude],
        zoom_start=14,
        tiles="OpenStreetMap",
    )
    south_west, north_east = region.bounds()
    m.fit_bounds(
        [
            [south_west.latitude, south_west.longitude],
            [north_east.latitude, north_east.longitude],
        ]
    )
    m.get_root().header.add_child(Element(POPUP_STYLE))

    if user_location is not None:
        folium.CircleMarker(
            location=[
                user_location.coordinate.latitude,
                user_location.coordinate.longitude,
            ],
            radius=8,
            color="#1565c0",
            fill=True,
            fill_color="#1e88e5",
            fill_opacity=0.9,
            tooltip="You are here",
        ).add_to(m)

    marker_count = 0
    for place in places:
        try:
            folium.Marker(
                location=[place.coordinate.latitude, place.coordinate.longitude],
                popup=folium.Popup(_popup_html(place, request), max_width=300),
                tooltip=html.escape(place.name),
                icon=folium.Icon(color="red", icon="map-pin", prefix="fa"),
            ).add_to(m)
            marker_count += 1
        except Exception as marker_error:
            logger.error(
                f"MAPGEN: Error processing marker for place ID {place.id}: {marker_error}",
                exc_info=True,
            )
    if places:
        logger.info(f"MAPGEN: Successfully added {marker_count} markers.")
    else:
        logger.info("MAPGEN: No places found to display on map.")

    return m


def generate_map_html(
    places: List[PlaceRecord],
    region: Region,
    user_location: Optional[LocationFix] = None,
    request: Optional[Request] = None,
) -> str:
    return build_map(places, region, user_location, request)._repr_html_()
