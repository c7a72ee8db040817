"""Shared test fixtures: fake search provider and location source, app client."""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from placefinder.models import Coordinate, LocationFix, Placemark, Region
from placefinder.services.coordinator import LocationCoordinator
from placefinder.services.geocoding import SearchProviderError


class FakeSearchProvider:
    """Returns canned placemarks (or raises) and records every call."""

    def __init__(
        self,
        placemarks: Optional[List[Placemark]] = None,
        error: Optional[str] = None,
    ):
        self.placemarks = placemarks or []
        self.error = error
        self.calls: List[tuple[str, Region]] = []

    async def search(self, query: str, region: Region) -> List[Placemark]:
        self.calls.append((query, region))
        if self.error is not None:
            raise SearchProviderError(self.error)
        return list(self.placemarks)


class FakeLocationSource:
    def __init__(self):
        self.authorization_requests = 0
        self.updates_active = False
        self.stop_calls = 0

    def request_authorization(self) -> None:
        self.authorization_requests += 1

    def start_updates(self) -> None:
        self.updates_active = True

    def stop_updates(self) -> None:
        self.stop_calls += 1
        self.updates_active = False


def make_fix(latitude: float, longitude: float) -> LocationFix:
    return LocationFix(coordinate=Coordinate(latitude=latitude, longitude=longitude))


@pytest.fixture()
def taco_placemarks() -> List[Placemark]:
    return [
        Placemark(
            name="Taco Bell",
            coordinate=Coordinate(latitude=39.7817, longitude=-89.6501),
            sub_thoroughfare=None,
            thoroughfare="123 Main St",
            locality="Springfield",
            administrative_area="IL",
            postal_code="62704",
            country="USA",
        ),
        Placemark(
            name="El Taquito",
            coordinate=Coordinate(latitude=39.7900, longitude=-89.6440),
            sub_thoroughfare="45",
            thoroughfare="Oak Ave",
            locality="Springfield",
            administrative_area="IL",
        ),
    ]


@pytest.fixture()
def provider(taco_placemarks) -> FakeSearchProvider:
    return FakeSearchProvider(placemarks=taco_placemarks)


@pytest.fixture()
def location_source() -> FakeLocationSource:
    return FakeLocationSource()


@pytest.fixture()
def coordinator(provider, location_source) -> LocationCoordinator:
    return LocationCoordinator(
        search_provider=provider,
        location_source=location_source,
        default_query="Taco",
    )


@pytest.fixture()
def located_coordinator(coordinator) -> LocationCoordinator:
    """Coordinator that already holds a fix in Springfield, IL."""
    coordinator.request_permission()
    coordinator.on_location_update([make_fix(39.7990, -89.6440)])
    return coordinator


@pytest.fixture()
def client(coordinator):
    """TestClient whose app uses the fake-backed coordinator."""
    from placefinder.main import app

    original = app.state.coordinator
    app.state.coordinator = coordinator
    yield TestClient(app)
    app.state.coordinator = original
