"""Tests for placefinder.models.places: placemark to PlaceRecord mapping."""

import pytest
from pydantic import ValidationError

from placefinder.models import (
    NO_ADDRESS,
    UNKNOWN_NAME,
    Coordinate,
    Placemark,
    PlaceRecord,
)

ORIGIN = Coordinate(latitude=0.0, longitude=0.0)


class TestFromPlacemark:
    def test_taco_bell_full_address(self):
        placemark = Placemark(
            name="Taco Bell",
            coordinate=Coordinate(latitude=39.78, longitude=-89.65),
            thoroughfare="123 Main St",
            locality="Springfield",
            administrative_area="IL",
            postal_code="62704",
            country="USA",
        )
        record = PlaceRecord.from_placemark(placemark)
        assert record.full_address == "123 Main St, Springfield, IL, 62704, USA"
        assert record.name == "Taco Bell"
        assert record.address_line == "123 Main St"

    def test_missing_everything_uses_placeholders(self):
        record = PlaceRecord.from_placemark(Placemark(coordinate=ORIGIN))
        assert record.name == UNKNOWN_NAME == "Unknown"
        assert record.address_line == NO_ADDRESS == "No address available"
        assert record.full_address == ""
        assert record.postal_code is None
        assert record.locality is None
        assert record.administrative_area is None
        assert record.country is None

    def test_sub_thoroughfare_comes_first(self):
        record = PlaceRecord.from_placemark(
            Placemark(
                coordinate=ORIGIN,
                sub_thoroughfare="1600",
                thoroughfare="Amphitheatre Pkwy",
                country="USA",
            )
        )
        assert record.full_address == "1600, Amphitheatre Pkwy, USA"

    @pytest.mark.parametrize(
        "fields, expected",
        [
            ({"locality": "Austin"}, "Austin"),
            ({"postal_code": "78701", "country": "USA"}, "78701, USA"),
            ({"administrative_area": "TX", "locality": "Austin"}, "Austin, TX"),
            ({"sub_thoroughfare": "7", "postal_code": "78701"}, "7, 78701"),
        ],
    )
    def test_only_present_components_in_fixed_order(self, fields, expected):
        record = PlaceRecord.from_placemark(Placemark(coordinate=ORIGIN, **fields))
        assert record.full_address == expected

    def test_empty_string_component_is_kept(self):
        # Only absent components are dropped.
        record = PlaceRecord.from_placemark(
            Placemark(coordinate=ORIGIN, thoroughfare="", country="USA")
        )
        assert record.full_address == ", USA"
        assert record.address_line == ""

    def test_copies_optional_fields(self):
        record = PlaceRecord.from_placemark(
            Placemark(
                coordinate=ORIGIN,
                postal_code="10001",
                locality="New York",
                administrative_area="NY",
                country="USA",
            )
        )
        assert (record.postal_code, record.locality) == ("10001", "New York")
        assert (record.administrative_area, record.country) == ("NY", "USA")
        assert record.coordinate == ORIGIN


class TestPlaceRecord:
    def test_each_record_gets_its_own_id(self):
        placemark = Placemark(name="Same", coordinate=ORIGIN)
        a = PlaceRecord.from_placemark(placemark)
        b = PlaceRecord.from_placemark(placemark)
        assert a.id != b.id

    def test_is_immutable(self):
        record = PlaceRecord.from_placemark(Placemark(name="Taco", coordinate=ORIGIN))
        with pytest.raises(ValidationError):
            record.name = "Burrito"

    def test_coordinate_is_validated(self):
        with pytest.raises(ValidationError):
            Placemark(coordinate={"latitude": 91.0, "longitude": 0.0})
