"""Unit tests for disaster models and alert messages.

Pure function tests - fast, no mocks needed.
"""

import pytest
from datetime import datetime, timezone

from disaster_alerts.core.disaster import (
    Disaster,
    DisasterKind,
    EarthquakeDetails,
    FloodDetails,
    HurricaneDetails,
    WildfireDetails,
    create_disaster,
    format_disaster_id,
    get_earthquake_level,
)
from disaster_alerts.core.validation import UnknownDisasterKind


def make_earthquake(magnitude: float, depth_km: float = 10.0) -> Disaster:
    return create_disaster(
        "EQ-1",
        DisasterKind.EARTHQUAKE,
        "California",
        8,
        "Shaking expected",
        EarthquakeDetails(magnitude=magnitude, depth_km=depth_km),
    )


class TestDisasterKind:
    """Tests for DisasterKind parsing and prefixes."""

    def test_prefixes(self):
        """Each kind has its two-letter ID prefix."""
        assert DisasterKind.EARTHQUAKE.prefix == "EQ"
        assert DisasterKind.FLOOD.prefix == "FL"
        assert DisasterKind.HURRICANE.prefix == "HU"
        assert DisasterKind.WILDFIRE.prefix == "WF"

    @pytest.mark.parametrize("name", ["Earthquake", "earthquake", "EARTHQUAKE", " Earthquake "])
    def test_parse_is_case_insensitive(self, name):
        assert DisasterKind.parse(name) is DisasterKind.EARTHQUAKE

    def test_parse_returns_members_unchanged(self):
        assert DisasterKind.parse(DisasterKind.FLOOD) is DisasterKind.FLOOD

    def test_parse_unknown_raises(self):
        with pytest.raises(UnknownDisasterKind):
            DisasterKind.parse("Tornado")

    def test_str_is_value(self):
        assert str(DisasterKind.WILDFIRE) == "Wildfire"


class TestFormatDisasterId:
    """Tests for format_disaster_id() function."""

    def test_formats_prefix_and_number(self):
        assert format_disaster_id(DisasterKind.EARTHQUAKE, 1) == "EQ-1"
        assert format_disaster_id(DisasterKind.WILDFIRE, 12) == "WF-12"


class TestCreateDisaster:
    """Tests for create_disaster() function."""

    def test_sets_fields(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        disaster = create_disaster(
            "FL-3",
            "flood",
            "Texas",
            6,
            "River overflow",
            FloodDetails(water_level_m=3.2, affected_areas="River basin areas"),
            created_at=created,
        )

        assert disaster.id == "FL-3"
        assert disaster.kind is DisasterKind.FLOOD
        assert disaster.location == "Texas"
        assert disaster.severity == 6
        assert disaster.created_at == created

    def test_defaults_created_at_to_now_utc(self):
        disaster = make_earthquake(5.0)
        assert disaster.created_at.tzinfo == timezone.utc

    def test_rejects_mismatched_details(self):
        """Details must belong to the disaster kind."""
        with pytest.raises(TypeError):
            create_disaster(
                "EQ-1",
                DisasterKind.EARTHQUAKE,
                "California",
                8,
                "",
                FloodDetails(water_level_m=1.0, affected_areas=""),
            )

    def test_is_immutable(self):
        disaster = make_earthquake(5.0)
        with pytest.raises(AttributeError):
            disaster.severity = 3

    def test_accepts_out_of_range_severity(self):
        """No range check is applied when building a disaster."""
        disaster = create_disaster(
            "HU-1",
            DisasterKind.HURRICANE,
            "",
            42,
            "",
            HurricaneDetails(wind_speed_kmh=10.0, category="Category 1"),
        )
        assert disaster.severity == 42


class TestEarthquakeLevel:
    """Tests for get_earthquake_level() function."""

    @pytest.mark.parametrize("magnitude", [7.0, 7.5, 9.9])
    def test_major(self, magnitude):
        assert get_earthquake_level(magnitude) == "MAJOR"

    @pytest.mark.parametrize("magnitude", [5.0, 6.5, 6.99])
    def test_moderate(self, magnitude):
        assert get_earthquake_level(magnitude) == "MODERATE"

    @pytest.mark.parametrize("magnitude", [0.0, 3.2, 4.99])
    def test_minor(self, magnitude):
        assert get_earthquake_level(magnitude) == "MINOR"


class TestAlertMessage:
    """Tests for Disaster.alert_message."""

    def test_earthquake_message(self):
        disaster = make_earthquake(6.5, 10.0)
        assert disaster.alert_message == (
            "🚨 EARTHQUAKE ALERT! Magnitude: 6.5, Depth: 10.0km, "
            "Location: California. MODERATE - Shaking expected"
        )

    def test_major_earthquake_contains_major(self):
        assert "MAJOR" in make_earthquake(7.0).alert_message

    def test_minor_earthquake_contains_minor(self):
        assert "MINOR" in make_earthquake(4.9).alert_message

    def test_flood_message(self):
        disaster = create_disaster(
            "FL-1",
            DisasterKind.FLOOD,
            "Texas",
            6,
            "Heavy rainfall causing river overflow",
            FloodDetails(water_level_m=3.2, affected_areas="River basin areas"),
        )
        assert disaster.alert_message == (
            "🌊 FLOOD ALERT! Water Level: 3.20m, Location: Texas. "
            "Affected Areas: River basin areas - Heavy rainfall causing river overflow"
        )

    def test_hurricane_message(self):
        disaster = create_disaster(
            "HU-2",
            DisasterKind.HURRICANE,
            "Florida",
            9,
            "Evacuation orders for coastal areas",
            HurricaneDetails(wind_speed_kmh=185.0, category="Category 4"),
        )
        assert disaster.alert_message == (
            "🌀 HURRICANE ALERT! Category: Category 4, Wind Speed: 185.0 km/h, "
            "Location: Florida - Evacuation orders for coastal areas"
        )

    def test_wildfire_message(self):
        disaster = create_disaster(
            "WF-4",
            DisasterKind.WILDFIRE,
            "California",
            7,
            "Strong winds spreading fire rapidly",
            WildfireDetails(area_affected_sq_km=150.5, containment_status="25% contained"),
        )
        assert disaster.alert_message == (
            "🔥 WILDFIRE ALERT! Area Affected: 150.50 sq km, Containment: 25% contained, "
            "Location: California - Strong winds spreading fire rapidly"
        )
