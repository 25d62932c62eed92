"""Unit tests for text formatting.

Pure function tests - no mocks needed.
"""

import pytest
from datetime import datetime, timezone

from disaster_alerts.core.disaster import (
    DisasterKind,
    EarthquakeDetails,
    HurricaneDetails,
    create_disaster,
)
from disaster_alerts.core.formatter import (
    format_active_disasters,
    format_disaster_list,
    format_disaster_summary,
    format_notification,
    format_registered_users,
    format_user_summary,
)
from disaster_alerts.core.matching import make_notification
from disaster_alerts.core.user import User


@pytest.fixture
def earthquake():
    return create_disaster(
        "EQ-1",
        DisasterKind.EARTHQUAKE,
        "California",
        8,
        "Moderate shaking",
        EarthquakeDetails(magnitude=6.5, depth_km=10.0),
        created_at=datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def alice():
    return User("U001", "Alice Johnson", "California", ["Earthquake", "Wildfire"])


class TestFormatDisasterSummary:
    """Tests for format_disaster_summary() function."""

    def test_summary(self, earthquake):
        assert format_disaster_summary(earthquake) == (
            "Disaster ID: EQ-1 | Type: Earthquake | Location: California | "
            "Severity: 8/10 | Time: 2024-01-01 12:00:00 UTC"
        )


class TestFormatUserSummary:
    """Tests for format_user_summary() function."""

    def test_summary(self, alice):
        assert format_user_summary(alice) == (
            "User: Alice Johnson (ID: U001) - Location: California "
            "- Subscriptions: [Earthquake, Wildfire]"
        )

    def test_no_subscriptions(self):
        user = User("U9", "Nobody", "Nowhere")
        assert format_user_summary(user).endswith("Subscriptions: []")


class TestFormatNotification:
    """Tests for format_notification() function."""

    def test_lines(self, earthquake, alice):
        bob = User("U002", "Bob Smith", "Florida", ["Hurricane"])
        lines = format_notification(make_notification(earthquake, [alice, bob]))

        assert lines == [
            "=== SENDING ALERTS ===",
            earthquake.alert_message,
            "Notifying users...",
            "📱 Alert sent to: Alice Johnson in California",
        ]

    def test_no_recipients(self, earthquake):
        lines = format_notification(make_notification(earthquake, []))
        assert lines[-1] == "Notifying users..."


class TestDumps:
    """Tests for the active disaster and registered user dumps."""

    def test_active_disasters_placeholder(self):
        assert format_active_disasters([]) == [
            "=== ACTIVE DISASTERS ===",
            "No active disasters.",
        ]

    def test_active_disasters(self, earthquake):
        hurricane = create_disaster(
            "HU-2",
            DisasterKind.HURRICANE,
            "Florida",
            9,
            "",
            HurricaneDetails(wind_speed_kmh=185.0, category="Category 4"),
        )
        lines = format_active_disasters([earthquake, hurricane])

        assert lines[0] == "=== ACTIVE DISASTERS ==="
        assert lines[1].startswith("Disaster ID: EQ-1")
        assert lines[2].startswith("Disaster ID: HU-2")

    def test_registered_users(self, alice):
        lines = format_registered_users([alice])
        assert lines == [
            "=== REGISTERED USERS ===",
            format_user_summary(alice),
        ]

    def test_disaster_list_without_entries(self):
        assert format_disaster_list("ALL FLOODS", []) == ["=== ALL FLOODS ==="]
