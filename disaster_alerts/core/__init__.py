"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Disaster models and alert message wording
- User subscriptions and proximity matching
- Fan-out decisions
- Text formatting
- Configuration validation

All functions here are deterministic and have no I/O.
"""

from disaster_alerts.core.disaster import (
    Disaster,
    DisasterKind,
    EarthquakeDetails,
    FloodDetails,
    HurricaneDetails,
    WildfireDetails,
    create_disaster,
)
from disaster_alerts.core.user import User, is_in_proximity
from disaster_alerts.core.matching import AlertNotification, find_recipients, make_notification
from disaster_alerts.core.formatter import format_disaster_summary, format_notification
from disaster_alerts.core.validation import (
    DisasterAlertError,
    EmptyLocation,
    InvalidSeverity,
    UnknownDisasterKind,
)

__all__ = [
    # Disaster
    "Disaster",
    "DisasterKind",
    "EarthquakeDetails",
    "FloodDetails",
    "HurricaneDetails",
    "WildfireDetails",
    "create_disaster",
    # User
    "User",
    "is_in_proximity",
    # Matching
    "AlertNotification",
    "find_recipients",
    "make_notification",
    # Formatter
    "format_disaster_summary",
    "format_notification",
    # Validation
    "DisasterAlertError",
    "EmptyLocation",
    "InvalidSeverity",
    "UnknownDisasterKind",
]
