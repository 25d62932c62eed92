"""Disaster data models - Pure data structures.

A disaster is one of a fixed set of kinds. Every disaster shares the same
base fields and carries a kind-specific details payload that determines
the wording of its alert message.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from disaster_alerts.core.validation import UnknownDisasterKind


class DisasterKind(str, Enum):
    """The closed set of supported disaster kinds."""

    EARTHQUAKE = "Earthquake"
    FLOOD = "Flood"
    HURRICANE = "Hurricane"
    WILDFIRE = "Wildfire"

    @property
    def prefix(self) -> str:
        """Two-letter prefix used when minting disaster IDs."""
        return _ID_PREFIXES[self]

    @classmethod
    def parse(cls, value: "DisasterKind | str") -> "DisasterKind":
        """Resolve a kind from an enum member or a case-insensitive name.

        Raises:
            UnknownDisasterKind: If the name matches no kind
        """
        if isinstance(value, cls):
            return value

        name = str(value).strip().lower()
        for kind in cls:
            if kind.value.lower() == name:
                return kind

        raise UnknownDisasterKind(f"Unknown disaster kind: {value!r}")

    def __str__(self) -> str:
        return self.value


_ID_PREFIXES = {
    DisasterKind.EARTHQUAKE: "EQ",
    DisasterKind.FLOOD: "FL",
    DisasterKind.HURRICANE: "HU",
    DisasterKind.WILDFIRE: "WF",
}

# Earthquake level thresholds (magnitude, inclusive lower bound)
MAJOR_MAGNITUDE = 7.0
MODERATE_MAGNITUDE = 5.0


@dataclass(frozen=True)
class EarthquakeDetails:
    """Earthquake-specific fields.

    Attributes:
        magnitude: Magnitude, typically 0-10
        depth_km: Depth in kilometers
    """
    magnitude: float
    depth_km: float


@dataclass(frozen=True)
class FloodDetails:
    """Flood-specific fields.

    Attributes:
        water_level_m: Water level in meters
        affected_areas: Free-text description of affected areas
    """
    water_level_m: float
    affected_areas: str


@dataclass(frozen=True)
class HurricaneDetails:
    """Hurricane-specific fields.

    Attributes:
        wind_speed_kmh: Sustained wind speed in km/h
        category: Free-text category, e.g. "Category 4"
    """
    wind_speed_kmh: float
    category: str


@dataclass(frozen=True)
class WildfireDetails:
    """Wildfire-specific fields.

    Attributes:
        area_affected_sq_km: Burned area in square kilometers
        containment_status: Free-text status, e.g. "25% contained"
    """
    area_affected_sq_km: float
    containment_status: str


DisasterDetails = EarthquakeDetails | FloodDetails | HurricaneDetails | WildfireDetails

DETAILS_TYPES: dict[DisasterKind, type] = {
    DisasterKind.EARTHQUAKE: EarthquakeDetails,
    DisasterKind.FLOOD: FloodDetails,
    DisasterKind.HURRICANE: HurricaneDetails,
    DisasterKind.WILDFIRE: WildfireDetails,
}


@dataclass(frozen=True)
class Disaster:
    """Immutable disaster record.

    Attributes:
        id: Registry-assigned ID, e.g. "EQ-1"
        kind: Disaster kind
        location: Free-text location
        severity: Severity on a 1-10 scale (not enforced by default)
        description: Free-text description
        details: Kind-specific payload
        created_at: Creation timestamp (UTC)
    """
    id: str
    kind: DisasterKind
    location: str
    severity: int
    description: str
    details: DisasterDetails
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def alert_message(self) -> str:
        """Human-readable alert text for this disaster."""
        return format_alert_message(self)


def format_disaster_id(kind: DisasterKind, number: int) -> str:
    """Build a disaster ID such as "EQ-1".

    Pure function.
    """
    return f"{kind.prefix}-{number}"


def create_disaster(
    disaster_id: str,
    kind: DisasterKind | str,
    location: str,
    severity: int,
    description: str,
    details: DisasterDetails,
    created_at: datetime | None = None,
) -> Disaster:
    """Create a disaster, checking that the details match the kind.

    Args:
        disaster_id: ID to assign
        kind: Disaster kind (enum member or name)
        location: Free-text location
        severity: Severity value
        description: Free-text description
        details: Kind-specific payload
        created_at: Creation time, defaults to now (UTC)

    Returns:
        New Disaster

    Raises:
        UnknownDisasterKind: If kind is not a known kind name
        TypeError: If details do not belong to the kind
    """
    kind = DisasterKind.parse(kind)
    expected = DETAILS_TYPES[kind]
    if not isinstance(details, expected):
        raise TypeError(
            f"{kind.value} requires {expected.__name__}, got {type(details).__name__}"
        )

    return Disaster(
        id=disaster_id,
        kind=kind,
        location=location,
        severity=severity,
        description=description,
        details=details,
        created_at=created_at or datetime.now(timezone.utc),
    )


def get_earthquake_level(magnitude: float) -> str:
    """Classify an earthquake as MAJOR, MODERATE or MINOR.

    Pure function.
    """
    if magnitude >= MAJOR_MAGNITUDE:
        return "MAJOR"
    elif magnitude >= MODERATE_MAGNITUDE:
        return "MODERATE"
    else:
        return "MINOR"


def format_alert_message(disaster: Disaster) -> str:
    """Format the alert text for a disaster.

    Pure function. Wording depends on the details payload.

    Args:
        disaster: Disaster to describe

    Returns:
        Alert message string
    """
    details = disaster.details

    if isinstance(details, EarthquakeDetails):
        level = get_earthquake_level(details.magnitude)
        return (
            f"🚨 EARTHQUAKE ALERT! Magnitude: {details.magnitude:.1f}, "
            f"Depth: {details.depth_km:.1f}km, Location: {disaster.location}. "
            f"{level} - {disaster.description}"
        )
    elif isinstance(details, FloodDetails):
        return (
            f"🌊 FLOOD ALERT! Water Level: {details.water_level_m:.2f}m, "
            f"Location: {disaster.location}. "
            f"Affected Areas: {details.affected_areas} - {disaster.description}"
        )
    elif isinstance(details, HurricaneDetails):
        return (
            f"🌀 HURRICANE ALERT! Category: {details.category}, "
            f"Wind Speed: {details.wind_speed_kmh:.1f} km/h, "
            f"Location: {disaster.location} - {disaster.description}"
        )
    elif isinstance(details, WildfireDetails):
        return (
            f"🔥 WILDFIRE ALERT! Area Affected: {details.area_affected_sq_km:.2f} sq km, "
            f"Containment: {details.containment_status}, "
            f"Location: {disaster.location} - {disaster.description}"
        )

    raise TypeError(f"Unsupported disaster details: {type(details).__name__}")
