"""Alert Registry - Wires Functional Core and Imperative Shell.

The registry owns every disaster and user it has seen. Adding a disaster
stores it and then, before returning, evaluates every registered user and
hands the resulting notification to the notifier.

The registry is single-owner and does no locking.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from disaster_alerts.core.config import Config
from disaster_alerts.core.disaster import (
    Disaster,
    DisasterDetails,
    DisasterKind,
    EarthquakeDetails,
    FloodDetails,
    HurricaneDetails,
    WildfireDetails,
    create_disaster,
    format_disaster_id,
)
from disaster_alerts.core.formatter import (
    format_active_disasters,
    format_registered_users,
)
from disaster_alerts.core.matching import AlertNotification, make_notification
from disaster_alerts.core.user import User
from disaster_alerts.core.validation import validate_location, validate_severity
from disaster_alerts.shell.notifier import ConsoleNotifier, Notifier


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AlertRegistry:
    """Stores disasters and users, and fans out alerts on every addition.

    Disaster IDs are "<PREFIX>-<N>" where N comes from a single counter
    shared by all kinds, so IDs are unique across the registry.
    """

    def __init__(
        self,
        config: Config | None = None,
        notifier: Notifier | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize an empty registry.

        Args:
            config: Application configuration (defaults used if not provided)
            notifier: Notification sink (console notifier if not provided)
            clock: Returns the creation time for new disasters
        """
        self.config = config or Config()
        self.notifier = notifier or ConsoleNotifier()
        self.clock = clock or _utcnow
        self._disasters: list[Disaster] = []
        self._users: list[User] = []
        self._notifications: list[AlertNotification] = []
        self._next_number = 1

    @property
    def disasters(self) -> tuple[Disaster, ...]:
        return tuple(self._disasters)

    @property
    def users(self) -> tuple[User, ...]:
        return tuple(self._users)

    @property
    def notifications(self) -> tuple[AlertNotification, ...]:
        """Every notification emitted so far, in emission order."""
        return tuple(self._notifications)

    def _validate(self, location: str, severity: int) -> None:
        if not self.config.strict_validation:
            return
        validate_severity(
            severity,
            minimum=self.config.min_severity,
            maximum=self.config.max_severity,
        )
        validate_location(location)

    def add_disaster(
        self,
        kind: DisasterKind | str,
        location: str,
        severity: int,
        description: str,
        details: DisasterDetails,
    ) -> str:
        """Add a disaster and alert every matching user.

        Does not return until all registered users have been evaluated
        and the notification has been delivered to the notifier.

        Args:
            kind: Disaster kind (enum member or name)
            location: Free-text location
            severity: Severity value
            description: Free-text description
            details: Kind-specific payload

        Returns:
            The new disaster's ID

        Raises:
            UnknownDisasterKind: If kind is not a known kind name
            InvalidSeverity: If strict validation is on and severity is out of range
            EmptyLocation: If strict validation is on and location is blank
            TypeError: If details do not belong to the kind
        """
        kind = DisasterKind.parse(kind)
        self._validate(location, severity)

        disaster = create_disaster(
            disaster_id=format_disaster_id(kind, self._next_number),
            kind=kind,
            location=location,
            severity=severity,
            description=description,
            details=details,
            created_at=self.clock(),
        )
        self._next_number += 1
        self._disasters.append(disaster)

        logger.info(
            "Added %s %s at %s (severity %d)",
            kind.value,
            disaster.id,
            location,
            severity,
        )

        self._notify_users(disaster)
        return disaster.id

    def add_earthquake(
        self,
        location: str,
        severity: int,
        magnitude: float,
        depth_km: float,
        description: str,
    ) -> str:
        return self.add_disaster(
            DisasterKind.EARTHQUAKE,
            location,
            severity,
            description,
            EarthquakeDetails(magnitude=magnitude, depth_km=depth_km),
        )

    def add_flood(
        self,
        location: str,
        severity: int,
        water_level_m: float,
        affected_areas: str,
        description: str,
    ) -> str:
        return self.add_disaster(
            DisasterKind.FLOOD,
            location,
            severity,
            description,
            FloodDetails(water_level_m=water_level_m, affected_areas=affected_areas),
        )

    def add_hurricane(
        self,
        location: str,
        severity: int,
        wind_speed_kmh: float,
        category: str,
        description: str,
    ) -> str:
        return self.add_disaster(
            DisasterKind.HURRICANE,
            location,
            severity,
            description,
            HurricaneDetails(wind_speed_kmh=wind_speed_kmh, category=category),
        )

    def add_wildfire(
        self,
        location: str,
        severity: int,
        area_affected_sq_km: float,
        containment_status: str,
        description: str,
    ) -> str:
        return self.add_disaster(
            DisasterKind.WILDFIRE,
            location,
            severity,
            description,
            WildfireDetails(
                area_affected_sq_km=area_affected_sq_km,
                containment_status=containment_status,
            ),
        )

    def register_user(self, user: User) -> None:
        """Register a user. Duplicate IDs are kept and evaluated separately."""
        self._users.append(user)
        logger.debug("Registered user %s (%s)", user.id, user.name)

    def _notify_users(self, disaster: Disaster) -> AlertNotification:
        """Evaluate all users against a disaster and emit the notification."""
        notification = make_notification(disaster, self._users)

        logger.info(
            "%s matched %d of %d users",
            disaster.id,
            len(notification.recipients),
            len(self._users),
        )

        self._notifications.append(notification)
        self.notifier.notify(notification)
        return notification

    def disasters_by_type(self, kind: DisasterKind | str) -> list[Disaster]:
        """Get disasters of a kind, matched case-insensitively.

        An unrecognised kind name matches nothing.
        """
        name = kind.value if isinstance(kind, DisasterKind) else str(kind)
        return [d for d in self._disasters if d.kind.value.lower() == name.lower()]

    def disasters_by_severity_at_least(self, threshold: int) -> list[Disaster]:
        """Get disasters with severity >= threshold, in insertion order."""
        return [d for d in self._disasters if d.severity >= threshold]

    def active_disasters_report(self) -> list[str]:
        return format_active_disasters(self._disasters)

    def registered_users_report(self) -> list[str]:
        return format_registered_users(self._users)

    def register_users(self, config: Config) -> list[User]:
        """Create and register the users described by a config."""
        users = []
        for spec in config.users:
            user = User(id=spec.id, name=spec.name, home_location=spec.home_location)
            for kind in spec.subscriptions:
                user.subscribe(kind)
            self.register_user(user)
            users.append(user)
        return users

    def add_disasters(self, config: Config) -> list[str]:
        """Add the disasters described by a config, in order."""
        return [
            self.add_disaster(
                spec.kind,
                spec.location,
                spec.severity,
                spec.description,
                spec.details,
            )
            for spec in config.disasters
        ]

    def load_scenario(self, config: Config) -> list[str]:
        """Register a config's users, then add its disasters.

        Returns:
            IDs of the added disasters
        """
        self.register_users(config)
        return self.add_disasters(config)
