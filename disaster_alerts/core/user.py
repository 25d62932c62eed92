"""User model and alert eligibility - Pure logic.

Proximity is a case-insensitive substring test between the user's home
location and the disaster location. It is not distance-based.
"""

from dataclasses import dataclass, field

from disaster_alerts.core.disaster import Disaster, DisasterKind


def is_in_proximity(home_location: str, disaster_location: str) -> bool:
    """Check whether two free-text locations refer to the same area.

    Pure function.

    Returns True if either lowercased location contains the other.
    """
    home = home_location.lower()
    other = disaster_location.lower()
    return other in home or home in other


@dataclass(frozen=True, eq=False)
class User:
    """A subscriber to disaster alerts.

    Identity fields cannot be reassigned; subscriptions change only
    through subscribe() and unsubscribe(). Users compare by identity.

    Attributes:
        id: User identifier (not required to be unique)
        name: Display name
        home_location: Free-text home location
        subscribed_types: Subscribed disaster kinds, without duplicates
    """
    id: str
    name: str
    home_location: str
    subscribed_types: list[DisasterKind] = field(default_factory=list)

    def __post_init__(self) -> None:
        kinds = list(self.subscribed_types)
        object.__setattr__(self, "subscribed_types", [])
        for kind in kinds:
            self.subscribe(kind)

    def subscribe(self, kind: DisasterKind | str) -> None:
        """Subscribe to a disaster kind. No-op if already subscribed."""
        kind = DisasterKind.parse(kind)
        if kind not in self.subscribed_types:
            self.subscribed_types.append(kind)

    def unsubscribe(self, kind: DisasterKind | str) -> None:
        """Unsubscribe from a disaster kind. No-op if not subscribed."""
        kind = DisasterKind.parse(kind)
        if kind in self.subscribed_types:
            self.subscribed_types.remove(kind)

    def is_subscribed(self, kind: DisasterKind) -> bool:
        return kind in self.subscribed_types

    def should_receive_alert(self, disaster: Disaster) -> bool:
        """Check if this user should be alerted about a disaster.

        Requires both a subscription to the disaster's kind and a
        proximity match between home and disaster locations.
        """
        return (
            self.is_subscribed(disaster.kind)
            and is_in_proximity(self.home_location, disaster.location)
        )
