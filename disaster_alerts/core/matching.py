"""Alert fan-out decisions - Pure functions.

Given a newly added disaster and the registered users, decide who should
be notified. Delivery is handled elsewhere.
"""

from dataclasses import dataclass

from disaster_alerts.core.disaster import Disaster
from disaster_alerts.core.user import User


@dataclass(frozen=True)
class AlertNotification:
    """Result of evaluating a disaster against all registered users.

    Attributes:
        disaster: The disaster evaluated
        recipients: Users that should be alerted, in registration order
    """
    disaster: Disaster
    recipients: tuple[User, ...]

    @property
    def message(self) -> str:
        return self.disaster.alert_message

    @property
    def should_alert(self) -> bool:
        """Returns True if at least one user should be alerted."""
        return len(self.recipients) > 0

    @property
    def recipient_names(self) -> list[str]:
        return [user.name for user in self.recipients]


def find_recipients(disaster: Disaster, users: list[User]) -> list[User]:
    """Determine which users should receive an alert for a disaster.

    Pure function. Users registered more than once are evaluated (and
    returned) once per registration.

    Args:
        disaster: Disaster to evaluate
        users: Registered users, in registration order

    Returns:
        Matching users, in registration order
    """
    return [user for user in users if user.should_receive_alert(disaster)]


def make_notification(disaster: Disaster, users: list[User]) -> AlertNotification:
    """Build the notification event for a disaster.

    Pure function.
    """
    return AlertNotification(
        disaster=disaster,
        recipients=tuple(find_recipients(disaster, users)),
    )
