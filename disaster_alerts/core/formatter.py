"""Text formatting - Pure functions.

This module renders disasters, users and notifications as the lines the
console notifier writes. All functions are pure with no side effects.
"""

from disaster_alerts.core.disaster import Disaster
from disaster_alerts.core.matching import AlertNotification
from disaster_alerts.core.user import User


TIME_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


def format_section_header(title: str) -> str:
    """Format a section header such as "=== ACTIVE DISASTERS ===".

    Pure function.
    """
    return f"=== {title} ==="


def format_disaster_summary(disaster: Disaster) -> str:
    """Format a one-line summary of a disaster.

    Pure function.

    Args:
        disaster: Disaster to summarize

    Returns:
        One-line summary string
    """
    time_str = disaster.created_at.strftime(TIME_FORMAT).strip()
    return (
        f"Disaster ID: {disaster.id} | Type: {disaster.kind.value} | "
        f"Location: {disaster.location} | Severity: {disaster.severity}/10 | "
        f"Time: {time_str}"
    )


def format_user_summary(user: User) -> str:
    """Format a one-line summary of a user and their subscriptions.

    Pure function.
    """
    subscriptions = ", ".join(kind.value for kind in user.subscribed_types)
    return (
        f"User: {user.name} (ID: {user.id}) - Location: {user.home_location} "
        f"- Subscriptions: [{subscriptions}]"
    )


def format_recipient_line(user: User) -> str:
    return f"📱 Alert sent to: {user.name} in {user.home_location}"


def format_notification(notification: AlertNotification) -> list[str]:
    """Format the lines reported when a disaster is broadcast.

    Pure function.

    Args:
        notification: Fan-out result for one disaster

    Returns:
        Header, alert message, and one line per recipient
    """
    lines = [
        format_section_header("SENDING ALERTS"),
        notification.message,
        "Notifying users...",
    ]
    lines.extend(format_recipient_line(user) for user in notification.recipients)
    return lines


def format_disaster_list(title: str, disasters: list[Disaster]) -> list[str]:
    """Format a titled list of disaster summaries.

    Pure function.
    """
    lines = [format_section_header(title)]
    lines.extend(format_disaster_summary(d) for d in disasters)
    return lines


def format_active_disasters(disasters: list[Disaster]) -> list[str]:
    """Format all active disasters, or a placeholder line when none exist.

    Pure function.
    """
    if not disasters:
        return [format_section_header("ACTIVE DISASTERS"), "No active disasters."]
    return format_disaster_list("ACTIVE DISASTERS", disasters)


def format_registered_users(users: list[User]) -> list[str]:
    """Format all registered users.

    Pure function.
    """
    lines = [format_section_header("REGISTERED USERS")]
    lines.extend(format_user_summary(user) for user in users)
    return lines
