"""Notification sinks - Imperative Shell.

This module writes notification events to the console or the log.
All I/O is contained here; message formatting is in the core module.
"""

import logging
import sys
from typing import Protocol, TextIO

from disaster_alerts.core.formatter import format_notification
from disaster_alerts.core.matching import AlertNotification


logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Anything that can receive alert notifications."""

    def notify(self, notification: AlertNotification) -> None:
        ...


class ConsoleNotifier:
    """Writes notifications and reports to a text stream.

    This is part of the imperative shell - it handles console I/O.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize console notifier.

        Args:
            stream: Output stream (defaults to stdout at write time)
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def write(self, lines: list[str] | str) -> None:
        """Write a block of lines, preceded by a blank line."""
        if isinstance(lines, str):
            lines = [lines]
        self.stream.write("\n" + "\n".join(lines) + "\n")

    def notify(self, notification: AlertNotification) -> None:
        """Write the alert header, message and recipient lines."""
        self.write(format_notification(notification))


class LoggingNotifier:
    """Reports notifications through the logging module."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def notify(self, notification: AlertNotification) -> None:
        logger.log(
            self.level,
            "Alert for %s (%s): %d recipient(s)",
            notification.disaster.id,
            notification.disaster.kind.value,
            len(notification.recipients),
        )
        for user in notification.recipients:
            logger.log(
                self.level,
                "Alert sent to %s in %s",
                user.name,
                user.home_location,
            )
