"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with the outside world:
- Console and log notification sinks
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from disaster_alerts.shell.notifier import ConsoleNotifier, LoggingNotifier
from disaster_alerts.shell.config_loader import load_config, load_config_from_env

__all__ = [
    "ConsoleNotifier",
    "LoggingNotifier",
    "load_config",
    "load_config_from_env",
]
