"""Disaster alert simulation: disaster taxonomy, subscriptions and fan-out."""

from disaster_alerts.registry import AlertRegistry

__all__ = ["AlertRegistry"]

__version__ = "1.0.0"
