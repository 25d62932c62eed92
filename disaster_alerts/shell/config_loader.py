"""Configuration Loader - Imperative Shell.

This module handles loading scenario configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, UserSpec, DisasterSpec) are defined in
disaster_alerts/core/config.py.
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from disaster_alerts.core.config import Config, DisasterSpec, UserSpec
from disaster_alerts.core.disaster import (
    DisasterDetails,
    DisasterKind,
    EarthquakeDetails,
    FloodDetails,
    HurricaneDetails,
    WildfireDetails,
)
from disaster_alerts.core.scenario import demo_config


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/scenario.yaml"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _require_mapping(data: Any, field_name: str) -> dict[str, Any]:
    """Check that a config section is a mapping; None counts as empty.

    Raises:
        ValueError: If the section is not a mapping
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"{field_name} must be a mapping, got {type(data).__name__}"
        )
    return data


def _parse_text(value: Any) -> str:
    """Parse an optional free-text value; empty YAML values become ''."""
    return "" if value is None else str(value)


def _parse_float(value: Any, field_name: str) -> float:
    """Parse a required number.

    Raises:
        ValueError: If the value is missing or not numeric
    """
    try:
        return float(value)
    except TypeError:
        raise ValueError(f"{field_name} must be a number, got {value!r}") from None


def _parse_severity(value: Any) -> int:
    """Parse a severity, rejecting non-integral values.

    Raises:
        ValueError: If the value is not a whole number
    """
    if isinstance(value, bool):
        raise ValueError(f"Severity must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Severity must be an integer, got {value!r}")
        return int(value)
    if isinstance(value, int):
        return value
    return int(str(value).strip())


def _parse_user(data: dict[str, Any]) -> UserSpec:
    """Parse a user from config data."""
    data = _require_mapping(data, "users[]")
    return UserSpec(
        id=str(data["id"]),
        name=_parse_text(data["name"]),
        home_location=_parse_text(data.get("location")),
        subscriptions=[str(k) for k in data.get("subscriptions") or []],
    )


def _parse_details(kind: DisasterKind, data: dict[str, Any] | None) -> DisasterDetails:
    """Parse kind-specific disaster fields from config data."""
    data = _require_mapping(data, "details")
    if kind is DisasterKind.EARTHQUAKE:
        return EarthquakeDetails(
            magnitude=_parse_float(data["magnitude"], "magnitude"),
            depth_km=_parse_float(data.get("depth_km") or 0.0, "depth_km"),
        )
    elif kind is DisasterKind.FLOOD:
        return FloodDetails(
            water_level_m=_parse_float(data["water_level_m"], "water_level_m"),
            affected_areas=_parse_text(data.get("affected_areas")),
        )
    elif kind is DisasterKind.HURRICANE:
        return HurricaneDetails(
            wind_speed_kmh=_parse_float(data["wind_speed_kmh"], "wind_speed_kmh"),
            category=_parse_text(data.get("category")),
        )
    else:
        return WildfireDetails(
            area_affected_sq_km=_parse_float(data["area_affected_sq_km"], "area_affected_sq_km"),
            containment_status=_parse_text(data.get("containment_status")),
        )


def _parse_disaster(data: dict[str, Any]) -> DisasterSpec:
    """Parse a disaster from config data.

    Raises:
        UnknownDisasterKind: If the kind name is not recognised
        KeyError: If a required field is missing
        ValueError: If severity is not a whole number
    """
    data = _require_mapping(data, "disasters[]")
    kind = DisasterKind.parse(data["kind"])

    return DisasterSpec(
        kind=kind.value,
        location=_parse_text(data.get("location")),
        severity=_parse_severity(data["severity"]),
        description=_parse_text(data.get("description")),
        details=_parse_details(kind, data.get("details")),
    )


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    data = _require_mapping(data, "configuration")
    defaults = Config()

    users = [_parse_user(u) for u in data.get("users") or []]
    disasters = [_parse_disaster(d) for d in data.get("disasters") or []]

    return Config(
        strict_validation=_parse_bool(data.get("strict_validation", defaults.strict_validation)),
        min_severity=int(data.get("min_severity", defaults.min_severity)),
        max_severity=int(data.get("max_severity", defaults.max_severity)),
        severity_report_threshold=int(
            data.get("severity_report_threshold", defaults.severity_report_threshold)
        ),
        report_kind=str(data.get("report_kind", defaults.report_kind)),
        users=users,
        disasters=disasters,
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object, or the demo config if the file is
        missing or empty

    Raises:
        yaml.YAMLError: If config file is invalid YAML
        ValueError: If the file does not hold a mapping, or a value is invalid
        KeyError: If a required field is missing
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using demo scenario", path)
        return demo_config()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using demo scenario")
        return demo_config()

    if not isinstance(data, dict):
        raise ValueError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: %d users, %d disasters",
        len(config.users),
        len(config.disasters),
    )

    return config


def load_config_from_env(base: Config | None = None) -> Config:
    """Apply environment variable overrides to a configuration.

    Environment variables:
        ALERTS_STRICT_VALIDATION: Reject invalid severities/locations
        ALERTS_SEVERITY_THRESHOLD: Threshold for the high-severity report
        ALERTS_REPORT_KIND: Disaster kind listed in the by-type report

    Args:
        base: Configuration to override (defaults to the demo config)

    Returns:
        A new Config with overrides applied; base is not modified
    """
    config = base if base is not None else demo_config()
    overrides: dict[str, Any] = {}

    strict = os.environ.get("ALERTS_STRICT_VALIDATION")
    if strict is not None:
        overrides["strict_validation"] = _parse_bool(strict)

    threshold = os.environ.get("ALERTS_SEVERITY_THRESHOLD")
    if threshold:
        overrides["severity_report_threshold"] = int(threshold)

    report_kind = os.environ.get("ALERTS_REPORT_KIND")
    if report_kind:
        overrides["report_kind"] = report_kind

    return replace(config, **overrides)
