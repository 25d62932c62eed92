"""Demo driver and command-line entry point.

Loads a scenario, registers its users, adds its disasters (printing who
is alerted for each), then prints the active disaster list and the two
filtered reports.
"""

import argparse
import logging
import os
import sys
from typing import TextIO

import yaml

from disaster_alerts.core.config import Config, validate_config
from disaster_alerts.core.formatter import format_disaster_list, format_section_header
from disaster_alerts.core.validation import DisasterAlertError
from disaster_alerts.registry import AlertRegistry
from disaster_alerts.shell.config_loader import load_config, load_config_from_env
from disaster_alerts.shell.notifier import ConsoleNotifier


logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    """Configure logging from an explicit level or the LOG_LEVEL env var."""
    log_level = (level or os.environ.get("LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run(config: Config, stream: TextIO | None = None) -> AlertRegistry:
    """Run a complete demo scenario.

    Args:
        config: Scenario configuration
        stream: Where to write output (stdout if not provided)

    Returns:
        The populated registry
    """
    console = ConsoleNotifier(stream)
    registry = AlertRegistry(config=config, notifier=console)

    registry.register_users(config)
    console.write(registry.registered_users_report())

    console.write(format_section_header("SIMULATING DISASTERS"))
    registry.add_disasters(config)

    console.write(registry.active_disasters_report())

    threshold = config.severity_report_threshold
    console.write(format_disaster_list(
        f"HIGH SEVERITY DISASTERS (Severity >= {threshold})",
        registry.disasters_by_severity_at_least(threshold),
    ))

    console.write(format_disaster_list(
        f"ALL {config.report_kind.upper()}S",
        registry.disasters_by_type(config.report_kind),
    ))

    return registry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate disaster alerts for a scenario of users and disasters.",
    )
    parser.add_argument(
        "--config",
        help="Path to a scenario YAML file (default: CONFIG_PATH or config/scenario.yaml)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject out-of-range severities and blank locations",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        help="Severity threshold for the high-severity report",
    )
    parser.add_argument(
        "--kind",
        help="Disaster kind listed in the by-type report",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = load_config_from_env(load_config(args.config))
    except (OSError, KeyError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to load configuration: %s", e)
        return 1

    if args.strict:
        config.strict_validation = True
    if args.threshold is not None:
        config.severity_report_threshold = args.threshold
    if args.kind:
        config.report_kind = args.kind

    result = validate_config(config)
    for warning in result.warnings:
        logger.warning("%s: %s", warning.field, warning.message)
    if not result.valid:
        for error in result.critical_errors:
            logger.error("%s: %s", error.field, error.message)
        return 1

    try:
        run(config)
    except DisasterAlertError as e:
        logger.error("Scenario aborted: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
