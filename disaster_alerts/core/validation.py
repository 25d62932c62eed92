"""Input validation - Pure functions.

The alert system accepts any severity and location by default. These
checks are only applied when strict validation is enabled in the config.
"""


class DisasterAlertError(Exception):
    """Base exception for disaster alert errors."""


class UnknownDisasterKind(DisasterAlertError, ValueError):
    """A disaster kind name did not match any known kind."""


class InvalidSeverity(DisasterAlertError, ValueError):
    """Severity is outside the allowed range."""


class EmptyLocation(DisasterAlertError, ValueError):
    """Location is empty or whitespace only."""


MIN_SEVERITY = 1
MAX_SEVERITY = 10


def validate_severity(
    severity: int,
    minimum: int = MIN_SEVERITY,
    maximum: int = MAX_SEVERITY,
) -> int:
    """Check that a severity falls within [minimum, maximum].

    Pure function.

    Args:
        severity: Severity to check
        minimum: Lowest allowed severity (inclusive)
        maximum: Highest allowed severity (inclusive)

    Returns:
        The severity, unchanged

    Raises:
        InvalidSeverity: If severity is out of range
    """
    if not minimum <= severity <= maximum:
        raise InvalidSeverity(
            f"Severity {severity} out of range [{minimum}, {maximum}]"
        )
    return severity


def validate_location(location: str) -> str:
    """Check that a location is not blank.

    Pure function.

    Raises:
        EmptyLocation: If location is empty or whitespace
    """
    if not location or not location.strip():
        raise EmptyLocation("Location must not be empty")
    return location
