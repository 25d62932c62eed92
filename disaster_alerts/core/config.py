"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from disaster_alerts.core.disaster import DETAILS_TYPES, DisasterDetails, DisasterKind
from disaster_alerts.core.validation import MAX_SEVERITY, MIN_SEVERITY, UnknownDisasterKind


@dataclass
class UserSpec:
    """A user to register when a scenario is loaded.

    Attributes:
        id: User identifier
        name: Display name
        home_location: Free-text home location
        subscriptions: Disaster kind names to subscribe to
    """
    id: str
    name: str
    home_location: str
    subscriptions: list[str] = field(default_factory=list)


@dataclass
class DisasterSpec:
    """A disaster to add when a scenario is loaded.

    Attributes:
        kind: Disaster kind name
        location: Free-text location
        severity: Severity value
        description: Free-text description
        details: Kind-specific payload
    """
    kind: str
    location: str
    severity: int
    description: str
    details: DisasterDetails


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        strict_validation: Reject out-of-range severities and blank locations
        min_severity: Lowest valid severity (strict mode only)
        max_severity: Highest valid severity (strict mode only)
        severity_report_threshold: Threshold for the high-severity report
        report_kind: Disaster kind listed in the by-type report
        users: Users registered by the scenario
        disasters: Disasters added by the scenario, in order
    """
    strict_validation: bool = False
    min_severity: int = MIN_SEVERITY
    max_severity: int = MAX_SEVERITY
    severity_report_threshold: int = 8
    report_kind: str = DisasterKind.EARTHQUAKE.value
    users: list[UserSpec] = field(default_factory=list)
    disasters: list[DisasterSpec] = field(default_factory=list)


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_kind(value: str, field_name: str) -> list[ValidationError]:
    """Validate that a kind name resolves to a known disaster kind.

    Pure function.
    """
    try:
        DisasterKind.parse(value)
    except UnknownDisasterKind:
        known = ", ".join(kind.value for kind in DisasterKind)
        return [ValidationError(
            field=field_name,
            message=f"Unknown disaster kind '{value}' (expected one of: {known})",
        )]
    return []


def validate_disaster_spec(
    spec: DisasterSpec,
    config: Config,
    field_name: str,
) -> list[ValidationError]:
    """Validate a single scenario disaster.

    Pure function. Range and blank-location problems are errors in strict
    mode and warnings otherwise.
    """
    errors = validate_kind(spec.kind, f"{field_name}.kind")
    level = "error" if config.strict_validation else "warning"

    if not errors:
        kind = DisasterKind.parse(spec.kind)
        expected = DETAILS_TYPES[kind]
        if not isinstance(spec.details, expected):
            errors.append(ValidationError(
                field=f"{field_name}.details",
                message=f"{kind.value} requires {expected.__name__}",
            ))

    if not config.min_severity <= spec.severity <= config.max_severity:
        errors.append(ValidationError(
            field=f"{field_name}.severity",
            message=(
                f"Severity {spec.severity} out of range "
                f"[{config.min_severity}, {config.max_severity}]"
            ),
            severity=level,
        ))

    if not spec.location.strip():
        errors.append(ValidationError(
            field=f"{field_name}.location",
            message="Location is empty",
            severity=level,
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if config.min_severity > config.max_severity:
        errors.append(ValidationError(
            field="min_severity",
            message=f"min_severity ({config.min_severity}) > max_severity ({config.max_severity})",
        ))

    errors.extend(validate_kind(config.report_kind, "report_kind"))

    seen_ids: set[str] = set()
    for i, user in enumerate(config.users):
        for j, kind in enumerate(user.subscriptions):
            errors.extend(validate_kind(kind, f"users[{i}].subscriptions[{j}]"))

        if not user.subscriptions:
            errors.append(ValidationError(
                field=f"users[{i}].subscriptions",
                message=f"User '{user.id}' has no subscriptions and will never be alerted",
                severity="warning",
            ))

        # Duplicate IDs are allowed; both registrations are kept
        if user.id in seen_ids:
            errors.append(ValidationError(
                field=f"users[{i}].id",
                message=f"Duplicate user ID '{user.id}'",
                severity="warning",
            ))
        seen_ids.add(user.id)

    for i, spec in enumerate(config.disasters):
        errors.extend(validate_disaster_spec(spec, config, f"disasters[{i}]"))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
