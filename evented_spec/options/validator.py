"""Options validator for evented examples."""

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Mapping

from ..errors import InvalidOptionsError

# Timeouts above this still work but usually point at a unit mistake (ms vs s).
LONG_TIMEOUT_WARNING = 300


@dataclass
class ValidationError:
    """A problem with a single option."""
    path: str
    message: str
    value: Any = None
    severity: str = "error"  # "error" or "warning"


@dataclass
class ValidationResult:
    """Result of options validation."""
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)


def validate_options(data: Mapping[str, Any]) -> ValidationResult:
    """Validate a merged options mapping.

    Checks:
    - Every option name is a string
    - ``spec_timeout`` is a finite positive number

    Args:
        data: Options mapping, already merged over the defaults.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    for name in data:
        if not isinstance(name, str):
            errors.append(ValidationError(
                path=repr(name),
                message=f"Option names must be strings, got {type(name).__name__}.",
                value=name,
            ))

    _validate_spec_timeout(data, errors, warnings)

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def check_options(data: Mapping[str, Any], source: str = "<inline>") -> ValidationResult:
    """Validate ``data`` and raise if it has errors.

    Raises:
        InvalidOptionsError: Listing every error, with ``source`` in the message.
    """
    result = validate_options(data)
    if not result.valid:
        errors_str = "; ".join(f"{e.path}: {e.message}" for e in result.errors)
        raise InvalidOptionsError(f"Invalid options in {source}: {errors_str}", result)
    return result


def _validate_spec_timeout(
    data: Mapping[str, Any],
    errors: list[ValidationError],
    warnings: list[ValidationError],
) -> None:
    if "spec_timeout" not in data:
        errors.append(ValidationError(
            path="spec_timeout",
            message="'spec_timeout' is required.",
        ))
        return

    timeout = data["spec_timeout"]

    # bool is a Real subclass; True must not mean one second
    if isinstance(timeout, bool) or not isinstance(timeout, Real):
        errors.append(ValidationError(
            path="spec_timeout",
            message=f"'spec_timeout' must be a number of seconds, got {type(timeout).__name__}.",
            value=timeout,
        ))
        return

    if not math.isfinite(timeout):
        errors.append(ValidationError(
            path="spec_timeout",
            message=f"'spec_timeout' must be finite, got {timeout}.",
            value=timeout,
        ))
    elif timeout <= 0:
        errors.append(ValidationError(
            path="spec_timeout",
            message=f"'spec_timeout' must be positive, got {timeout}.",
            value=timeout,
        ))
    elif timeout > LONG_TIMEOUT_WARNING:
        warnings.append(ValidationError(
            path="spec_timeout",
            message=f"'spec_timeout' of {timeout}s is unusually long. Is it in seconds?",
            value=timeout,
            severity="warning",
        ))
