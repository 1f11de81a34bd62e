"""Options module - example configuration."""

from .validator import (
    ValidationError,
    ValidationResult,
    check_options,
    validate_options,
)
from .schema import (
    DEFAULT_OPTIONS,
    DEFAULT_SPEC_TIMEOUT,
    ExampleOptions,
)
from .parser import load_options, parse_options_data

__all__ = [
    "DEFAULT_OPTIONS",
    "DEFAULT_SPEC_TIMEOUT",
    "ExampleOptions",
    "ValidationError",
    "ValidationResult",
    "check_options",
    "load_options",
    "parse_options_data",
    "validate_options",
]
