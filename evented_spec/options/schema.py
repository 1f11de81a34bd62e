"""Option models for evented examples.

Defines the immutable options value handed to every example runner.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..errors import InvalidOptionsError
from .validator import ValidationError, ValidationResult, check_options

DEFAULT_SPEC_TIMEOUT = 5

DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType({
    "spec_timeout": DEFAULT_SPEC_TIMEOUT,
})


@dataclass(frozen=True)
class ExampleOptions:
    """Resolved options for a single example.

    ``spec_timeout`` is always present. Any option the runner itself does not
    understand is kept in ``extra`` so backend adapters can read their own
    settings (connection parameters and the like). Options are validated on
    construction.
    """
    spec_timeout: float = DEFAULT_SPEC_TIMEOUT
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        if "spec_timeout" in self.extra:
            raise InvalidOptionsError(
                "'spec_timeout' must be passed as a field, not inside 'extra'",
                ValidationResult(valid=False, errors=[ValidationError(
                    path="extra.spec_timeout",
                    message="'spec_timeout' is not allowed in 'extra'.",
                    value=self.extra["spec_timeout"],
                )]),
            )

        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))
        check_options(self.to_dict(), source=type(self).__name__)

    @classmethod
    def resolve(cls, overrides: Optional[Mapping[str, Any]] = None) -> "ExampleOptions":
        """Merge ``overrides`` over DEFAULT_OPTIONS and validate the result.

        Args:
            overrides: Caller supplied options, an existing ExampleOptions
                (returned as is), or None.

        Returns:
            Validated ExampleOptions.

        Raises:
            InvalidOptionsError: If the merged options are invalid.
        """
        if isinstance(overrides, cls):
            return overrides

        from .parser import parse_options_data

        return parse_options_data(dict(overrides or {}), source="<overrides>")

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> "ExampleOptions":
        """Return new options with ``overrides`` applied on top of these."""
        if not overrides:
            return self

        from .parser import parse_options_data

        if isinstance(overrides, ExampleOptions):
            overrides = overrides.to_dict()

        data = self.to_dict()
        data.update(overrides)
        return parse_options_data(data, source="<overrides>")

    def to_dict(self) -> dict[str, Any]:
        """Convert options to a plain dictionary."""
        data = dict(self.extra)
        data["spec_timeout"] = self.spec_timeout
        return data

    def get(self, name: str, default: Any = None) -> Any:
        if name == "spec_timeout":
            return self.spec_timeout
        return self.extra.get(name, default)

    def __getitem__(self, name: str) -> Any:
        if name == "spec_timeout":
            return self.spec_timeout
        return self.extra[name]

    def __contains__(self, name: object) -> bool:
        return name == "spec_timeout" or name in self.extra
