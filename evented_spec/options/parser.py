"""YAML options loader for evented examples.

Parses option files and dictionaries into ExampleOptions objects.
"""

from pathlib import Path
from typing import Any, Mapping, Union

import yaml

from ..errors import InvalidOptionsError
from .schema import DEFAULT_OPTIONS, ExampleOptions
from .validator import check_options


def load_options(file_path: Union[str, Path]) -> ExampleOptions:
    """Load example options from a YAML file.

    An empty file resolves to the defaults.

    Args:
        file_path: Path to the YAML options file.

    Returns:
        Resolved ExampleOptions.

    Raises:
        FileNotFoundError: If the options file doesn't exist.
        InvalidOptionsError: If the file is malformed YAML, not a mapping,
            or fails validation.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Options file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise InvalidOptionsError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidOptionsError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        data = {}

    return parse_options_data(data, source=str(file_path))


def parse_options_data(data: Mapping[str, Any], source: str = "<inline>") -> ExampleOptions:
    """Merge a mapping over DEFAULT_OPTIONS and build ExampleOptions.

    Args:
        data: Option name to value.
        source: Source identifier for error messages.

    Returns:
        Resolved ExampleOptions.

    Raises:
        InvalidOptionsError: If ``data`` is not a mapping or fails validation.
    """
    if not isinstance(data, Mapping):
        raise InvalidOptionsError(
            f"Options must be a mapping, got {type(data).__name__} in {source}"
        )

    merged = dict(DEFAULT_OPTIONS)
    merged.update(data)

    check_options(merged, source=source)

    spec_timeout = merged.pop("spec_timeout")
    return ExampleOptions(spec_timeout=spec_timeout, extra=merged)
