"""evented-spec - run test examples inside an externally driven event loop."""

from .errors import (
    EventedSpecError,
    InvalidOptionsError,
    InvalidStateError,
    SpecTimeoutExceededError,
)
from .hooks import Hook, HookRegistry, HookType
from .options import DEFAULT_OPTIONS, ExampleOptions, load_options
from .runner import EventedExample, ExampleState

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_OPTIONS",
    "EventedExample",
    "EventedSpecError",
    "ExampleOptions",
    "ExampleState",
    "Hook",
    "HookRegistry",
    "HookType",
    "InvalidOptionsError",
    "InvalidStateError",
    "SpecTimeoutExceededError",
    "load_options",
]
