"""Runner module - evented example lifecycle."""

from .example import Body, EventedExample, ExampleState

__all__ = [
    "Body",
    "EventedExample",
    "ExampleState",
]
