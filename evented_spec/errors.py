"""Exceptions raised by evented-spec."""

from typing import Optional


class EventedSpecError(Exception):
    """Base class for evented-spec errors."""


class SpecTimeoutExceededError(EventedSpecError, TimeoutError):
    """An example did not call ``done`` before its timer expired."""

    def __init__(self, timeout: float, message: Optional[str] = None):
        self.timeout = timeout
        super().__init__(message or f"Example timed out after {timeout} seconds")


class InvalidStateError(EventedSpecError, RuntimeError):
    """A lifecycle method was called out of order."""


class InvalidOptionsError(EventedSpecError, ValueError):
    """Example options failed validation."""

    def __init__(self, message: str, result=None):
        self.result = result
        super().__init__(message)
