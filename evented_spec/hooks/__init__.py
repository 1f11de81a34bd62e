"""Hooks module - lifecycle hook registration."""

from .registry import Hook, HookRegistry, HookType

__all__ = [
    "Hook",
    "HookRegistry",
    "HookType",
]
