"""Hook registry for example groups.

Hooks are plain callables registered against a lifecycle phase. Each one is
called with the group context as its only argument.
"""

import logging
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

from ..options import ExampleOptions

logger = logging.getLogger(__name__)

Hook = Callable[[Any], None]


class HookType(str, Enum):
    """Standard lifecycle phases."""
    BEFORE = "before"
    AFTER = "after"


def _phase_name(hook_type: Union[HookType, str]) -> str:
    if isinstance(hook_type, HookType):
        return hook_type.value
    if not isinstance(hook_type, str) or not hook_type:
        raise ValueError(f"Hook type must be a non-empty string, got {hook_type!r}")
    return hook_type.lower()


def _runs_outer_first(phase: str) -> bool:
    """Setup phases run outer groups first, teardown phases inner groups first."""
    return phase == HookType.BEFORE.value or phase.endswith("_" + HookType.BEFORE.value)


class HookRegistry:
    """Ordered hooks and default options for one example group.

    Nested groups get a child registry. Lookups then include the parent's
    hooks: setup phases (``before``, ``*_before``) run parent hooks first,
    every other phase runs the group's own hooks first.
    """

    def __init__(
        self,
        parent: Optional["HookRegistry"] = None,
        default_options: Optional[Mapping[str, Any]] = None,
    ):
        """Initialize hook registry.

        Args:
            parent: Registry of the enclosing group, if any.
            default_options: Options for every example in this group,
                applied over the parent's defaults.
        """
        self.parent = parent
        self._hooks: dict[str, list[Hook]] = {}

        base = parent.default_options if parent else ExampleOptions.resolve()
        self.default_options = base.merged(default_options)

    def add(self, hook_type: Union[HookType, str], hook: Hook) -> Hook:
        """Register ``hook`` for ``hook_type`` after any existing hooks."""
        if not callable(hook):
            raise TypeError(f"Hook must be callable, got {type(hook).__name__}")

        phase = _phase_name(hook_type)
        self._hooks.setdefault(phase, []).append(hook)
        logger.debug("Registered %s hook %r", phase, hook)
        return hook

    def before(self, hook: Hook) -> Hook:
        """Decorator registering a ``before`` hook."""
        return self.add(HookType.BEFORE, hook)

    def after(self, hook: Hook) -> Hook:
        """Decorator registering an ``after`` hook."""
        return self.add(HookType.AFTER, hook)

    def hooks_for(self, hook_type: Union[HookType, str]) -> tuple[Hook, ...]:
        """Hooks for ``hook_type`` in the order they must run."""
        phase = _phase_name(hook_type)
        own = tuple(self._hooks.get(phase, ()))
        if self.parent is None:
            return own

        inherited = self.parent.hooks_for(phase)
        if _runs_outer_first(phase):
            return inherited + own
        return own + inherited

    def child(self, default_options: Optional[Mapping[str, Any]] = None) -> "HookRegistry":
        """Create the registry for a group nested inside this one."""
        return HookRegistry(parent=self, default_options=default_options)

    def options_for(self, overrides: Optional[Mapping[str, Any]] = None) -> ExampleOptions:
        """Resolve options for one example: group defaults, then ``overrides``."""
        return self.default_options.merged(overrides)
