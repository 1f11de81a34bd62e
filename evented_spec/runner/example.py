"""Evented example - an example running inside some type of event loop.

Backend adapters subclass EventedExample and supply ``run``, ``timeout``,
``done`` and ``delayed`` for their event loop. The base class owns the
parts every backend shares: option resolution, hook execution, the
lifecycle state and the stored failure that ``finish_example`` re-raises.

Typical adapter flow:
1. ``run`` starts the loop, runs ``before`` hooks and arms ``timeout``
2. ``run_body`` invokes the example, then ``suspend`` if it awaits callbacks
3. errors caught inside loop callbacks go to ``set_failure``
4. ``done`` stops the loop, runs ``after`` hooks and calls ``finish_example``
"""

import logging
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

from ..errors import InvalidStateError, SpecTimeoutExceededError
from ..hooks import HookType
from ..options import ExampleOptions

logger = logging.getLogger(__name__)

Body = Callable[[], Any]


class ExampleState(Enum):
    """Lifecycle of a single example run."""
    CREATED = "created"
    RUNNING = "running"
    AWAITING_COMPLETION = "awaiting_completion"
    TIMED_OUT = "timed_out"
    FAILED = "failed"
    FINISHED = "finished"


_TRANSITIONS: dict[ExampleState, frozenset[ExampleState]] = {
    ExampleState.CREATED: frozenset({
        ExampleState.RUNNING,
        ExampleState.FAILED,
        ExampleState.TIMED_OUT,
        ExampleState.FINISHED,
    }),
    ExampleState.RUNNING: frozenset({
        ExampleState.AWAITING_COMPLETION,
        ExampleState.FAILED,
        ExampleState.TIMED_OUT,
        ExampleState.FINISHED,
    }),
    ExampleState.AWAITING_COMPLETION: frozenset({
        ExampleState.FAILED,
        ExampleState.TIMED_OUT,
        ExampleState.FINISHED,
    }),
    ExampleState.FAILED: frozenset({ExampleState.FINISHED}),
    ExampleState.TIMED_OUT: frozenset({ExampleState.FINISHED}),
    ExampleState.FINISHED: frozenset(),
}


class EventedExample:
    """Abstract example runner bound to one event loop backend.

    One instance is created per example and used for exactly one run.
    """

    def __init__(
        self,
        opts: Optional[Union[Mapping[str, Any], ExampleOptions]],
        example_group: Any,
        body: Body,
    ):
        """Create new evented example.

        Args:
            opts: Options merged over DEFAULT_OPTIONS.
            example_group: Group context. Must expose ``hook_registry``.
            body: Zero-argument callable holding the example code.

        Raises:
            InvalidOptionsError: If the merged options are invalid.
            TypeError: If ``body`` is not callable.
        """
        if not callable(body):
            raise TypeError(f"Example body must be callable, got {type(body).__name__}")

        self.options = ExampleOptions.resolve(opts)
        self.example_group = example_group
        self._body = body
        self._body_called = False
        self._state = ExampleState.CREATED
        self._failure: Optional[BaseException] = None

    @property
    def spec_timeout(self) -> float:
        return self.options.spec_timeout

    @property
    def state(self) -> ExampleState:
        return self._state

    @property
    def failure(self) -> Optional[BaseException]:
        """Failure waiting to be re-raised by ``finish_example``."""
        return self._failure

    def run_hooks(self, hook_type: Union[HookType, str]) -> None:
        """Run hooks of the given type against the group context.

        Hooks run in registration order. The first one that raises aborts
        the rest and the error propagates unchanged.
        """
        hooks = self.example_group.hook_registry.hooks_for(hook_type)
        for hook in hooks:
            logger.debug("Running %s hook %r", hook_type, hook)
            hook(self.example_group)

    def run_body(self) -> Any:
        """Invoke the example body. Allowed once per example.

        Returns:
            Whatever the body returns.

        Raises:
            InvalidStateError: If the body already ran.
        """
        if self._body_called:
            raise InvalidStateError("Example body has already been run")

        self._body_called = True
        self._transition(ExampleState.RUNNING)
        return self._body()

    def suspend(self) -> None:
        """Mark the example as waiting for event loop callbacks."""
        self._transition(ExampleState.AWAITING_COMPLETION)

    def set_failure(self, error: BaseException) -> None:
        """Store a failure raised inside the event loop.

        Only the first failure is kept. Timeouts move the example to
        TIMED_OUT, anything else to FAILED.
        """
        if not isinstance(error, BaseException):
            raise TypeError(f"Failure must be an exception, got {type(error).__name__}")

        if self._failure is not None:
            logger.warning(
                "Dropping %s: example already failed with %r",
                type(error).__name__, self._failure,
            )
            return

        if isinstance(error, SpecTimeoutExceededError):
            self._transition(ExampleState.TIMED_OUT)
        else:
            self._transition(ExampleState.FAILED)
        self._failure = error

    def finish_example(self) -> None:
        """Called once the event loop has stopped, before the example returns.

        Re-raises the stored failure, if any. Descendants may extend this to
        clean up backend-specific state.
        """
        if self._state is ExampleState.FINISHED:
            return

        self._transition(ExampleState.FINISHED)
        failure, self._failure = self._failure, None
        if failure is not None:
            raise failure

    def run(self) -> None:
        """Run the example."""
        raise NotImplementedError(f"you should implement run in {type(self).__name__}")

    def timeout(self, spec_timeout: float) -> None:
        """Fail the example and stop the loop if it runs past ``spec_timeout`` seconds."""
        raise NotImplementedError(f"you should implement timeout in {type(self).__name__}")

    def done(self, delay: Optional[float] = None, block: Optional[Callable[[], Any]] = None) -> None:
        """Break the event loop and finish the example.

        Stops the loop (after ``delay`` seconds, if given), then calls
        ``block`` and ``finish_example``.
        """
        raise NotImplementedError(f"you should implement done in {type(self).__name__}")

    def delayed(self, delay: Optional[float] = None, block: Optional[Callable[[], Any]] = None) -> None:
        """Run ``block`` after ``delay`` seconds inside the event loop.

        A ``delay`` of None means run ``block`` immediately.
        """
        raise NotImplementedError(f"you should implement delayed in {type(self).__name__}")

    def _transition(self, new_state: ExampleState) -> None:
        if new_state not in _TRANSITIONS[self._state]:
            raise InvalidStateError(
                f"Cannot move example from {self._state.value} to {new_state.value}"
            )
        logger.debug("Example %s -> %s", self._state.value, new_state.value)
        self._state = new_state
