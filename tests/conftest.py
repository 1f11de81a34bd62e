"""Pytest configuration and fixtures."""

import pytest

from evented_spec import EventedExample, HookRegistry, HookType, SpecTimeoutExceededError


class Group:
    """Minimal group context: a hook registry plus a call log."""

    def __init__(self, hook_registry=None):
        self.hook_registry = hook_registry or HookRegistry()
        self.calls = []


class QueueExample(EventedExample):
    """Adapter driving a deterministic callback queue with a fake clock."""

    def __init__(self, opts, example_group, body):
        super().__init__(opts, example_group, body)
        self.clock = 0.0
        self.pending = []
        self.running = False

    def run(self):
        self.running = True
        self.pending.append((0.0, self._start))
        while self.running and self.pending:
            # stable sort keeps scheduling order for equal deadlines
            self.pending.sort(key=lambda item: item[0])
            self.clock, callback = self.pending.pop(0)
            try:
                callback()
            except Exception as e:
                self.set_failure(e)
                self.running = False
        self.run_hooks(HookType.AFTER)
        self.finish_example()

    def timeout(self, spec_timeout):
        def expire():
            self.running = False
            self.set_failure(SpecTimeoutExceededError(spec_timeout))
        self.pending.append((self.clock + spec_timeout, expire))

    def done(self, delay=None, block=None):
        def stop():
            self.running = False
            if block:
                block()
        self.delayed(delay, stop)

    def delayed(self, delay=None, block=None):
        if delay is None:
            block()
            return
        self.pending.append((self.clock + delay, block))

    def _start(self):
        self.run_hooks(HookType.BEFORE)
        self.timeout(self.spec_timeout)
        self.run_body()
        if self.running:
            self.suspend()


@pytest.fixture
def group():
    return Group()


@pytest.fixture
def make_group():
    return Group


@pytest.fixture
def queue_example():
    return QueueExample
