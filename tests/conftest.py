"""Shared fixtures: every test runs against its own manually drained queue."""
import pytest

from thenable import Promise, TaskQueue, set_scheduler


@pytest.fixture(autouse=True)
def queue():
    tasks = TaskQueue()
    previous = set_scheduler(tasks)
    yield tasks
    set_scheduler(previous)


@pytest.fixture()
def outcome():
    """Attach recording handlers to a promise and return the recorded outcomes."""
    def attach(promise):
        seen = []
        promise.then(
            lambda value: seen.append(('fulfilled', value)),
            lambda reason: seen.append(('rejected', reason)),
        )
        return seen
    return attach


@pytest.fixture()
def deferred():
    """Factory for pending promises that also hands back their resolve and reject."""
    def make():
        functions = {}

        def capture(resolve, reject):
            functions['resolve'] = resolve
            functions['reject'] = reject

        promise = Promise(capture)
        return promise, functions['resolve'], functions['reject']
    return make
