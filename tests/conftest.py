import pytest

from rsignal import Signal


class Recorder:
    """Callable that remembers every call made to it."""

    def __init__(self, name="recorder", log=None):
        self.name = name
        self.calls = []
        self._log = log

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        if self._log is not None:
            self._log.append(self.name)

    @property
    def count(self):
        return len(self.calls)


@pytest.fixture
def signal():
    return Signal()


@pytest.fixture
def order():
    return []


@pytest.fixture
def recorder_factory(order):
    def _make(name="recorder"):
        return Recorder(name, log=order)

    return _make
