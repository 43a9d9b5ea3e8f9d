from contextlib import contextmanager

import pytest


class FakeSurface:
    """Scripted stand-in for TerminalSurface that records every call in order.

    ``keys`` is consumed one entry per poll: a string is a key press, None is a
    poll timeout and an exception instance is raised from the poll.
    """

    def __init__(self, keys=(), size=(10, 10), size_error=None):
        self.keys = list(keys)
        self._size = size
        self._size_error = size_error
        self.calls = []
        self.timeouts = []

    def size(self):
        if self._size_error is not None:
            raise self._size_error
        return self._size

    @contextmanager
    def session(self):
        self.calls.append("enter")
        try:
            yield self
        finally:
            self.calls.append("restore")

    def poll_key(self, timeout):
        self.calls.append("poll")
        self.timeouts.append(timeout)
        if not self.keys:
            raise RuntimeError("scripted keys exhausted")
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    def clear(self):
        self.calls.append("clear")

    def put(self, x, y, char):
        self.calls.append(("put", x, y, char))

    def flush(self):
        self.calls.append("flush")

    def count(self, name):
        return sum(1 for c in self.calls if c == name)


@pytest.fixture
def make_surface():
    return FakeSurface
