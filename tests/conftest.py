import os

import pytest

# Qt widgets are created without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeClock:
    def __init__(self, start_ms=100_000.0):
        self.now = start_ms

    def __call__(self):
        return self.now

    def advance_ms(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()
