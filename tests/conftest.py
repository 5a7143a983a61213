import pytest

import eggtimer.config as cfg
from eggtimer import configure


class FakeClock:
    """Monotonic clock that only moves when told to"""

    def __init__(self, start_ns: int = 1_000_000_000):
        self.ns = start_ns

    def __call__(self) -> int:
        return self.ns

    def advance(self, seconds: float) -> None:
        self.ns += int(round(seconds * 1_000_000_000))


@pytest.fixture(autouse=True)
def reset_config():
    # Reset global state before and after each test
    cfg._config = None
    yield
    cfg._config = None


@pytest.fixture
def clock():
    fake = FakeClock()
    configure(clock=fake)
    return fake
