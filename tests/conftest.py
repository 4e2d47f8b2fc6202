import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from breakout.state import GameState


class FixedRandom:
    """Stands in for a numpy Generator when a test needs a known power-up roll."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture()
def fixed_random():
    return FixedRandom


@pytest.fixture()
def state():
    # 0.99 never beats the power-up chance, so no power-ups spawn.
    return GameState(np_random=FixedRandom(0.99))

