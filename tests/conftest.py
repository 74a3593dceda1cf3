import math

import matplotlib
import pytest

matplotlib.use('Agg')

from pra.config import WalkerConfig
from pra.scene import WalkerScene
from pra.vector import Vector2D
from pra.walker import Walker


@pytest.fixture
def small_config():
    return WalkerConfig(seed='test', size=10, repulsion=1.0, max_turn_deg=180.0,
                        turn_resolution=math.radians(1.0), log_interval=1000)


@pytest.fixture
def scene(small_config):
    return WalkerScene(small_config)


@pytest.fixture
def make_walker():
    def _make(x=0.0, y=0.0, dx=1.0, dy=0.0, max_turn=math.pi,
              turn_resolution=math.radians(1.0), turn_preference=1):
        return Walker(Vector2D(x, y), Vector2D(dx, dy), max_turn,
                      turn_resolution=turn_resolution, turn_preference=turn_preference)
    return _make
