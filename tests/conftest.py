import numpy as np
import pytest

from lane_runner.config import GameConfig
from lane_runner.core import RunState


@pytest.fixture
def config():
    """預設參數，但關閉金幣以免干擾計分"""
    return GameConfig(coins_enabled=False)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def state(config):
    return RunState.new(config, now=0.0)
