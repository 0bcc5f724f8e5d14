"""
Shared fixtures for Tick Pong tests
"""

from collections.abc import Callable

import pytest

from tick_pong.utils.config import game_config


class FixedRandomSource:
    """Deterministic RandomSource returning the same draws every time"""

    def __init__(self, flip: bool = False, value: float = 0.0):
        self.flip = flip
        self.value = value
        self.calls: list[tuple] = []

    def coin_flip(self) -> bool:
        self.calls.append(("coin_flip",))
        return self.flip

    def uniform(self, low: float, high: float) -> float:
        self.calls.append(("uniform", low, high))
        return self.value


@pytest.fixture
def fixed_random() -> Callable[..., FixedRandomSource]:
    """Factory building deterministic random sources"""
    return FixedRandomSource


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration"""
    game_config.reset_to_defaults()
    yield
    game_config.reset_to_defaults()
