"""
Random direction draw used when the ball is served
"""

import numpy as np

from tick_pong.core.interfaces.random_source import RandomSource
from tick_pong.core.vector import Vector2D
from tick_pong.utils.config import game_config


class NumpyRandomSource:
    """RandomSource backed by a numpy Generator"""

    def __init__(self, seed: int | None = None):
        # seed=None pulls fresh entropy from the OS
        self.rng = np.random.default_rng(seed)

    def coin_flip(self) -> bool:
        return bool(self.rng.random() < 0.5)

    def uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))


def draw_initial_direction(source: RandomSource) -> Vector2D:
    """Draws the direction of a freshly served ball

    Heads sends the ball left, tails right, always at BALL_START_SPEED; the
    vertical drift is uniform in [-BALL_MAX_START_DRIFT, BALL_MAX_START_DRIFT).
    """
    drift = game_config.BALL_MAX_START_DRIFT
    vy = source.uniform(-drift, drift)
    speed = game_config.BALL_START_SPEED
    vx = -speed if source.coin_flip() else speed
    return Vector2D(vx, vy)
