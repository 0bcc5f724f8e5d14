"""
Core module of Tick Pong game
"""

from tick_pong.core.entities import Ball
from tick_pong.core.entities import Opponent
from tick_pong.core.entities import Paddle
from tick_pong.core.entities import Player
from tick_pong.core.physics import PhysicsEngine
from tick_pong.core.randomness import NumpyRandomSource
from tick_pong.core.shapes import Bounds
from tick_pong.core.shapes import Rectangle
from tick_pong.core.shapes import get_ball_shape
from tick_pong.core.shapes import get_player_shape
from tick_pong.core.vector import Vector2D

__all__ = [
    "Ball",
    "Paddle",
    "Player",
    "Opponent",
    "PhysicsEngine",
    "NumpyRandomSource",
    "Bounds",
    "Rectangle",
    "get_ball_shape",
    "get_player_shape",
    "Vector2D",
]
