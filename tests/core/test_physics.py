"""
Unit tests for the tick driver and the serve randomness

Tests physics engine functionality including:
- Tick ordering (ball collides with already moved paddles)
- Scoring from goal events
- Game over and reset
- Random direction draw
"""

import numpy as np
import pytest

from tick_pong.core.physics import PhysicsEngine
from tick_pong.core.randomness import NumpyRandomSource, draw_initial_direction
from tick_pong.core.vector import Vector2D
from tick_pong.utils.config import game_config_tmp


class TestPhysicsEngine:
    """Test the tick driver"""

    def test_engine_initialization(self, fixed_random):
        engine = PhysicsEngine(fixed_random())

        assert engine.player.position.to_tuple() == (-0.95, 0.0)
        assert engine.opponent.position.to_tuple() == (0.95, 0.0)
        assert engine.ball.position.to_tuple() == (0.0, 0.0)
        assert engine.score == [0, 0]
        assert engine.tick_count == 0

    def test_update_moves_every_entity(self, fixed_random):
        engine = PhysicsEngine(fixed_random(flip=False, value=0.005))

        engine.update(clicked_up=True)

        assert engine.tick_count == 1
        assert engine.player.position.y == pytest.approx(-0.01)
        # Opponent was level with the ball when it moved
        assert engine.opponent.position.y == 0.0
        assert engine.ball.position.to_tuple() == pytest.approx((0.003, 0.005))

    def test_ball_collides_with_paddle_moved_this_tick(self, fixed_random):
        """The player moves before the ball checks for collisions"""
        engine = PhysicsEngine(fixed_random())
        engine.ball.position = Vector2D(-0.935, 0.22)
        engine.ball.direction = Vector2D(-0.003, 0.0)

        events = engine.update(clicked_down=True)

        assert events["paddle_hits"] == ["player"]
        assert engine.ball.direction.x > 0

    def test_paddle_not_moved_misses_ball(self, fixed_random):
        engine = PhysicsEngine(fixed_random())
        engine.ball.position = Vector2D(-0.935, 0.22)
        engine.ball.direction = Vector2D(-0.003, 0.0)

        events = engine.update()

        assert events["paddle_hits"] == []

    def test_goal_on_the_right_scores_for_player(self, fixed_random):
        engine = PhysicsEngine(fixed_random())
        engine.ball.position = Vector2D(0.99, 0.5)
        engine.ball.direction = Vector2D(0.003, 0.0)

        events = engine.update()

        assert events["goals"] == ["right"]
        assert events["score"] == [1, 0]
        assert engine.score == [1, 0]

    def test_goal_on_the_left_scores_for_opponent(self, fixed_random):
        engine = PhysicsEngine(fixed_random())
        engine.ball.position = Vector2D(-0.99, 0.5)
        engine.ball.direction = Vector2D(-0.003, 0.0)

        events = engine.update()

        assert events["goals"] == ["left"]
        assert engine.score == [0, 1]

    def test_game_over(self, fixed_random):
        engine = PhysicsEngine(fixed_random())
        with game_config_tmp(MAX_SCORE=2):
            assert not engine.is_game_over()
            assert engine.get_winner() == 0

            engine.score = [0, 2]
            assert engine.is_game_over()
            assert engine.get_winner() == 2

    def test_reset_game(self, fixed_random):
        engine = PhysicsEngine(fixed_random())
        for _ in range(10):
            engine.update(clicked_down=True)
        engine.score = [3, 4]

        engine.reset_game()

        assert engine.score == [0, 0]
        assert engine.tick_count == 0
        assert engine.player.position.to_tuple() == (-0.95, 0.0)
        assert engine.ball.position.to_tuple() == (0.0, 0.0)

    def test_game_state(self, fixed_random):
        engine = PhysicsEngine(fixed_random(flip=True, value=0.001))
        state = engine.get_game_state()

        assert state["player_position"] == (-0.95, 0.0)
        assert state["opponent_position"] == (0.95, 0.0)
        assert state["ball_position"] == (0.0, 0.0)
        assert state["ball_direction"] == pytest.approx((-0.003, 0.001))
        assert state["ball_speed"] == pytest.approx((0.003**2 + 0.001**2) ** 0.5)
        assert state["score"] == [0, 0]
        assert state["tick_count"] == 0

    def test_instance_offsets(self, fixed_random):
        engine = PhysicsEngine(fixed_random())
        offsets = engine.instance_offsets()

        assert offsets.shape == (3, 2)
        assert offsets.dtype == np.float32
        np.testing.assert_allclose(offsets, [[-0.95, 0.0], [0.95, 0.0], [0.0, 0.0]], rtol=1e-6)

    def test_long_rally_stays_finite(self):
        """Many ticks with a real random source never leave the court for long"""
        engine = PhysicsEngine()
        for i in range(5000):
            engine.update(clicked_up=i % 7 == 0, clicked_down=i % 5 == 0)
            x, y = engine.ball.position.to_tuple()
            assert -1.1 < x < 1.1
        assert engine.tick_count == 5000


class TestRandomness:
    """Test the serve direction draw"""

    def test_numpy_source_is_reproducible_with_seed(self):
        a = NumpyRandomSource(seed=42)
        b = NumpyRandomSource(seed=42)
        assert [a.uniform(-1, 1) for _ in range(5)] == [b.uniform(-1, 1) for _ in range(5)]
        assert [a.coin_flip() for _ in range(5)] == [b.coin_flip() for _ in range(5)]

    def test_numpy_source_types(self):
        source = NumpyRandomSource(seed=0)
        assert isinstance(source.coin_flip(), bool)
        assert isinstance(source.uniform(0.0, 1.0), float)

    def test_coin_flip_is_fair(self):
        source = NumpyRandomSource(seed=1)
        heads = sum(source.coin_flip() for _ in range(2000))
        assert 850 < heads < 1150

    def test_draw_initial_direction_bounds(self):
        source = NumpyRandomSource(seed=7)
        directions = [draw_initial_direction(source) for _ in range(500)]

        assert all(abs(d.x) == pytest.approx(0.003) for d in directions)
        assert all(-0.01 <= d.y < 0.01 for d in directions)
        assert {d.x > 0 for d in directions} == {True, False}

    def test_draw_initial_direction_follows_config(self, fixed_random):
        with game_config_tmp(BALL_START_SPEED=0.004):
            direction = draw_initial_direction(fixed_random(flip=False, value=0.002))
        assert direction.to_tuple() == (0.004, 0.002)
