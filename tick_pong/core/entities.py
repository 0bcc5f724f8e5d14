"""
Tick Pong game entities: player paddle, opponent paddle, ball

One tick must update the entities in this order::

    player.update_position(clicked_up, clicked_down)
    opponent.update_position(ball)
    ball.update_position(player, opponent)

The ball collides against the paddles' already-updated positions. Calling the
ball first is not an error, it silently checks collisions against positions
that are one tick stale. ``PhysicsEngine.update`` applies this order.
"""

import logging

from tick_pong.core.interfaces.random_source import RandomSource
from tick_pong.core.randomness import NumpyRandomSource
from tick_pong.core.randomness import draw_initial_direction
from tick_pong.core.shapes import Bounds
from tick_pong.core.shapes import Rectangle
from tick_pong.core.shapes import get_ball_shape
from tick_pong.core.shapes import get_player_shape
from tick_pong.core.vector import Vector2D
from tick_pong.utils.config import game_config

logger = logging.getLogger(__name__)

# Court edges, the court is not configurable
COURT_TOP = -1.0
COURT_BOTTOM = 1.0
COURT_LEFT = -1.0
COURT_RIGHT = 1.0


class Paddle:
    """Vertically moving rectangle shared by the player and the opponent"""

    def __init__(self, x: float, y: float = 0.0):
        self.position = Vector2D(x, y)
        self.shape: Rectangle = get_player_shape()

    def bounds(self) -> Bounds:
        return self.shape.bounds(self.position.x, self.position.y)

    def move_vertically(self, movement: float) -> None:
        """Moves the paddle by ``movement`` unless that pushes it further off court

        A paddle already past an edge is not pulled back, it just cannot go
        further out.
        """
        bounds = self.bounds()

        if bounds.top <= COURT_TOP and movement < 0.0:
            movement = 0.0
        elif bounds.bottom >= COURT_BOTTOM and movement > 0.0:
            movement = 0.0

        self.position.y += movement


class Player(Paddle):
    """Paddle controlled by the keyboard"""

    def __init__(self) -> None:
        super().__init__(game_config.PLAYER_START_X)

    def update_position(self, clicked_up: bool, clicked_down: bool) -> None:
        """Moves one step up and/or down; both flags cancel out"""
        movement = 0.0
        if clicked_up:
            movement -= game_config.PADDLE_STEP
        if clicked_down:
            movement += game_config.PADDLE_STEP

        self.move_vertically(movement)


class Opponent(Paddle):
    """Paddle following the ball's height one step per tick"""

    def __init__(self) -> None:
        super().__init__(game_config.OPPONENT_START_X)

    def update_position(self, ball: "Ball") -> None:
        movement = 0.0
        if self.position.y > ball.position.y:
            movement -= game_config.PADDLE_STEP
        elif self.position.y < ball.position.y:
            movement += game_config.PADDLE_STEP

        self.move_vertically(movement)


class Ball:
    """Game ball

    ``direction`` is the displacement applied every tick, its magnitude is the
    ball speed. Without an explicit ``random_source`` each serve draws from a
    freshly seeded generator.
    """

    def __init__(self, random_source: RandomSource | None = None):
        self.random_source = random_source
        self.position = Vector2D(0.0, 0.0)
        self.direction = Vector2D(0.0, 0.0)
        self.shape: Rectangle = get_ball_shape()
        self.reset()

    def reset(self) -> None:
        """Serves the ball again from the centre of the court"""
        source = self.random_source or NumpyRandomSource()
        self.position = Vector2D(0.0, 0.0)
        self.direction = draw_initial_direction(source)
        self.shape = get_ball_shape()

    def bounds(self) -> Bounds:
        return self.shape.bounds(self.position.x, self.position.y)

    def reflect(self) -> None:
        """Sends the ball back faster after a paddle hit

        Both components gain BOUNCE_ACCELERATION in magnitude; x then changes
        sign, y keeps its sign (0 counts as positive).
        """
        acceleration = game_config.BOUNCE_ACCELERATION

        if self.direction.x < 0.0:
            self.direction.x -= acceleration
        else:
            self.direction.x += acceleration
        self.direction.x = -self.direction.x

        if self.direction.y < 0.0:
            self.direction.y -= acceleration
        else:
            self.direction.y += acceleration

    def update_position(self, player: Player, opponent: Opponent) -> dict[str, list[str]]:
        """Advances the ball one tick and resolves its collisions

        Returns the events of the tick: paddle hits ("player"/"opponent"),
        wall bounces ("top"/"bottom") and goals (the side the ball left by,
        "left"/"right").
        """
        events: dict[str, list[str]] = {
            "paddle_hits": [],
            "wall_bounces": [],
            "goals": [],
        }

        self.position += self.direction
        ball = self.bounds()

        # Player: only its right face matters
        paddle = player.bounds()
        if paddle.right > ball.left and paddle.bottom > ball.top and paddle.top < ball.bottom:
            self.reflect()
            events["paddle_hits"].append("player")
            logger.debug("Ball hit player paddle, direction now %s", self.direction.to_tuple())

        paddle = opponent.bounds()
        if (
            paddle.left <= ball.right
            and paddle.right >= ball.left
            and paddle.bottom > ball.top
            and paddle.top < ball.bottom
        ):
            self.reflect()
            events["paddle_hits"].append("opponent")
            logger.debug("Ball hit opponent paddle, direction now %s", self.direction.to_tuple())

        # Ceiling and floor, the ball is not moved back inside
        if ball.top <= COURT_TOP or ball.bottom >= COURT_BOTTOM:
            self.direction.y = -self.direction.y
            wall = "top" if ball.top <= COURT_TOP else "bottom"
            events["wall_bounces"].append(wall)
            logger.debug(
                "Ball bounced off the %s wall, direction now %s", wall, self.direction.to_tuple()
            )

        if ball.left <= COURT_LEFT or ball.right >= COURT_RIGHT:
            events["goals"].append("left" if ball.left <= COURT_LEFT else "right")
            self.reset()
            logger.debug("Ball left the court, served again towards %s", self.direction.to_tuple())

        return events
