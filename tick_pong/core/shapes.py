"""
Tick Pong entity footprints: paddle and ball rectangles
"""

from dataclasses import dataclass

from tick_pong.utils.config import game_config


@dataclass(frozen=True)
class Bounds:
    """Edges of a shape placed in the court"""

    left: float
    right: float
    top: float
    bottom: float


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given as offsets from an entity position

    y grows downwards, so ``top_offset`` is the smaller y value.
    """

    left_offset: float
    right_offset: float
    top_offset: float
    bottom_offset: float

    @classmethod
    def from_half_extents(cls, half_width: float, half_height: float) -> "Rectangle":
        """Build a rectangle centred on the entity position"""
        return cls(-half_width, half_width, -half_height, half_height)

    @property
    def width(self) -> float:
        return self.right_offset - self.left_offset

    @property
    def height(self) -> float:
        return self.bottom_offset - self.top_offset

    def bounds(self, x: float, y: float) -> Bounds:
        """Returns the edges of the rectangle placed at (x, y)"""
        return Bounds(
            left=x + self.left_offset,
            right=x + self.right_offset,
            top=y + self.top_offset,
            bottom=y + self.bottom_offset,
        )

    def vertices(self) -> list[tuple[float, float]]:
        """Returns the rectangle as two triangles (6 vertices) for vertex buffers"""
        top_left = (self.left_offset, self.top_offset)
        bottom_left = (self.left_offset, self.bottom_offset)
        top_right = (self.right_offset, self.top_offset)
        bottom_right = (self.right_offset, self.bottom_offset)
        return [top_left, bottom_left, top_right, bottom_left, top_right, bottom_right]


def get_player_shape() -> Rectangle:
    """Footprint shared by the player and opponent paddles"""
    return Rectangle.from_half_extents(
        game_config.PADDLE_HALF_WIDTH, game_config.PADDLE_HALF_HEIGHT
    )


def get_ball_shape() -> Rectangle:
    """Footprint of the ball

    The ball is logically square; its width is scaled by the display aspect
    ratio so it is drawn square on screen (0.0084375 x 0.015 at 16:9).
    """
    return Rectangle.from_half_extents(game_config.ball_half_width, game_config.BALL_HALF_SIZE)
