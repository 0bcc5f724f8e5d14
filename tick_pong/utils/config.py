"""
Tick Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import model_validator

logger = logging.getLogger(__name__)


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation

    All gameplay distances are in normalized device coordinates: the court
    always spans [-1, 1] on both axes and y = -1 is the top of the screen.
    Speeds are per-tick displacements.
    """

    # Allow mutation for compatibility with temporary overrides
    model_config = {"validate_assignment": True}

    # Paddles
    PLAYER_START_X: float = Field(default=-0.95, gt=-1.0, lt=0.0, description="Player x")
    OPPONENT_START_X: float = Field(default=0.95, gt=0.0, lt=1.0, description="Opponent x")
    PADDLE_HALF_WIDTH: float = Field(default=0.01, gt=0, description="Paddle half width")
    PADDLE_HALF_HEIGHT: float = Field(default=0.2, gt=0, lt=1.0, description="Paddle half height")
    PADDLE_STEP: float = Field(default=0.01, gt=0, description="Paddle movement per tick")

    # Ball
    BALL_HALF_SIZE: float = Field(default=0.015, gt=0, lt=0.5, description="Ball half height")
    ASPECT_RATIO: float = Field(default=16 / 9, gt=0, description="Display width / height")
    BALL_START_SPEED: float = Field(default=0.003, gt=0, description="Initial |direction.x|")
    BALL_MAX_START_DRIFT: float = Field(default=0.01, ge=0, description="Max initial |dir.y|")
    BOUNCE_ACCELERATION: float = Field(default=0.002, ge=0, description="Speed gain per hit")

    # Gameplay
    MAX_SCORE: int = Field(default=11, gt=0, description="Winning score")

    # Display
    WINDOW_WIDTH: int = Field(default=1280, gt=0, description="Window width in pixels")
    WINDOW_HEIGHT: int = Field(default=720, gt=0, description="Window height in pixels")
    FPS: int = Field(default=60, gt=0, description="Ticks (frames) per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    # Controls (pygame key codes)
    UP_KEYS: tuple[int, ...] = Field(default=(pygame.K_UP, pygame.K_w), description="Move up")
    DOWN_KEYS: tuple[int, ...] = Field(
        default=(pygame.K_DOWN, pygame.K_s), description="Move down"
    )

    @property
    def ball_half_width(self) -> float:
        """Ball half width once corrected for the display aspect ratio"""
        return self.BALL_HALF_SIZE / self.ASPECT_RATIO

    @model_validator(mode="after")
    def validate_court_fit(self) -> "GameConfig":
        """Validate paddles and ball fit in the fixed [-1, 1] court"""
        if self.PADDLE_HALF_WIDTH >= 1.0 - abs(self.PLAYER_START_X):
            raise ValueError("Player paddle must not touch the left edge of the court")
        if self.PADDLE_HALF_WIDTH >= 1.0 - abs(self.OPPONENT_START_X):
            raise ValueError("Opponent paddle must not touch the right edge of the court")
        if self.BALL_MAX_START_DRIFT >= 1.0 or self.BALL_START_SPEED >= 1.0:
            raise ValueError("Initial ball speed must be smaller than the court")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "tick_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "tick_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        _apply_values(self, GameConfig())


# Global configuration instance
game_config = GameConfig()


def _apply_values(config: GameConfig, validated: GameConfig) -> None:
    """Copies an already validated configuration over ``config`` in one step"""
    config.__dict__.update(validated.__dict__)


def _merged(config: GameConfig, **kwargs: Any) -> GameConfig:
    """Validates ``config`` with ``kwargs`` applied on top of it"""
    unknown = sorted(set(kwargs) - set(GameConfig.model_fields))
    if unknown:
        raise AttributeError(f"Unknown configuration fields: {', '.join(unknown)}")
    return GameConfig(**{**config.model_dump(), **kwargs})


def load_config_from_file(filepath: str = "tick_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (ValidationError, json.JSONDecodeError) as e:
        logger.error("Error loading config from %s: %s", filepath, e)
        return False

    _apply_values(game_config, loaded_config)
    logger.info("Loaded configuration from %s", filepath)
    return True


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)

    The overrides are validated together with the rest of the configuration
    before anything changes, and the previous values are restored on exit.
    """
    previous = game_config.model_copy()
    _apply_values(game_config, _merged(game_config, **kwargs))
    try:
        yield
    finally:
        _apply_values(game_config, previous)
