"""
Tick driver for Tick Pong
"""

import logging
from typing import Any

import numpy as np
import numpy.typing as npt

from tick_pong.core.entities import Ball
from tick_pong.core.entities import Opponent
from tick_pong.core.entities import Player
from tick_pong.core.interfaces.random_source import RandomSource
from tick_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class PhysicsEngine:
    """Owns the three entities and advances them in the required order"""

    def __init__(self, random_source: RandomSource | None = None):
        self.random_source = random_source
        self.player = Player()
        self.opponent = Opponent()
        self.ball = Ball(random_source)
        self.score: list[int] = [0, 0]
        self.tick_count = 0

    def update(self, clicked_up: bool = False, clicked_down: bool = False) -> dict[str, Any]:
        """Runs one tick and returns the events that occurred

        Goals on the right score for the player (index 0), goals on the left
        for the opponent (index 1).
        """
        self.tick_count += 1

        self.player.update_position(clicked_up, clicked_down)
        self.opponent.update_position(self.ball)
        events: dict[str, Any] = self.ball.update_position(self.player, self.opponent)

        for side in events["goals"]:
            scorer = 0 if side == "right" else 1
            self.score[scorer] += 1
            logger.info(
                "Goal for %s, score %d - %d",
                "player" if scorer == 0 else "opponent",
                self.score[0],
                self.score[1],
            )
        events["score"] = self.score.copy()

        return events

    def instance_offsets(self) -> npt.NDArray[np.float32]:
        """Per-instance offsets (player, opponent, ball) for a GPU renderer"""
        return np.array(
            [
                self.player.position.to_tuple(),
                self.opponent.position.to_tuple(),
                self.ball.position.to_tuple(),
            ],
            dtype=np.float32,
        )

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return {
            "player_position": self.player.position.to_tuple(),
            "opponent_position": self.opponent.position.to_tuple(),
            "ball_position": self.ball.position.to_tuple(),
            "ball_direction": self.ball.direction.to_tuple(),
            "ball_speed": self.ball.direction.magnitude(),
            "score": self.score.copy(),
            "tick_count": self.tick_count,
        }

    def is_game_over(self) -> bool:
        """Checks if the game is over"""
        return max(self.score) >= game_config.MAX_SCORE

    def get_winner(self) -> int:
        """Returns the winner (1 for the player, 2 for the opponent), or 0"""
        if self.score[0] >= game_config.MAX_SCORE:
            return 1
        elif self.score[1] >= game_config.MAX_SCORE:
            return 2
        return 0

    def reset_game(self) -> None:
        """Resets the game to zero"""
        self.score = [0, 0]
        self.tick_count = 0
        self.player = Player()
        self.opponent = Opponent()
        self.ball = Ball(self.random_source)
