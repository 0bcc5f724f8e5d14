"""
Main game application with PyGame GUI
"""

import logging
from collections.abc import Mapping
from collections.abc import Sequence
from enum import Enum

import pygame

from tick_pong.core.interfaces.renderer import RendererProtocol
from tick_pong.core.physics import PhysicsEngine
from tick_pong.gui.pygame_renderer import PygameRenderer
from tick_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Current application state"""

    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


def input_flags(
    keys_pressed: Sequence[bool] | Mapping[int, bool],
    up_keys: Sequence[int] | None = None,
    down_keys: Sequence[int] | None = None,
) -> tuple[bool, bool]:
    """Turns a pygame key state into the player's (clicked_up, clicked_down)"""
    up_keys = up_keys if up_keys is not None else game_config.UP_KEYS
    down_keys = down_keys if down_keys is not None else game_config.DOWN_KEYS
    clicked_up = any(keys_pressed[key] for key in up_keys)
    clicked_down = any(keys_pressed[key] for key in down_keys)
    return clicked_up, clicked_down


class PongApp:
    """Main application class: one simulation tick per rendered frame"""

    def __init__(
        self,
        engine: PhysicsEngine | None = None,
        renderer: RendererProtocol | None = None,
    ) -> None:
        self.engine = engine or PhysicsEngine()
        self.renderer: RendererProtocol = renderer or PygameRenderer()
        self.state = GameState.PLAYING
        self.running = True
        logger.info("Tick Pong initialized")

    def handle_events(self) -> None:
        events = self.renderer.handle_events()

        if events["quit"]:
            self.running = False
        elif self.state == GameState.GAME_OVER and events["restart"]:
            self.engine.reset_game()
            self.state = GameState.PLAYING
            logger.info("New game started")
        elif events["pause"] and self.state != GameState.GAME_OVER:
            self.state = GameState.PLAYING if self.state == GameState.PAUSED else GameState.PAUSED

    def tick(self) -> None:
        """Advances the simulation one tick with the current keyboard state"""
        clicked_up, clicked_down = input_flags(pygame.key.get_pressed())
        self.engine.update(clicked_up, clicked_down)

        if self.engine.is_game_over():
            self.state = GameState.GAME_OVER
            logger.info("Game over, final score %s", self.engine.score)

    def render(self) -> None:
        self.renderer.render_frame(
            self.engine.player,
            self.engine.opponent,
            self.engine.ball,
            self.engine.score,
            {
                "paused": self.state == GameState.PAUSED,
                "winner": self.engine.get_winner() if self.state == GameState.GAME_OVER else 0,
            },
        )

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting Tick Pong...")

        try:
            while self.running and self.renderer.is_active():
                self.handle_events()
                if not self.running:
                    break
                if self.state == GameState.PLAYING:
                    self.tick()
                self.render()
                self.renderer.update()
        finally:
            self.renderer.cleanup()
            logger.info("Tick Pong closed")


def main() -> None:
    """Main entry point"""
    app = PongApp()
    app.run()


if __name__ == "__main__":
    main()
