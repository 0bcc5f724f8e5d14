"""
PyGame renderer for Tick Pong game
"""

from typing import Any

import pygame

from tick_pong.core.entities import Ball
from tick_pong.core.entities import Opponent
from tick_pong.core.entities import Paddle
from tick_pong.core.entities import Player
from tick_pong.core.shapes import Rectangle
from tick_pong.core.vector import Vector2D
from tick_pong.utils.config import game_config


def ndc_to_screen(x: float, y: float, width: int, height: int) -> tuple[float, float]:
    """Maps normalized device coordinates to pixels

    (-1, -1) is the top-left corner of the window and (1, 1) the bottom-right.
    """
    return ((x + 1.0) / 2.0 * width, (y + 1.0) / 2.0 * height)


def shape_to_rect(position: Vector2D, shape: Rectangle, width: int, height: int) -> pygame.Rect:
    """Pixel rectangle covering ``shape`` placed at ``position``"""
    bounds = shape.bounds(position.x, position.y)
    left, top = ndc_to_screen(bounds.left, bounds.top, width, height)
    right, bottom = ndc_to_screen(bounds.right, bounds.bottom, width, height)
    size = (max(1, round(right - left)), max(1, round(bottom - top)))
    return pygame.Rect((round(left), round(top)), size)


class PygameRenderer:
    """PyGame-based renderer for Tick Pong"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize the PyGame renderer"""
        self.width = width or game_config.WINDOW_WIDTH
        self.height = height or game_config.WINDOW_HEIGHT

        pygame.init()

        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Tick Pong")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = game_config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = game_config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = game_config.PADDLE_COLOR
        self.text_color: tuple[int, int, int] = (255, 255, 255)
        self.line_color: tuple[int, int, int] = (100, 100, 100)

        self.font_large = pygame.font.Font(None, 74)
        self.font_small = pygame.font.Font(None, 36)

        self.show_fps = False
        self.active = True

    def _check_active(self) -> None:
        if not self.active:
            raise RuntimeError("Renderer used after cleanup()")

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_field(self) -> None:
        """Draw the centre line"""
        center_x = self.width // 2
        pygame.draw.line(self.screen, self.line_color, (center_x, 0), (center_x, self.height), 2)

    def draw_paddle(self, paddle: Paddle) -> None:
        rect = shape_to_rect(paddle.position, paddle.shape, self.width, self.height)
        pygame.draw.rect(self.screen, self.paddle_color, rect)

    def draw_ball(self, ball: Ball) -> None:
        rect = shape_to_rect(ball.position, ball.shape, self.width, self.height)
        pygame.draw.rect(self.screen, self.ball_color, rect)

    def draw_score(self, score: list[int]) -> None:
        """Draw the current score"""
        score_text = f"{score[0]}  -  {score[1]}"
        text_surface = self.font_large.render(score_text, True, self.text_color)
        text_rect = text_surface.get_rect()
        text_rect.centerx = self.width // 2
        text_rect.top = 20
        self.screen.blit(text_surface, text_rect)

    def draw_pause_screen(self) -> None:
        """Draw pause screen"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(128)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        pause_surface = self.font_large.render("PAUSE", True, self.text_color)
        pause_rect = pause_surface.get_rect()
        pause_rect.center = (self.width // 2, self.height // 2)
        self.screen.blit(pause_surface, pause_rect)

    def draw_game_over(self, winner: int, score: list[int]) -> None:
        """Draw game over screen"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(180)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        winner_text = "You win!" if winner == 1 else "Opponent wins!"
        winner_surface = self.font_large.render(winner_text, True, self.text_color)
        winner_rect = winner_surface.get_rect()
        winner_rect.center = (self.width // 2, self.height // 2 - 50)
        self.screen.blit(winner_surface, winner_rect)

        restart_text = f"{score[0]} - {score[1]}   SPACE to play again, ESC to quit"
        restart_surface = self.font_small.render(restart_text, True, self.text_color)
        restart_rect = restart_surface.get_rect()
        restart_rect.center = (self.width // 2, self.height // 2 + 40)
        self.screen.blit(restart_surface, restart_rect)

    def draw_fps(self) -> None:
        fps_text = f"FPS: {self.clock.get_fps():.0f}"
        fps_surface = self.font_small.render(fps_text, True, self.text_color)
        self.screen.blit(fps_surface, (10, 20))

    def render_frame(
        self,
        player: Player,
        opponent: Opponent,
        ball: Ball,
        score: list[int],
        additional_info: dict[str, Any] | None = None,
    ) -> None:
        """Render the complete game state"""
        self._check_active()
        info = additional_info or {}

        self.clear_screen()
        self.draw_field()
        self.draw_paddle(player)
        self.draw_paddle(opponent)
        self.draw_ball(ball)
        self.draw_score(score)

        if self.show_fps:
            self.draw_fps()
        if info.get("paused"):
            self.draw_pause_screen()
        if info.get("winner"):
            self.draw_game_over(info["winner"], score)

        pygame.display.flip()

    def handle_events(self) -> dict[str, Any]:
        """Collect window and key-press events of the frame"""
        self._check_active()
        events: dict[str, Any] = {"quit": False, "pause": False, "restart": False}

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events["quit"] = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    events["quit"] = True
                elif event.key == pygame.K_p:
                    events["pause"] = True
                elif event.key == pygame.K_SPACE:
                    # SPACE pauses while playing, restarts on the game over screen
                    events["pause"] = True
                    events["restart"] = True
                elif event.key == pygame.K_F2:
                    self.show_fps = not self.show_fps

        return events

    def update(self, fps: int | None = None) -> None:
        """Maintain the tick rate"""
        self.clock.tick(fps or game_config.FPS)

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        if self.active:
            self.active = False
            pygame.quit()

    def is_active(self) -> bool:
        return self.active
