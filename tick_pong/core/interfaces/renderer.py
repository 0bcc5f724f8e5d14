"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Any, Protocol

from tick_pong.core.entities import Ball, Opponent, Player


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The simulation only exposes positions and shapes; turning them into
    pixels (or instance buffers) is entirely the renderer's job.
    """

    def render_frame(
        self,
        player: Player,
        opponent: Opponent,
        ball: Ball,
        score: list[int],
        additional_info: dict[str, Any] | None = None,
    ) -> None:
        """
        Render a single frame of the game.

        Args:
            player: Player paddle
            opponent: Opponent paddle
            ball: Ball entity
            score: Current score [player, opponent]
            additional_info: Optional extra data to display (paused, FPS, etc.)
        """
        ...

    def handle_events(self) -> dict[str, Any]:
        """
        Process input events (keyboard, window close, etc.).

        Returns:
            Dictionary with event data (quit, pause, ...)
        """
        ...

    def update(self, fps: int | None = None) -> None:
        """
        Wait for the next tick.

        Args:
            fps: Ticks per second, defaults to the configured FPS
        """
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...

    def is_active(self) -> bool:
        """Check if renderer is still active (window not closed)"""
        ...
