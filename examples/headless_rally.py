"""
Headless Tick Pong: runs the simulation without a window and prints the score

The left paddle is driven by a tiny scripted "player" that chases the ball,
the right paddle by the built-in opponent.
"""

import argparse

from tick_pong.core.physics import PhysicsEngine
from tick_pong.core.randomness import NumpyRandomSource


def scripted_input(engine: PhysicsEngine) -> tuple[bool, bool]:
    """Press up/down to follow the ball, like the opponent does"""
    player_y = engine.player.position.y
    ball_y = engine.ball.position.y
    return player_y > ball_y, player_y < ball_y


def main() -> None:
    parser = argparse.ArgumentParser(description="Run Tick Pong without a display")
    parser.add_argument("--ticks", type=int, default=60 * 60, help="Number of ticks to simulate")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible serves")
    args = parser.parse_args()

    source = NumpyRandomSource(args.seed) if args.seed is not None else None
    engine = PhysicsEngine(source)

    hits = 0
    for _ in range(args.ticks):
        events = engine.update(*scripted_input(engine))
        hits += len(events["paddle_hits"])
        if engine.is_game_over():
            break

    print(f"Ticks: {engine.tick_count}")
    print(f"Paddle hits: {hits}")
    print(f"Score: {engine.score[0]} - {engine.score[1]}")


if __name__ == "__main__":
    main()
