#!/usr/bin/env python3
"""
Main script to launch Tick Pong with PyGame graphical interface
"""

import argparse
import logging
import sys

from tick_pong.gui.game_app import main
from tick_pong.utils.config import load_config_from_file


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Tick Pong against the computer")
    parser.add_argument(
        "--config", default="tick_pong_config.json", help="JSON configuration file (optional)"
    )
    parser.add_argument("--debug", action="store_true", help="Log every bounce and serve")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if load_config_from_file(args.config):
        print(f"Using configuration from {args.config}")

    print("=== TICK PONG ===")
    print()
    print("CONTROLS:")
    print("  UP/W: Move up")
    print("  DOWN/S: Move down")
    print("  P or SPACE: Pause")
    print("  F2: Show FPS")
    print("  ESC: Quit")
    print()

    main()
    sys.exit(0)
