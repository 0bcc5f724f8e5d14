"""
Utility module of Tick Pong game
"""

from tick_pong.utils.config import GameConfig
from tick_pong.utils.config import game_config
from tick_pong.utils.config import game_config_tmp

__all__ = ["game_config", "game_config_tmp", "GameConfig"]
