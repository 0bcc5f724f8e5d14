"""
Tick Pong: fixed-tick two-paddle ball game
"""

__version__ = "0.1.0"
