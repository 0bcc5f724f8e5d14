"""
Protocols at the boundary of the Tick Pong simulation
"""

from tick_pong.core.interfaces.random_source import RandomSource

__all__ = ["RandomSource"]
