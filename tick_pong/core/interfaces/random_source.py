"""
Random source protocol - defines the randomness the ball reset draws from
"""

from typing import Protocol


class RandomSource(Protocol):
    """
    Protocol for the random draws made when the ball is (re)served.

    Production code uses a freshly seeded numpy generator; tests substitute a
    deterministic implementation.
    """

    def coin_flip(self) -> bool:
        """Return a fair random boolean"""
        ...

    def uniform(self, low: float, high: float) -> float:
        """
        Return a uniform random float.

        Args:
            low: Inclusive lower bound
            high: Exclusive upper bound
        """
        ...
