"""
Simple 2D vector used for positions and directions
"""

from dataclasses import dataclass

import numpy as np


@dataclass
class Vector2D:
    """Simple 2D vector for positions and per-tick directions"""

    x: float
    y: float

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)
