"""
Two dimensional point/vector value type.
"""
import math
import attrs
import numpy as np


@attrs.frozen
class Vector2:
    """
    Immutable 2D vector. Every operation returns a new instance.
    """
    x: float
    y: float

    @staticmethod
    def lerp(a: 'Vector2', b: 'Vector2', t: float) -> 'Vector2':
        """
        Linear interpolation (1-t)*a + t*b, componentwise.
        Values of `t` outside [0, 1] extrapolate.
        """
        return Vector2((1 - t) * a.x + t * b.x,
                       (1 - t) * a.y + t * b.y)

    @staticmethod
    def distance(a: 'Vector2', b: 'Vector2') -> float:
        return math.hypot(b.x - a.x, b.y - a.y)

    @classmethod
    def from_array(cls, xy) -> 'Vector2':
        x, y = xy
        return cls(float(x), float(y))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Vector2':
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__
