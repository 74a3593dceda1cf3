"""
Simple 2D Vector class for the Path Repulsion Algorithm.
"""

import math
from typing import List, Tuple

Matrix2D = Tuple[Tuple[float, float], Tuple[float, float]]


class Vector2D:
    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vector2D is immutable")

    def __add__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Vector2D':
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> 'Vector2D':
        return self.__mul__(scalar)

    def __neg__(self) -> 'Vector2D':
        return Vector2D(-self.x, -self.y)

    def __truediv__(self, scalar: float) -> 'Vector2D':
        return Vector2D(self.x / scalar, self.y / scalar)

    def __repr__(self) -> str:
        return f"Vector2D({self.x:.2f}, {self.y:.2f})"

    # Exact comparison: registry self-exclusion relies on bit-identical coordinates
    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2)

    @property
    def magnitude_squared(self) -> float:
        return self.x ** 2 + self.y ** 2

    def normalize(self) -> 'Vector2D':
        """Unit vector in the same direction. Raises ZeroDivisionError for the zero vector."""
        mag = self.magnitude
        if mag == 0.0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        return self / mag

    def distance_to(self, other: 'Vector2D') -> float:
        return (self - other).magnitude

    def distance_squared_to(self, other: 'Vector2D') -> float:
        return (self - other).magnitude_squared

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        return [self.x, self.y]


def rot2d(angle: float) -> Matrix2D:
    """2x2 rotation matrix for `angle` radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    return ((c, -s), (s, c))


def trans(matrix: Matrix2D, v: Vector2D) -> Vector2D:
    """Row vector `v` times `matrix` (rotates by -angle for a rot2d matrix)."""
    return Vector2D(
        v.x * matrix[0][0] + v.y * matrix[1][0],
        v.x * matrix[0][1] + v.y * matrix[1][1],
    )


def rotate(v: Vector2D, angle: float) -> Vector2D:
    return trans(rot2d(angle), v)
