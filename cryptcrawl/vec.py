"""Integer 2-D vectors used for positions, sizes and directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True, slots=True)
class Vec:
    """An immutable pair of integers."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: int) -> Vec:
        if not isinstance(scalar, int):
            return NotImplemented
        return Vec(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: int) -> Vec:
        return self.__mul__(scalar)

    def __floordiv__(self, scalar: int) -> Vec:
        """Divide both components, truncating toward zero."""
        if not isinstance(scalar, int):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide a Vec by zero")
        return Vec(_truncating_div(self.x, scalar), _truncating_div(self.y, scalar))

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def distance(a: Vec, b: Vec) -> float:
    """Euclidean distance between two positions."""
    difference = a - b
    return math.hypot(difference.x, difference.y)


# cartesian directions: right, up, left, down
DIRECTIONS: tuple[Vec, Vec, Vec, Vec] = (Vec(1, 0), Vec(0, 1), Vec(-1, 0), Vec(0, -1))