"""Symmetric shadowcasting field of view."""

from __future__ import annotations

import enum
import math
from fractions import Fraction
from typing import Protocol

from .vec import Vec

_HALF = Fraction(1, 2)


class _Blocking(Protocol):
    def is_blocking(self, position: Vec) -> bool: ...


class Cardinal(enum.Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


class Quadrant:
    """One of four 90 degree sectors around an origin."""

    def __init__(self, direction: Cardinal, origin: Vec) -> None:
        self.direction = direction
        self.origin = origin

    def transform(self, tile: Vec) -> Vec:
        """Convert quadrant coordinates (row, col) to map coordinates (x, y)."""
        row, col = tile
        if self.direction is Cardinal.NORTH:
            return self.origin + Vec(col, -row)
        if self.direction is Cardinal.SOUTH:
            return self.origin + Vec(col, row)
        if self.direction is Cardinal.EAST:
            return self.origin + Vec(row, col)
        return self.origin + Vec(-row, col)


class Row:
    """A row of tiles at some depth, bounded by two slopes."""

    def __init__(self, depth: int, start_slope: Fraction, end_slope: Fraction) -> None:
        self.depth = depth
        self.start_slope = Fraction(start_slope)
        self.end_slope = Fraction(end_slope)

    def tiles(self) -> list[Vec]:
        min_col = round_ties_up(self.depth * self.start_slope)
        max_col = round_ties_down(self.depth * self.end_slope)
        return [Vec(self.depth, col) for col in range(min_col, max_col + 1)]

    def next(self) -> Row:
        return Row(self.depth + 1, self.start_slope, self.end_slope)


class FieldOfView:
    """Computes which positions are visible from a point of a map."""

    def __init__(self, dungeon: _Blocking) -> None:
        self.dungeon = dungeon
        self._visible: set[Vec] = set()
        self._quadrant = Quadrant(Cardinal.NORTH, Vec(0, 0))

    def compute(self, position: Vec) -> set[Vec]:
        self._visible = set()
        self.mark_visible(position)
        for direction in Cardinal:
            self._quadrant = Quadrant(direction, position)
            self.scan(Row(1, Fraction(-1), Fraction(1)))
        return set(self._visible)

    def mark_visible(self, position: Vec) -> None:
        self._visible.add(position)

    def reveal(self, tile: Vec) -> None:
        self.mark_visible(self._quadrant.transform(tile))

    def is_wall(self, tile: Vec | None) -> bool:
        if tile is None:
            return False
        return self.dungeon.is_blocking(self._quadrant.transform(tile))

    def is_floor(self, tile: Vec | None) -> bool:
        if tile is None:
            return False
        return not self.dungeon.is_blocking(self._quadrant.transform(tile))

    def scan(self, row: Row) -> None:
        prev_tile: Vec | None = None
        for tile in row.tiles():
            if self.is_wall(tile) or is_symmetric(row, tile):
                self.reveal(tile)
            if self.is_wall(prev_tile) and self.is_floor(tile):
                row.start_slope = slope(tile)
            if self.is_floor(prev_tile) and self.is_wall(tile):
                next_row = row.next()
                next_row.end_slope = slope(tile)
                self.scan(next_row)
            prev_tile = tile
        if self.is_floor(prev_tile):
            self.scan(row.next())


def slope(tile: Vec) -> Fraction:
    """Slope of the left edge of a tile."""
    row_depth, col = tile
    return Fraction(2 * col - 1, 2 * row_depth)


def is_symmetric(row: Row, tile: Vec) -> bool:
    _, col = tile
    return row.depth * row.start_slope <= col <= row.depth * row.end_slope


def round_ties_up(n) -> int:
    return math.floor(n + _HALF)


def round_ties_down(n) -> int:
    return math.ceil(n - _HALF)