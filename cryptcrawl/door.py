"""Doors that can be opened and closed on a tile."""

from __future__ import annotations

from dataclasses import replace

from .sprite import Sprite
from .tile import Tile
from .vec import Vec


class Door:
    """A door sitting on a tile; open doors make the tile walkable."""

    def __init__(self, tile: Tile, is_horizontal: bool, horizontal: Sprite, vertical: Sprite) -> None:
        self.tile = tile
        self.is_horizontal = is_horizontal
        self._open = False
        self._horizontal = replace(horizontal)
        self._vertical = replace(vertical)
        # shift open door sprites by a few pixels to make the tile appear walkable
        if is_horizontal:
            self._vertical.shift += Vec(-6, 0)
        else:
            self._horizontal.shift += Vec(6, -12)

    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        self._open = True
        self.tile.walkable = True

    def close(self) -> None:
        self._open = False
        self.tile.walkable = False

    def sprite(self) -> Sprite:
        """The sprite matching the door's orientation and state."""
        if self._open == self.is_horizontal:
            return self._vertical
        return self._horizontal