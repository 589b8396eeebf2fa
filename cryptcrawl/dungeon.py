"""The playable dungeon: tiles, rooms, decorations and fog of war."""

from __future__ import annotations

from typing import Mapping

from .fog import Fog
from .fov import FieldOfView
from .grid import Grid
from .pathfinding import breadth_first
from .randomness import randint, random_choice
from .room import Room
from .sprite import AnimatedSprite
from .tile import Tile
from .vec import DIRECTIONS, Vec


class Dungeon:
    """A grid of tiles with rooms, doodads and the hero's fog of war."""

    def __init__(
        self,
        tiles: Grid,
        rooms: list[Room] | None = None,
        doodads: Mapping[Vec, AnimatedSprite] | None = None,
    ) -> None:
        self.tiles = tiles
        self.rooms: list[Room] = list(rooms or [])
        self.doodads: dict[Vec, AnimatedSprite] = dict(doodads or {})
        self.fog = Fog()
        # all tiles start hidden
        for y in range(tiles.height):
            for x in range(tiles.width):
                tiles[x, y].visible = False

    def random_open_room_tile(self) -> Vec:
        """Position of a random walkable, unoccupied tile inside a room."""
        while True:
            room = random_choice(self.rooms)
            x = randint(room.position.x, room.position.x + room.size.x - 1)
            y = randint(room.position.y, room.position.y + room.size.y - 1)
            tile = self.tiles[x, y]
            if tile.walkable and tile.entity is None:
                return Vec(x, y)

    def update(self) -> None:
        """Advance animations of visible doodads."""
        for position, animated_sprite in self.doodads.items():
            if self.tiles[position].visible:
                animated_sprite.update()

    def update_visibility(self, position: Vec) -> None:
        self.fog.update_visibility(self, position)

    def remove_entity(self, position: Vec) -> None:
        self.tiles[position].entity = None

    def tile(self, position: Vec) -> Tile:
        return self.tiles[position]

    def neighbors(self, position: Vec) -> list[Vec]:
        """In-bounds positions next to ``position``: right, up, left, down."""
        return [
            position + direction
            for direction in DIRECTIONS
            if self.tiles.within_bounds(position + direction)
        ]

    def is_blocking(self, position: Vec) -> bool:
        """Whether the tile at ``position`` blocks line of sight."""
        tile = self.tiles[position]
        if tile.is_wall():
            return True
        if tile.has_door():
            return not tile.door.is_open()
        return False

    def calculate_fov(self, position: Vec) -> set[Vec]:
        return FieldOfView(self).compute(position)

    def calculate_path(self, start: Vec, stop: Vec) -> list[Vec]:
        return breadth_first(self, start, stop)