"""Turns a numeric dungeon layout into decorated tiles."""

from __future__ import annotations

from .door import Door
from .dungeon import Dungeon
from .grid import Grid
from .randomness import probability, randint, random_choice
from .room import Room
from .sprite import AnimatedSprite
from .tile import Tile, TileType
from .vec import DIRECTIONS, Vec

_LAYOUT_TYPES = {
    -1: TileType.NONE,
    0: TileType.WALL,
    1: TileType.FLOOR,
    2: TileType.DOOR,
}
_DIRECTION_NAMES = ("_right", "_up", "_left", "_down")


class Decorator:
    """Assigns tile types, sprites, doors and doodads to a layout."""

    def __init__(self, graphics, layout: Grid, rooms: list[Room]) -> None:
        self._graphics = graphics
        self.rooms = list(rooms)
        self.tiles: Grid = Grid(layout.width, layout.height, factory=Tile)
        self.doodads: dict[Vec, AnimatedSprite] = {}
        for y in range(layout.height):
            for x in range(layout.width):
                self._set_tile_type(layout, x, y)

    def create_dungeon(self) -> Dungeon:
        self._set_tile_sprites()
        self._place_torches()
        self._place_pillars()
        # randomly place some destroyed walls
        for _ in range(2):
            if probability(50):
                self._place_destroyed_wall()
        return Dungeon(self.tiles, self.rooms, self.doodads)

    def _set_tile_type(self, layout: Grid, x: int, y: int) -> None:
        tile = self.tiles[x, y]
        tile_type = _LAYOUT_TYPES.get(layout[x, y])
        if tile_type is None:
            return
        tile.type = tile_type
        if tile_type is TileType.FLOOR:
            tile.walkable = True

    def _set_tile_sprites(self) -> None:
        for y in range(self.tiles.height):
            for x in range(self.tiles.width):
                tile_type = self.tiles[x, y].type
                if tile_type is TileType.WALL:
                    self._choose_wall_sprite(x, y)
                elif tile_type is TileType.FLOOR:
                    self._choose_floor_sprite(x, y)
                elif tile_type is TileType.DOOR:
                    self._choose_door_sprite(x, y)

    def _choose_wall_sprite(self, x: int, y: int) -> None:
        name = "".join(
            label
            for direction, label in zip(DIRECTIONS, _DIRECTION_NAMES)
            if self.tiles.within_bounds(Vec(x, y) + direction)
            and self.tiles[Vec(x, y) + direction].is_wall()
        )
        if not name:
            name = "_pillar"
        elif name in ("_right_left", "_up_down"):
            # randomly add fancy cracked walls
            roll = randint(0, 99)
            if roll < 10:
                name += "_3"
            elif roll < 20:
                name += "_2"
            else:
                name += "_1"
        self.tiles[x, y].sprite = self._graphics.get_sprite("wall" + name)

    def _choose_floor_sprite(self, x: int, y: int) -> None:
        roll = randint(0, 99)
        if roll < 5:
            name = "floor_cracked_1"
        elif roll < 20:
            name = "floor_sunken"
        elif roll < 35:
            name = "floor_cracked_2"
        else:
            name = "floor_nice"
        self.tiles[x, y].sprite = self._graphics.get_sprite(name)

    def _choose_door_sprite(self, x: int, y: int) -> None:
        self._choose_floor_sprite(x, y)
        is_horizontal = self.tiles[x - 1, y].is_wall() and self.tiles[x + 1, y].is_wall()
        tile = self.tiles[x, y]
        tile.door = Door(
            tile,
            is_horizontal,
            self._graphics.get_sprite("door_horizontal"),
            self._graphics.get_sprite("door_vertical"),
        )

    def _place_destroyed_wall(self) -> None:
        """Break a horizontal wall that separates two walkable areas."""
        positions: list[Vec] = []
        for y in range(1, self.tiles.height - 1):
            walls = 0
            for x in range(self.tiles.width):
                walls = walls + 1 if self.tiles[x, y].is_wall() else 0
                if walls == 5:
                    good = all(
                        self.tiles[x + dx, y + 1].walkable and self.tiles[x + dx, y - 1].walkable
                        for dx in (-3, -2, -1)
                    )
                    if good:
                        positions.append(Vec(x - 2, y))

        if not positions:
            return

        x, y = random_choice(positions)
        x_names = ("_left", "_center", "_right")
        y_names = ("_bottom", "_center", "_top")
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                name = "floor_broken" + y_names[dy + 1] + x_names[dx + 1]
                self.tiles[x + dx, y + dy].sprite = self._graphics.get_sprite(name)
        center = self.tiles[x, y]
        center.type = TileType.FLOOR
        center.walkable = True

        self.doodads.pop(Vec(x - 1, y), None)
        self.doodads.pop(Vec(x + 1, y), None)
        self.doodads[Vec(x - 1, y)] = self._graphics.get_animated_sprite("wall_destroyed_left", 1)
        self.doodads[Vec(x, y)] = self._graphics.get_animated_sprite("wall_destroyed_center", 1)
        self.doodads[Vec(x + 1, y)] = self._graphics.get_animated_sprite("wall_destroyed_right", 1)

    def _place_torches(self) -> None:
        """Hang torches on runs of three walls that sit above a floor."""
        positions: list[Vec] = []
        for y in range(1, self.tiles.height):
            walls = 0
            for x in range(1, self.tiles.width - 1):
                if self.tiles[x, y].is_wall() and self.tiles[x, y - 1].walkable:
                    walls += 1
                else:
                    walls = 0
                if walls == 3:
                    positions.append(Vec(x - 1, y))
                    walls = 0

        for position in positions:
            if probability(50):
                self.doodads[position] = self._graphics.get_animated_sprite("torch", 2, True, True)

    def _place_pillars(self) -> None:
        spacing = 4
        for room in self.rooms:
            # no pillars in rooms smaller than 5x7 or 7x5
            if min(room.size.x, room.size.y) < 5 or max(room.size.x, room.size.y) < 7:
                continue
            start_x = 2 if (room.size.x // 2) % 2 == 0 else 1
            start_y = 2 if (room.size.y // 2) % 2 == 0 else 1
            for y in range(start_y, room.size.y, spacing):
                for x in range(start_x, room.size.x - 1, spacing):
                    tile = self.tiles[room.position + Vec(x, y)]
                    tile.type = TileType.WALL
                    tile.walkable = False
                    tile.sprite = self._graphics.get_sprite("wall_pillar")