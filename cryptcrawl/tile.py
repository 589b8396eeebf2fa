"""A single dungeon tile."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from .sprite import Sprite


class TileType(enum.Enum):
    NONE = "none"
    FLOOR = "floor"
    WALL = "wall"
    DOOR = "door"


@dataclass(eq=False)
class Tile:
    """Compared by identity: tiles are shared, mutable places in the map."""

    type: TileType = TileType.NONE
    sprite: Sprite = field(default_factory=Sprite)
    visible: bool = False
    walkable: bool = False
    door: Any = None
    entity: Any = None

    def is_wall(self) -> bool:
        return self.type is TileType.WALL

    def has_door(self) -> bool:
        return self.type is TileType.DOOR

    def has_entity(self) -> bool:
        return self.entity is not None

    def is_visible(self) -> bool:
        return self.visible