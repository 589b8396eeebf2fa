"""Fog of war: which tiles are visible, remembered or unknown."""

from __future__ import annotations

from .vec import Vec, distance


class Fog:
    """Tracks the hero's sight and how dark each tile is drawn."""

    def __init__(self, brightness_seen: float = 0.7) -> None:
        self.brightness_seen = brightness_seen
        self.position = Vec(0, 0)
        self.visible_tiles: set[Vec] = set()
        self.previously_seen_tiles: set[Vec] = set()

    def update_visibility(self, dungeon, position: Vec) -> None:
        """Recompute sight from ``position`` and flag tiles as visible."""
        self.position = position
        for pos in self.visible_tiles:
            dungeon.tile(pos).visible = False
        self.previously_seen_tiles |= self.visible_tiles
        self.visible_tiles = set(dungeon.calculate_fov(position))
        for pos in self.visible_tiles:
            dungeon.tile(pos).visible = True

    def brightness(self, location: Vec) -> float:
        """Darkness overlay strength: 0 is fully lit, 1 is unknown."""
        if location in self.visible_tiles:
            dist = distance(self.position, location)
            return min(max(0.1 * (dist - 1), 0.0), self.brightness_seen)
        if location in self.previously_seen_tiles:
            return self.brightness_seen
        return 1.0