"""Maps world positions to screen pixels and draws the visible world."""

from __future__ import annotations

from .sprite import Sprite
from .vec import Vec

_MAX_ZOOM = 8
_MIN_ZOOM = 1


class Camera:
    """A view onto the dungeon centred on a world position."""

    def __init__(self, graphics, tilesize: int, zoom: int = 1) -> None:
        self._graphics = graphics
        self.tilesize = tilesize
        self._zoom = zoom
        self._location = Vec(0, 0)
        self._screen_center = Vec(graphics.width // 2, graphics.height // 2)
        self._overlays: list[tuple[Vec, Sprite]] = []
        self._min = Vec(0, 0)
        self._max = Vec(0, 0)
        self._calculate_visibility_limits()

    @property
    def zoom(self) -> int:
        return self._zoom

    @property
    def location(self) -> Vec:
        return self._location

    # drawing

    def render_sprite(self, position: Vec, sprite: Sprite) -> None:
        self._graphics.draw_sprite(self.world_to_screen(position), sprite, self._zoom)

    def _visible_range(self, dungeon) -> tuple[range, range]:
        xmin = max(0, self._min.x)
        ymin = max(0, self._min.y)
        xmax = min(self._max.x, dungeon.tiles.width - 1)
        ymax = min(self._max.y, dungeon.tiles.height - 1)
        return range(xmin, xmax + 1), range(ymin, ymax + 1)

    def render_dungeon(self, dungeon) -> None:
        """Draw tiles, then doodads, then doors on top."""
        xs, ys = self._visible_range(dungeon)
        door_sprites: list[tuple[Vec, Sprite]] = []
        for y in ys:
            for x in xs:
                position = Vec(x, y)
                if not self.within_view(position):
                    continue
                tile = dungeon.tiles[position]
                self.render_sprite(position, tile.sprite)
                if tile.has_door():
                    door_sprites.append((position, tile.door.sprite()))

        for position, doodad in dungeon.doodads.items():
            if self.within_view(position):
                self.render_sprite(position, doodad.current())

        for position, sprite in door_sprites:
            self.render_sprite(position, sprite)

    def render_entities(self, entities) -> None:
        for entity in entities:
            position = entity.position
            if self.within_view(position) and entity.alive and entity.is_visible():
                for sprite in entity.sprites():
                    self.render_sprite(position, sprite)

    def render_fog(self, dungeon) -> None:
        xs, ys = self._visible_range(dungeon)
        for y in ys:
            for x in xs:
                position = Vec(x, y)
                brightness = dungeon.fog.brightness(position)
                alpha = min(max(int(brightness * 255), 0), 255)
                self.render_rect(position, 0, 0, 0, alpha)

    def render_rect(self, position: Vec, red: int, green: int, blue: int, alpha: int) -> None:
        scale = self.tilesize * self._zoom
        # sprites are anchored at the bottom center, rectangles at the upper left
        pixel = self.world_to_screen(position) - Vec(scale // 2, scale)
        self._graphics.draw_rect(pixel, Vec(scale, scale), red, green, blue, alpha)

    def render_healthbar(self, current_health: int, max_health: int) -> None:
        length = int(current_health / max_health * 300)
        self._graphics.draw_rect(Vec(10, 10), Vec(320, 40), 255, 255, 255, 255)
        self._graphics.draw_rect(Vec(15, 15), Vec(310, 30), 0, 0, 0, 255)
        self._graphics.draw_rect(Vec(20, 20), Vec(length, 20), 50, 255, 50, 255)

    def add_overlay(self, position: Vec, sprite: Sprite) -> None:
        self._overlays.append((position, sprite))

    def render_overlays(self) -> None:
        for position, sprite in self._overlays:
            self.render_sprite(position, sprite)

    def update(self) -> None:
        """Forget the overlays added during the last frame."""
        self._overlays.clear()

    # coordinates

    def world_to_screen(self, position: Vec) -> Vec:
        """Convert world coordinates (y up) to pixel coordinates (y down)."""
        scale = self._zoom * self.tilesize
        pixel = scale * (position - self._location) + self._screen_center
        return Vec(pixel.x, self._graphics.height - pixel.y + scale // 2)

    def move_to(self, position: Vec) -> None:
        self._location = position
        self._calculate_visibility_limits()

    def zoom_in(self) -> None:
        if self._zoom < _MAX_ZOOM:
            self._zoom += 1
            self._calculate_visibility_limits()

    def zoom_out(self) -> None:
        if self._zoom > _MIN_ZOOM:
            self._zoom -= 1
            self._calculate_visibility_limits()

    def within_view(self, position: Vec) -> bool:
        return (
            self._min.x <= position.x <= self._max.x
            and self._min.y <= position.y <= self._max.y
        )

    def _calculate_visibility_limits(self) -> None:
        screen = Vec(self._graphics.width, self._graphics.height)
        num_tiles = screen // (2 * self._zoom * self.tilesize) + Vec(1, 1)
        self._max = self._location + num_tiles
        self._min = self._location - num_tiles