"""Window, sprite sheets and drawing."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pygame

from .randomness import randint, shuffle
from .sprite import AnimatedSprite, Sprite
from .vec import Vec


def _is_int(token: str) -> bool:
    try:
        int(token)
    except ValueError:
        return False
    return True


def read_spritesheet(filename) -> tuple[Path, dict[str, list[Sprite]]]:
    """Parse a sprite sheet description.

    The first token names the image, relative to the description file. Each
    following entry is ``name x y width height [frames]``. Returned sprites
    have no texture assigned yet.
    """
    path = Path(filename)
    tokens = path.read_text().split()
    if not tokens:
        raise ValueError(f"No image named in sprite sheet: {filename}")
    image = path.parent / tokens[0]

    sprites: dict[str, list[Sprite]] = {}
    pos = 1
    while pos + 5 <= len(tokens):
        name = tokens[pos]
        numbers = tokens[pos + 1 : pos + 5]
        if not all(_is_int(token) for token in numbers):
            break
        x, y, width, height = (int(token) for token in numbers)
        pos += 5
        frames = 1
        if pos < len(tokens) and _is_int(tokens[pos]):
            frames = int(tokens[pos])
            pos += 1
        shift = Vec(-(width // 2), -height)  # anchor at bottom center
        center = Vec(width // 2, height // 2)
        sprites.setdefault(name, []).extend(
            Sprite(
                location=Vec(x + i * width, y),
                size=Vec(width, height),
                shift=shift,
                center=center,
            )
            for i in range(frames)
        )
    return image, sprites


class Graphics:
    """A game window that loads sprite sheets and draws sprites."""

    def __init__(self, title: str, width: int, height: int) -> None:
        self.width = width
        self.height = height
        pygame.display.init()
        if not pygame.image.get_extended():
            raise RuntimeError("PNG image loading is not available")
        pygame.display.set_caption(title)
        self.screen = pygame.display.set_mode((width, height))
        self._textures: list[pygame.Surface] = []
        self._texture_ids: dict[str, int] = {}
        self._sprites: dict[str, list[Sprite]] = {}

    def __enter__(self) -> Graphics:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def load_spritesheet(self, filename) -> None:
        image, sheet = read_spritesheet(filename)
        texture_id = self._texture_id(image)
        for name, frames in sheet.items():
            self._sprites.setdefault(name, []).extend(
                replace(frame, texture_id=texture_id) for frame in frames
            )
        if not self._sprites:
            raise ValueError(f"Could not read any sprites from filename: {filename}")

    def get_sprite(self, name: str) -> Sprite:
        try:
            frames = self._sprites[name]
        except KeyError:
            raise KeyError(f"Cannot find sprite: {name}") from None
        return replace(frames[0])

    def get_animated_sprite(
        self,
        name: str,
        ticks_per_frame: int = 1,
        random_start: bool = False,
        shuffle_order: bool = False,
    ) -> AnimatedSprite:
        try:
            frames = [replace(frame) for frame in self._sprites[name]]
        except KeyError:
            raise KeyError(f"Cannot find sprite: {name}") from None
        if shuffle_order:
            shuffle(frames)
        if len(frames) > 1 and random_start:
            return AnimatedSprite(frames, ticks_per_frame, randint(0, len(frames) - 1))
        return AnimatedSprite(frames, ticks_per_frame)

    def clear(self) -> None:
        self.screen.fill((0, 0, 0))

    def draw_rect(self, pixel: Vec, size: Vec, red: int, green: int, blue: int, alpha: int) -> None:
        width, height = max(size.x, 0), max(size.y, 0)
        if alpha >= 255:
            pygame.draw.rect(self.screen, (red, green, blue), pygame.Rect(pixel.x, pixel.y, width, height))
            return
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((red, green, blue, max(alpha, 0)))
        self.screen.blit(overlay, (pixel.x, pixel.y))

    def draw_sprite(self, pixel: Vec, sprite: Sprite, scale: int = 1) -> None:
        if sprite.texture_id < 0:  # sprite with no texture
            return
        x = pixel.x + sprite.shift.x * scale
        y = pixel.y + sprite.shift.y * scale
        width = sprite.size.x * scale
        height = sprite.size.y * scale
        if width <= 0 or height <= 0:
            return
        texture = self._textures[sprite.texture_id]
        image = texture.subsurface(
            pygame.Rect(sprite.location.x, sprite.location.y, sprite.size.x, sprite.size.y)
        )
        if scale != 1:
            image = pygame.transform.scale(image, (width, height))
        if sprite.flip:
            image = pygame.transform.flip(image, True, False)
        if sprite.angle:
            # rotate clockwise about the sprite's center point
            pivot = pygame.math.Vector2(x + sprite.center.x * scale, y + sprite.center.y * scale)
            offset = pygame.math.Vector2(x + width / 2, y + height / 2) - pivot
            rotated = pygame.transform.rotate(image, -sprite.angle)
            rect = rotated.get_rect(center=pivot + offset.rotate(sprite.angle))
            self.screen.blit(rotated, rect)
        else:
            self.screen.blit(image, (x, y))

    def redraw(self) -> None:
        pygame.display.flip()

    def close(self) -> None:
        self._textures.clear()
        self._texture_ids.clear()
        pygame.display.quit()

    def _texture_id(self, image: Path) -> int:
        key = str(image)
        if key in self._texture_ids:
            return self._texture_ids[key]
        texture = pygame.image.load(key).convert_alpha()
        texture_id = len(self._textures)
        self._textures.append(texture)
        self._texture_ids[key] = texture_id
        return texture_id