"""Sprites and frame-based sprite animations."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Iterable

from .vec import Vec


@dataclass
class Sprite:
    """A region of a texture plus how to place it on screen."""

    texture_id: int = -1  # assigned when requested from the graphics engine
    location: Vec = Vec(0, 0)  # upper left corner of sprite in image
    size: Vec = Vec(0, 0)  # width, height in image
    shift: Vec = Vec(0, 0)  # pixels to shift by when displaying
    center: Vec = Vec(0, 0)  # position to rotate about
    angle: float = 0.0
    flip: bool = False  # flip horizontally

    def restore(self, other: Sprite) -> None:
        """Overwrite every field with those of ``other``."""
        for spec in fields(self):
            setattr(self, spec.name, getattr(other, spec.name))


class AnimatedSprite:
    """A looping sequence of sprite frames."""

    def __init__(
        self,
        sprites: Iterable[Sprite] | None = None,
        ticks_per_frame: int = 1,
        starting_frame: int = 0,
    ) -> None:
        frames = [Sprite()] if sprites is None else [replace(s) for s in sprites]
        if not frames:
            raise ValueError("an animated sprite needs at least one frame")
        self.visible = True
        self._sprites = frames
        self._ticks_per_frame = ticks_per_frame
        self._current_frame = starting_frame
        self._time = 0

    def flip(self, flip: bool) -> None:
        """Flip every frame horizontally (or not)."""
        for sprite in self._sprites:
            sprite.flip = flip

    def update(self) -> None:
        """Advance the animation clock."""
        if not self.visible:
            return
        self._time += 1
        if self._time >= self._ticks_per_frame:
            self._current_frame = (self._current_frame + 1) % len(self._sprites)

    def current(self) -> Sprite:
        """A copy of the frame currently shown."""
        return replace(self._sprites[self._current_frame])

    def number_of_frames(self) -> int:
        return len(self._sprites)