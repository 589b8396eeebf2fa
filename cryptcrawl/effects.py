"""World events: sounds, hits, deaths, spells and weapon animations."""

from __future__ import annotations

import math
from dataclasses import replace

from .event import Event
from .sprite import AnimatedSprite, Sprite
from .vec import Vec


class AudioEvent(Event):
    """Plays a named sound once."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name

    def execute(self, engine) -> None:
        engine.audio.play_sound(self.name)


class Hit(Event):
    """Deals damage to an entity; a lethal hit is followed by its death."""

    def __init__(self, entity, damage: int) -> None:
        super().__init__()
        self.entity = entity
        self.damage = damage

    def execute(self, engine) -> None:
        self.entity.take_damage(self.damage)

    def when_done(self, engine) -> None:
        if not self.entity.alive:
            self.add_next(Die(self.entity))


class Die(Event):
    """Removes a dead entity from its tile."""

    def __init__(self, entity) -> None:
        super().__init__()
        self.entity = entity

    def execute(self, engine) -> None:
        engine.dungeon.remove_entity(self.entity.position)
        engine.events.create_event(AudioEvent, "death")


_STRIKE_DAMAGE = 5


def _animate_strike(event: Event, engine, animation: str, sound: str) -> None:
    """Run one frame of a strike animation, loading it on the first frame."""
    if event.frame_count == 0:
        event.sprite = engine.graphics.get_animated_sprite(animation)
        event.number_of_frames = event.sprite.number_of_frames()
        engine.events.create_event(AudioEvent, sound)
    engine.camera.add_overlay(event.position, event.sprite.current())
    event.sprite.update()


def _strike_tile(engine, position: Vec, damage: int) -> None:
    """Hit whoever stands on the tile at ``position``."""
    tile = engine.dungeon.tile(position)
    if tile.has_entity():
        engine.events.create_event(Hit, tile.entity, damage)


class Fire(Event):
    """A burst of flames on one tile."""

    damage = _STRIKE_DAMAGE

    def __init__(self, position: Vec) -> None:
        super().__init__()
        self.position = position
        self.sprite = AnimatedSprite()

    def execute(self, engine) -> None:
        _animate_strike(self, engine, "fire", "fire")

    def when_done(self, engine) -> None:
        _strike_tile(engine, self.position, self.damage)


class Lightning(Event):
    """A lightning bolt striking one tile."""

    damage = _STRIKE_DAMAGE

    def __init__(self, position: Vec) -> None:
        super().__init__()
        self.position = position
        self.sprite = AnimatedSprite()

    def execute(self, engine) -> None:
        _animate_strike(self, engine, "lightning", "thunder")

    def when_done(self, engine) -> None:
        _strike_tile(engine, self.position, self.damage)


class Fireball(Event):
    """A projectile flying from the tile in front of the caster."""

    def __init__(
        self,
        sprite: Sprite,
        direction: Vec,
        damage: int,
        start_position: Vec,
        end_position: Vec,
    ) -> None:
        super().__init__()
        self.weapon_sprite = sprite
        self.direction = direction
        self.damage = damage
        self.end_position = end_position
        self.position = direction + start_position
        self._projectile = Sprite()

    def execute(self, engine) -> None:
        if self.frame_count == 0:
            self._projectile = engine.graphics.get_sprite("explosion")
        engine.camera.add_overlay(self.position, self._projectile)
        self.position = self.position + self.direction

    def when_done(self, engine) -> None:
        if not engine.dungeon.tiles.within_bounds(self.position):
            return
        tile = engine.dungeon.tile(self.position)
        if tile.has_entity() and tile.entity.alive:
            engine.events.create_event(Hit, tile.entity, self.damage)


_SWING_FRAMES = 3


class Swing(Event):
    """Rotates a weapon sprite through an arc, then restores it."""

    def __init__(self, sprite: Sprite, direction: Vec) -> None:
        super().__init__(_SWING_FRAMES)
        self.sprite = sprite
        self._copy = replace(sprite)
        steps = _SWING_FRAMES - 1
        if direction == Vec(1, 0):
            self._starting_angle = 0.0
            self._delta = 135.0 / steps
        elif direction == Vec(-1, 0):
            self._starting_angle = 0.0
            self._delta = -135.0 / steps
        elif direction == Vec(0, 1):
            sprite.shift = sprite.shift - Vec(0, 12)
            sign = math.copysign(1.0, sprite.angle)
            self._starting_angle = -75 * sign  # rotate back before swing
            self._delta = 90.0 / steps * sign
        else:
            sprite.shift = sprite.shift - Vec(0, 4)
            sign = math.copysign(1.0, sprite.angle)
            sprite.shift = Vec(0, sprite.shift.y)
            self._starting_angle = 135 * sign  # rotate forward to swing
            self._delta = 90.0 / steps * sign

    def execute(self, engine) -> None:
        self.sprite.angle = self._starting_angle + self._delta * self.frame_count

    def when_done(self, engine) -> None:
        self.sprite.restore(self._copy)


_THRUST_FRAMES = 3
_THRUST_STEP = 3  # pixels per frame


class Thrust(Event):
    """Points a weapon sprite at the target and pushes it forward."""

    def __init__(self, sprite: Sprite, direction: Vec) -> None:
        super().__init__(_THRUST_FRAMES)
        self.sprite = sprite
        self._copy = replace(sprite)
        self.direction = direction

        half_height = sprite.size.y // 2
        sprite.shift = sprite.shift - Vec(0, sprite.size.y // 4)
        sprite.center = sprite.size // 2

        if direction == Vec(1, 0):
            sprite.angle = 90
            sprite.shift = sprite.shift + Vec(0, half_height)
        elif direction == Vec(-1, 0):
            sprite.angle = 270
            sprite.shift = sprite.shift + Vec(0, half_height)
        elif direction == Vec(0, 1):
            sprite.angle = 0
            self.direction = direction * -1
        else:
            sprite.angle = 180
            self.direction = direction * -1
            sprite.shift = sprite.shift + Vec(0, half_height)

    def execute(self, engine) -> None:
        self.sprite.shift = self.sprite.shift + self.direction * _THRUST_STEP

    def when_done(self, engine) -> None:
        self.sprite.restore(self._copy)


class UpdateFOV(Event):
    """Recomputes what the hero can see."""

    def execute(self, engine) -> None:
        engine.dungeon.update_visibility(engine.hero.position)