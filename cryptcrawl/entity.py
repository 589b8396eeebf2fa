"""Interacting beings: heroes and monsters."""

from __future__ import annotations

import enum
from dataclasses import replace
from typing import Callable

from .sprite import AnimatedSprite, Sprite
from .vec import Vec
from .weapon import Weapon

DEFAULT_SPEED = 8


class Team(enum.Enum):
    HERO = "hero"
    MONSTER = "monster"


class Entity:
    """A being standing on a dungeon tile that takes turns."""

    def __init__(self, engine, position: Vec, team: Team) -> None:
        self._engine = engine
        self._position = position
        self._direction = Vec(1, 0)
        self._sprite = AnimatedSprite()
        self._health = 1
        self._max_health = 1
        self._alive = True
        self._weapon = Weapon()
        self.team = team
        # energy gained per turn; an entity acts once it has enough energy
        self.speed = DEFAULT_SPEED
        self.energy = 0
        self.behavior: Callable | None = None
        # called after each move_to as func(engine, entity)
        self.on_move: list[Callable] = []

        tile = engine.dungeon.tile(position)
        if tile.entity is not None:
            raise ValueError(f"An entity is already on tile: {position}")
        tile.entity = self

    # movement

    @property
    def position(self) -> Vec:
        return self._position

    @property
    def direction(self) -> Vec:
        return self._direction

    def move_to(self, position: Vec) -> None:
        old_tile = self._engine.dungeon.tile(self._position)
        new_tile = self._engine.dungeon.tile(position)
        old_tile.entity, new_tile.entity = new_tile.entity, old_tile.entity
        self._position = position
        for func in self.on_move:
            func(self._engine, self)

    def change_direction(self, direction: Vec) -> None:
        self._direction = direction
        if direction.x == 1:
            self._sprite.flip(False)
        elif direction.x == -1:
            self._sprite.flip(True)
        self._adjust_weapon_position()

    def is_visible(self) -> bool:
        """An entity is visible when its tile is."""
        return self._engine.dungeon.tile(self._position).visible

    # combat

    @property
    def health(self) -> int:
        return self._health

    @property
    def max_health(self) -> int:
        return self._max_health

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def weapon(self) -> Weapon:
        return self._weapon

    def take_damage(self, amount: int) -> None:
        """Lose health (gain it for negative amounts); dies at zero."""
        self._health = min(max(self._health - amount, 0), self._max_health)
        if self._health == 0:
            self._alive = False

    def set_max_health(self, value: int) -> None:
        self._max_health = self._health = value

    def set_weapon(self, weapon: Weapon) -> None:
        self._weapon = weapon
        weapon.sprite = self._engine.graphics.get_sprite(weapon.name)
        self._adjust_weapon_position()
        size = weapon.sprite.size
        weapon.sprite.center = Vec(size.x // 2, size.y)

    # turns

    def take_turn(self):
        """The next action chosen by the behavior, or None."""
        if self.behavior is not None:
            return self.behavior(self._engine, self)
        return None

    # drawing

    def set_sprite(self, name: str) -> None:
        self._sprite = self._engine.graphics.get_animated_sprite(name, 1, True)

    def update(self) -> None:
        self._sprite.update()

    def sprites(self) -> list[Sprite]:
        """Sprites to draw, weapon first."""
        return [replace(self._weapon.sprite), self._sprite.current()]

    def _adjust_weapon_position(self) -> None:
        sprite = self._weapon.sprite
        width = self._sprite.current().size.x
        if self._direction.x == 1:
            sprite.flip = False
            sprite.shift = Vec(width // 8, sprite.shift.y)
            sprite.angle = 20
        elif self._direction.x == -1:
            sprite.flip = True
            sprite.shift = Vec(-(width // 2), sprite.shift.y)
            sprite.angle = -20