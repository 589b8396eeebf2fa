"""Playable heroes and their keyboard-driven behavior."""

from __future__ import annotations

from functools import partial
from typing import Callable

from .action import Action
from .actions import CastLightning, CloseDoor, Move, Projectile, Rest
from .vec import Vec
from .weapons import Staff

WIZARD_HEALTH = 20
WIZARD_STAFF_DAMAGE = 5

_KEY_ACTIONS: dict[str, Callable[[], Action]] = {
    "R": Rest,
    "C": CloseDoor,
    "W": partial(Move, Vec(0, 1)),
    "A": partial(Move, Vec(-1, 0)),
    "S": partial(Move, Vec(0, -1)),
    "D": partial(Move, Vec(1, 0)),
    "L": CastLightning,
    "Q": Projectile,
}


def make_wizard(entity) -> None:
    """Turn ``entity`` into a staff-wielding wizard controlled by the keyboard."""
    entity.set_sprite("wizard")
    entity.set_max_health(WIZARD_HEALTH)
    entity.behavior = behavior
    entity.set_weapon(Staff(WIZARD_STAFF_DAMAGE))


def behavior(engine, entity) -> Action | None:
    """The action bound to the last key pressed, or None to wait for input."""
    factory = _KEY_ACTIONS.get(engine.input.take_last_keypress())
    return factory() if factory is not None else None