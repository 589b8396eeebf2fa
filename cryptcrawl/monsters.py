"""Monsters and how they hunt the hero."""

from __future__ import annotations

from .action import Action
from .actions import Move, Rest, Wander
from .randomness import probability
from .weapons import Mace

ORC_HEALTH = 10
ORC_MACE_DAMAGE = 3
WANDER_PERCENTAGE = 66


def make_orc_masked(monster) -> None:
    """Turn ``monster`` into a mace-wielding orc."""
    monster.set_sprite("skeleton")
    monster.set_max_health(ORC_HEALTH)
    monster.behavior = behavior
    monster.set_weapon(Mace(ORC_MACE_DAMAGE))


def behavior(engine, entity) -> Action:
    """Chase the hero while in sight; otherwise wander or rest."""
    if engine.hero is not None and entity.is_visible():
        path = engine.dungeon.calculate_path(entity.position, engine.hero.position)
        if len(path) > 1:
            return Move(path[1] - path[0])
    if probability(WANDER_PERCENTAGE):
        return Wander()
    return Rest()