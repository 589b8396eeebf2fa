"""The weapons heroes and monsters carry."""

from __future__ import annotations

from .effects import AudioEvent, Fireball, Hit, Lightning, Swing, Thrust
from .weapon import Weapon


class Bite(Weapon):
    """A natural attack with no sprite and no effect."""

    def __init__(self, damage: int) -> None:
        super().__init__("none", damage)

    def use(self, engine, attacker, defender) -> None:
        pass


class Bow(Weapon):
    """Draws the bow, then calls down lightning on the target."""

    def __init__(self, damage: int) -> None:
        super().__init__("bow", damage)

    def use(self, engine, attacker, defender) -> None:
        direction = defender.position - attacker.position
        thrust = engine.events.create_event(Thrust, self.sprite, direction)
        thrust.add_next(Lightning(defender.position))


class Mace(Weapon):
    """Swings at the target and hits it with a clang."""

    def __init__(self, damage: int) -> None:
        super().__init__("mace", damage)

    def use(self, engine, attacker, defender) -> None:
        direction = defender.position - attacker.position
        swing = engine.events.create_event(Swing, self.sprite, direction)
        swing.add_next(Hit(defender, self.damage))
        engine.events.create_event(AudioEvent, "metal-clang")


class Staff(Weapon):
    """Pokes adjacent targets; shoots a fireball at distant ones."""

    def __init__(self, damage: int) -> None:
        super().__init__("staff_red", damage)

    def use(self, engine, attacker, defender) -> None:
        distance = defender.position - attacker.position
        if abs(distance.x) == 1 or abs(distance.y) == 1:
            first = engine.events.create_event(Thrust, self.sprite, distance)
        else:
            first = engine.events.create_event(
                Fireball,
                self.sprite,
                attacker.direction,
                self.damage,
                attacker.position,
                defender.position,
            )
        first.add_next(Hit(defender, self.damage))