"""Base weapon wielded by entities."""

from __future__ import annotations

from .sprite import Sprite


class Weapon:
    """A named weapon; ``name`` matches a sprite in the weapons sheet."""

    def __init__(self, name: str = "", damage: int = 0) -> None:
        self.name = name
        self.damage = damage
        self.sprite = Sprite()

    def use(self, engine, attacker, defender) -> None:
        """Deal the weapon's plain damage; a weapon without damage has no effect."""
        if self.damage <= 0:
            return
        from .effects import Hit

        engine.events.create_event(Hit, defender, self.damage)