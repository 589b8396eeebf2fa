"""Actions that heroes and monsters take on their turns."""

from __future__ import annotations

from .action import Action, Result, alternative, failure, success
from .effects import AudioEvent, Fireball, Lightning, UpdateFOV
from .randomness import randint, shuffle
from .vec import Vec

_LIGHTNING_RANGE = 5
_PROJECTILE_DAMAGE = 4


class Attack(Action):
    """Use the attacker's weapon on a defender."""

    def __init__(self, defender) -> None:
        self.defender = defender

    def perform(self, engine, entity) -> Result:
        entity.weapon.use(engine, entity, self.defender)
        return success()


class Rest(Action):
    """Recover one point of health."""

    def perform(self, engine, entity) -> Result:
        entity.take_damage(-1)
        return success()


class OpenDoor(Action):
    """Open a closed door."""

    def __init__(self, door) -> None:
        self.door = door

    def perform(self, engine, entity) -> Result:
        if self.door.is_open():
            return failure()
        self.door.open()
        engine.events.create_event(UpdateFOV)
        engine.events.create_event(AudioEvent, "door-open")
        return success()


class CloseDoor(Action):
    """Close every open door next to the entity."""

    def perform(self, engine, entity) -> Result:
        closed_any = False
        for position in engine.dungeon.neighbors(entity.position):
            tile = engine.dungeon.tile(position)
            if tile.has_door() and tile.door.is_open():
                tile.door.close()
                closed_any = True
        if not closed_any:
            return failure()
        engine.events.create_event(UpdateFOV)
        engine.events.create_event(AudioEvent, "door-close")
        return success()


class Move(Action):
    """Step in a direction, attacking or opening doors on the way."""

    def __init__(self, direction: Vec) -> None:
        self.direction = direction

    def perform(self, engine, entity) -> Result:
        new_position = entity.position + self.direction
        tile = engine.dungeon.tile(new_position)
        if tile.is_wall():
            return failure()
        if tile.has_entity():
            return alternative(Attack(tile.entity))
        if tile.has_door() and not tile.door.is_open():
            return alternative(OpenDoor(tile.door))
        entity.move_to(new_position)
        entity.change_direction(self.direction)
        return success()


class CastLightning(Action):
    """Strike a random in-bounds tile near the caster with lightning."""

    def perform(self, engine, entity) -> Result:
        px, py = entity.position
        while True:
            target = Vec(
                randint(px - _LIGHTNING_RANGE, px + _LIGHTNING_RANGE),
                randint(py - _LIGHTNING_RANGE, py + _LIGHTNING_RANGE),
            )
            if engine.dungeon.tiles.within_bounds(target):
                break
        engine.events.create_event(Lightning, target)
        return success()


class Projectile(Action):
    """Fire along the facing direction until something is in the way."""

    def perform(self, engine, entity) -> Result:
        direction = entity.direction
        tiles = engine.dungeon.tiles
        position = entity.position + direction
        tile = tiles[position]
        while tile.entity is None and not tile.is_wall():
            if tile.has_door() and not tile.door.is_open():
                break
            position = position + direction
            if not tiles.within_bounds(position):
                break
            tile = tiles[position]

        if tile.has_entity():
            entity.weapon.use(engine, entity, tile.entity)
        else:
            sprite = engine.graphics.get_sprite("staff_red")
            engine.events.create_event(
                Fireball, sprite, direction, _PROJECTILE_DAMAGE, entity.position, position
            )
        return success()


class Wander(Action):
    """Move to a random free neighbouring tile, or rest if there is none."""

    def perform(self, engine, entity) -> Result:
        position = entity.position
        neighbors = engine.dungeon.neighbors(position)
        shuffle(neighbors)
        for neighbor in neighbors:
            tile = engine.dungeon.tile(neighbor)
            if not tile.is_wall() and not tile.has_entity():
                return alternative(Move(neighbor - position))
        return alternative(Rest())