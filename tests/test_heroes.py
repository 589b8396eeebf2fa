import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from types import SimpleNamespace

import pytest

from cryptcrawl import heroes
from cryptcrawl.actions import CastLightning, CloseDoor, Move, Projectile, Rest
from cryptcrawl.controls import Input
from cryptcrawl.dungeon import Dungeon
from cryptcrawl.entity import Entity, Team
from cryptcrawl.grid import Grid
from cryptcrawl.sprite import AnimatedSprite, Sprite
from cryptcrawl.tile import Tile
from cryptcrawl.vec import Vec
from cryptcrawl.weapons import Staff


class _Graphics:
    def __init__(self):
        self.requested = []

    def get_sprite(self, name):
        self.requested.append(name)
        return Sprite(size=Vec(16, 16))

    def get_animated_sprite(self, name, ticks_per_frame=1, random_start=False, shuffle_order=False):
        self.requested.append(name)
        return AnimatedSprite([Sprite(size=Vec(16, 16))], ticks_per_frame)


@pytest.fixture
def engine():
    dungeon = Dungeon(Grid(5, 5, factory=Tile))
    return SimpleNamespace(dungeon=dungeon, graphics=_Graphics(), input=Input())


@pytest.fixture
def wizard(engine):
    entity = Entity(engine, Vec(2, 2), Team.HERO)
    heroes.make_wizard(entity)
    return entity


def test_make_wizard_sets_health(wizard):
    assert wizard.health == 20
    assert wizard.max_health == 20


def test_make_wizard_gives_staff(wizard):
    assert isinstance(wizard.weapon, Staff)
    assert wizard.weapon.damage == 5
    assert wizard.weapon.name == "staff_red"


def test_make_wizard_requests_sprites(engine, wizard):
    assert "wizard" in engine.graphics.requested
    assert "staff_red" in engine.graphics.requested


def test_make_wizard_installs_behavior(wizard):
    assert wizard.behavior is heroes.behavior


@pytest.mark.parametrize(
    "key, kind",
    [("R", Rest), ("C", CloseDoor), ("L", CastLightning), ("Q", Projectile)],
)
def test_key_selects_action(engine, wizard, key, kind):
    engine.input.set_last_keypress(key)
    action = heroes.behavior(engine, wizard)
    assert type(action) is kind
    assert heroes.behavior(engine, wizard) is None


@pytest.mark.parametrize(
    "key, direction",
    [("W", Vec(0, 1)), ("A", Vec(-1, 0)), ("S", Vec(0, -1)), ("D", Vec(1, 0))],
)
def test_movement_keys(engine, wizard, key, direction):
    engine.input.set_last_keypress(key)
    action = heroes.behavior(engine, wizard)
    assert isinstance(action, Move)
    assert action.direction == direction


def test_unknown_key_gives_no_action(engine, wizard):
    engine.input.set_last_keypress("X")
    assert heroes.behavior(engine, wizard) is None


def test_keypress_is_consumed(engine, wizard):
    engine.input.set_last_keypress("R")
    heroes.behavior(engine, wizard)
    assert heroes.behavior(engine, wizard) is None


def test_take_turn_uses_behavior(engine, wizard):
    engine.input.set_last_keypress("D")
    action = wizard.take_turn()
    assert isinstance(action, Move)
    assert action.direction == Vec(1, 0)