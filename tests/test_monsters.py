from types import SimpleNamespace

import pytest

from cryptcrawl import monsters
from cryptcrawl.actions import Move, Rest, Wander
from cryptcrawl.dungeon import Dungeon
from cryptcrawl.entity import Entity, Team
from cryptcrawl.grid import Grid
from cryptcrawl.randomness import seed
from cryptcrawl.sprite import AnimatedSprite, Sprite
from cryptcrawl.tile import Tile, TileType
from cryptcrawl.vec import Vec
from cryptcrawl.weapons import Mace


class _Graphics:
    def __init__(self):
        self.requested = []

    def get_sprite(self, name):
        self.requested.append(name)
        return Sprite(size=Vec(16, 16))

    def get_animated_sprite(self, name, ticks_per_frame=1, random_start=False, shuffle_order=False):
        self.requested.append(name)
        return AnimatedSprite([Sprite(size=Vec(16, 16))], ticks_per_frame)


def _open_dungeon():
    tiles = Grid(6, 6, factory=Tile)
    for y in range(6):
        for x in range(6):
            tiles[x, y].type = TileType.FLOOR
            tiles[x, y].walkable = True
    return Dungeon(tiles)


@pytest.fixture
def engine():
    return SimpleNamespace(dungeon=_open_dungeon(), graphics=_Graphics(), hero=None)


def test_make_orc_masked(engine):
    monster = Entity(engine, Vec(1, 1), Team.MONSTER)
    monsters.make_orc_masked(monster)
    assert monster.health == 10
    assert monster.max_health == 10
    assert isinstance(monster.weapon, Mace)
    assert monster.weapon.damage == 3
    assert monster.behavior is monsters.behavior
    assert "skeleton" in engine.graphics.requested


def test_visible_monster_chases_hero_horizontally(engine):
    engine.hero = Entity(engine, Vec(4, 2), Team.HERO)
    monster = Entity(engine, Vec(1, 2), Team.MONSTER)
    engine.dungeon.tile(Vec(1, 2)).visible = True
    action = monsters.behavior(engine, monster)
    assert isinstance(action, Move)
    assert action.direction == Vec(1, 0)


def test_visible_monster_chases_hero_vertically(engine):
    engine.hero = Entity(engine, Vec(1, 4), Team.HERO)
    monster = Entity(engine, Vec(1, 1), Team.MONSTER)
    engine.dungeon.tile(Vec(1, 1)).visible = True
    action = monsters.behavior(engine, monster)
    assert isinstance(action, Move)
    assert action.direction == Vec(0, 1)


def test_hidden_monster_wanders_or_rests(engine):
    engine.hero = Entity(engine, Vec(4, 2), Team.HERO)
    monster = Entity(engine, Vec(1, 2), Team.MONSTER)
    seed(7)
    kinds = {type(monsters.behavior(engine, monster)) for _ in range(200)}
    assert kinds == {Wander, Rest}


def test_without_hero_monster_wanders_or_rests(engine):
    monster = Entity(engine, Vec(1, 2), Team.MONSTER)
    engine.dungeon.tile(Vec(1, 2)).visible = True
    seed(3)
    kinds = {type(monsters.behavior(engine, monster)) for _ in range(200)}
    assert kinds == {Wander, Rest}