import pytest

from cryptcrawl import randomness
from cryptcrawl.builder import Builder
from cryptcrawl.decorator import Decorator
from cryptcrawl.grid import Grid
from cryptcrawl.sprite import AnimatedSprite, Sprite
from cryptcrawl.tile import TileType
from cryptcrawl.vec import Vec

FLOOR_NAMES = {"floor_cracked_1", "floor_sunken", "floor_cracked_2", "floor_nice"}


class FakeGraphics:
    def __init__(self):
        self.names = []

    def get_sprite(self, name):
        self.names.append(name)
        return Sprite(texture_id=len(self.names) - 1)

    def get_animated_sprite(self, name, ticks_per_frame=1, random_start=False, shuffle_order=False):
        return AnimatedSprite([self.get_sprite(name)], ticks_per_frame)

    def name_of(self, sprite):
        return self.names[sprite.texture_id]


def make_layout(rows):
    layout = Grid(len(rows[0]), len(rows), 0)
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            layout[x, y] = value
    return layout


SEPARATED = [
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 1, 1, 1, 1, 1, 1, 0],
    [0, 1, 1, 1, 1, 1, 1, 1, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 1, 1, 1, 1, 1, 1, 0],
    [0, 1, 1, 1, 1, 1, 1, 1, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
]


def test_tile_types_follow_layout():
    layout = make_layout([[-1, 0, 0], [0, 1, 0], [0, 0, 5]])
    decorator = Decorator(FakeGraphics(), layout, [])
    assert decorator.tiles[0, 0].type is TileType.NONE
    assert decorator.tiles[1, 0].type is TileType.WALL
    assert decorator.tiles[1, 1].type is TileType.FLOOR
    assert decorator.tiles[1, 1].walkable
    assert not decorator.tiles[1, 0].walkable
    assert decorator.tiles[2, 2].type is TileType.NONE


@pytest.mark.parametrize(
    "rows, door, horizontal",
    [
        ([[0, 0, 0, 0, 0], [0, 1, 2, 1, 0], [0, 0, 0, 0, 0]], Vec(2, 1), False),
        ([[0, 0, 0], [0, 1, 0], [0, 2, 0], [0, 1, 0], [0, 0, 0]], Vec(1, 2), True),
    ],
)
def test_doors_are_created_closed(rows, door, horizontal):
    graphics = FakeGraphics()
    dungeon = Decorator(graphics, make_layout(rows), []).create_dungeon()
    tile = dungeon.tile(door)
    assert tile.has_door()
    assert tile.door.is_horizontal is horizontal
    assert not tile.door.is_open()
    assert not tile.walkable
    assert graphics.name_of(tile.sprite) in FLOOR_NAMES


def test_wall_and_floor_sprites():
    graphics = FakeGraphics()
    rows = [[0, 0, 0, 0, 0], [0, 1, 2, 1, 0], [0, 0, 0, 0, 0]]
    dungeon = Decorator(graphics, make_layout(rows), []).create_dungeon()
    assert graphics.name_of(dungeon.tile(Vec(0, 0)).sprite) == "wall_right_up"
    assert graphics.name_of(dungeon.tile(Vec(1, 1)).sprite) in FLOOR_NAMES
    assert all(not dungeon.tile(Vec(x, y)).visible for y in range(3) for x in range(5))
    assert dungeon.doodads == {}


def test_lone_wall_becomes_pillar_sprite():
    graphics = FakeGraphics()
    rows = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    dungeon = Decorator(graphics, make_layout(rows), []).create_dungeon()
    assert graphics.name_of(dungeon.tile(Vec(1, 1)).sprite) == "wall_pillar"


def test_pillars_placed_in_large_rooms():
    randomness.seed(3)
    layout, rooms = Builder(0).test(13, 11)
    graphics = FakeGraphics()
    dungeon = Decorator(graphics, layout, rooms).create_dungeon()
    room = rooms[0]
    pillars = [
        Vec(x, y)
        for y in range(room.position.y, room.position.y + room.size.y)
        for x in range(room.position.x, room.position.x + room.size.x)
        if layout[x, y] == 1 and dungeon.tile(Vec(x, y)).is_wall()
    ]
    assert pillars
    for position in pillars:
        tile = dungeon.tile(position)
        assert not tile.walkable
        assert graphics.name_of(tile.sprite) == "wall_pillar"


def test_no_pillars_in_small_rooms():
    layout, rooms = Builder(0).test(7, 7)
    dungeon = Decorator(FakeGraphics(), layout, rooms).create_dungeon()
    converted = [
        (x, y)
        for y in range(7)
        for x in range(7)
        if layout[x, y] == 1 and dungeon.tile(Vec(x, y)).is_wall()
    ]
    assert converted == []


def test_torches_hang_on_walls_above_floor():
    layout = make_layout(SEPARATED)
    found_torch = False
    for value in range(20):
        randomness.seed(value)
        graphics = FakeGraphics()
        dungeon = Decorator(graphics, layout, []).create_dungeon()
        for position, doodad in dungeon.doodads.items():
            if graphics.name_of(doodad.current()) == "torch":
                found_torch = True
                assert layout[position] == 0
                assert layout[position.x, position.y - 1] == 1
    assert found_torch


def test_destroyed_wall_opens_passage():
    layout = make_layout(SEPARATED)
    for value in range(30):
        randomness.seed(value)
        graphics = FakeGraphics()
        dungeon = Decorator(graphics, layout, []).create_dungeon()
        if dungeon.tile(Vec(2, 3)).walkable:
            break
    else:
        pytest.fail("no destroyed wall was placed")

    center = dungeon.tile(Vec(2, 3))
    assert center.type is TileType.FLOOR
    assert graphics.name_of(center.sprite) == "floor_broken_center_center"
    assert graphics.name_of(dungeon.tile(Vec(1, 2)).sprite) == "floor_broken_bottom_left"
    for position, suffix in [(Vec(1, 3), "left"), (Vec(2, 3), "center"), (Vec(3, 3), "right")]:
        assert graphics.name_of(dungeon.doodads[position].current()) == "wall_destroyed_" + suffix
    assert dungeon.tile(Vec(1, 3)).is_wall()