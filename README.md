# cryptcrawl

Building blocks for a turn-based dungeon crawler: randomly generated crypts
of rooms, winding corridors and doors, symmetric shadowcasting field of view
with fog of war, breadth-first pathfinding, an energy-based turn queue, timed
world events for combat and spells, and pygame-based drawing of sprite
sheets.

## Installation

```
pip install .
```

Drawing (`cryptcrawl.graphics`) and input (`cryptcrawl.controls`) use
pygame and need a display. Everything else runs without one.

## What is here

| module | contents |
| --- | --- |
| `vec` | `Vec`, an immutable integer pair with `+`, `-`, `*`, `//` (truncating); `distance`; `DIRECTIONS` (right, up, left, down) |
| `grid` | `Grid`, a bounds-checked 2-D grid indexed as `grid[x, y]` or `grid[vec]` |
| `randomness` | `seed`, `randint`, `probability`, `random_choice`, `shuffle` on one shared generator |
| `timer` | `Timer.elapsed()`, seconds since the last call |
| `room` | `Room` and `overlaps` |
| `builder` | `Builder.generate(width, height)` returns a layout grid (0 wall, 1 floor, 2 door, -1 solid rock) and its rooms; `format_layout`, `print_layout` |
| `tile`, `door` | `Tile`, `TileType`, `Door` |
| `fov` | symmetric shadowcasting: `FieldOfView`, `Quadrant`, `Row`, `Cardinal` |
| `pathfinding` | `breadth_first(dungeon, start, goal)` |
| `fog` | `Fog`, tracking visible and remembered tiles and their darkness |
| `dungeon` | `Dungeon`: tiles, rooms, doodads, fog, `calculate_fov`, `calculate_path`, `random_open_room_tile` |
| `decorator` | `Decorator(graphics, layout, rooms).create_dungeon()` picks wall, floor and door sprites and places torches, pillars and broken walls |
| `sprite` | `Sprite`, `AnimatedSprite` |
| `graphics` | `Graphics` window; `read_spritesheet` parses a sheet description |
| `controls` | `Input`: window events as key names, last keypress, last left click |
| `camera` | `Camera`: world-to-screen mapping, zoom 1 to 8, rendering of dungeon, entities, fog, overlays and a health bar |
| `action`, `actions` | `Action`, `Result`, `success`, `failure`, `alternative`; `Move`, `Attack`, `OpenDoor`, `CloseDoor`, `Rest`, `Wander`, `Projectile`, `CastLightning` |
| `event`, `effects` | `Event`, `Events`; `Hit`, `Die`, `AudioEvent`, `Fire`, `Fireball`, `Lightning`, `Swing`, `Thrust`, `UpdateFOV` |
| `weapon`, `weapons` | `Weapon`; `Bite`, `Bow`, `Mace`, `Staff` |
| `entity`, `entities` | `Entity`, `Team`; `Entities`, the round-robin turn queue (a turn costs 8 energy) |
| `heroes`, `monsters` | `make_wizard` and `make_orc_masked`, with their `behavior` functions |
| `settings` | `Settings`, read from a `key value` file |

### Generating a layout

```python
from cryptcrawl.builder import Builder, print_layout

layout, rooms = Builder(room_placement_attempts=200).generate(41, 31)
print_layout(layout)
```

Width and height must be odd and at least 19; anything else raises
`ValueError`. Call `cryptcrawl.randomness.seed(...)` first for a
reproducible layout.

`Decorator` turns a layout into a `Dungeon`. It takes any `graphics`
object with `get_sprite(name)` and
`get_animated_sprite(name, ticks_per_frame, random_start, shuffle_order)`,
so a `Graphics` window is not required.

### Settings file

`Settings(path)` reads whitespace-separated `key value` pairs. These keys
are all required; a missing one raises `ValueError`, as does a
non-integer value for a numeric key:

| key | meaning |
| --- | --- |
| `title` | window title |
| `screen_width`, `screen_height` | window size in pixels |
| `tilesize` | pixels per tile |
| `zoom` | camera zoom |
| `map_width`, `map_height` | dungeon size in tiles |
| `room_placement_attempts` | how many times to try placing a room |
| `tiles`, `heros`, `monsters`, `weapons`, `items`, `effects` | sprite sheet description files |
| `sounds` | sound list file |

A sprite sheet description starts with an image file name, relative to the
description file's directory, followed by entries of the form
`name x y width height [frames]`.

### Hero keys

`heroes.behavior` maps the last key taken from `engine.input` to an action:

| key | action |
| --- | --- |
| `W` `A` `S` `D` | move up, left, down, right; moving into a closed door opens it, moving into an entity attacks it |
| `R` | rest and recover one point of health |
| `C` | close neighbouring open doors |
| `Q` | fire along the facing direction |
| `L` | call lightning onto a random tile nearby |

Monsters chase the hero along a path while their tile is visible, and
otherwise wander (66%) or rest.

### The engine object

Actions, events, weapons and behaviours receive an `engine` argument and
use these attributes of it: `dungeon` (a `Dungeon`), `events` (an
`Events`), `graphics`, `camera`, `input` (with `take_last_keypress()`),
`audio` (with `play_sound(name)`), and `hero` (an `Entity` or `None`).
`Entity(engine, position, team)` places itself on `engine.dungeon`.

## What this package does not do

There is no game engine class, main loop or command to start a game, and no
sound playback. To play, supply an object with the attributes above
(including an `audio` object that plays named sounds), then each step call
`Entities.take_turn(engine)` while `engine.events` is empty,
`Events.execute(engine)`, and the `Camera` render methods.

## Tests

```
pip install .[test]
pytest
```