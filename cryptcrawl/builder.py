"""Random dungeon layout generation: rooms, maze corridors and connectors."""

from __future__ import annotations

import sys
from typing import TextIO

from .grid import Grid
from .randomness import probability, randint, random_choice, shuffle
from .room import Room, overlaps
from .vec import DIRECTIONS, Vec, distance

Connector = tuple[Vec, int, int]


def format_layout(layout: Grid) -> str:
    """Render a layout as text inside a box; -1 cells show as blanks."""
    border = "+" + "-" * layout.width + "+\n"
    rows = [
        "|"
        + "".join(
            " " if layout[x, y] == -1 else str(layout[x, y]) for x in range(layout.width)
        )
        + "|\n"
        for y in range(layout.height)
    ]
    return border + "".join(rows) + border


def print_layout(layout: Grid, file: TextIO | None = None) -> None:
    """Write the boxed layout text to ``file`` (standard output by default)."""
    print(format_layout(layout), end="", file=sys.stdout if file is None else file)


class Builder:
    """Generates a layout grid where 0 is wall, 1 floor, 2 door, -1 solid rock."""

    def __init__(self, room_placement_attempts: int) -> None:
        self.room_placement_attempts = room_placement_attempts
        self.rooms: list[Room] = []
        self._id = 0

    def generate(self, width: int, height: int) -> tuple[Grid, list[Room]]:
        if width % 2 == 0 or height % 2 == 0:
            raise ValueError(f"width and height must be odd numbers: ({width}, {height})")
        if width < 19 or height < 19:
            raise ValueError(f"width and height must be at least 19: ({width}, {height})")

        layout: Grid = Grid(width, height, 0)
        self._id = 1
        self.rooms = []

        self._add_rooms(layout)
        self._create_corridors(layout)

        connectors = self._reduce_connectors(self._find_all_connectors(layout))

        # make all walkable tiles = 1
        for y in range(1, layout.height):
            for x in range(1, layout.width):
                if layout[x, y] != 0:
                    layout[x, y] = 1

        # make all connectors = 2
        for position in connectors:
            layout[position] = 2

        self._remove_deadends(layout)
        self._mark_surrounded_walls(layout)
        return layout, list(self.rooms)

    def test(self, width: int, height: int) -> tuple[Grid, list[Room]]:
        """A single open room bordered by walls, with one wall at (3, 2)."""
        layout: Grid = Grid(width, height, 0)
        for y in range(height):
            for x in range(width):
                on_border = y in (0, height - 1) or x in (0, width - 1)
                layout[x, y] = 0 if on_border else 1
        layout[3, 2] = 0
        self.rooms.append(Room(Vec(1, 1), Vec(width - 2, height - 2)))
        return layout, list(self.rooms)

    # rooms

    def _add_rooms(self, layout: Grid) -> None:
        for _ in range(self.room_placement_attempts):
            new_room = self._generate_room(layout)
            if (
                new_room.position.x >= layout.width - 2
                or new_room.position.y >= layout.height - 2
            ):
                continue
            if any(overlaps(new_room, room) for room in self.rooms):
                continue
            self.rooms.append(new_room)
            self._imprint_room(layout, new_room, self._id)
            self._id += 1

    def _generate_room(self, layout: Grid) -> Room:
        size = Vec(1, 1) * (1 + 2 * randint(1, 3))
        size_variation = 2 * randint(0, 1 + size.x // 2)
        if probability(50):
            size = Vec(size.x + size_variation, size.y)
        else:
            size = Vec(size.x, size.y + size_variation)
        x = randint(0, layout.width - 2 - size.x) // 2 * 2 + 1
        y = randint(0, layout.height - 2 - size.y) // 2 * 2 + 1
        return Room(Vec(x, y), size)

    @staticmethod
    def _imprint_room(layout: Grid, room: Room, region: int) -> None:
        for y in range(room.size.y):
            for x in range(room.size.x):
                layout[x + room.position.x, y + room.position.y] = region

    # corridors

    def _create_corridors(self, layout: Grid) -> None:
        directions = list(DIRECTIONS)
        for y in range(1, layout.height, 2):
            for x in range(1, layout.width, 2):
                if layout[x, y] == 0:
                    shuffle(directions)
                    self._carve_corridor(layout, Vec(x, y), directions)
                    self._id += 1

    def _carve_corridor(self, layout: Grid, start: Vec, directions: list[Vec]) -> None:
        """Depth-first maze carving; each step keeps its own direction order."""
        if layout[start] != 0:
            return
        stack = []

        def enter(position: Vec, inherited: list[Vec]) -> None:
            order = list(inherited)
            layout[position] = self._id
            ahead = position + order[0] * 2
            if not layout.within_bounds(ahead) or layout[ahead] != 0 or probability(10):
                shuffle(order)
            stack.append((position, order, iter(order)))

        enter(start, directions)
        while stack:
            position, order, remaining = stack[-1]
            for direction in remaining:
                ahead = position + direction * 2
                if layout.within_bounds(ahead) and layout[ahead] == 0:
                    layout[position + direction] = self._id
                    enter(ahead, order)
                    break
            else:
                stack.pop()

    # connectors

    @staticmethod
    def _maybe_connector(layout: Grid, position: Vec) -> Connector | None:
        if layout[position] != 0:
            return None
        regions = {
            layout[position + direction]
            for direction in DIRECTIONS
            if layout[position + direction] > 0
        }
        if len(regions) != 2:
            return None
        first, second = sorted(regions)
        return position, first, second

    def _find_all_connectors(self, layout: Grid) -> list[Connector]:
        connectors = []
        for y in range(1, layout.height - 1):
            for x in range(1, layout.width - 1):
                connector = self._maybe_connector(layout, Vec(x, y))
                if connector is not None:
                    connectors.append(connector)
        return connectors

    @staticmethod
    def _reduce_connectors(connectors: list[Connector]) -> list[Vec]:
        """Keep enough connectors to join every region, plus a few extras."""
        if not connectors:
            return []

        graph: dict[int, dict[int, set[Vec]]] = {}
        for position, region_a, region_b in connectors:
            graph.setdefault(region_a, {}).setdefault(region_b, set()).add(position)
            graph.setdefault(region_b, {}).setdefault(region_a, set()).add(position)

        reduced: list[Vec] = []
        main, _ = random_choice(graph)

        while len(graph) > 1:
            main_links = graph[main]
            other, linking = random_choice(main_links)
            positions = set(linking)

            position = random_choice(positions)
            reduced.append(position)
            main_links[other].discard(position)

            if positions and probability(25):
                additional = random_choice(positions)
                if distance(position, additional) > 1:
                    reduced.append(additional)

            other_links = graph.pop(other)
            other_links.pop(main, None)
            main_links.pop(other, None)
            for region, shared in other_links.items():
                main_links.setdefault(region, shared)
            for links in graph.values():
                links.pop(other, None)

        return reduced

    # cleanup

    @staticmethod
    def _remove_deadends(layout: Grid) -> None:
        removed = True
        while removed:
            removed = False
            for y in range(1, layout.height - 1):
                for x in range(1, layout.width - 1):
                    position = Vec(x, y)
                    if layout[position] == 0:
                        continue
                    walls = sum(
                        1 for direction in DIRECTIONS if layout[position + direction] == 0
                    )
                    if walls >= 3:
                        layout[position] = 0
                        removed = True

    @staticmethod
    def _mark_surrounded_walls(layout: Grid) -> None:
        surrounded = [
            Vec(x, y)
            for y in range(layout.height)
            for x in range(layout.width)
            if sum(
                layout[x + i, y + j]
                for j in (-1, 0, 1)
                for i in (-1, 0, 1)
                if layout.within_bounds((x + i, y + j))
            )
            == 0
        ]
        for position in surrounded:
            layout[position] = -1