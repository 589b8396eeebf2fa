"""Breadth-first path search over dungeon tiles."""

from __future__ import annotations

from collections import deque

from .vec import Vec


def breadth_first(dungeon, start: Vec, goal: Vec) -> list[Vec]:
    """Shortest path from start to goal around walls, both ends included.

    Returns an empty list when the goal cannot be reached.
    """
    frontier = deque([start])
    came_from: dict[Vec, Vec] = {start: start}

    while frontier:
        current = frontier.popleft()
        if current == goal:
            break
        for neighbor in dungeon.neighbors(current):
            if neighbor not in came_from and not dungeon.tile(neighbor).is_wall():
                frontier.append(neighbor)
                came_from[neighbor] = current

    if goal not in came_from:
        return []

    path = [goal]
    current = goal
    while current != start:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path