"""The round-robin queue of entities taking turns."""

from __future__ import annotations

from collections import deque
from typing import Iterator

COST_OF_TURN = 8  # energy needed for taking a turn


class Entities:
    """Manages entities and when each may act."""

    def __init__(self) -> None:
        self._entities: deque = deque()

    def add(self, entity) -> None:
        self._entities.append(entity)

    def update(self) -> None:
        for entity in self._entities:
            entity.update()

    def take_turn(self, engine) -> bool:
        """Let the front entity act; False when it must be waited for."""
        self._remove_dead_entities()
        if not self._entities:
            return False

        entity = self._entities[0]
        if entity.energy < COST_OF_TURN:
            self.advance()
            return True

        action = entity.take_turn()
        if action is None:
            return False

        while True:
            result = action.perform(engine, entity)
            if result.succeeded:
                entity.energy %= COST_OF_TURN
                self.advance()
                return True
            if result.next_action is None:
                # failed without alternative: the same entity tries again
                return True
            action = result.next_action

    def advance(self) -> None:
        """Move the front entity to the back and give it energy."""
        if not self._entities:
            return
        entity = self._entities.popleft()
        self._entities.append(entity)
        entity.energy += entity.speed

    def __iter__(self) -> Iterator:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def _remove_dead_entities(self) -> None:
        self._entities = deque(entity for entity in self._entities if entity.alive)