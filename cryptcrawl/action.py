"""Actions that entities perform on their turn."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Result:
    """Outcome of an action; ``next_action`` allows chaining."""

    succeeded: bool = False
    next_action: Action | None = None


class Action(ABC):
    """Base class for everything an entity can do."""

    @abstractmethod
    def perform(self, engine, entity) -> Result:
        """Carry out the action for ``entity``."""


def success() -> Result:
    """The entity completed the action and its turn is over."""
    return Result(True, None)


def failure() -> Result:
    """The action cannot be performed; the entity gets another turn."""
    return Result(False, None)


def alternative(action: Action) -> Result:
    """Substitute the current action with ``action``."""
    return Result(False, action)