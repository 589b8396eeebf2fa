"""Shared random number helpers for dungeon generation and gameplay."""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any, MutableSequence

_rng = random.Random()


def seed(value) -> None:
    """Reseed the shared generator, making later draws reproducible."""
    _rng.seed(value)


def randint(low: int, high: int) -> int:
    """Uniform integer in [low, high]; low must be strictly less than high."""
    if not low < high:
        raise ValueError(f"min must be less than max: randint({low}, {high})")
    return _rng.randint(int(low), int(high))


def probability(percentage: int) -> bool:
    """Return True with the given percent chance."""
    if percentage < 0:
        raise ValueError(f"percentage must be positive: {percentage}")
    return randint(0, 99) < percentage


def random_choice(container) -> Any:
    """Pick a random element; mappings yield a (key, value) pair."""
    items = list(container.items()) if isinstance(container, Mapping) else list(container)
    if not items:
        raise IndexError("Container is empty")
    if len(items) == 1:
        return items[0]
    return items[randint(0, len(items) - 1)]


def shuffle(items: MutableSequence) -> None:
    """Shuffle a sequence in place."""
    _rng.shuffle(items)