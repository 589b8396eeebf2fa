"""Wall-clock timer measuring time between calls."""

from __future__ import annotations

from time import perf_counter


class Timer:
    """Reports seconds elapsed since it was created or last queried."""

    def __init__(self) -> None:
        self._previous = perf_counter()

    def elapsed(self) -> float:
        current = perf_counter()
        difference = current - self._previous
        self._previous = current
        return difference