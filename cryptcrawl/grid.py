"""A fixed-size two-dimensional grid with bounds checking."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class Grid(Generic[T]):
    """Values laid out in rows; index with ``grid[x, y]`` or ``grid[vec]``.

    Every cell shares ``initval`` unless ``factory`` is given, in which case
    each cell gets its own freshly created value.
    """

    def __init__(
        self,
        width: int,
        height: int,
        initval: Any = 0,
        *,
        factory: Callable[[], T] | None = None,
    ) -> None:
        if width <= 0:
            raise ValueError(f"Value width = {width} must be greater than 0")
        if height <= 0:
            raise ValueError(f"Value height = {height} must be greater than 0")
        self.width = width
        self.height = height
        count = width * height
        if factory is not None:
            self._values: list[T] = [factory() for _ in range(count)]
        else:
            self._values = [initval] * count

    def __getitem__(self, key) -> T:
        x, y = key
        self.check_bounds(x, y)
        return self._values[self.width * y + x]

    def __setitem__(self, key, value: T) -> None:
        x, y = key
        self.check_bounds(x, y)
        self._values[self.width * y + x] = value

    def within_bounds(self, position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def check_bounds(self, x: int, y: int) -> None:
        if not self.within_bounds((x, y)):
            raise IndexError(
                f"({x}, {y}) is out of bounds for an array with size "
                f"({self.width}, {self.height})"
            )

    def __str__(self) -> str:
        return "".join(
            "".join(str(self[x, y]) for x in range(self.width)) + "\n"
            for y in range(self.height)
        )