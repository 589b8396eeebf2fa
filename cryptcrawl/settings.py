"""Game settings read from a whitespace-separated key/value file."""

from __future__ import annotations

from pathlib import Path

_PARAMETERS: dict[str, type] = {
    "title": str,
    "screen_width": int,
    "screen_height": int,
    "tilesize": int,
    "zoom": int,
    "tiles": str,
    "heros": str,
    "monsters": str,
    "weapons": str,
    "items": str,
    "effects": str,
    "sounds": str,
    "map_width": int,
    "map_height": int,
    "room_placement_attempts": int,
}


class Settings:
    """Window, camera, dungeon and asset settings for the game."""

    def __init__(self, filename) -> None:
        self.path = Path(filename).absolute()

        # window parameters
        self.title = ""
        self.screen_width = 0
        self.screen_height = 0

        # camera parameters
        self.tilesize = 0  # pixels per tile
        self.zoom = 0

        # dungeon parameters
        self.map_width = 0
        self.map_height = 0
        self.room_placement_attempts = 0  # controls the number of rooms

        # asset files
        self.tiles = ""
        self.heros = ""
        self.monsters = ""
        self.weapons = ""
        self.items = ""
        self.effects = ""
        self.sounds = ""

        self._parameters: dict[str, str] = {}
        self.load()

    def load(self) -> None:
        """Read the settings file and set every parameter from it."""
        try:
            text = self.path.read_text()
        except OSError as exc:
            raise OSError(f"Could not open settings file: {self.path}") from exc

        tokens = text.split()
        self._parameters.update(zip(tokens[0::2], tokens[1::2]))

        for name, kind in _PARAMETERS.items():
            setattr(self, name, self._value(name, kind))

    def _value(self, name: str, kind: type):
        try:
            raw = self._parameters[name]
        except KeyError:
            raise ValueError(f"Parameter '{name}' not found in {self.path}") from None
        try:
            return kind(raw)
        except ValueError:
            raise ValueError(
                f"Parameter '{name}' in {self.path} has an invalid value: {raw}"
            ) from None