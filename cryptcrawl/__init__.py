"""Building blocks for a turn-based dungeon crawler: generated crypts, fog of war, turns, combat events and sprites."""

__version__ = "0.1.0"