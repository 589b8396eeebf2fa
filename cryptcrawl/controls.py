"""Keyboard and mouse input."""

from __future__ import annotations

import pygame


def _key_name(key: int) -> str:
    try:
        return pygame.key.name(key, use_compat=False)
    except TypeError:
        name = pygame.key.name(key)
        return name[:1].upper() + name[1:]


class Input:
    """Collects window events and remembers the latest keypress and click."""

    def __init__(self) -> None:
        pygame.display.init()  # the event queue belongs to the video subsystem
        self._last_keypress = ""
        self._mouse = (-1, -1)

    def set_last_keypress(self, key: str) -> None:
        """Register ``key`` as the most recent keypress."""
        self._last_keypress = key

    def take_last_keypress(self) -> str:
        """Return the last key pressed and forget it; names are capitalized."""
        key, self._last_keypress = self._last_keypress, ""
        return key

    def last_mouse_click(self) -> tuple[int, int]:
        return self._mouse

    def get_all_input_events(self) -> list[str]:
        """Names of all input events since the last call."""
        inputs: list[str] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                inputs.append("Quit")
            elif event.type == pygame.KEYDOWN:
                inputs.append(_key_name(event.key))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == pygame.BUTTON_LEFT:
                inputs.append("Click")
                self._mouse = tuple(event.pos)
        return inputs