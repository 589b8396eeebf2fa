"""Timed world events and the queue that runs them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

E = TypeVar("E", bound="Event")


class Event(ABC):
    """Something that happens in the world over a number of frames.

    Events run to completion before entities take more turns.
    """

    def __init__(self, number_of_frames: int = 1) -> None:
        self.number_of_frames = number_of_frames
        self.frame_count = 0
        self.next_events: list[Event] = []

    def update(self) -> None:
        self.frame_count += 1

    def is_done(self) -> bool:
        return self.frame_count == self.number_of_frames

    @abstractmethod
    def execute(self, engine) -> None:
        """What the event does each frame."""

    def when_done(self, engine) -> None:
        """Called once the event has finished."""

    def add_next(self, event: Event) -> None:
        """Queue ``event`` to start after this one finishes."""
        self.next_events.append(event)


class Events:
    """The queue of running events."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def add(self, event: Event) -> None:
        self._events.append(event)

    def create_event(self, event_type: type[E], *args, **kwargs) -> E:
        """Construct an event, queue it and return it."""
        event = event_type(*args, **kwargs)
        self.add(event)
        return event

    def execute(self, engine) -> None:
        """Run one frame of every current event."""
        if self.empty():
            return
        next_events: list[Event] = []
        # events created while executing start on the next frame
        for event in list(self._events):
            event.execute(engine)
            event.update()
            if event.is_done():
                event.when_done(engine)
                next_events.extend(event.next_events)
        self._events = [event for event in self._events if not event.is_done()]
        self._events.extend(next_events)

    def empty(self) -> bool:
        return not self._events