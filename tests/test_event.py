import pytest

from cryptcrawl.event import Event, Events


class Counting(Event):
    def __init__(self, frames=1):
        super().__init__(frames)
        self.executed = 0
        self.finished = 0

    def execute(self, engine):
        self.executed += 1

    def when_done(self, engine):
        self.finished += 1


class Spawner(Event):
    def __init__(self, events):
        super().__init__()
        self.events = events
        self.child = None

    def execute(self, engine):
        self.child = self.events.create_event(Counting)


def test_event_is_done_after_frames():
    events = Events()
    event = events.create_event(Counting, 2)
    assert not event.is_done()
    events.execute(None)
    assert not event.is_done()
    events.execute(None)
    assert event.is_done()
    assert events.empty()


def test_event_is_abstract():
    with pytest.raises(TypeError):
        Event()


def test_events_run_until_done():
    events = Events()
    event = events.create_event(Counting, 3)
    assert isinstance(event, Counting) and event.number_of_frames == 3
    events.execute(None)
    events.execute(None)
    assert not events.empty()
    assert event.finished == 0
    events.execute(None)
    assert events.empty()
    assert event.executed == 3
    assert event.finished == 1


def test_next_events_start_after_completion():
    events = Events()
    first = Counting()
    second = Counting()
    first.add_next(second)
    events.add(first)
    events.execute(None)
    assert first.finished == 1
    assert second.executed == 0
    assert not events.empty()
    events.execute(None)
    assert second.executed == 1
    assert events.empty()


def test_events_created_during_execute_wait_a_frame():
    events = Events()
    spawner = events.create_event(Spawner, events)
    events.execute(None)
    assert spawner.child.executed == 0
    events.execute(None)
    assert spawner.child.executed == 1
    assert events.empty()


def test_empty_queue():
    events = Events()
    events.execute(None)
    assert events.empty()