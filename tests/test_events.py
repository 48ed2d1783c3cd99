from itertools import combinations

from ugine.events import Controller, Event, KeyEvent, MouseEvent


def test_event_fields():
    ev = Event(Controller.MOUSE, MouseEvent.LMB_PRESS, 3, 4)
    assert (ev.controller, ev.event_id, ev.x, ev.y) == (
        Controller.MOUSE, MouseEvent.LMB_PRESS, 3, 4)


def test_event_id_is_mutable():
    ev = Event(Controller.MOUSE, MouseEvent.LMB_RELEASE, 1, 1)
    ev.event_id = MouseEvent.LMB_CLICK
    assert ev.event_id == MouseEvent.LMB_CLICK


def test_event_equality():
    a = Event(Controller.KEYBOARD, KeyEvent.SPACE, 0, 0)
    b = Event(Controller.KEYBOARD, KeyEvent.SPACE)
    assert a == b
    assert a != Event(Controller.MOUSE, KeyEvent.SPACE)


def test_events_with_distinct_mouse_ids_differ():
    events = [Event(Controller.MOUSE, mouse_id, 5, 6) for mouse_id in MouseEvent]
    assert [ev.event_id for ev in events] == list(MouseEvent)
    assert not any(a == b for a, b in combinations(events, 2))
    assert all(ev.controller == Controller.MOUSE for ev in events)