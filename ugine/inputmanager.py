"""Queues input events, runs gestures over them and dispatches to observers."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import NamedTuple, Protocol

from .events import Controller, Event
from .gestures import ClickGesture, DragGesture


class Observer(Protocol):
    def notify(self, event: Event) -> None: ...


class Gesture(Protocol):
    def modify(self, events: MutableSequence[Event]) -> None: ...


class _Registration(NamedTuple):
    observer: Observer
    controller: Controller
    event_id: int


class InputManager:
    """Dispatches queued events to the observers registered for them."""

    def __init__(self, gestures: Iterable[Gesture] | None = None) -> None:
        if gestures is None:
            gestures = (ClickGesture(), DragGesture())
        self.gestures: list[Gesture] = list(gestures)
        self._registrations: list[_Registration] = []
        self._events: list[Event] = []

    @property
    def pending(self) -> tuple[Event, ...]:
        return tuple(self._events)

    def _find(self, observer: Observer, controller: Controller,
              event_id: int) -> _Registration | None:
        return next(
            (r for r in self._registrations
             if r.observer is observer and r.controller is controller
             and r.event_id == event_id),
            None,
        )

    def register(self, observer: Observer, controller: Controller,
                 event_id: int) -> None:
        """Subscribe ``observer`` to one event; repeated registrations are ignored."""
        if self._find(observer, controller, event_id) is None:
            self._registrations.append(_Registration(observer, controller, event_id))

    def unregister(self, observer: Observer, controller: Controller,
                   event_id: int) -> bool:
        """Remove a subscription; False if it was not registered."""
        reg = self._find(observer, controller, event_id)
        if reg is None:
            return False
        self._registrations.remove(reg)
        return True

    def add_event(self, event: Event) -> None:
        self._events.append(event)

    def process_gestures(self) -> None:
        for gesture in self.gestures:
            gesture.modify(self._events)

    def manage_events(self) -> None:
        """Deliver every queued event, then clear the queue."""
        for event in self._events:
            for reg in list(self._registrations):
                if (event.controller is reg.controller
                        and event.event_id == reg.event_id):
                    reg.observer.notify(event)
        self._events.clear()

    def update(self) -> None:
        self.process_gestures()
        self.manage_events()