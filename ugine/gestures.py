"""Gestures that rewrite raw mouse events into clicks and drags."""

from __future__ import annotations

import time
from collections.abc import Callable, MutableSequence

from .events import Controller, Event, MouseEvent

CLICK_THRESHOLD_TIME = 0.3


class ClickGesture:
    """Turns a left-button release into a click when it follows a press quickly."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._pressed = False
        self._press_time = 0.0

    def modify(self, events: MutableSequence[Event]) -> None:
        for ev in events:
            if ev.controller is not Controller.MOUSE:
                continue
            if not self._pressed and ev.event_id == MouseEvent.LMB_PRESS:
                self._press_time = self._clock()
                self._pressed = True
            elif self._pressed and ev.event_id == MouseEvent.LMB_RELEASE:
                duration = self._clock() - self._press_time
                self._pressed = False
                if duration < CLICK_THRESHOLD_TIME:
                    ev.event_id = MouseEvent.LMB_CLICK


class DragGesture:
    """Marks mouse events as drags while the left button is held and the pointer moves."""

    def __init__(self) -> None:
        self._pressed = False
        self._last: tuple[int, int] | None = None

    def modify(self, events: MutableSequence[Event]) -> None:
        for ev in events:
            if ev.controller is not Controller.MOUSE:
                continue
            if ev.event_id == MouseEvent.LMB_PRESS:
                self._pressed = True
            elif ev.event_id == MouseEvent.LMB_RELEASE:
                self._pressed = False
            if self._pressed and (ev.x, ev.y) != self._last:
                ev.event_id = MouseEvent.LMB_DRAG
        if events:
            self._last = (events[0].x, events[0].y)
        self._pressed = False