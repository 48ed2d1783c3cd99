"""Input events produced by controllers and consumed by observers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Controller(Enum):
    MOUSE = "mouse"
    KEYBOARD = "keyboard"


class MouseEvent(IntEnum):
    LMB_PRESS = 0
    LMB_RELEASE = 1
    LMB_CLICK = 2
    LMB_DRAG = 3
    RMB_PRESS = 4
    RMB_RELEASE = 5
    MOUSE_MOVED = 6


class KeyEvent(IntEnum):
    SPACE = 0


@dataclass
class Event:
    """An input event; gestures may rewrite ``event_id``."""

    controller: Controller
    event_id: int
    x: int = 0
    y: int = 0