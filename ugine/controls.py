"""Base GUI control tree, the manager at its root and control rendering."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any, Protocol

from .events import Controller, Event, MouseEvent
from .font import Font
from .image import Image


class ControlType(Enum):
    NONE = "none"
    BUTTON = "button"
    CHECKBOX = "checkbox"
    CHECKBOX_GROUP = "checkbox_group"
    SLIDER = "slider"


class GuiState(Enum):
    DEFAULT = "default"
    ON_CLICK = "on_click"
    INACTIVE = "inactive"


class GuiRenderer(Protocol):
    def draw_image(self, image: Image, x: float, y: float) -> None: ...

    def set_color(self, red: int, green: int, blue: int, alpha: int) -> None: ...

    def draw_text(self, font: Font, text: str, x: float, y: float) -> None: ...


class ControlListener(Protocol):
    def manage_control_event(self, sender: Control) -> None: ...


def _stops_propagation(event: Event) -> bool:
    # Mouse moves reach every control so each can leave its pressed state.
    return (event.controller is Controller.MOUSE
            and event.event_id != MouseEvent.MOUSE_MOVED)


class GuiRender:
    """Images for each control state plus an optional centred caption."""

    def __init__(self, font: Font | None = None, default_img: Image | None = None,
                 on_click_img: Image | None = None,
                 inactive_img: Image | None = None) -> None:
        self.font = font
        self.default_img = default_img
        self.on_click_img = on_click_img
        self.inactive_img = inactive_img
        self.text = ""

    def current_image(self, state: GuiState) -> Image | None:
        return {
            GuiState.DEFAULT: self.default_img,
            GuiState.ON_CLICK: self.on_click_img,
            GuiState.INACTIVE: self.inactive_img,
        }.get(state)

    def _image(self, state: GuiState) -> Image:
        img = self.current_image(state)
        if img is None:
            raise ValueError(f"no image for state {state.name}")
        return img

    def image_width(self, state: GuiState) -> int:
        return self._image(state).width

    def image_height(self, state: GuiState) -> int:
        return self._image(state).height

    def set_text(self, text: str) -> None:
        """Set the caption and centre the font vertically on it."""
        self.text = text
        if self.font is not None:
            self.font.set_handle(self.font.handle_x,
                                 float(self.font.text_height(text) // 2))

    def render(self, renderer: GuiRenderer, state: GuiState, x: int, y: int) -> None:
        img = self._image(state)
        renderer.draw_image(img, float(x), float(y))
        renderer.set_color(255, 255, 255, 255)
        if self.font is None:
            return
        text_offset = (img.width - self.font.text_width(self.text)) // 2
        renderer.draw_text(self.font, self.text,
                           float(x - img.handle_x) + text_offset, float(y))


class Control:
    """A GUI control holding child controls and listeners."""

    def __init__(self, control_type: ControlType = ControlType.NONE,
                 control_id: int = 0) -> None:
        self.control_type = control_type
        self.control_id = control_id
        self.state = GuiState.DEFAULT
        self.controls: list[Any] = []
        self.listeners: list[ControlListener] = []

    def update(self) -> None:
        for control in self.controls:
            control.update()

    def render(self, renderer: GuiRenderer) -> None:
        for control in self.controls:
            control.render(renderer)

    def manage_event(self, event: Event) -> bool:
        """Offer the event to children, newest first; True if one consumed it."""
        consumed = False
        for control in reversed(list(self.controls)):
            if control.manage_event(event):
                consumed = True
                if _stops_propagation(event):
                    break
        return consumed

    def add_listener(self, listener: ControlListener) -> None:
        self.listeners.append(listener)

    def remove_listener(self, listener: ControlListener) -> None:
        for index, existing in enumerate(self.listeners):
            if existing is listener:
                del self.listeners[index]
                return

    def add_control(self, control: Control) -> None:
        self.controls.append(control)

    def remove_control(self, control: Control) -> bool:
        for index, existing in enumerate(self.controls):
            if existing is control:
                del self.controls[index]
                return True
        return False

    def notify_listeners(self, sender: Control) -> None:
        for listener in list(self.listeners):
            listener.manage_control_event(sender)


class ControlManager:
    """Root of the GUI: receives mouse events and passes them to controls."""

    def __init__(self) -> None:
        self.controls: list[Any] = []

    def register(self, input_manager: Any) -> None:
        """Subscribe to every mouse event of ``input_manager``."""
        for event_id in MouseEvent:
            input_manager.register(self, Controller.MOUSE, event_id)

    def notify(self, event: Event) -> None:
        for control in reversed(list(self.controls)):
            if control.manage_event(event) and _stops_propagation(event):
                break

    def add_control(self, control: Control) -> None:
        self.controls.append(control)

    def remove_control(self, control: Control) -> bool:
        for index, existing in enumerate(self.controls):
            if existing is control:
                del self.controls[index]
                return True
        return False

    def update(self) -> None:
        for control in self.controls:
            control.update()

    def render(self, renderer: GuiRenderer) -> None:
        for control in self.controls:
            control.render(renderer)

    def __iter__(self) -> Iterable[Any]:
        return iter(self.controls)