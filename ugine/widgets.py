"""Buttons, check boxes and check-box groups."""

from __future__ import annotations

from .controls import Control, ControlType, GuiRender, GuiRenderer, GuiState
from .events import Controller, Event, MouseEvent


def _over(gui_render: GuiRender, state: GuiState, cx: int, cy: int,
          event: Event) -> bool:
    half_w = gui_render.image_width(state) // 2
    half_h = gui_render.image_height(state) // 2
    return (cx - half_w <= event.x <= cx + half_w
            and cy - half_h <= event.y <= cy + half_h)


class Button(Control):
    """A push button centred on ``(x, y)`` that notifies listeners when clicked."""

    def __init__(self, x: int = 0, y: int = 0, gui_render: GuiRender | None = None,
                 control_id: int = 0) -> None:
        super().__init__(ControlType.BUTTON, control_id)
        self.x = x
        self.y = y
        self.gui_render = gui_render if gui_render is not None else GuiRender()
        self.pressed = False

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def set_text(self, text: str) -> None:
        self.gui_render.set_text(text)

    def mouse_is_over(self, event: Event) -> bool:
        return _over(self.gui_render, self.state, self.x, self.y, event)

    def manage_event(self, event: Event) -> bool:
        if self.state is GuiState.INACTIVE or event.controller is not Controller.MOUSE:
            return False
        if event.event_id == MouseEvent.LMB_PRESS:
            if self.mouse_is_over(event):
                self.pressed = True
                self.state = GuiState.ON_CLICK
                return True
        elif event.event_id == MouseEvent.LMB_RELEASE:
            if self.pressed and self.mouse_is_over(event):
                self.pressed = False
                self.notify_listeners(self)
                self.state = GuiState.DEFAULT
                return True
        elif event.event_id == MouseEvent.MOUSE_MOVED:
            if not self.mouse_is_over(event):
                self.pressed = False
                self.state = GuiState.DEFAULT
                return True
        return False

    def render(self, renderer: GuiRenderer) -> None:
        self.gui_render.render(renderer, self.state, self.x, self.y)
        super().render(renderer)


class CheckBox(Control):
    """A check box that becomes the active one of its group when clicked."""

    def __init__(self, x: int = 0, y: int = 0, gui_render: GuiRender | None = None,
                 control_id: int = 0) -> None:
        super().__init__(ControlType.CHECKBOX, control_id)
        self.x = x
        self.y = y
        self.gui_render = gui_render if gui_render is not None else GuiRender()
        self.group: CheckBoxGroup | None = None

    def mouse_is_over(self, event: Event) -> bool:
        return _over(self.gui_render, self.state, self.x, self.y, event)

    def manage_event(self, event: Event) -> bool:
        if self.state is GuiState.INACTIVE or event.controller is not Controller.MOUSE:
            return False
        if event.event_id == MouseEvent.LMB_CLICK and self.mouse_is_over(event):
            if self.state is GuiState.DEFAULT:
                self.state = GuiState.ON_CLICK
                if self.group is not None:
                    self.group.mark_active(self)
            return True
        return False

    def render(self, renderer: GuiRenderer) -> None:
        self.gui_render.render(renderer, self.state, self.x, self.y)
        super().render(renderer)


class CheckBoxGroup(Control):
    """Check boxes of which exactly one is marked at a time."""

    def __init__(self, control_id: int = 0) -> None:
        super().__init__(ControlType.CHECKBOX_GROUP, control_id)
        self.active: CheckBox | None = None

    def add_control(self, control: Control) -> None:
        """Add a check box; controls of other kinds are ignored."""
        if control.control_type is ControlType.CHECKBOX:
            super().add_control(control)
            control.group = self  # type: ignore[attr-defined]

    def remove_control(self, control: Control) -> bool:
        if control.control_type is ControlType.CHECKBOX and super().remove_control(control):
            control.group = None  # type: ignore[attr-defined]
            return True
        return False

    def mark_active(self, control: Control) -> None:
        """Mark ``control`` as the chosen box, clear the others, notify listeners."""
        for box in self.controls:
            if box.control_type is not ControlType.CHECKBOX:
                continue
            if box is control:
                box.state = GuiState.ON_CLICK
                self.active = box
            else:
                box.state = GuiState.DEFAULT
        self.notify_listeners(self)