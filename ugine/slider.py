"""A horizontal slider with a ball on a bar and step buttons on each side."""

from __future__ import annotations

from enum import Enum

from .controls import Control, ControlType, GuiRender, GuiRenderer
from .events import Event
from .font import Font
from .image import Image
from .widgets import Button

SLIDER_BUTTON_MARGIN = 10


class SliderPart(Enum):
    BAR = "bar"
    BALL = "ball"
    LEFT_BUTTON = "left_button"
    RIGHT_BUTTON = "right_button"


class SliderRender:
    """Images of a slider and its two step buttons (ids 0 and 1)."""

    def __init__(self, bar: Image, ball: Image, left_default: Image,
                 left_on_click: Image, right_default: Image,
                 right_on_click: Image, font: Font | None = None) -> None:
        self.bar = bar
        self.ball = ball
        self.left_button = Button(0, 0, GuiRender(font, left_default, left_on_click), 0)
        self.right_button = Button(0, 0, GuiRender(font, right_default, right_on_click), 1)

    def image(self, part: SliderPart) -> Image | None:
        if part is SliderPart.BALL:
            return self.ball
        if part is SliderPart.BAR:
            return self.bar
        if part is SliderPart.LEFT_BUTTON:
            return self.left_button.gui_render.current_image(self.left_button.state)
        return self.right_button.gui_render.current_image(self.right_button.state)

    def _image(self, part: SliderPart) -> Image:
        img = self.image(part)
        if img is None:
            raise ValueError(f"no image for {part.name}")
        return img

    def image_width(self, part: SliderPart) -> int:
        return self._image(part).width

    def image_height(self, part: SliderPart) -> int:
        return self._image(part).height

    def render(self, renderer: GuiRenderer, part: SliderPart, x: int, y: int) -> None:
        if part is SliderPart.BAR:
            renderer.draw_image(self.bar, float(x), float(y))
        elif part is SliderPart.BALL:
            renderer.draw_image(self.ball, float(x), float(y))
        else:
            button = (self.left_button if part is SliderPart.LEFT_BUTTON
                      else self.right_button)
            button.set_position(x, y)
            button.render(renderer)

    def manage_event_buttons(self, event: Event) -> bool:
        """Offer the event to both buttons; the result is the right button's."""
        self.left_button.manage_event(event)
        return self.right_button.manage_event(event)


def _half_toward_zero(value: float) -> int:
    return int(int(value) / 2)


class Slider(Control):
    """A slider whose ball moves along the bar in steps of ``ball_rate`` pixels."""

    def __init__(self, x: int, y: int, min_value: int, max_value: int,
                 slider_render: SliderRender, control_id: int = 0) -> None:
        if min_value == max_value:
            raise ValueError("slider range must not be empty")
        super().__init__(ControlType.SLIDER, control_id)
        self.x = x
        self.y = y
        self.slider_render = slider_render
        slider_render.left_button.add_listener(self)
        slider_render.right_button.add_listener(self)
        bar_width = slider_render.bar.width
        self.min_value = 0
        self.max_value = bar_width
        self.ball_value = 0.0
        self.ball_rate = bar_width / (max_value - min_value)

    @property
    def value(self) -> float:
        """Position of the ball along the bar, in pixels."""
        return self.ball_value

    def manage_control_event(self, sender: Control) -> None:
        if sender.control_type is not ControlType.BUTTON:
            return
        if sender.control_id == 0:
            if self.ball_value - self.ball_rate >= 0:
                self.ball_value -= self.ball_rate
            else:
                self.ball_value = 0.0
            self.notify_listeners(self)
        elif sender.control_id == 1:
            if self.ball_value + self.ball_rate <= self.max_value:
                self.ball_value += self.ball_rate
            else:
                self.ball_value = float(self.max_value)
            self.notify_listeners(self)

    def manage_event(self, event: Event) -> bool:
        return self.slider_render.manage_event_buttons(event)

    def render(self, renderer: GuiRenderer) -> None:
        sr = self.slider_render
        offset = 0
        left_img = sr._image(SliderPart.LEFT_BUTTON)
        sr.render(renderer, SliderPart.LEFT_BUTTON, self.x + offset,
                  self.y - _half_toward_zero(left_img.handle_y))
        offset += sr.image_width(SliderPart.LEFT_BUTTON) // 2 + SLIDER_BUTTON_MARGIN

        sr.render(renderer, SliderPart.BAR, self.x + offset,
                  self.y - int(sr.bar.handle_y))
        sr.render(renderer, SliderPart.BALL,
                  self.x + offset + int(self.ball_value), self.y)

        offset += (sr.image_width(SliderPart.BAR)
                   + sr.image_width(SliderPart.RIGHT_BUTTON) // 2
                   + SLIDER_BUTTON_MARGIN)
        right_img = sr._image(SliderPart.RIGHT_BUTTON)
        sr.render(renderer, SliderPart.RIGHT_BUTTON, self.x + offset,
                  self.y - _half_toward_zero(right_img.handle_y))