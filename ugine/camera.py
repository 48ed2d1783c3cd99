"""A 2D camera that can be bounded and can follow a target."""

from __future__ import annotations

from typing import Protocol


class Positioned(Protocol):
    x: float
    y: float


class Camera:
    """Scroll position of the view over a world, in world coordinates."""

    def __init__(self, screen_width: int, screen_height: int) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.x = 0.0
        self.y = 0.0
        self.bound_x0 = 0.0
        self.bound_y0 = 0.0
        self.bound_x1 = 0.0
        self.bound_y1 = 0.0
        self.target: Positioned | None = None

    def set_position(self, x: float, y: float) -> None:
        self.set_x(x)
        self.set_y(y)

    def set_x(self, x: float) -> None:
        right = self.bound_x1 - self.screen_width
        if self.bound_x0 <= x <= right:
            self.x = x
        elif x <= self.bound_x0:
            self.x = self.bound_x0
        elif x >= right:
            self.x = self.bound_x1

    def set_y(self, y: float) -> None:
        bottom = self.bound_y1 - self.screen_height
        if self.bound_y0 <= y <= bottom:
            self.y = y
        elif y <= self.bound_y0:
            self.y = self.bound_y0
        elif y >= bottom:
            self.y = self.bound_y1

    def set_bounds(self, bx0: float, by0: float, bx1: float, by1: float) -> None:
        self.bound_x0 = bx0
        self.bound_y0 = by0
        self.bound_x1 = bx1
        self.bound_y1 = by1

    def has_bounds(self) -> bool:
        return self.bound_x0 != self.bound_x1

    def follow(self, target: Positioned | None) -> None:
        """Keep ``target`` centred on screen; ``None`` stops following."""
        self.target = target

    def update(self) -> None:
        if self.target is None:
            return
        self.x = self.target.x - self.screen_width // 2
        self.y = self.target.y - self.screen_height // 2
        if not self.has_bounds():
            return
        if self.x < self.bound_x0:
            self.x = self.bound_x0
        elif self.x + self.screen_width > self.bound_x1:
            self.x = self.bound_x1 - self.screen_width
        if self.y < self.bound_y0:
            self.y = self.bound_y0
        elif self.y + self.screen_height > self.bound_y1:
            self.y = self.bound_y1 - self.screen_height