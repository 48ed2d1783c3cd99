"""Angle, distance and rectangle helpers used across the engine."""

from __future__ import annotations

import math

DEG2RAD = 0.0174532925
RAD2DEG = 57.2957795


def log2(x: float) -> float:
    """Base-2 logarithm."""
    return math.log(x) / math.log(2.0)


def deg_sin(degrees: float) -> float:
    return math.sin(DEG2RAD * degrees)


def deg_cos(degrees: float) -> float:
    return math.cos(DEG2RAD * degrees)


def deg_tan(degrees: float) -> float:
    return math.tan(DEG2RAD * degrees)


def deg_asin(value: float) -> float:
    return math.asin(value) * RAD2DEG


def deg_acos(value: float) -> float:
    return math.acos(value) * RAD2DEG


def deg_atan(value: float) -> float:
    return math.atan(value) * RAD2DEG


def deg_atan2(y: float, x: float) -> float:
    return math.atan2(y, x) * RAD2DEG


def wrap_value(val: float, mod: float) -> float:
    """Wrap ``val`` into ``[0, mod)``; a zero modulus leaves it unchanged."""
    if mod == 0:
        return val
    return val - mod * math.floor(val / mod)


def angle(x1: float, y1: float, x2: float, y2: float) -> float:
    """Angle in degrees from the first point to the second, with y growing downwards."""
    return wrap_value(deg_atan2(-(y2 - y1), x2 - x1), 360)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.sqrt((y1 - y2) ** 2 + (x1 - x2) ** 2)


def value_in_range(value: float, minimum: float, maximum: float) -> bool:
    """True when ``minimum <= value <= maximum``."""
    return minimum <= value <= maximum


def point_in_rect(x: float, y: float, rectx: float, recty: float,
                  width: float, height: float) -> bool:
    return (value_in_range(x, rectx, rectx + width)
            and value_in_range(y, recty, recty + height))


def closest_point_to_rect(x: float, y: float, rectx: float, recty: float,
                          width: float, height: float) -> tuple[float, float]:
    """Point of the rectangle closest to ``(x, y)``."""
    out_x = rectx if x < rectx else rectx + width if x > rectx + width else x
    out_y = recty if y < recty else recty + height if y > recty + height else y
    return out_x, out_y


def rects_overlap(x1: float, y1: float, width1: float, height1: float,
                  x2: float, y2: float, width2: float, height2: float) -> bool:
    if (value_in_range(x1, x2, x2 + width2)
            or value_in_range(x1 + width1, x2, x2 + width2)):
        if (value_in_range(y1, y2, y2 + height2)
                or value_in_range(y1 + height1, y2, y2 + height2)):
            return True
    if (value_in_range(x2, x1, x1 + width1)
            or value_in_range(x2 + width2, x1, x1 + width1)):
        if (value_in_range(y2, y1, y1 + height1)
                or value_in_range(y2 + height2, y1, y1 + height1)):
            return True
    return False


def overlapping_rect(x1: float, y1: float, width1: float, height1: float,
                     x2: float, y2: float, width2: float, height2: float
                     ) -> tuple[float, float, float, float]:
    """Return ``(x, y, width, height)`` of the overlap of two rectangles."""
    out_x = x1 if value_in_range(x1, x2, x2 + width2) else x2
    out_y = y1 if value_in_range(y1, y2, y2 + height2) else y2
    if value_in_range(x1 + width1, x2, x2 + width2):
        out_w = x1 + width1 - out_x
    else:
        out_w = x2 + width2 - out_x
    if value_in_range(y1 + height1, y2, y2 + height2):
        out_h = y1 + height1 - out_y
    else:
        out_h = y2 + height2 - out_y
    return out_x, out_y, out_w, out_h