from __future__ import annotations

import math
from typing import Tuple

from .types import Point2D


def to_pixel(p: Point2D, width: float, height: float) -> Point2D:
    return Point2D(p.x * width, p.y * height)


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def midpoint(a: Point2D, b: Point2D) -> Point2D:
    return Point2D((a.x + b.x) / 2, (a.y + b.y) / 2)


def clamp_int(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, v))


def int_point(p: Point2D) -> Tuple[int, int]:
    """Round a pixel-space point for OpenCV drawing calls."""
    return (int(round(p.x)), int(round(p.y)))


def hex_to_bgr(value: str) -> Tuple[int, int, int]:
    value = value.lstrip("#")
    r, g, b = int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    return (b, g, r)
