"""
Love-symbol classifier: pure geometry over two hands' landmarks.

Each hand must open a "V" between thumb tip and index tip, and the two V's
must sit close together. All distances are in pixels, so the thresholds are
tied to the capture resolution (tuned for ~640x480) and are not rescaled.
"""
from __future__ import annotations

from typing import Optional

from .config import GestureThresholds
from .types import GestureMetrics, HandLandmarks
from .utils import distance, midpoint, to_pixel

THUMB_TIP = 4
INDEX_TIP = 8

DEFAULT_THRESHOLDS = GestureThresholds()


def measure(hand1: HandLandmarks, hand2: HandLandmarks, width: float, height: float) -> GestureMetrics:
    thumb1 = to_pixel(hand1[THUMB_TIP], width, height)
    index1 = to_pixel(hand1[INDEX_TIP], width, height)
    thumb2 = to_pixel(hand2[THUMB_TIP], width, height)
    index2 = to_pixel(hand2[INDEX_TIP], width, height)

    return GestureMetrics(
        v1_px=distance(thumb1, index1),
        v2_px=distance(thumb2, index2),
        proximity_px=distance(midpoint(thumb1, index1), midpoint(thumb2, index2)),
    )


def is_love_symbol(metrics: GestureMetrics, thresholds: Optional[GestureThresholds] = None) -> bool:
    t = thresholds or DEFAULT_THRESHOLDS
    return (
        t.v_min_px < metrics.v1_px < t.v_max_px
        and t.v_min_px < metrics.v2_px < t.v_max_px
        and metrics.proximity_px < t.proximity_max_px
    )


def classify(
    hand1: HandLandmarks,
    hand2: HandLandmarks,
    width: float,
    height: float,
    thresholds: Optional[GestureThresholds] = None,
) -> bool:
    """
    Return True if the two hands form the love symbol in this frame.

    Both hands must carry 21 normalized landmarks; the caller is responsible
    for that. The result does not depend on argument order.
    """
    return is_love_symbol(measure(hand1, hand2, width, height), thresholds)
