from __future__ import annotations

from typing import Iterable, Tuple

import cv2
import numpy as np

from .status import StatusView
from .types import Skeleton
from .utils import clamp_int, hex_to_bgr, int_point

WHITE = (255, 255, 255)

TONE_BGR = {
    "red": (68, 68, 239),
    "yellow": (8, 179, 234),
    "gray": (55, 41, 31),
    "green": (94, 197, 34),
}

BONE_THICKNESS = 3
JOINT_RADIUS = 5


def draw_text(frame, text: str, org: Tuple[int, int], color=WHITE, scale=0.6, thickness=2):
    cv2.putText(frame, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, (0, 0, 0), thickness + 2, cv2.LINE_AA)
    cv2.putText(frame, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, color, thickness, cv2.LINE_AA)
    return frame


def draw_polyline(frame, points: Iterable[Tuple[int, int]], color=(255, 255, 0), thickness=2, closed=False):
    pts = np.array([(int(x), int(y)) for x, y in points], dtype=np.int32)
    if pts.shape[0] < 2:
        return frame
    cv2.polylines(frame, [pts], closed, color, thickness, cv2.LINE_AA)
    return frame


def draw_skeleton(frame, skeleton: Skeleton):
    """Paint bones, then joints with a thin white outline."""
    color = hex_to_bgr(skeleton.color.value)
    for a, b in skeleton.bones:
        cv2.line(frame, int_point(a), int_point(b), color, BONE_THICKNESS, cv2.LINE_AA)
    for p in skeleton.joints:
        c = int_point(p)
        cv2.circle(frame, c, JOINT_RADIUS, color, -1, lineType=cv2.LINE_AA)
        cv2.circle(frame, c, JOINT_RADIUS, WHITE, 1, lineType=cv2.LINE_AA)
    return frame


def draw_status(frame, view: StatusView):
    h, w = frame.shape[:2]

    # Badge in the top-right corner.
    (tw, th), _ = cv2.getTextSize(view.badge, cv2.FONT_HERSHEY_SIMPLEX, 0.55, 2)
    x1 = w - 12
    x0 = clamp_int(x1 - tw - 20, 0, w - 1)
    y0, y1 = 12, 12 + th + 16
    cv2.rectangle(frame, (x0, y0), (x1, y1), TONE_BGR.get(view.tone, TONE_BGR["gray"]), -1)
    draw_text(frame, view.badge, (x0 + 10, y1 - 8), scale=0.55)

    draw_text(frame, view.mood, (12, max(28, h - 44)), scale=0.8)
    draw_text(frame, view.debug, (12, max(28, h - 14)), scale=0.5, thickness=1)

    if view.active:
        corners = [(2, 2), (w - 3, 2), (w - 3, h - 3), (2, h - 3)]
        draw_polyline(frame, corners, color=hex_to_bgr("#ff006e"), thickness=4, closed=True)
    return frame
