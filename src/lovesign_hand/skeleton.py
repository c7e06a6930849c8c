from __future__ import annotations

from typing import List, Tuple

from .types import Bone, Handedness, HandLandmarks, Skeleton, SkeletonColor
from .utils import to_pixel

# Each finger is a path from the wrist (0) to its tip.
FINGER_CHAINS: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4),  # thumb
    (0, 5, 6, 7, 8),  # index
    (0, 9, 10, 11, 12),  # middle
    (0, 13, 14, 15, 16),  # ring
    (0, 17, 18, 19, 20),  # pinky
)

HAND_CONNECTIONS: List[Tuple[int, int]] = [
    (chain[i], chain[i + 1]) for chain in FINGER_CHAINS for i in range(len(chain) - 1)
]


def color_for(handedness: Handedness) -> SkeletonColor:
    if handedness is Handedness.RIGHT:
        return SkeletonColor.RIGHT
    return SkeletonColor.LEFT


def render(hand: HandLandmarks, handedness: Handedness, width: float, height: float) -> Skeleton:
    """Project one hand's 21 normalized landmarks to pixel-space bones and joints."""
    joints = tuple(to_pixel(p, width, height) for p in hand)
    bones: Tuple[Bone, ...] = tuple((joints[a], joints[b]) for a, b in HAND_CONNECTIONS)
    return Skeleton(color=color_for(handedness), bones=bones, joints=joints)
