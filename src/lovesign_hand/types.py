from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional, Sequence, Tuple


class Point2D(NamedTuple):
    """A 2D point, either normalized ([0, 1]) or in pixels."""

    x: float
    y: float


HandLandmarks = Sequence[Point2D]  # length 21, normalized
DEFAULT_HOLD_FRAMES = 3  # consecutive qualifying frames before confirming
Bone = Tuple[Point2D, Point2D]


class Handedness(Enum):
    LEFT = "Left"
    RIGHT = "Right"
    UNKNOWN = "Unknown"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "Handedness":
        """Map a MediaPipe handedness label ("Left" / "Right" / None) to the enum."""
        if label:
            norm = label.strip().lower()
            if norm == "left":
                return cls.LEFT
            if norm == "right":
                return cls.RIGHT
        return cls.UNKNOWN


class SkeletonColor(Enum):
    LEFT = "#4ade80"  # green
    RIGHT = "#ff006e"  # pink


class GesturePhase(Enum):
    NO_HANDS = "no_hands"
    ONE_HAND = "one_hand"
    TWO_HANDS_UNCONFIRMED = "two_hands_unconfirmed"
    TWO_HANDS_CONFIRMED = "two_hands_confirmed"


@dataclass(frozen=True)
class HandDetection:
    """One detected hand: its 21 normalized landmarks plus handedness."""

    landmarks: Tuple[Point2D, ...]
    handedness: Handedness = Handedness.UNKNOWN

    def __post_init__(self) -> None:
        # Accept (x, y) tuples or MediaPipe landmark objects; anything unreadable
        # becomes an empty hand, which the pipeline drops as malformed.
        try:
            points = to_points(self.landmarks) if self.landmarks is not None else ()
        except (TypeError, ValueError, IndexError):
            points = ()
        object.__setattr__(self, "landmarks", points)
        if not isinstance(self.handedness, Handedness):
            object.__setattr__(self, "handedness", Handedness.from_label(self.handedness))


@dataclass(frozen=True)
class FrameDetections:
    """Everything the landmark model reported for a single frame."""

    hands: Tuple[HandDetection, ...]
    width: float
    height: float

    @classmethod
    def from_pairs(cls, pairs, width: float, height: float) -> "FrameDetections":
        """
        Build from an iterable of ``(landmarks, handedness)`` pairs.

        Landmarks may be any sequence of ``(x, y)`` tuples or objects exposing
        ``.x`` / ``.y``, or None when the model reported none; handedness may be
        a `Handedness`, a label string or None.
        """
        hands = tuple(HandDetection(landmarks=landmarks, handedness=handedness) for landmarks, handedness in pairs)
        return cls(hands=hands, width=width, height=height)


@dataclass
class GestureState:
    """Debounce state carried between frames. Mutated once per processed frame."""

    hold_counter: int = 0
    confirmed: bool = False

    def reset(self) -> None:
        self.hold_counter = 0
        self.confirmed = False


@dataclass(frozen=True)
class GestureMetrics:
    """Pixel distances behind a single classification."""

    v1_px: float
    v2_px: float
    proximity_px: float


@dataclass(frozen=True)
class Skeleton:
    """Bones and joints of one hand in pixel space."""

    color: SkeletonColor
    bones: Tuple[Bone, ...]  # length 20
    joints: Tuple[Point2D, ...]  # length 21


@dataclass(frozen=True)
class FrameResult:
    """Outcome of processing one frame, for the presentation layer."""

    hands_count: int
    gesture_confirmed: bool
    hold_counter: int
    skeletons: Tuple[Skeleton, ...] = ()
    phase: GesturePhase = GesturePhase.NO_HANDS
    gesture_detected: bool = False
    hold_frames: int = DEFAULT_HOLD_FRAMES
    metrics: Optional[GestureMetrics] = field(default=None)


def to_points(landmarks) -> Tuple[Point2D, ...]:
    pts = []
    for lm in landmarks:
        if hasattr(lm, "x") and hasattr(lm, "y"):
            pts.append(Point2D(float(lm.x), float(lm.y)))
        else:
            x, y = lm[0], lm[1]
            pts.append(Point2D(float(x), float(y)))
    return tuple(pts)
