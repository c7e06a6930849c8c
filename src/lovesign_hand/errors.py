from __future__ import annotations

from typing import Sequence

NUM_LANDMARKS = 21
MAX_HANDS = 2


class LoveSignError(Exception):
    """Base class for all errors raised by this package."""


class MalformedLandmarksError(LoveSignError):
    """A hand does not carry exactly 21 landmarks."""

    def __init__(self, count: int) -> None:
        super().__init__(f"expected {NUM_LANDMARKS} landmarks, got {count}")
        self.count = count


class UnsupportedHandCountError(LoveSignError):
    """More hands than the classifier is defined for."""

    def __init__(self, count: int) -> None:
        super().__init__(f"at most {MAX_HANDS} hands are supported, got {count}")
        self.count = count


class DimensionError(LoveSignError):
    """Frame width or height is not strictly positive."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__(f"frame dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class ConfigError(LoveSignError):
    """Invalid configuration file or value."""


def validate_landmarks(landmarks: Sequence) -> None:
    if landmarks is None:
        raise MalformedLandmarksError(0)
    n = len(landmarks)
    if n != NUM_LANDMARKS:
        raise MalformedLandmarksError(n)


def validate_hand_count(count: int) -> None:
    if count > MAX_HANDS:
        raise UnsupportedHandCountError(count)


def validate_dimensions(width: float, height: float) -> None:
    if not (width > 0 and height > 0):
        raise DimensionError(width, height)
