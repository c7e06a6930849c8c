"""
Per-frame orchestration: validate detections, classify, debounce, render.

``process_frame`` is the only code that mutates a `GestureState`. It never
raises for per-frame problems: malformed hands are dropped, surplus hands are
truncated and degenerate frame sizes leave the state untouched.
"""
from __future__ import annotations

import logging
import threading
from typing import List, Optional

from . import debounce
from .classifier import is_love_symbol, measure
from .config import Config
from .errors import (
    DimensionError,
    MalformedLandmarksError,
    UnsupportedHandCountError,
    validate_dimensions,
    validate_hand_count,
    validate_landmarks,
)
from .skeleton import render
from .types import FrameDetections, FrameResult, GestureState, HandDetection

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Config()


def _usable_hands(detections: FrameDetections) -> List[HandDetection]:
    hands: List[HandDetection] = []
    for i, hand in enumerate(detections.hands):
        try:
            validate_landmarks(hand.landmarks)
        except MalformedLandmarksError as e:
            logger.warning("Dropping hand %d: %s", i, e)
            continue
        hands.append(hand)

    try:
        validate_hand_count(len(hands))
    except UnsupportedHandCountError as e:
        logger.debug("%s; keeping the first two", e)
        hands = hands[:2]
    return hands


def process_frame(detections: FrameDetections, state: GestureState, config: Optional[Config] = None) -> FrameResult:
    """
    Process one frame of detections against `state`.

    Args:
        detections: Hands reported by the landmark model for this frame.
        state: Debounce state, updated in place (except on degenerate frames).
        config: Thresholds and hold length; defaults if None.

    Returns:
        An immutable `FrameResult` describing the frame.
    """
    cfg = config or DEFAULT_CONFIG
    hold_frames = cfg.debounce.hold_frames
    hands = _usable_hands(detections)
    hands_count = len(hands)
    w, h = detections.width, detections.height

    try:
        validate_dimensions(w, h)
    except DimensionError as e:
        logger.warning("Skipping frame: %s", e)
        return FrameResult(
            hands_count=hands_count,
            gesture_confirmed=state.confirmed and hands_count == 2,
            hold_counter=state.hold_counter,
            phase=debounce.phase_of(state, hands_count),
            hold_frames=hold_frames,
        )

    was_confirmed = state.confirmed
    metrics = None
    detected = False
    if hands_count == 2:
        metrics = measure(hands[0].landmarks, hands[1].landmarks, w, h)
        detected = is_love_symbol(metrics, cfg.thresholds)
        phase = debounce.update(state, 2, detected, hold_frames)
        logger.debug("Gesture: %s, Hold: %d", "LOVE" if detected else "NO", state.hold_counter)
    else:
        phase = debounce.update(state, hands_count, hold_frames=hold_frames)

    if state.confirmed and not was_confirmed:
        logger.info("Love symbol confirmed after %d frames", state.hold_counter)
    elif was_confirmed and not state.confirmed:
        logger.info("Love symbol lost (%d hands in view)", hands_count)

    skeletons = tuple(render(hand.landmarks, hand.handedness, w, h) for hand in hands)

    return FrameResult(
        hands_count=hands_count,
        gesture_confirmed=state.confirmed,
        hold_counter=state.hold_counter,
        skeletons=skeletons,
        phase=phase,
        gesture_detected=detected,
        hold_frames=hold_frames,
        metrics=metrics,
    )


class FramePipeline:
    """
    Stateful wrapper that owns a `GestureState` for one session.

    The lock serializes `process` and `reset`, so the pipeline can be shared
    between a capture thread and a UI thread.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._state = GestureState()
        self._lock = threading.Lock()

    @property
    def state(self) -> GestureState:
        with self._lock:
            return GestureState(self._state.hold_counter, self._state.confirmed)

    def process(self, detections: FrameDetections) -> FrameResult:
        with self._lock:
            return process_frame(detections, self._state, self.config)

    def reset(self) -> None:
        with self._lock:
            self._state.reset()
        logger.debug("Gesture state reset")
