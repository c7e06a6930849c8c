from __future__ import annotations

from .types import DEFAULT_HOLD_FRAMES, GesturePhase, GestureState


def update(state: GestureState, hands_count: int, gesture_detected: bool = False, hold_frames: int = DEFAULT_HOLD_FRAMES) -> GesturePhase:
    """
    Advance the hold counter by one frame and return the resulting phase.

    Any frame that does not qualify (fewer or more than two hands, or two hands
    without the gesture) drops the counter straight back to zero.
    """
    if hands_count != 2:
        state.hold_counter = 0
        state.confirmed = False
        return GesturePhase.NO_HANDS if hands_count == 0 else GesturePhase.ONE_HAND

    if gesture_detected:
        state.hold_counter += 1
    else:
        state.hold_counter = 0

    state.confirmed = state.hold_counter >= hold_frames
    if state.confirmed:
        return GesturePhase.TWO_HANDS_CONFIRMED
    return GesturePhase.TWO_HANDS_UNCONFIRMED


def phase_of(state: GestureState, hands_count: int) -> GesturePhase:
    """Phase for a frame that did not advance the state."""
    if hands_count == 0:
        return GesturePhase.NO_HANDS
    if hands_count == 1:
        return GesturePhase.ONE_HAND
    if state.confirmed:
        return GesturePhase.TWO_HANDS_CONFIRMED
    return GesturePhase.TWO_HANDS_UNCONFIRMED
