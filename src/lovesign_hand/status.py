from __future__ import annotations

from dataclasses import dataclass

from .types import FrameResult, GesturePhase

PROMPT_MOOD = "Show her the love!"
HAPPY_MOOD = "She is Happy!"


@dataclass(frozen=True)
class StatusView:
    """User-facing text for one frame."""

    badge: str
    tone: str  # red / yellow / gray / green
    mood: str
    debug: str
    active: bool


def describe(result: FrameResult) -> StatusView:
    """Map a `FrameResult` to the badge, mood line and debug line shown to the user."""
    phase = result.phase
    if phase is GesturePhase.NO_HANDS:
        return StatusView("No hands detected", "red", PROMPT_MOOD, "Hands: 0", False)
    if phase is GesturePhase.ONE_HAND:
        return StatusView("Raise both hands...", "yellow", PROMPT_MOOD, "Hands: 1 | Need both!", False)

    debug = f"Hands: 2 | Hold: {result.hold_counter}/{result.hold_frames}"
    if phase is GesturePhase.TWO_HANDS_CONFIRMED:
        return StatusView("LOVE SYMBOL DETECTED!", "green", HAPPY_MOOD, debug, True)
    return StatusView("Make the love symbol...", "gray", PROMPT_MOOD, debug, False)
