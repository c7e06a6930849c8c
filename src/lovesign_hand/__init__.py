from .classifier import classify, measure
from .config import Config, load_config
from .pipeline import FramePipeline, process_frame
from .skeleton import render
from .status import StatusView, describe
from .types import (
    FrameDetections,
    FrameResult,
    GesturePhase,
    GestureState,
    Handedness,
    HandDetection,
    Point2D,
    Skeleton,
    SkeletonColor,
)

__all__ = [
    "classify",
    "measure",
    "render",
    "process_frame",
    "FramePipeline",
    "Config",
    "load_config",
    "describe",
    "StatusView",
    "FrameDetections",
    "FrameResult",
    "GesturePhase",
    "GestureState",
    "Handedness",
    "HandDetection",
    "Point2D",
    "Skeleton",
    "SkeletonColor",
]
