from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import cv2

from .config import DetectorConfig
from .model_assets import ensure_hand_landmarker_task
from .types import FrameDetections, HandDetection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _SolutionsBackend:
    hands: object


@dataclass(frozen=True)
class _TasksBackend:
    mp: object
    landmarker: object


def _create_solutions_backend(cfg: DetectorConfig, static_image_mode: bool) -> Optional[_SolutionsBackend]:
    import mediapipe as mp  # type: ignore

    if not hasattr(mp, "solutions"):
        return None
    hands = mp.solutions.hands.Hands(
        static_image_mode=static_image_mode,
        max_num_hands=cfg.max_num_hands,
        model_complexity=cfg.model_complexity,
        min_detection_confidence=cfg.min_detection_confidence,
        min_tracking_confidence=cfg.min_tracking_confidence,
    )
    return _SolutionsBackend(hands=hands)


def _create_tasks_backend(cfg: DetectorConfig) -> _TasksBackend:
    """
    Fallback for MediaPipe builds without `mp.solutions`.

    The Tasks HandLandmarker needs a `.task` model asset on disk; it is fetched
    on first use.
    """
    import mediapipe as mp  # type: ignore
    from mediapipe.tasks.python import BaseOptions  # type: ignore
    from mediapipe.tasks.python.vision import HandLandmarker, HandLandmarkerOptions, RunningMode  # type: ignore

    model_path = ensure_hand_landmarker_task(cfg.tasks_model_path)
    options = HandLandmarkerOptions(
        base_options=BaseOptions(model_asset_path=model_path),
        running_mode=RunningMode.VIDEO,
        num_hands=cfg.max_num_hands,
        min_hand_detection_confidence=cfg.min_detection_confidence,
        min_tracking_confidence=cfg.min_tracking_confidence,
    )
    return _TasksBackend(mp=mp, landmarker=HandLandmarker.create_from_options(options))


class HandLandmarkSource:
    """
    Turns BGR frames (OpenCV default) into `FrameDetections` using MediaPipe Hands.

    Frame width/height of the returned detections are the image's pixel size.
    """

    def __init__(self, config: Optional[DetectorConfig] = None, static_image_mode: bool = False) -> None:
        self.config = config or DetectorConfig()
        self._solutions = _create_solutions_backend(self.config, static_image_mode)
        self._tasks: Optional[_TasksBackend] = None
        self._timestamp_ms = 0

        if self._solutions is None:
            logger.info("mediapipe.solutions unavailable, using the Tasks HandLandmarker")
            try:
                self._tasks = _create_tasks_backend(self.config)
            except FileNotFoundError as e:
                raise RuntimeError(
                    "MediaPipe does not provide `mp.solutions`, and the Tasks HandLandmarker model is missing:\n"
                    f"  {self.config.tasks_model_path}"
                ) from e

    def close(self) -> None:
        if self._solutions is not None:
            self._solutions.hands.close()
        if self._tasks is not None:
            self._tasks.landmarker.close()

    def __enter__(self) -> "HandLandmarkSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def detect(self, frame_bgr) -> FrameDetections:
        h, w = frame_bgr.shape[:2]
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)

        if self._solutions is not None:
            results = self._solutions.hands.process(frame_rgb)
            raw = self._from_solutions(results)
        else:
            raw = self._from_tasks(frame_rgb)

        hands = tuple(HandDetection(landmarks=lms, handedness=label) for lms, label in raw)
        return FrameDetections(hands=hands, width=float(w), height=float(h))

    @staticmethod
    def _from_solutions(results) -> List[Tuple[list, Optional[str]]]:
        if not results.multi_hand_landmarks:
            return []
        handedness_list = results.multi_handedness or []
        out = []
        for i, hand_landmarks in enumerate(results.multi_hand_landmarks):
            label = None
            if i < len(handedness_list) and handedness_list[i].classification:
                label = getattr(handedness_list[i].classification[0], "label", None)
            out.append((hand_landmarks.landmark, label))
        return out

    def _from_tasks(self, frame_rgb) -> List[Tuple[list, Optional[str]]]:
        mp = self._tasks.mp
        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=frame_rgb)

        # VIDEO mode requires monotonically increasing timestamps.
        self._timestamp_ms += 33
        result = self._tasks.landmarker.detect_for_video(mp_image, self._timestamp_ms)

        landmarks_list = getattr(result, "hand_landmarks", None) or []
        handedness_list = getattr(result, "handedness", None) or []
        out = []
        for i, landmarks in enumerate(landmarks_list):
            label = None
            if i < len(handedness_list) and handedness_list[i]:
                cat0 = handedness_list[i][0]
                label = getattr(cat0, "category_name", None) or getattr(cat0, "display_name", None)
            out.append((landmarks, label))
        return out
