from __future__ import annotations

import argparse
import logging
import os
import sys

import cv2

# Allow running without installing the package (repo-local usage).
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_ROOT = os.path.join(REPO_ROOT, "src")
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from lovesign_hand.config import load_config  # noqa: E402
from lovesign_hand.detector import HandLandmarkSource  # noqa: E402
from lovesign_hand.drawing import draw_skeleton, draw_status  # noqa: E402
from lovesign_hand.pipeline import process_frame  # noqa: E402
from lovesign_hand.status import describe  # noqa: E402
from lovesign_hand.types import GestureState  # noqa: E402


def main() -> int:
    ap = argparse.ArgumentParser(description="Classify a single image and write an annotated copy.")
    ap.add_argument("--image", required=True, help="Path to input image")
    ap.add_argument("--out", required=True, help="Path to output image (annotated)")
    ap.add_argument("--config", default=None, help="Path to a YAML config (default: built-in settings)")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    cfg = load_config(args.config)

    frame = cv2.imread(args.image)
    if frame is None:
        raise RuntimeError(f"Could not read image: {args.image}")

    with HandLandmarkSource(cfg.detector, static_image_mode=True) as source:
        detections = source.detect(frame)

    # A single image can never satisfy the hold, so report the raw verdict too.
    result = process_frame(detections, GestureState(), cfg)
    for skeleton in result.skeletons:
        draw_skeleton(frame, skeleton)
    draw_status(frame, describe(result))

    ok = cv2.imwrite(args.out, frame)
    if not ok:
        raise RuntimeError(f"Could not write output image: {args.out}")

    print(f"hands: {result.hands_count} | love symbol in frame: {result.gesture_detected}")
    if result.metrics is not None:
        m = result.metrics
        print(f"v1={m.v1_px:.1f}px v2={m.v2_px:.1f}px proximity={m.proximity_px:.1f}px")
    for i, sk in enumerate(result.skeletons):
        print(f"[{i}] color={sk.color.name} wrist=({sk.joints[0].x:.0f}, {sk.joints[0].y:.0f})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
