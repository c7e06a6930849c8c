from __future__ import annotations

import argparse
import logging
import os
import platform
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
from lovesign_hand.pipeline import FramePipeline  # noqa: E402
from lovesign_hand.status import describe  # noqa: E402


def main() -> int:
    ap = argparse.ArgumentParser(description="Webcam love-symbol detector demo.")
    ap.add_argument("--config", default=None, help="Path to a YAML config (default: built-in settings)")
    ap.add_argument("--camera", type=int, default=None, help="Camera index (overrides config)")
    ap.add_argument(
        "--no-mirror",
        action="store_true",
        help="Disable horizontal mirroring (default is mirrored/selfie mode)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log per-frame gesture decisions")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_config(args.config)
    cam = cfg.camera
    index = cam.index if args.camera is None else args.camera
    mirror = cam.mirror and not args.no_mirror

    if platform.system() == "Darwin":
        cap = cv2.VideoCapture(index, cv2.CAP_AVFOUNDATION)
    else:
        cap = cv2.VideoCapture(index)
    if not cap.isOpened():
        raise RuntimeError(
            f"Could not open camera index {index}. "
            "On macOS: System Settings -> Privacy & Security -> Camera -> allow your terminal."
        )

    cap.set(cv2.CAP_PROP_FRAME_WIDTH, cam.width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, cam.height)

    pipeline = FramePipeline(cfg)
    with HandLandmarkSource(cfg.detector) as source:
        while True:
            ok, frame = cap.read()
            if not ok:
                break

            if mirror:
                frame = cv2.flip(frame, 1)

            result = pipeline.process(source.detect(frame))
            for skeleton in result.skeletons:
                draw_skeleton(frame, skeleton)
            draw_status(frame, describe(result))

            cv2.imshow("lovesign - press q to quit, r to reset", frame)
            key = cv2.waitKey(1) & 0xFF
            if key in (ord("q"), 27):
                break
            if key == ord("r"):
                pipeline.reset()

    cap.release()
    cv2.destroyAllWindows()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
