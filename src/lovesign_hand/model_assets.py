from __future__ import annotations

import logging
import os
import ssl
import urllib.request

import certifi

logger = logging.getLogger(__name__)

HAND_LANDMARKER_TASK_URL = (
    "https://storage.googleapis.com/mediapipe-models/hand_landmarker/hand_landmarker/float16/latest/hand_landmarker.task"
)


def ensure_hand_landmarker_task(model_path: str, *, url: str = HAND_LANDMARKER_TASK_URL, timeout_s: int = 30) -> str:
    """
    Make sure `hand_landmarker.task` exists at `model_path`, downloading it if needed.

    Returns the model path. Raises RuntimeError with manual download
    instructions when the download fails.
    """
    if os.path.exists(model_path):
        return model_path

    os.makedirs(os.path.dirname(model_path) or ".", exist_ok=True)
    logger.info("Downloading hand landmarker model to %s", model_path)

    # certifi avoids CERTIFICATE_VERIFY_FAILED on Python builds without system roots.
    ctx = ssl.create_default_context(cafile=certifi.where())
    try:
        with urllib.request.urlopen(url, context=ctx, timeout=timeout_s) as r:
            data = r.read()
        if not data:
            raise ValueError("empty response")
        with open(model_path, "wb") as f:
            f.write(data)
    except Exception as e:
        # Never leave a partial file behind; it would be accepted as the model next time.
        if os.path.exists(model_path):
            os.remove(model_path)
        raise RuntimeError(
            "Missing MediaPipe Tasks model file and auto-download failed.\n\n"
            f"Expected model at: {model_path}\n"
            "Download it manually:\n"
            f'  mkdir -p "{os.path.dirname(model_path) or "."}"\n'
            f'  curl -L -o "{model_path}" "{url}"\n'
        ) from e

    return model_path
