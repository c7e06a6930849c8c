"""
Tests for the MediaPipe result adapters, using stand-in result objects.
"""
import tempfile
import unittest
from http.client import IncompleteRead
from pathlib import Path
from types import SimpleNamespace
from unittest import mock
from urllib.error import URLError

import hand_fixtures  # noqa: F401

from lovesign_hand.detector import HandLandmarkSource
from lovesign_hand.model_assets import ensure_hand_landmarker_task
from lovesign_hand.types import FrameDetections, Handedness, Point2D


def fake_landmarks(n=21):
    return [SimpleNamespace(x=i / 100.0, y=0.5, z=0.0) for i in range(n)]


class TestHandedness(unittest.TestCase):

    def test_labels(self):
        self.assertEqual(Handedness.from_label("Left"), Handedness.LEFT)
        self.assertEqual(Handedness.from_label("right"), Handedness.RIGHT)
        self.assertEqual(Handedness.from_label(None), Handedness.UNKNOWN)
        self.assertEqual(Handedness.from_label(""), Handedness.UNKNOWN)
        self.assertEqual(Handedness.from_label("Both"), Handedness.UNKNOWN)


class TestSolutionsAdapter(unittest.TestCase):

    def test_no_hands(self):
        results = SimpleNamespace(multi_hand_landmarks=None, multi_handedness=None)
        self.assertEqual(HandLandmarkSource._from_solutions(results), [])

    def test_missing_handedness(self):
        results = SimpleNamespace(
            multi_hand_landmarks=[SimpleNamespace(landmark=fake_landmarks()), SimpleNamespace(landmark=fake_landmarks())],
            multi_handedness=[SimpleNamespace(classification=[SimpleNamespace(label="Right", score=0.9)])],
        )
        raw = HandLandmarkSource._from_solutions(results)
        self.assertEqual([label for _, label in raw], ["Right", None])

        det = FrameDetections.from_pairs(raw, 640, 480)
        self.assertEqual([h.handedness for h in det.hands], [Handedness.RIGHT, Handedness.UNKNOWN])
        self.assertEqual(len(det.hands[0].landmarks), 21)
        self.assertEqual(det.hands[0].landmarks[10], Point2D(0.1, 0.5))


class TestModelAssets(unittest.TestCase):

    def test_existing_model_is_not_downloaded(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "hand_landmarker.task"
            path.write_bytes(b"model")
            self.assertEqual(ensure_hand_landmarker_task(str(path), url="http://invalid.example/"), str(path))

    def _urlopen_failing_on_read(self, exc):
        response = mock.MagicMock()
        response.__enter__.return_value.read.side_effect = exc
        return mock.patch("lovesign_hand.model_assets.urllib.request.urlopen", return_value=response)

    def test_interrupted_download_leaves_no_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "models" / "hand_landmarker.task"
            with self._urlopen_failing_on_read(IncompleteRead(b"")):
                with self.assertRaises(RuntimeError):
                    ensure_hand_landmarker_task(str(path))
                self.assertFalse(path.exists())
                # A retry must attempt the download again rather than accept a stale file.
                with self.assertRaises(RuntimeError):
                    ensure_hand_landmarker_task(str(path))
            self.assertFalse(path.exists())

    def test_unreachable_host(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "hand_landmarker.task"
            with mock.patch(
                "lovesign_hand.model_assets.urllib.request.urlopen",
                side_effect=URLError("no route to host"),
            ):
                with self.assertRaises(RuntimeError):
                    ensure_hand_landmarker_task(str(path))
            self.assertFalse(path.exists())

    def test_empty_response_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "hand_landmarker.task"
            response = mock.MagicMock()
            response.__enter__.return_value.read.return_value = b""
            with mock.patch("lovesign_hand.model_assets.urllib.request.urlopen", return_value=response):
                with self.assertRaises(RuntimeError):
                    ensure_hand_landmarker_task(str(path))
            self.assertFalse(path.exists())

    def test_successful_download_written(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "hand_landmarker.task"
            response = mock.MagicMock()
            response.__enter__.return_value.read.return_value = b"model-bytes"
            with mock.patch("lovesign_hand.model_assets.urllib.request.urlopen", return_value=response):
                self.assertEqual(ensure_hand_landmarker_task(str(path)), str(path))
            self.assertEqual(path.read_bytes(), b"model-bytes")


if __name__ == "__main__":
    unittest.main()
