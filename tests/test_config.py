"""
Tests for YAML configuration loading.
"""
import tempfile
import unittest
from pathlib import Path

import hand_fixtures  # noqa: F401

from lovesign_hand.config import Config, DebounceConfig, config_from_dict, load_config
from lovesign_hand.errors import ConfigError
from lovesign_hand.types import DEFAULT_HOLD_FRAMES, FrameResult

REPO_ROOT = Path(__file__).parent.parent


class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, text):
        path = Path(self.tmp.name) / "cfg.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    def test_defaults(self):
        cfg = load_config()
        self.assertEqual(cfg.thresholds.v_min_px, 30.0)
        self.assertEqual(cfg.thresholds.v_max_px, 100.0)
        self.assertEqual(cfg.thresholds.proximity_max_px, 150.0)
        self.assertEqual(cfg.debounce.hold_frames, 3)
        self.assertEqual(cfg.detector.max_num_hands, 2)
        self.assertEqual(cfg.detector.min_detection_confidence, 0.7)
        self.assertEqual((cfg.camera.width, cfg.camera.height), (640, 480))

    def test_shipped_default_file_matches_builtin(self):
        self.assertEqual(load_config(str(REPO_ROOT / "config.default.yaml")), Config())

    def test_partial_override(self):
        cfg = load_config(self.write("debounce:\n  hold_frames: 5\nthresholds:\n  proximity_max_px: 200\n"))
        self.assertEqual(cfg.debounce.hold_frames, 5)
        self.assertEqual(cfg.thresholds.proximity_max_px, 200.0)
        self.assertIsInstance(cfg.thresholds.proximity_max_px, float)
        self.assertEqual(cfg.thresholds.v_min_px, 30.0)

    def test_empty_file(self):
        self.assertEqual(load_config(self.write("")), Config())

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            load_config(str(Path(self.tmp.name) / "nope.yaml"))

    def test_bad_yaml(self):
        with self.assertRaises(ConfigError):
            load_config(self.write("thresholds: [unclosed\n"))

    def test_unknown_keys(self):
        with self.assertRaises(ConfigError):
            config_from_dict({"thresholds": {"v_min": 10}})
        with self.assertRaises(ConfigError):
            config_from_dict({"audio": {}})

    def test_type_errors(self):
        with self.assertRaises(ConfigError):
            config_from_dict({"debounce": {"hold_frames": "3"}})
        with self.assertRaises(ConfigError):
            config_from_dict({"debounce": {"hold_frames": True}})
        with self.assertRaises(ConfigError):
            config_from_dict({"camera": {"mirror": 1}})

    def test_invalid_values(self):
        for data in (
            {"thresholds": {"v_min_px": 100, "v_max_px": 30}},
            {"thresholds": {"proximity_max_px": 0}},
            {"debounce": {"hold_frames": 0}},
            {"detector": {"max_num_hands": 0}},
            {"detector": {"min_tracking_confidence": 1.5}},
            {"camera": {"width": 0}},
        ):
            with self.assertRaises(ConfigError):
                config_from_dict(data)

    def test_non_finite_thresholds(self):
        for key in ("v_min_px", "v_max_px", "proximity_max_px"):
            with self.assertRaises(ConfigError):
                config_from_dict({"thresholds": {key: float("nan")}})
        with self.assertRaises(ConfigError):
            load_config(self.write("thresholds:\n  proximity_max_px: .inf\n"))
        with self.assertRaises(ConfigError):
            load_config(self.write("thresholds:\n  v_max_px: .nan\n"))

    def test_falsy_scalar_root_rejected(self):
        for text in ("0\n", "false\n", "''\n", "[]\n"):
            with self.assertRaises(ConfigError):
                load_config(self.write(text))

    def test_hold_frames_default_shared_with_results(self):
        self.assertEqual(FrameResult(0, False, 0).hold_frames, DebounceConfig().hold_frames)
        self.assertEqual(DebounceConfig().hold_frames, DEFAULT_HOLD_FRAMES)


if __name__ == "__main__":
    unittest.main()
