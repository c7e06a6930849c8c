"""
Configuration for the love-symbol pipeline, its landmark source and the camera.

Every setting has a default matching the tuned 640x480 setup, so
``load_config()`` with no path is a complete configuration. A YAML file may
override any subset of keys; see ``config.default.yaml`` at the repository
root for the full layout.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .types import DEFAULT_HOLD_FRAMES


@dataclass(frozen=True)
class GestureThresholds:
    """Pixel thresholds of the love-symbol classifier (tuned for ~640x480)."""

    v_min_px: float = 30.0
    v_max_px: float = 100.0
    proximity_max_px: float = 150.0


@dataclass(frozen=True)
class DebounceConfig:
    # Consecutive qualifying frames required before the gesture is confirmed.
    hold_frames: int = DEFAULT_HOLD_FRAMES


@dataclass(frozen=True)
class DetectorConfig:
    """MediaPipe Hands settings."""

    max_num_hands: int = 2
    model_complexity: int = 1
    min_detection_confidence: float = 0.7
    min_tracking_confidence: float = 0.5
    tasks_model_path: str = "models/hand_landmarker.task"


@dataclass(frozen=True)
class CameraConfig:
    index: int = 0
    width: int = 640
    height: int = 480
    mirror: bool = True


@dataclass(frozen=True)
class Config:
    thresholds: GestureThresholds = field(default_factory=GestureThresholds)
    debounce: DebounceConfig = field(default_factory=DebounceConfig)
    detector: DetectorConfig = field(default_factory=DetectorConfig)
    camera: CameraConfig = field(default_factory=CameraConfig)


_SECTIONS = {f.name: f.default_factory for f in fields(Config)}


def _coerce(section: str, key: str, current: Any, value: Any) -> Any:
    # bool is a subclass of int; keep them apart in both directions.
    if isinstance(current, bool):
        if not isinstance(value, bool):
            raise ConfigError(f"{section}.{key} must be a boolean, got {value!r}")
        return value
    if isinstance(value, bool):
        raise ConfigError(f"{section}.{key} must be a number, got {value!r}")
    if isinstance(current, int):
        if not isinstance(value, int):
            raise ConfigError(f"{section}.{key} must be an integer, got {value!r}")
        return value
    if isinstance(current, float):
        if not isinstance(value, (int, float)):
            raise ConfigError(f"{section}.{key} must be a number, got {value!r}")
        return float(value)
    if isinstance(current, str):
        if not isinstance(value, str):
            raise ConfigError(f"{section}.{key} must be a string, got {value!r}")
        return value
    return value


def _build_section(name: str, raw: Any):
    base = _SECTIONS[name]()
    if raw is None:
        return base
    if not isinstance(raw, dict):
        raise ConfigError(f"section '{name}' must be a mapping")
    known = {f.name for f in fields(base)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"unknown keys in '{name}': {', '.join(unknown)}")
    updates = {k: _coerce(name, k, getattr(base, k), v) for k, v in raw.items()}
    return replace(base, **updates)


def validate_config(cfg: Config) -> Config:
    t = cfg.thresholds
    if not all(math.isfinite(v) for v in (t.v_min_px, t.v_max_px, t.proximity_max_px)):
        raise ConfigError("gesture thresholds must be finite numbers")
    if t.v_min_px < 0 or t.v_max_px <= 0 or t.proximity_max_px <= 0:
        raise ConfigError("gesture thresholds must be positive")
    if t.v_min_px >= t.v_max_px:
        raise ConfigError(f"v_min_px ({t.v_min_px}) must be below v_max_px ({t.v_max_px})")
    if cfg.debounce.hold_frames < 1:
        raise ConfigError("debounce.hold_frames must be at least 1")
    d = cfg.detector
    if d.max_num_hands < 1:
        raise ConfigError("detector.max_num_hands must be at least 1")
    for name in ("min_detection_confidence", "min_tracking_confidence"):
        if not (0.0 <= getattr(d, name) <= 1.0):
            raise ConfigError(f"detector.{name} must be within [0, 1]")
    if cfg.camera.width <= 0 or cfg.camera.height <= 0:
        raise ConfigError("camera width/height must be positive")
    return cfg


def config_from_dict(data: Optional[Dict[str, Any]]) -> Config:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("configuration root must be a mapping")
    unknown = sorted(set(data) - set(_SECTIONS))
    if unknown:
        raise ConfigError(f"unknown config sections: {', '.join(unknown)}")
    cfg = Config(**{name: _build_section(name, data.get(name)) for name in _SECTIONS})
    return validate_config(cfg)


def load_config(path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML file. If None, the built-in defaults are used.

    Returns:
        A validated `Config`.

    Raises:
        ConfigError: if the file cannot be read or parsed, or holds invalid values.
    """
    if path is None:
        return Config()

    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"could not read config file {p}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"could not parse config file {p}: {e}") from e

    return config_from_dict(data)
