# config.py
"""
Render settings: defaults, quality presets and JSON settings files.
"""
import json
import logging
from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path

from lumen.core.errors import ConfigError

logger = logging.getLogger(__name__)

QUALITY_PRESETS = {
    "preview": {"width": 200, "height": 100, "samples": 4, "max_depth": 8},
    "balanced": {"width": 400, "height": 200, "samples": 32, "max_depth": 50},
    "final": {"width": 800, "height": 400, "samples": 200, "max_depth": 50},
}


@dataclass(frozen=True)
class RenderSettings:
    width: int = 200
    height: int = 100
    samples: int = 100
    max_depth: int = 50
    seed: int = 0
    workers: int = 1
    scene: str = "two_spheres"
    output: str = "render.png"
    use_bvh: bool = True
    gamma: float = 2.0
    clamp: bool = True

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def with_overrides(self, **overrides) -> "RenderSettings":
        """Copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def with_quality(self, quality: str) -> "RenderSettings":
        if quality not in QUALITY_PRESETS:
            raise ConfigError(f"Unknown quality {quality!r}; choose from {', '.join(QUALITY_PRESETS)}")
        return replace(self, **QUALITY_PRESETS[quality])

    def validate(self) -> "RenderSettings":
        for name in ("width", "height", "samples", "workers"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.max_depth < 0:
            raise ConfigError(f"max_depth must not be negative, got {self.max_depth}")
        if self.gamma <= 0:
            raise ConfigError(f"gamma must be positive, got {self.gamma}")
        return self

    def to_dict(self) -> dict:
        return asdict(self)


def _check_type(path, name, value, default):
    expected = type(default)
    # JSON has one number type: accept 4 where 4.0 is expected.
    if expected is float and type(value) is int:
        return float(value)
    if type(value) is not expected:
        raise ConfigError(f"Setting {name!r} in {path} must be {expected.__name__}, "
                          f"got {type(value).__name__} {value!r}")
    return value


def load_settings(path) -> RenderSettings:
    """
    Read settings from a JSON object. Missing keys keep their defaults;
    unknown keys are rejected.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Settings file not found: {path}") from None
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to read settings {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a JSON object")
    known = {f.name for f in fields(RenderSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown settings in {path}: {', '.join(unknown)}")

    defaults = RenderSettings()
    checked = {name: _check_type(path, name, value, getattr(defaults, name))
               for name, value in data.items()}

    logger.info("Loaded settings from %s", path)
    return RenderSettings(**checked)


def save_settings(settings: RenderSettings, path) -> Path:
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(settings.to_dict(), f, indent=4)
    return path
