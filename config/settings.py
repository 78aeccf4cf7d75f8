"""Configuration management for the ECG rhythm demo."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

import yaml

from src.ecg_system.exceptions import ConfigError


@dataclass
class SynthesisConfig:
    """Configuration for waveform synthesis."""

    sample_rate: int = 250
    duration_sec: float = 10.0
    amplitude: float = 80.0
    noise_amplitude: float = 1.0


@dataclass
class DetectionConfig:
    """Configuration for R-peak detection.

    ``min_distance`` is the refractory spacing in samples: a local maximum
    closer than this to the previously accepted peak is dropped.
    """

    threshold: float = 50.0
    min_distance: int = 50


@dataclass
class AtrialConfig:
    """Configuration for P-wave detection.

    The lookback window spans ``[R - lookback_start_sec, R - lookback_end_sec)``
    and a P-wave is counted when the window maximum lies strictly inside
    ``(band_low, band_high)``.
    """

    lookback_start_sec: float = 0.20
    lookback_end_sec: float = 0.05
    band_low: float = 10.0
    band_high: float = 30.0


@dataclass
class Settings:
    """Top-level application settings."""

    synthesis: SynthesisConfig = field(default_factory=SynthesisConfig)
    detection: DetectionConfig = field(default_factory=DetectionConfig)
    atrial: AtrialConfig = field(default_factory=AtrialConfig)
    rules_path: Optional[str] = None
    log_level: str = "INFO"
    seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        settings = cls(
            rules_path=os.getenv("ECG_RULES_PATH"),
            log_level=os.getenv("ECG_LOG_LEVEL", "INFO"),
            seed=_env_number("ECG_SEED", int),
        )
        sample_rate = _env_number("ECG_SAMPLE_RATE", int)
        if sample_rate is not None:
            settings.synthesis.sample_rate = sample_rate
        duration = _env_number("ECG_DURATION_SEC", float)
        if duration is not None:
            settings.synthesis.duration_sec = duration
        return settings

    @classmethod
    def from_yaml(cls, path: str) -> Settings:
        """Load settings from YAML config file."""
        config_path = Path(path)
        if not config_path.exists():
            return cls()
        with open(config_path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(f"Cannot parse settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Top level of {path} must be a mapping")
        settings = cls()
        try:
            if "synthesis" in data:
                settings.synthesis = SynthesisConfig(**data["synthesis"])
            if "detection" in data:
                settings.detection = DetectionConfig(**data["detection"])
            if "atrial" in data:
                settings.atrial = AtrialConfig(**data["atrial"])
        except TypeError as exc:
            raise ConfigError(f"Bad section in {path}: {exc}") from exc
        for key in ("rules_path", "log_level", "seed"):
            if key in data:
                setattr(settings, key, data[key])
        return settings


def _env_number(name: str, cast: Callable[[str], Any]) -> Any:
    """Parse a numeric environment variable, ``None`` when unset or empty."""
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc
