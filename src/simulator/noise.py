"""Baseline noise for synthesized ECG traces."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class NoiseConfig:
    """Configuration for the noise stage.

    Attributes:
        uniform_amplitude: half-width of the uniform jitter added to every
            sample, in the same units as the waveform amplitude.
    """

    uniform_amplitude: float = 1.0


NOISE_PRESETS: dict[str, NoiseConfig] = {
    "clean": NoiseConfig(uniform_amplitude=0.0),
    "default": NoiseConfig(uniform_amplitude=1.0),
}


def add_uniform_noise(
    signal: np.ndarray,
    rng: np.random.Generator,
    config: NoiseConfig,
) -> np.ndarray:
    """Add independent uniform noise in [-a, a] to every sample."""
    if config.uniform_amplitude == 0.0:
        return signal
    a = config.uniform_amplitude
    return signal + rng.uniform(-a, a, len(signal))
