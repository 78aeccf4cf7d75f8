"""ECG simulator facade: single entry point for generating synthetic traces."""

from __future__ import annotations

import logging

import numpy as np

from src.ecg_system.exceptions import InvalidParameterError
from src.ecg_system.schemas import SampleSequence
from src.simulator.morphology import generate_beat
from src.simulator.noise import NOISE_PRESETS, NoiseConfig, add_uniform_noise
from src.simulator.patterns import PATTERN_REGISTRY, PatternConfig, RhythmPattern

logger = logging.getLogger(__name__)

FS_ECG = 250
ECG_DURATION = 10.0
ECG_AMPLITUDE = 80.0


class ECGSimulator:
    """Facade for generating a synthetic single-lead ECG.

    Args:
        fs: sampling frequency in Hz (default 250).
        duration: signal duration in seconds (default 10).
        amplitude: R-wave amplitude in drawing units (default 80).
        seed: random seed for reproducibility. ``None`` for non-deterministic.
        rng: explicit generator; takes precedence over *seed*.
        noise_config: baseline noise settings (default +/- 1 uniform).
    """

    def __init__(
        self,
        fs: int = FS_ECG,
        duration: float = ECG_DURATION,
        amplitude: float = ECG_AMPLITUDE,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        noise_config: NoiseConfig | None = None,
    ) -> None:
        if fs <= 0:
            raise InvalidParameterError("fs", fs, "sampling rate must be positive")
        if duration <= 0:
            raise InvalidParameterError("duration", duration, "duration must be positive")
        self.fs = fs
        self.duration = duration
        self.amplitude = amplitude
        self.n_samples = int(fs * duration)
        if self.n_samples <= 0:
            raise InvalidParameterError(
                "duration", duration, "fewer than one sample at this rate",
            )
        self.time = np.arange(self.n_samples) / fs
        self.noise_config = noise_config or NOISE_PRESETS["default"]
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, pattern: RhythmPattern) -> SampleSequence:
        """Generate a trace for *pattern*.

        Returns:
            1-D float64 array of length ``n_samples``.
        """
        cfg = PATTERN_REGISTRY[pattern]
        signal = add_uniform_noise(
            np.zeros(self.n_samples), self._rng, self.noise_config,
        )
        signal += generate_beat(self._beat_phase(cfg), cfg, self.amplitude, self._rng)
        logger.debug(
            "Synthesized %s: %d samples at %d Hz", pattern.name, self.n_samples, self.fs,
        )
        return signal

    # ------------------------------------------------------------------
    # Beat phase
    # ------------------------------------------------------------------

    def _beat_phase(self, cfg: PatternConfig) -> np.ndarray:
        if cfg.periodic:
            interval = cfg.beat_interval
            return np.mod(self.time, interval) / interval
        starts = self._beat_starts(cfg)
        return (self.time - starts) / cfg.beat_interval

    def _beat_starts(self, cfg: PatternConfig) -> np.ndarray:
        """Start time of the beat that contains each sample.

        The cursor walks forward from 0 in steps of ``base_interval`` plus a
        uniform draw in ``[0, variability)`` and stops at the last position
        whose next step would pass the sample time. Sample times increase, so
        the walk resumes where the previous sample left it.
        """
        starts = np.empty(self.n_samples)
        cursor = 0.0
        step = cfg.base_interval + self._rng.uniform(0.0, cfg.variability)
        for i, t in enumerate(self.time):
            while cursor + step < t:
                cursor += step
                step = cfg.base_interval + self._rng.uniform(0.0, cfg.variability)
            starts[i] = cursor
        return starts


def synthesize(
    pattern: RhythmPattern,
    sample_rate: int = FS_ECG,
    duration_sec: float = ECG_DURATION,
    amplitude: float = ECG_AMPLITUDE,
    rng: np.random.Generator | None = None,
) -> SampleSequence:
    """Convenience wrapper around :meth:`ECGSimulator.generate`."""
    sim = ECGSimulator(fs=sample_rate, duration=duration_sec, amplitude=amplitude, rng=rng)
    return sim.generate(pattern)
