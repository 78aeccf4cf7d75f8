"""Explicit session holding the current rhythm selection and its artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from config.settings import Settings
from src.ecg_system.pipeline import RhythmAnalyzer
from src.ecg_system.schemas import ClassificationResult
from src.simulator.ecg_simulator import ECGSimulator
from src.simulator.noise import NoiseConfig
from src.simulator.patterns import RhythmPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Artifacts derived from one selection; replaced wholesale on reselect."""

    pattern: RhythmPattern
    samples: np.ndarray
    result: ClassificationResult


class RhythmSession:
    """One logical user session.

    Each :meth:`select` synthesizes a fresh trace and analyzes it to
    completion; the previous snapshot is discarded, never merged.

    Args:
        settings: application settings (defaults if ``None``).
        rng: generator shared by all syntheses of this session; built from
            ``settings.seed`` when omitted.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._rng = rng if rng is not None else np.random.default_rng(self.settings.seed)
        syn = self.settings.synthesis
        self.simulator = ECGSimulator(
            fs=syn.sample_rate,
            duration=syn.duration_sec,
            amplitude=syn.amplitude,
            rng=self._rng,
            noise_config=NoiseConfig(uniform_amplitude=syn.noise_amplitude),
        )
        self.analyzer = RhythmAnalyzer(self.settings)
        self._snapshot: Optional[SessionSnapshot] = None

    @property
    def snapshot(self) -> Optional[SessionSnapshot]:
        return self._snapshot

    @property
    def current_pattern(self) -> Optional[RhythmPattern]:
        return self._snapshot.pattern if self._snapshot else None

    def select(self, pattern: RhythmPattern | str) -> SessionSnapshot:
        """Make *pattern* the current selection and recompute everything."""
        if isinstance(pattern, str):
            pattern = RhythmPattern.parse(pattern)
        logger.info("Selected rhythm pattern %s", pattern.name)

        samples = self.simulator.generate(pattern)
        samples.setflags(write=False)
        result = self.analyzer.analyze(samples)

        self._snapshot = SessionSnapshot(pattern=pattern, samples=samples, result=result)
        return self._snapshot
