"""Signal-based R-peak detector.

Finds R-peaks directly in the raw trace: strict local maxima above an
amplitude threshold, accepted greedily in time order subject to a
refractory spacing.

Usage:
    detector = SignalBasedBeatDetector(threshold=50, min_distance=50)
    r_peaks = detector.detect(samples)  # samples: [2500]
"""

from __future__ import annotations

import logging

import numpy as np
from scipy.signal import argrelmax

logger = logging.getLogger(__name__)


class SignalBasedBeatDetector:
    """Detect R-peaks from a raw single-lead trace.

    The acceptance rule is greedy and never backtracks: once a candidate is
    rejected for falling inside the refractory window of the previous peak
    it is not reconsidered, even if it is taller than the accepted one.

    Args:
        threshold: minimum amplitude of an R-peak (default 50).
        min_distance: minimum spacing in samples between accepted peaks
            (default 50, i.e. 200 ms at 250 Hz).
    """

    def __init__(self, threshold: float = 50.0, min_distance: int = 50) -> None:
        self.threshold = threshold
        self.min_distance = min_distance

    def detect(self, samples: np.ndarray) -> list[int]:
        """Detect R-peaks.

        Args:
            samples: 1-D trace.

        Returns:
            Strictly increasing list of sample indices.
        """
        candidates = self._candidates(np.asarray(samples, dtype=np.float64))

        # Enforce refractory distance between R-peaks
        kept: list[int] = []
        for idx in candidates:
            if not kept or idx - kept[-1] >= self.min_distance:
                kept.append(int(idx))

        logger.debug(
            "R-peak detection: %d candidates, %d accepted", len(candidates), len(kept),
        )
        return kept

    def _candidates(self, signal: np.ndarray) -> np.ndarray:
        """Interior strict local maxima above the threshold, in index order."""
        if signal.ndim != 1 or len(signal) < 3:
            return np.empty(0, dtype=np.intp)
        # mode="clip" compares the edges with themselves, so they never qualify
        (maxima,) = argrelmax(signal, order=1, mode="clip")
        return maxima[signal[maxima] > self.threshold]


def detect_events(
    samples: np.ndarray,
    threshold: float = 50.0,
    min_distance: int = 50,
) -> list[int]:
    """Functional form of :meth:`SignalBasedBeatDetector.detect`."""
    return SignalBasedBeatDetector(threshold, min_distance).detect(samples)
