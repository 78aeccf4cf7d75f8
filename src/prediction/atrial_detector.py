"""P-wave (atrial activity) detector.

Looks for a small positive deflection in a fixed window before each R-peak.
The amplitude band sits above the baseline noise floor and well below the
QRS amplitude, so noise alone and R/T waves both read as "missing".
"""

from __future__ import annotations

import logging
import math

import numpy as np

from src.ecg_system.schemas import AtrialActivityReport

logger = logging.getLogger(__name__)


class AtrialActivityDetector:
    """Count beats with and without a detectable P-wave.

    Args:
        fs: sampling rate in Hz (default 250).
        lookback_start_sec: window start, seconds before the R-peak.
        lookback_end_sec: window end (exclusive), seconds before the R-peak.
        band_low: window maximum must exceed this to count as a P-wave.
        band_high: window maximum must stay below this.
    """

    def __init__(
        self,
        fs: int = 250,
        lookback_start_sec: float = 0.20,
        lookback_end_sec: float = 0.05,
        band_low: float = 10.0,
        band_high: float = 30.0,
    ) -> None:
        self.fs = fs
        self.lookback_start = int(math.floor(lookback_start_sec * fs))
        self.lookback_end = int(math.floor(lookback_end_sec * fs))
        self.band_low = band_low
        self.band_high = band_high

    def detect(self, samples: np.ndarray, r_peaks: list[int]) -> AtrialActivityReport:
        """Classify every beat after the first as P-wave detected or missing.

        The first beat is skipped: its lookback window is not guaranteed to
        lie inside the buffer.
        """
        samples = np.asarray(samples, dtype=np.float64)
        detected = 0
        missing = 0
        for r in r_peaks[1:]:
            if self.band_low < self.window_max(samples, r) < self.band_high:
                detected += 1
            else:
                missing += 1

        report = AtrialActivityReport(detected=detected, missing=missing)
        logger.debug(
            "P-wave detection: %d detected, %d missing", detected, missing,
        )
        return report

    def window_max(self, samples: np.ndarray, r_peak: int) -> float:
        """Maximum of the lookback window before *r_peak*, floored at 0.

        Windows clipped by the buffer start or left empty yield 0.
        """
        start = max(0, r_peak - self.lookback_start)
        end = min(len(samples), max(start, r_peak - self.lookback_end))
        window = samples[start:end]
        if window.size == 0:
            return 0.0
        return max(0.0, float(window.max()))


def detect_atrial_activity(
    samples: np.ndarray,
    beat_events: list[int],
    sample_rate: int = 250,
) -> AtrialActivityReport:
    """Functional form of :meth:`AtrialActivityDetector.detect`."""
    return AtrialActivityDetector(fs=sample_rate).detect(samples, beat_events)
