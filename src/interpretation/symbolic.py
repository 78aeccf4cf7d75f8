"""Symbolic calculation engine for R-R interval statistics.

Computes intervals, variability and heart rate from detected R-peaks with
auditable calculation traces.
"""

from __future__ import annotations

from typing import Optional

import numpy as np


def compute_intervals(beat_events: list[int], sample_rate: int = 250) -> list[float]:
    """R-R intervals in seconds from consecutive R-peak indices."""
    return [
        (beat_events[i] - beat_events[i - 1]) / sample_rate
        for i in range(1, len(beat_events))
    ]


def compute_variability(intervals: list[float]) -> float:
    """Population standard deviation of *intervals* (0 below two intervals)."""
    if len(intervals) < 2:
        return 0.0
    rr = np.asarray(intervals, dtype=np.float64)
    # Shifting by the first interval keeps a constant series at exactly 0
    return float(np.std(rr - rr[0]))


class SymbolicCalculationEngine:
    """Compute R-R statistics from R-peak indices.

    All calculations produce human-readable traces stored in ``self.traces``.

    Args:
        fs: Sampling rate in Hz (default 250).
    """

    def __init__(self, fs: int = 250) -> None:
        self.fs = fs
        self.traces: list[str] = []

    def rr_intervals(self, r_peaks: list[int]) -> list[float]:
        """Compute R-R intervals in seconds, tracing each one."""
        self.traces.clear()
        if len(r_peaks) < 2:
            self.traces.append("RR intervals: insufficient R-peaks (<2)")
            return []

        rr = compute_intervals(r_peaks, self.fs)
        for i, interval in enumerate(rr, start=1):
            self.traces.append(
                f"RR[{i}]: sample {r_peaks[i - 1]}->{r_peaks[i]} = {interval:.3f}s"
            )
        return rr

    def mean_rr(self, rr_intervals: list[float]) -> Optional[float]:
        """Mean R-R interval in seconds, ``None`` without intervals."""
        if not rr_intervals:
            return None
        mean = float(np.mean(rr_intervals))
        self.traces.append(
            f"Mean RR: sum / {len(rr_intervals)} = {mean:.3f}s"
        )
        return mean

    def heart_rate(self, mean_rr: Optional[float]) -> Optional[float]:
        """Heart rate in BPM from the mean R-R interval."""
        if mean_rr is None or mean_rr <= 0:
            self.traces.append("Heart rate: no RR intervals available")
            return None
        hr = 60.0 / mean_rr
        self.traces.append(f"Heart rate: 60 / {mean_rr:.3f}s = {hr:.1f} bpm")
        return hr

    def variability(self, rr_intervals: list[float]) -> float:
        """R-R variability (population std) in seconds."""
        std = compute_variability(rr_intervals)
        if len(rr_intervals) < 2:
            self.traces.append("RR variability: fewer than 2 intervals, defaulting to 0")
        else:
            self.traces.append(
                f"RR variability: std over {len(rr_intervals)} intervals = {std:.4f}s"
            )
        return std
