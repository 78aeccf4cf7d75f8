"""Data classes for ECG rhythm analysis output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np


# A synthesized trace: 1-D float64 array, index i is time i / sample_rate.
SampleSequence = np.ndarray


@dataclass(frozen=True)
class AtrialActivityReport:
    """P-wave evidence collected over all beats after the first.

    Attributes:
        detected: beats whose lookback window held a P-sized deflection.
        missing: beats whose lookback window did not.
    """

    detected: int = 0
    missing: int = 0

    @property
    def present(self) -> bool:
        """Majority rule: P-waves count as present when detected > missing."""
        return self.detected > self.missing

    @property
    def total(self) -> int:
        return self.detected + self.missing

    def to_dict(self) -> dict[str, Any]:
        return {
            "detected": self.detected,
            "missing": self.missing,
            "present": self.present,
        }


@dataclass
class ClassificationResult:
    """Terminal artifact of one analysis pass.

    ``mean_rr`` and ``heart_rate_bpm`` are ``None`` when fewer than two
    beats were detected; renderers should show a placeholder instead.
    """

    peak_count: int
    mean_rr: Optional[float]
    heart_rate_bpm: Optional[float]
    rr_std: float
    regular: bool
    atrial_report: AtrialActivityReport
    verdict: str
    conclusion: str
    rationale: list[str] = field(default_factory=list)
    r_peaks: list[int] = field(default_factory=list)
    rr_intervals: list[float] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON assembly."""
        return {
            "peak_count": self.peak_count,
            "mean_rr_sec": self.mean_rr,
            "heart_rate_bpm": self.heart_rate_bpm,
            "rr_std_sec": self.rr_std,
            "regular": self.regular,
            "atrial_activity": self.atrial_report.to_dict(),
            "verdict": self.verdict,
            "conclusion": self.conclusion,
            "rationale": list(self.rationale),
            "r_peaks": list(self.r_peaks),
            "rr_intervals_sec": list(self.rr_intervals),
        }
