"""Rhythm pattern definitions and beat-phase configurations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.ecg_system.exceptions import UnknownPatternError


class RhythmPattern(Enum):
    """Rhythm patterns the simulator can produce, keyed by UI selector."""

    NORMAL = "normal"
    ATRIAL_FIBRILLATION = "afib"
    MISSING_P_WAVE = "missingPwave"

    @classmethod
    def parse(cls, selector: str) -> RhythmPattern:
        """Resolve a selector value (``"afib"``) or member name (``"ATRIAL_FIBRILLATION"``)."""
        for pattern in cls:
            if selector in (pattern.value, pattern.name):
                return pattern
        raise UnknownPatternError(
            selector, [p.value for p in cls] + [p.name for p in cls],
        )


@dataclass(frozen=True)
class PatternConfig:
    """Beat-cycle layout for a rhythm pattern.

    All windows are half-open ``(start, end)`` ranges of the beat phase in
    [0, 1]. ``None`` for ``p_wave`` means the pattern has no P deflection.

    Attributes:
        heart_rate: fixed rate in BPM for periodic patterns, ``None`` otherwise.
        base_interval: minimum beat spacing in seconds (aperiodic patterns).
        variability: width of the uniform jitter added to ``base_interval``.
        p_wave: P-wave window.
        atrial_noise: fibrillatory-wave window.
        qrs: QRS complex window.
        t_wave: T-wave window.
    """

    heart_rate: Optional[float]
    base_interval: float
    variability: float
    p_wave: Optional[tuple[float, float]]
    atrial_noise: Optional[tuple[float, float]]
    qrs: tuple[float, float]
    t_wave: tuple[float, float]

    @property
    def periodic(self) -> bool:
        return self.heart_rate is not None

    @property
    def beat_interval(self) -> float:
        """Nominal beat length in seconds used to normalise the phase."""
        if self.heart_rate is not None:
            return 60.0 / self.heart_rate
        return self.base_interval + self.variability / 2.0


PATTERN_REGISTRY: dict[RhythmPattern, PatternConfig] = {
    RhythmPattern.NORMAL: PatternConfig(
        heart_rate=70.0,
        base_interval=60.0 / 70.0,
        variability=0.0,
        p_wave=(0.0, 0.10),
        atrial_noise=None,
        qrs=(0.20, 0.35),
        t_wave=(0.55, 0.75),
    ),
    RhythmPattern.ATRIAL_FIBRILLATION: PatternConfig(
        heart_rate=None,
        base_interval=0.8,
        variability=0.4,
        p_wave=None,
        atrial_noise=(0.0, 0.15),
        qrs=(0.15, 0.30),
        t_wave=(0.50, 0.70),
    ),
    RhythmPattern.MISSING_P_WAVE: PatternConfig(
        heart_rate=75.0,
        base_interval=60.0 / 75.0,
        variability=0.0,
        p_wave=None,
        atrial_noise=None,
        qrs=(0.15, 0.30),
        t_wave=(0.50, 0.70),
    ),
}
