"""Rhythm analysis pipeline: R-peaks -> R-R statistics -> P-waves -> verdict."""

from __future__ import annotations

import logging
from pathlib import Path

from config.settings import Settings
from src.ecg_system.schemas import ClassificationResult, SampleSequence
from src.interpretation.rules import RuleBasedReasoningEngine
from src.interpretation.symbolic import SymbolicCalculationEngine
from src.prediction.atrial_detector import AtrialActivityDetector
from src.prediction.signal_beat_detector import SignalBasedBeatDetector

logger = logging.getLogger(__name__)


class RhythmAnalyzer:
    """Run every analysis stage over one trace.

    Holds configuration only; each :meth:`analyze` call recomputes all
    artifacts from the samples, so repeated calls on the same input give
    equal results.

    Args:
        settings: detection / atrial / sampling settings (defaults if ``None``).
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        fs = self.settings.synthesis.sample_rate
        det = self.settings.detection
        atr = self.settings.atrial
        self.fs = fs
        self.beat_detector = SignalBasedBeatDetector(det.threshold, det.min_distance)
        self.atrial_detector = AtrialActivityDetector(
            fs=fs,
            lookback_start_sec=atr.lookback_start_sec,
            lookback_end_sec=atr.lookback_end_sec,
            band_low=atr.band_low,
            band_high=atr.band_high,
        )
        rules_path = Path(self.settings.rules_path) if self.settings.rules_path else None
        self.rules = RuleBasedReasoningEngine(rules_path)

    def analyze(self, samples: SampleSequence) -> ClassificationResult:
        """Classify the rhythm of *samples*. The input array is not modified."""
        r_peaks = self.beat_detector.detect(samples)

        sym = SymbolicCalculationEngine(fs=self.fs)
        rr = sym.rr_intervals(r_peaks)
        mean_rr = sym.mean_rr(rr)
        hr = sym.heart_rate(mean_rr)
        rr_std = sym.variability(rr)
        for trace in sym.traces:
            logger.debug(trace)

        report = self.atrial_detector.detect(samples, r_peaks)

        verdict = self.rules.classify(rr_std, report)
        result = ClassificationResult(
            peak_count=len(r_peaks),
            mean_rr=mean_rr,
            heart_rate_bpm=hr,
            rr_std=rr_std,
            regular=self.rules.is_regular(rr_std),
            atrial_report=report,
            verdict=verdict,
            conclusion=self.rules.conclusion(rr_std, report),
            rationale=self.rules.explain(len(r_peaks), mean_rr, rr_std, report),
            r_peaks=r_peaks,
            rr_intervals=rr,
        )
        logger.info(
            "Analysis: %d R-peaks, RR std=%.4fs, P-waves %d/%d -> %s",
            result.peak_count, rr_std, report.detected, report.total, verdict,
        )
        return result


def analyze(samples: SampleSequence, settings: Settings | None = None) -> ClassificationResult:
    """Convenience wrapper around :meth:`RhythmAnalyzer.analyze`."""
    return RhythmAnalyzer(settings).analyze(samples)
