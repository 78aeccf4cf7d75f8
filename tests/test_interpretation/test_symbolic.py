"""Unit tests for R-R interval statistics and SymbolicCalculationEngine."""

import numpy as np
import pytest

from src.interpretation.symbolic import (
    SymbolicCalculationEngine,
    compute_intervals,
    compute_variability,
)


class TestComputeIntervals:
    def test_forward_differences(self):
        assert compute_intervals([0, 250, 500, 750]) == [1.0, 1.0, 1.0]

    def test_custom_rate(self):
        assert compute_intervals([10, 110, 310], sample_rate=100) == pytest.approx([1.0, 2.0])

    @pytest.mark.parametrize("events", [[], [42]])
    def test_too_few_events(self, events):
        assert compute_intervals(events) == []

    def test_length_and_positivity(self):
        events = [54, 268, 482, 697, 911]
        rr = compute_intervals(events)
        assert len(rr) == len(events) - 1
        assert all(v > 0 for v in rr)


class TestComputeVariability:
    def test_empty(self):
        assert compute_variability([]) == 0

    def test_single(self):
        assert compute_variability([0.857]) == 0

    @pytest.mark.parametrize("value", [0.856, 0.8, 1.0 / 3.0, 0.1])
    def test_constant_is_exactly_zero(self, value):
        assert compute_variability([value] * 11) == 0.0

    def test_population_std(self):
        rr = [0.8, 1.0, 1.2]
        # Divide by N, not N - 1
        expected = np.sqrt(((0.2 ** 2) + 0 + (0.2 ** 2)) / 3)
        assert compute_variability(rr) == pytest.approx(expected)
        assert compute_variability(rr) < float(np.std(rr, ddof=1))


class TestSymbolicCalculationEngine:
    def test_regular_beats(self):
        engine = SymbolicCalculationEngine(fs=250)
        peaks = [54 + i * 200 for i in range(6)]
        rr = engine.rr_intervals(peaks)
        assert rr == pytest.approx([0.8] * 5)
        mean = engine.mean_rr(rr)
        assert mean == pytest.approx(0.8)
        assert engine.heart_rate(mean) == pytest.approx(75.0)
        assert engine.variability(rr) == pytest.approx(0.0)

    def test_traces_recorded(self):
        engine = SymbolicCalculationEngine(fs=250)
        rr = engine.rr_intervals([0, 200, 400])
        engine.heart_rate(engine.mean_rr(rr))
        assert any(t.startswith("RR[1]") for t in engine.traces)
        assert any("75.0 bpm" in t for t in engine.traces)

    def test_insufficient_peaks(self):
        engine = SymbolicCalculationEngine()
        rr = engine.rr_intervals([100])
        assert rr == []
        assert engine.mean_rr(rr) is None
        assert engine.heart_rate(None) is None
        assert engine.variability(rr) == 0.0
        assert "insufficient" in engine.traces[0]

    def test_traces_reset_per_run(self):
        engine = SymbolicCalculationEngine()
        engine.rr_intervals([0, 200, 400])
        engine.rr_intervals([0, 200])
        assert len([t for t in engine.traces if t.startswith("RR[")]) == 1
