"""Tests for the ECGSimulator facade."""

import numpy as np
import pytest

from src.ecg_system.exceptions import InvalidParameterError
from src.simulator.ecg_simulator import ECGSimulator, synthesize
from src.simulator.patterns import RhythmPattern


class TestGenerate:
    @pytest.mark.parametrize("pattern", list(RhythmPattern))
    def test_default_length(self, pattern):
        sig = ECGSimulator(seed=1).generate(pattern)
        assert sig.shape == (2500,)
        assert sig.dtype == np.float64

    @pytest.mark.parametrize("pattern", list(RhythmPattern))
    @pytest.mark.parametrize("fs,duration", [(250, 10), (100, 3), (500, 2.5), (360, 1)])
    def test_length_is_fs_times_duration(self, pattern, fs, duration):
        sig = ECGSimulator(fs=fs, duration=duration, seed=3).generate(pattern)
        assert len(sig) == int(fs * duration)

    def test_reproducible_with_seed(self):
        for pattern in RhythmPattern:
            sig1 = ECGSimulator(seed=123).generate(pattern)
            sig2 = ECGSimulator(seed=123).generate(pattern)
            np.testing.assert_array_equal(sig1, sig2)

    def test_different_seeds_differ(self):
        sig1 = ECGSimulator(seed=1).generate(RhythmPattern.NORMAL)
        sig2 = ECGSimulator(seed=2).generate(RhythmPattern.NORMAL)
        assert not np.allclose(sig1, sig2)

    def test_injected_generator_used(self):
        sig1 = ECGSimulator(rng=np.random.default_rng(9)).generate(RhythmPattern.NORMAL)
        sig2 = ECGSimulator(seed=9).generate(RhythmPattern.NORMAL)
        np.testing.assert_array_equal(sig1, sig2)

    def test_values_within_envelope(self, normal_trace, afib_trace, missing_p_trace):
        for sig in (normal_trace, afib_trace, missing_p_trace):
            assert np.max(np.abs(sig)) <= 80 * 1.2 + 1.0

    def test_synthesize_wrapper(self):
        sig = synthesize(RhythmPattern.MISSING_P_WAVE, rng=np.random.default_rng(0))
        assert len(sig) == 2500


class TestCleanWaveforms:
    def test_normal_beat_period(self, clean_simulator):
        sig = clean_simulator.generate(RhythmPattern.NORMAL)
        # R-peak of beat 0 sits at phase 0.2 + 0.35 * 0.15 of a 60/70 s cycle
        r0 = int(np.argmax(sig[:200]))
        assert r0 / 250 == pytest.approx(0.2525 * 60 / 70, abs=0.01)

    def test_missing_p_flat_before_qrs(self, clean_simulator):
        sig = clean_simulator.generate(RhythmPattern.MISSING_P_WAVE)
        # First 0.15 of each 200-sample beat is baseline
        for start in range(0, 2500, 200):
            assert np.all(sig[start:start + 29] == 0.0)

    def test_afib_intervals_vary(self, clean_simulator):
        sig = clean_simulator.generate(RhythmPattern.ATRIAL_FIBRILLATION)
        above = np.flatnonzero(sig > 79.0)
        # Group samples near each R apex into beats
        apexes = above[np.insert(np.diff(above) > 10, 0, True)]
        rr = np.diff(apexes) / 250
        assert len(rr) >= 6
        assert np.all(rr >= 0.8 - 0.01)
        assert np.all(rr <= 1.2 + 0.01)
        assert np.std(rr) > 0.02


class TestValidation:
    @pytest.mark.parametrize("kwargs", [
        {"fs": 0}, {"fs": -250}, {"duration": 0}, {"duration": -1.0},
        {"fs": 10, "duration": 0.01},
    ])
    def test_non_positive_length_rejected(self, kwargs):
        with pytest.raises(InvalidParameterError):
            ECGSimulator(**kwargs)
