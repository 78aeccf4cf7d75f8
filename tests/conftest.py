"""Shared pytest fixtures for ECG rhythm demo tests."""

from __future__ import annotations

import numpy as np
import pytest

from src.simulator.ecg_simulator import ECGSimulator
from src.simulator.noise import NOISE_PRESETS
from src.simulator.patterns import RhythmPattern


FS = 250


def make_spike_trace(
    r_peaks: list[int],
    num_samples: int = 1000,
    r_amplitude: float = 80.0,
    p_amplitude: float | None = None,
    p_offset: int = 30,
    noise: float = 1.0,
    seed: int = 42,
) -> np.ndarray:
    """Hand-built trace: a sharp spike at each R-peak, optional P bump.

    The P bump is a short half-sine of height *p_amplitude* centred
    *p_offset* samples before each R-peak.
    """
    rng = np.random.default_rng(seed)
    signal = rng.uniform(-noise, noise, num_samples) if noise else np.zeros(num_samples)
    for r in r_peaks:
        signal[r] = r_amplitude
        signal[r - 1] = r_amplitude * 0.5
        if r + 1 < num_samples:
            signal[r + 1] = r_amplitude * 0.5
        if p_amplitude is not None:
            bump = np.sin(np.linspace(0, np.pi, 9)) * p_amplitude
            start = r - p_offset - 4
            signal[start:start + 9] += bump
    return signal


@pytest.fixture
def spike_trace():
    return make_spike_trace


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def clean_simulator():
    return ECGSimulator(seed=0, noise_config=NOISE_PRESETS["clean"])


@pytest.fixture
def normal_trace():
    return ECGSimulator(seed=42).generate(RhythmPattern.NORMAL)


@pytest.fixture
def afib_trace():
    return ECGSimulator(seed=42).generate(RhythmPattern.ATRIAL_FIBRILLATION)


@pytest.fixture
def missing_p_trace():
    return ECGSimulator(seed=42).generate(RhythmPattern.MISSING_P_WAVE)
