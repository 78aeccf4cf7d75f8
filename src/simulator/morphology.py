"""Beat morphology engine: phase-windowed PQRST waveforms.

Every function here works on a *beat phase* array (position within the
cardiac cycle, 0 at beat start, 1 at the nominal beat end) and returns the
waveform contribution for each element. Samples outside a wave's window
contribute 0.
"""

from __future__ import annotations

import numpy as np

from src.simulator.patterns import PatternConfig


def _in_window(phase: np.ndarray, window: tuple[float, float]) -> np.ndarray:
    start, end = window
    return (phase >= start) & (phase < end)


def _sub_phase(phase: np.ndarray, window: tuple[float, float]) -> np.ndarray:
    """Rescale *phase* so the window maps onto [0, 1)."""
    start, end = window
    return (phase - start) / (end - start)


def create_qrs_complex(sub_phase: np.ndarray, amplitude: float) -> np.ndarray:
    """Create a Q-R-S deflection from a sub-phase in [0, 1].

    Q dips below baseline for the first fifth, the R spike peaks at
    ``amplitude`` around sub-phase 0.35, and S dips again after 0.5.
    """
    sub_phase = np.asarray(sub_phase, dtype=np.float64)
    q = -np.sin(sub_phase * np.pi * 2.5) * amplitude * 0.3
    r = np.sin((sub_phase - 0.2) * np.pi * 3.33) * amplitude
    s = -np.sin((sub_phase - 0.5) * np.pi * 2) * amplitude * 0.4
    return np.select([sub_phase < 0.2, sub_phase < 0.5], [q, r], default=s)


def create_p_wave(
    phase: np.ndarray,
    window: tuple[float, float],
    amplitude: float,
) -> np.ndarray:
    """Half-sine P wave spanning *window*, peaking at 0.15 x amplitude."""
    mask = _in_window(phase, window)
    wave = np.sin(_sub_phase(phase, window) * np.pi) * amplitude * 0.15
    return np.where(mask, wave, 0.0)


def create_t_wave(
    phase: np.ndarray,
    window: tuple[float, float],
    amplitude: float,
) -> np.ndarray:
    """Half-sine T wave spanning *window*, peaking at 0.30 x amplitude."""
    mask = _in_window(phase, window)
    wave = np.sin(_sub_phase(phase, window) * np.pi) * amplitude * 0.30
    return np.where(mask, wave, 0.0)


def create_fibrillatory_waves(
    phase: np.ndarray,
    window: tuple[float, float],
    amplitude: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Low-amplitude chaotic atrial activity in place of a P wave.

    One independent uniform draw per sample, scaled to +/- 0.05 x amplitude.
    """
    mask = _in_window(phase, window)
    noise = (rng.random(phase.shape) - 0.5) * amplitude * 0.1
    return np.where(mask, noise, 0.0)


def generate_beat(
    phase: np.ndarray,
    config: PatternConfig,
    amplitude: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Sum the phase-local waves of one pattern over a phase array.

    Phases outside [0, 1] belong to no beat and contribute nothing.
    """
    phase = np.asarray(phase, dtype=np.float64)
    signal = np.zeros_like(phase)

    if config.p_wave is not None:
        signal += create_p_wave(phase, config.p_wave, amplitude)

    if config.atrial_noise is not None:
        signal += create_fibrillatory_waves(phase, config.atrial_noise, amplitude, rng)

    qrs_mask = _in_window(phase, config.qrs)
    qrs = create_qrs_complex(_sub_phase(phase, config.qrs), amplitude)
    signal += np.where(qrs_mask, qrs, 0.0)

    signal += create_t_wave(phase, config.t_wave, amplitude)

    outside = (phase < 0.0) | (phase > 1.0)
    signal[outside] = 0.0
    return signal
