"""ECG Simulator: synthetic single-lead traces for demo rhythm patterns."""

from src.simulator.patterns import RhythmPattern, PatternConfig, PATTERN_REGISTRY
from src.simulator.noise import NoiseConfig, NOISE_PRESETS
from src.simulator.ecg_simulator import ECGSimulator, synthesize

__all__ = [
    "RhythmPattern",
    "PatternConfig",
    "PATTERN_REGISTRY",
    "NoiseConfig",
    "NOISE_PRESETS",
    "ECGSimulator",
    "synthesize",
]
