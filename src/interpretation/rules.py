"""Rule-based reasoning engine for rhythm classification.

Applies fixed rules (loaded from ``config/rules_config.yaml``) to R-R
variability and P-wave evidence, and writes a step-by-step rationale.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml

from src.ecg_system.exceptions import ConfigError
from src.ecg_system.schemas import AtrialActivityReport

logger = logging.getLogger(__name__)

_DEFAULT_RULES_PATH = Path(__file__).resolve().parents[2] / "config" / "rules_config.yaml"

RR_STD_MAX_SEC = 0.05

NORMAL_SINUS = "normal_sinus"
ATRIAL_FIBRILLATION = "atrial_fibrillation"
MISSING_P_WAVE = "missing_p_wave"
IRREGULAR = "irregular"

_DEFAULT_LABELS = {
    NORMAL_SINUS: "Normal Sinus Rhythm",
    ATRIAL_FIBRILLATION: "Possible Atrial Fibrillation",
    MISSING_P_WAVE: "Possible Junctional Rhythm or Missing P-Wave",
    IRREGULAR: "Irregular rhythm, further analysis recommended",
}

_DEFAULT_CONCLUSIONS = {
    NORMAL_SINUS: "Regular R-R intervals and presence of P-waves → Normal Sinus Rhythm.",
    ATRIAL_FIBRILLATION: (
        "Irregular R-R intervals and missing P-waves → Possible Atrial Fibrillation."
    ),
    MISSING_P_WAVE: (
        "Regular R-R intervals but missing P-waves → "
        "Possible Junctional Rhythm or Missing P-Wave Scenario."
    ),
    IRREGULAR: "Irregular R-R intervals detected. Further analysis recommended.",
}


def _load_rules(path: Path | None = None) -> dict:
    p = path or _DEFAULT_RULES_PATH
    if not p.exists():
        logger.warning("Rules file %s not found, using built-in thresholds", p)
        return {}
    with open(p) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Cannot parse rules file {p}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Rules file {p} must contain a mapping")
    return data


class RuleBasedReasoningEngine:
    """Classify a rhythm from R-R variability and P-wave presence.

    Args:
        rules_path: Path to YAML rules config (default: config/rules_config.yaml).
        rules: Already-parsed rules mapping; skips file loading when given.
    """

    def __init__(
        self,
        rules_path: Path | None = None,
        rules: dict | None = None,
    ) -> None:
        self.rules = rules if rules is not None else _load_rules(rules_path)
        rhythm = self.rules.get("rhythm") or {}
        regularity = rhythm.get("regularity") or {}
        self.rr_std_max = float(regularity.get("rr_std_max_sec", RR_STD_MAX_SEC))
        self.labels = {**_DEFAULT_LABELS, **(rhythm.get("labels") or {})}
        self.conclusions = {**_DEFAULT_CONCLUSIONS, **(rhythm.get("conclusions") or {})}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def is_regular(self, variability: float) -> bool:
        return variability < self.rr_std_max

    def rule_key(self, variability: float, report: AtrialActivityReport) -> str:
        """Pick the rule that fires for this variability / P-wave combination.

        Irregular intervals with P-waves present have no diagnostic rule and
        are reported as needing further analysis.
        """
        regular = self.is_regular(variability)
        if regular and report.present:
            return NORMAL_SINUS
        if not regular and not report.present:
            return ATRIAL_FIBRILLATION
        if regular and not report.present:
            return MISSING_P_WAVE
        return IRREGULAR

    def classify(self, variability: float, report: AtrialActivityReport) -> str:
        """Return the verdict label."""
        return self.labels[self.rule_key(variability, report)]

    def conclusion(self, variability: float, report: AtrialActivityReport) -> str:
        """Return the one-sentence conclusion behind the verdict."""
        return self.conclusions[self.rule_key(variability, report)]

    def explain(
        self,
        peak_count: int,
        mean_rr: Optional[float],
        variability: float,
        report: AtrialActivityReport,
    ) -> list[str]:
        """Build the step-by-step rationale for a classification."""
        steps: list[str] = [
            f"1. R-Peak Detection: Detected {peak_count} R-peaks in the ECG signal.",
        ]

        if mean_rr is not None and mean_rr > 0:
            steps.append(
                f"2. R-R Interval Analysis: Average R-R interval is {mean_rr:.3f} "
                f"seconds ({60.0 / mean_rr:.0f} bpm)."
            )
        else:
            steps.append(
                "2. R-R Interval Analysis: Average R-R interval is — "
                "(fewer than two R-peaks)."
            )

        regularity = "regular" if self.is_regular(variability) else "irregular"
        steps.append(
            f"3. R-R Variability: Standard deviation of R-R intervals is "
            f"{variability:.3f} seconds. This indicates {regularity} R-R intervals."
        )

        counts = f"({report.detected} detected, {report.missing} missing)"
        if report.present:
            steps.append(
                f"4. P-Wave Analysis: P-waves are present before QRS complexes {counts}."
            )
        else:
            steps.append(
                f"4. P-Wave Analysis: P-waves are missing or not clearly visible {counts}."
            )

        steps.append(f"Conclusion: {self.conclusion(variability, report)}")
        return steps


def classify(variability: float, atrial_report: AtrialActivityReport) -> str:
    """Verdict label using the built-in thresholds."""
    return RuleBasedReasoningEngine(rules={}).classify(variability, atrial_report)
