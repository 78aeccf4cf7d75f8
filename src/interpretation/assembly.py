"""JSON assembly for rhythm analysis output.

Builds a single JSON-serializable document from a classification result,
for consumption by rendering collaborators.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

import numpy as np

from config.settings import Settings
from src.ecg_system.schemas import ClassificationResult
from src.simulator.patterns import RhythmPattern


def metrics_summary(result: ClassificationResult) -> dict[str, str]:
    """Display values for the metrics panel.

    The average R-R reads ``"-"`` when no interval could be measured.
    """
    avg_rr = f"{result.mean_rr:.3f} s" if result.mean_rr is not None else "-"
    return {
        "rPeakCount": str(result.peak_count),
        "avgRRInterval": avg_rr,
        "rrVariability": f"{result.rr_std:.3f} s",
        "pWaveStatus": "Yes" if result.atrial_report.present else "No",
    }


class JSONAssembler:
    """Assemble the analysis document."""

    SCHEMA_VERSION = "1.0"

    def assemble(
        self,
        result: ClassificationResult,
        pattern: Optional[RhythmPattern] = None,
        samples: Optional[np.ndarray] = None,
        settings: Optional[Settings] = None,
        include_samples: bool = False,
    ) -> dict[str, Any]:
        """Build the document.

        Args:
            result: Output of :class:`~src.ecg_system.pipeline.RhythmAnalyzer`.
            pattern: Rhythm pattern the trace was synthesized from, if known.
            samples: The analyzed trace (summarised, or embedded when
                *include_samples* is set).
            settings: Settings used for synthesis and analysis.
            include_samples: Embed the full sample list.

        Returns:
            JSON-serializable dictionary.
        """
        cfg = settings or Settings()
        doc: dict[str, Any] = {
            "schema_version": self.SCHEMA_VERSION,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "pattern": pattern.value if pattern is not None else None,
            "strip_info": self._build_strip_info(cfg, samples),
            "analysis": result.to_dict(),
            "metrics": metrics_summary(result),
        }
        if include_samples and samples is not None:
            doc["samples"] = [round(float(v), 4) for v in samples]
        return doc

    # ------------------------------------------------------------------
    # Section builders
    # ------------------------------------------------------------------

    def _build_strip_info(
        self, cfg: Settings, samples: Optional[np.ndarray],
    ) -> dict[str, Any]:
        syn = cfg.synthesis
        info: dict[str, Any] = {
            "sample_rate_hz": syn.sample_rate,
            "duration_sec": syn.duration_sec,
            "amplitude": syn.amplitude,
        }
        if samples is not None:
            info["num_samples"] = int(len(samples))
            if len(samples):
                info["min"] = round(float(np.min(samples)), 4)
                info["max"] = round(float(np.max(samples)), 4)
        return info
