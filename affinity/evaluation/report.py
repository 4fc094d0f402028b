"""
Reporting over batches of affinity results.

Turns results for one subject (or many) into tables for dashboards:
1. One row per available result
2. Per-context aggregates
3. A global summary (mean heat, band of the mean composite)
4. Score distribution statistics
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, Iterable, List

import numpy as np
import pandas as pd

from ..metrics import classify_band

logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    "subject_id", "counterpart_id", "context", "closeness",
    "composite", "heat", "level", "band",
    "growth", "collaboration", "understanding",
]


@dataclass
class ScoreDistributionStats:
    """Statistics about score distribution."""
    count: int
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p10": 80.0, "p50": 95.0, "p90": 110.0}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": int(self.count),
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }


def results_to_frame(results: Iterable) -> pd.DataFrame:
    """
    Convert AffinityResults to a DataFrame.

    Not-available results are dropped.

    Args:
        results: Iterable of AffinityResult

    Returns:
        DataFrame with RESULT_COLUMNS
    """
    rows = []
    skipped = 0
    for r in results:
        if not r.available:
            skipped += 1
            continue
        rows.append({
            "subject_id": r.subject_id,
            "counterpart_id": r.counterpart_id,
            "context": r.context,
            "closeness": r.closeness,
            "composite": r.composite,
            "heat": r.heat,
            "level": r.level,
            "band": r.band,
            "growth": r.parts.growth,
            "collaboration": r.parts.collaboration,
            "understanding": r.parts.understanding,
        })
    if skipped:
        logger.info(f"Dropped {skipped} unavailable results from report")
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def summarize_by_context(frame: pd.DataFrame) -> pd.DataFrame:
    """Per-context count, mean heat and mean composite."""
    if frame.empty:
        return pd.DataFrame(columns=["context", "count", "mean_heat", "mean_composite"])
    grouped = frame.groupby("context").agg(
        count=("heat", "size"),
        mean_heat=("heat", "mean"),
        mean_composite=("composite", "mean"),
    )
    grouped["mean_heat"] = grouped["mean_heat"].round(1)
    return grouped.reset_index()


def dashboard_summary(frame: pd.DataFrame) -> Dict[str, Any]:
    """
    Global summary across every relationship in `frame`.

    Returns:
        Dictionary with heat (mean, 1 decimal), band, relationships, and
        band counts
    """
    if frame.empty:
        return {"heat": 0.0, "band": "cold", "relationships": 0, "bands": {}}

    mean_composite = float(frame["composite"].mean())
    return {
        "heat": round(float(frame["heat"].mean()), 1),
        "band": classify_band(mean_composite),
        "relationships": int(len(frame)),
        "bands": {k: int(v) for k, v in frame["band"].value_counts().items()},
    }


def compute_score_distribution(scores: np.ndarray) -> ScoreDistributionStats:
    """
    Compute distribution statistics for scores.

    Args:
        scores: Array of composite scores

    Returns:
        ScoreDistributionStats instance
    """
    scores = np.asarray(scores, dtype=float)
    if scores.size == 0:
        raise ValueError("Cannot compute distribution of an empty score array")
    return ScoreDistributionStats(
        count=int(scores.size),
        mean=np.mean(scores),
        std=np.std(scores),
        min=np.min(scores),
        max=np.max(scores),
        quantiles={
            "p10": np.percentile(scores, 10),
            "p50": np.percentile(scores, 50),
            "p90": np.percentile(scores, 90),
        }
    )


def top_matches(frame: pd.DataFrame, n: int = 5) -> List[Dict[str, Any]]:
    """The n highest-composite rows as records."""
    if frame.empty:
        return []
    return frame.sort_values("composite", ascending=False).head(n).to_dict(orient="records")
