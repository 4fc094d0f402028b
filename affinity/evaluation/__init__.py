"""Reporting module for batches of affinity results."""

from .report import (
    ScoreDistributionStats,
    results_to_frame,
    summarize_by_context,
    dashboard_summary,
    compute_score_distribution,
    top_matches,
)

__all__ = [
    "ScoreDistributionStats",
    "results_to_frame",
    "summarize_by_context",
    "dashboard_summary",
    "compute_score_distribution",
    "top_matches",
]
