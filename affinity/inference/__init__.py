"""
Inference module for affinity scoring.

This module provides the end-to-end scoring path, relationship insights,
the summarizer collaborator and the caller-side service.
"""

from .engine import AffinityEngine
from .channels import ChannelHint, infer_channel
from .cache import SnapshotCache
from .service import AffinityService
from .summary import (
    Summarizer,
    SummaryRequest,
    StaticSummarizer,
    PromptSummarizer,
)

__all__ = [
    "AffinityEngine",
    "ChannelHint",
    "infer_channel",
    "SnapshotCache",
    "AffinityService",
    "Summarizer",
    "SummaryRequest",
    "StaticSummarizer",
    "PromptSummarizer",
]
