"""
Affinity Scoring Engine

This package computes a bounded affinity score between two people in a
relational context (innovation, execution, leadership, conversation,
relationship, decision) from their psychometric profiles.

Key Design Decisions:
- Three sub-scores (growth, collaboration, understanding) on a 0-135 scale
- Per-context weights are static data, not subclasses
- Missing values are "unknown", never zero (67.5 neutral default)
- Preference learning is a cheap text heuristic behind a narrow interface
- Persistence and text generation are injected collaborators
"""

__version__ = "1.0.0"
