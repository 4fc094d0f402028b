"""
In-memory snapshot cache for affinity results.

Keyed by (subject_id, counterpart_id, context). A later write for the same
key overwrites the earlier one; there is no versioning or locking.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..schema import AffinityResult

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, str, str]


class SnapshotCache:
    """Last-write-wins store of AffinityResult snapshots."""

    def __init__(self):
        self._entries: Dict[CacheKey, AffinityResult] = {}

    def put(self, subject_id: str, counterpart_id: str, context: str, result: AffinityResult) -> None:
        self._entries[(subject_id, counterpart_id, context)] = result

    def get(self, subject_id: str, counterpart_id: str, context: str) -> Optional[AffinityResult]:
        return self._entries.get((subject_id, counterpart_id, context))

    def for_subject(self, subject_id: str) -> List[AffinityResult]:
        return [r for (s, _, _), r in self._entries.items() if s == subject_id]

    def __len__(self) -> int:
        return len(self._entries)

    def save(self, filepath: str) -> None:
        """Save all snapshots to a JSON file."""
        rows = [
            {"key": list(key), "result": result.to_dict()}
            for key, result in self._entries.items()
        ]
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(rows, f, indent=2)
        logger.info(f"Saved {len(rows)} affinity snapshots to {filepath}")

    @classmethod
    def load(cls, filepath: str) -> "SnapshotCache":
        """Load snapshots from a JSON file written by save()."""
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Snapshot file not found: {filepath}")
        with open(path, "r", encoding="utf-8") as f:
            rows = json.load(f)
        cache = cls()
        for row in rows:
            subject_id, counterpart_id, context = row["key"]
            cache.put(subject_id, counterpart_id, context, AffinityResult.from_dict(row["result"]))
        return cache
