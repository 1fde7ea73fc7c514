"""JSON reporter for scripts and CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from patchstat.stats.models import DiffStat


def _counts(stat: DiffStat) -> Dict[str, Any]:
    return {
        "files": stat.files,
        "hunks": stat.hunks,
        "insertions": stat.insertions,
        "deletions": stat.deletions,
        "modifications": stat.modifications,
        "junk": stat.junk,
    }


def to_dict(total: DiffStat, per_source: Optional[List[DiffStat]] = None) -> Dict[str, Any]:
    """Convert stats to a JSON-serialisable dict."""
    data: Dict[str, Any] = {
        "version": "1.0",
        **_counts(total),
        "summary": total.summary(),
    }
    if per_source:
        data["sources"] = [
            {"source": s.sources[0] if s.sources else "-", **_counts(s)}
            for s in per_source
        ]
    return data


def render(total: DiffStat, per_source: Optional[List[DiffStat]] = None) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(total, per_source), indent=2)
