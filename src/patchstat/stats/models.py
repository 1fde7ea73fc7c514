"""Diffstat summary model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class DiffStat:
    """Counters accumulated over a stream of classified lines."""

    files: int = 0
    hunks: int = 0
    insertions: int = 0
    deletions: int = 0
    modifications: int = 0
    junk: int = 0  # diagnostic only, not part of the summary line
    sources: List[str] = field(default_factory=list)

    def merge(self, other: DiffStat) -> DiffStat:
        """Return a new DiffStat holding the sum of both."""
        return DiffStat(
            files=self.files + other.files,
            hunks=self.hunks + other.hunks,
            insertions=self.insertions + other.insertions,
            deletions=self.deletions + other.deletions,
            modifications=self.modifications + other.modifications,
            junk=self.junk + other.junk,
            sources=self.sources + other.sources,
        )

    def summary(self) -> str:
        return (
            f"{self.files} file(s) changed, {self.hunks} hunks, "
            f"{self.insertions} insertions(+), {self.deletions} deletions(-), "
            f"{self.modifications} modifications(!)"
        )
