"""Diffstat aggregation."""

from patchstat.stats.aggregator import add, tally
from patchstat.stats.models import DiffStat

__all__ = ["DiffStat", "add", "tally"]
