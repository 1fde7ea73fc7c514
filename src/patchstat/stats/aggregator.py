"""Fold classified diff lines into a DiffStat."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from patchstat.diff.models import (
    Binaries,
    Deleted,
    DiffLine,
    Hunk,
    Inserted,
    Junk,
    Modified,
    NewFile,
)
from patchstat.stats.models import DiffStat

logger = logging.getLogger(__name__)


def add(stat: DiffStat, event: DiffLine) -> None:
    """Count one event into *stat*.

    Files are counted on the ``+++`` side and on binary markers, so a
    ``---`` header without its partner never counts.
    """
    if isinstance(event, (NewFile, Binaries)):
        stat.files += 1
    elif isinstance(event, Hunk):
        stat.hunks += 1
    elif isinstance(event, Inserted):
        stat.insertions += 1
    elif isinstance(event, Deleted):
        stat.deletions += 1
    elif isinstance(event, Modified):
        stat.modifications += 1
    elif isinstance(event, Junk):
        stat.junk += 1


def tally(
    events: Iterable[DiffLine],
    *,
    source: Optional[str] = None,
    log_junk: bool = False,
) -> DiffStat:
    """Aggregate *events* into a fresh DiffStat."""
    stat = DiffStat(sources=[source] if source else [])
    for line_no, event in enumerate(events, start=1):
        if log_junk and isinstance(event, Junk):
            logger.info("junk line %s:%d: %r", source or "<stream>", line_no, event.raw)
        add(stat, event)
    return stat
