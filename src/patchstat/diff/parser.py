"""Stateful unified diff parser.

Pulls one physical line per call from a binary line source, classifies it
with the classifier for the current phase, and advances the phase. There is
no lookahead: the phase only changes based on what the current line
classified as, which lets the parser resynchronise after any garbage.

Usage::

    with open("change.patch", "rb") as fh:
        for event in DiffParser(fh):
            ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional, Union

from patchstat.diff.classify import (
    classify_delta,
    classify_hunk,
    classify_new_file,
    classify_old_file,
)
from patchstat.diff.models import (
    Context,
    Deleted,
    DiffLine,
    Hunk,
    Inserted,
    Junk,
    Modified,
    NewFile,
    NoNewlineAtEof,
    OldFile,
)

logger = logging.getLogger(__name__)


class DiffParserError(Exception):
    """Base error for the diff parser."""


class ParserClosedError(DiffParserError):
    """Raised when a parser is used again after its source failed."""


@dataclass(frozen=True)
class JunkPhase:
    """Hunting for a ``---`` header (or a binary marker)."""


@dataclass(frozen=True)
class OldFilePhase:
    """Just read ``---``; expecting ``+++``."""


@dataclass(frozen=True)
class NewFilePhase:
    """Just read ``+++`` or finished a hunk; expecting ``@@``."""


@dataclass(frozen=True)
class HunkPhase:
    """Inside a hunk body. Counts go negative when the header understated them."""

    old_remaining: int
    new_remaining: int


Phase = Union[JunkPhase, OldFilePhase, NewFilePhase, HunkPhase]


class DiffParser:
    """Classify the lines of a unified diff one at a time.

    *source* is anything with a ``readline()`` returning ``bytes``. Each
    call to :meth:`next_line` performs exactly one read.
    """

    def __init__(self, source: BinaryIO) -> None:
        self._source = source
        self._phase: Phase = JunkPhase()
        self._failed = False
        self.line: bytes = b""  # raw bytes of the last line read
        self.line_no: int = 0

    @property
    def phase(self) -> Phase:
        return self._phase

    def __iter__(self) -> Iterator[DiffLine]:
        while True:
            event = self.next_line()
            if event is None:
                return
            yield event

    def next_line(self) -> Optional[DiffLine]:
        """Read and classify the next line. Returns None at end of stream.

        An ``OSError`` from the source is re-raised and the parser refuses
        further reads.
        """
        if self._failed:
            raise ParserClosedError("parser source failed earlier; it cannot be read again")

        try:
            line = self._source.readline()
        except OSError:
            self._failed = True
            raise

        self.line = line
        if not line:
            return None
        self.line_no += 1

        phase = self._phase
        if isinstance(phase, JunkPhase):
            event = classify_old_file(line)
            if isinstance(event, OldFile):
                self._phase = OldFilePhase()
            return event

        if isinstance(phase, OldFilePhase):
            event = classify_new_file(line)
            self._phase = NewFilePhase() if isinstance(event, NewFile) else JunkPhase()
            return event

        if isinstance(phase, NewFilePhase):
            event = classify_hunk(line)
            if isinstance(event, Hunk):
                self._phase = HunkPhase(event.info.old_line_len, event.info.new_line_len)
            else:
                self._phase = JunkPhase()
            return event

        return self._advance_hunk(phase, line)

    def _advance_hunk(self, phase: HunkPhase, line: bytes) -> DiffLine:
        old, new = phase.old_remaining, phase.new_remaining
        event = classify_delta(line)

        if isinstance(event, (Context, Modified)):
            old -= 1
            new -= 1
        elif isinstance(event, Inserted):
            new -= 1
        elif isinstance(event, Deleted):
            old -= 1
        elif isinstance(event, NoNewlineAtEof):
            pass
        else:
            logger.debug(
                "junk inside hunk at line %d (old=%d, new=%d), dropping file: %r",
                self.line_no, old, new, line,
            )
            self._phase = JunkPhase()
            return Junk(line)

        if old < 0 or new < 0 or (old == 0 and new == 0):
            self._phase = NewFilePhase()
        else:
            self._phase = HunkPhase(old, new)
        return event
