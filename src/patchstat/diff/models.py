"""Data models for classified diff lines.

Every variant is a frozen dataclass holding ``bytes`` payloads. Slicing a
``bytes`` object copies it, so an event stays valid after the parser has
moved on to the next line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

NO_NEWLINE_MARKER = b"\\ No newline at end of file\n"


class LineKind(str, Enum):
    OLD_FILE = "old_file"
    NEW_FILE = "new_file"
    BINARIES = "binaries"
    HUNK = "hunk"
    CONTEXT = "context"
    INSERTED = "inserted"
    DELETED = "deleted"
    MODIFIED = "modified"
    NO_NEWLINE_AT_EOF = "no_newline_at_eof"
    JUNK = "junk"


@dataclass(frozen=True, slots=True)
class FileInfo:
    """Filename (and optional tab-separated annotation) from a ``---``/``+++`` header."""

    filename: bytes
    metadata: Optional[bytes] = None  # timestamp, revision, ...

    def render(self) -> bytes:
        if self.metadata is None:
            return self.filename
        return self.filename + b"\t" + self.metadata


@dataclass(frozen=True, slots=True)
class HunkInfo:
    """Ranges from a ``@@ -A,B +C,D @@`` header."""

    old_line_no: int = 0
    old_line_len: int = 1
    new_line_no: int = 0
    new_line_len: int = 1
    context: Optional[bytes] = None

    def render(self) -> bytes:
        old = _render_range(self.old_line_no, self.old_line_len)
        new = _render_range(self.new_line_no, self.new_line_len)
        header = b"@@ -" + old + b" +" + new + b" @@"
        if self.context is not None:
            header += b"\t" + self.context
        return header + b"\n"


def _render_range(line_no: int, line_len: int) -> bytes:
    if line_len == 1:
        return str(line_no).encode("ascii")
    return f"{line_no},{line_len}".encode("ascii")


@dataclass(frozen=True, slots=True)
class OldFile:
    kind: ClassVar[LineKind] = LineKind.OLD_FILE

    info: FileInfo

    def render(self) -> bytes:
        return b"--- " + self.info.render() + b"\n"


@dataclass(frozen=True, slots=True)
class NewFile:
    kind: ClassVar[LineKind] = LineKind.NEW_FILE

    info: FileInfo

    def render(self) -> bytes:
        return b"+++ " + self.info.render() + b"\n"


@dataclass(frozen=True, slots=True)
class Binaries:
    """``Binary files A and B differ`` marker."""

    kind: ClassVar[LineKind] = LineKind.BINARIES

    old: bytes
    new: bytes

    def render(self) -> bytes:
        return b"Binary files " + self.old + b" and " + self.new + b" differ\n"


@dataclass(frozen=True, slots=True)
class Hunk:
    kind: ClassVar[LineKind] = LineKind.HUNK

    info: HunkInfo

    def render(self) -> bytes:
        return self.info.render()


@dataclass(frozen=True, slots=True)
class Context:
    kind: ClassVar[LineKind] = LineKind.CONTEXT

    body: bytes

    def render(self) -> bytes:
        return b" " + self.body


@dataclass(frozen=True, slots=True)
class Inserted:
    kind: ClassVar[LineKind] = LineKind.INSERTED

    body: bytes

    def render(self) -> bytes:
        return b"+" + self.body


@dataclass(frozen=True, slots=True)
class Deleted:
    kind: ClassVar[LineKind] = LineKind.DELETED

    body: bytes

    def render(self) -> bytes:
        return b"-" + self.body


@dataclass(frozen=True, slots=True)
class Modified:
    """``!`` line, as written by context-diff style tools."""

    kind: ClassVar[LineKind] = LineKind.MODIFIED

    body: bytes

    def render(self) -> bytes:
        return b"!" + self.body


@dataclass(frozen=True, slots=True)
class NoNewlineAtEof:
    kind: ClassVar[LineKind] = LineKind.NO_NEWLINE_AT_EOF

    def render(self) -> bytes:
        return NO_NEWLINE_MARKER


@dataclass(frozen=True, slots=True)
class Junk:
    """A line that could not be classified in the parser's current phase."""

    kind: ClassVar[LineKind] = LineKind.JUNK

    raw: bytes

    def render(self) -> bytes:
        return self.raw


DiffLine = Union[
    OldFile,
    NewFile,
    Binaries,
    Hunk,
    Context,
    Inserted,
    Deleted,
    Modified,
    NoNewlineAtEof,
    Junk,
]
