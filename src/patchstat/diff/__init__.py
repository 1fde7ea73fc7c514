"""Unified diff classification: models, line classifier, stateful parser."""

from patchstat.diff.classify import (
    classify_delta,
    classify_hunk,
    classify_new_file,
    classify_old_file,
    parse_u32,
)
from patchstat.diff.models import (
    Binaries,
    Context,
    Deleted,
    DiffLine,
    FileInfo,
    Hunk,
    HunkInfo,
    Inserted,
    Junk,
    LineKind,
    Modified,
    NewFile,
    NoNewlineAtEof,
    OldFile,
)
from patchstat.diff.parser import (
    DiffParser,
    DiffParserError,
    HunkPhase,
    JunkPhase,
    NewFilePhase,
    OldFilePhase,
    ParserClosedError,
    Phase,
)

__all__ = [
    "Binaries",
    "Context",
    "Deleted",
    "DiffLine",
    "DiffParser",
    "DiffParserError",
    "FileInfo",
    "Hunk",
    "HunkInfo",
    "HunkPhase",
    "Inserted",
    "Junk",
    "JunkPhase",
    "LineKind",
    "Modified",
    "NewFile",
    "NewFilePhase",
    "NoNewlineAtEof",
    "OldFile",
    "OldFilePhase",
    "ParserClosedError",
    "Phase",
    "classify_delta",
    "classify_hunk",
    "classify_new_file",
    "classify_old_file",
    "parse_u32",
]
