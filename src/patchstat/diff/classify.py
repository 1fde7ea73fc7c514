"""Line classifier: one stateless function per parser phase.

Each function takes one raw line (terminator included) and always returns
a DiffLine. Anything it does not recognise comes back as ``Junk``.
"""

from __future__ import annotations

from typing import Optional

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
    Modified,
    NewFile,
    NoNewlineAtEof,
    OldFile,
)

U32_MAX = 0xFFFFFFFF

_OLD_PREFIX = b"--- "
_NEW_PREFIX = b"+++ "
_FILE_PREFIX_LEN = 4  # both "--- " and "+++ "
_HUNK_PREFIX = b"@@ -"
_BINARY_PREFIX = b"Binary files "
_BINARY_SUFFIXES = (b" differ\r\n", b" differ\n")
_BINARY_SEPARATOR = b" and "

_MIN_FILE_HEADER = len(b"--- x\n")
_MIN_HUNK_HEADER = len(b"@@ -1 +1 @@")

_DIGITS = b"0123456789"


def parse_u32(data: bytes) -> Optional[int]:
    """Parse ASCII decimal digits into an unsigned 32-bit value.

    Returns None for empty input, any non-digit byte, or overflow.
    """
    if not data:
        return None
    value = 0
    for byte in data:
        if byte not in _DIGITS:
            return None
        value = value * 10 + (byte - 0x30)
        if value > U32_MAX:
            return None
    return value


def strip_eol(data: bytes) -> bytes:
    """Drop one trailing ``\\r\\n``, ``\\n``, or bare ``\\r``.

    A bare ``\\r`` can only end the final line of a stream.
    """
    if data.endswith(b"\r\n"):
        return data[:-2]
    if data.endswith(b"\n"):
        return data[:-1]
    if data.endswith(b"\r"):
        return data[:-1]
    return data


def _parse_file_info(line: bytes) -> FileInfo:
    end = len(line)
    for idx in range(_FILE_PREFIX_LEN, len(line)):
        if line[idx] in b"\t\r\n":
            end = idx
            break

    metadata = None
    if end < len(line) and line[end] == 0x09:
        metadata = strip_eol(line[end + 1 :])
    return FileInfo(filename=line[_FILE_PREFIX_LEN:end], metadata=metadata)


def _parse_binaries(line: bytes) -> DiffLine:
    for suffix in _BINARY_SUFFIXES:
        if line.endswith(suffix):
            middle = line[len(_BINARY_PREFIX) : len(line) - len(suffix)]
            break
    else:
        return Junk(line)

    # Binary files foo and bar differ
    pos = middle.find(_BINARY_SEPARATOR)
    if pos < 0:
        return Junk(line)
    return Binaries(old=middle[:pos], new=middle[pos + len(_BINARY_SEPARATOR) :])


def classify_old_file(line: bytes) -> DiffLine:
    """Classify a line while hunting for the start of a file pair."""
    if line.startswith(_BINARY_PREFIX):
        return _parse_binaries(line)

    if line.startswith(_OLD_PREFIX) and len(line) >= _MIN_FILE_HEADER:
        return OldFile(_parse_file_info(line))

    return Junk(line)


def classify_new_file(line: bytes) -> DiffLine:
    """Classify the line that should follow a ``---`` header."""
    if line.startswith(_NEW_PREFIX) and len(line) >= _MIN_FILE_HEADER:
        return NewFile(_parse_file_info(line))

    return Junk(line)


def _parse_range(token: bytes) -> Optional[tuple[int, int]]:
    parts = token.split(b",")
    line_no = parse_u32(parts[0])
    if line_no is None:
        return None
    line_len = parse_u32(parts[1]) if len(parts) > 1 else None
    return line_no, 1 if line_len is None else line_len


def classify_hunk(line: bytes) -> DiffLine:
    """Classify a ``@@ -A[,B] +C[,D] @@`` header.

    Only the first two space-separated tokens after ``@@ -`` are read, so the
    closing ``@@`` is not required. A missing or unparsable length means 1.
    """
    if len(line) <= _MIN_HUNK_HEADER or not line.startswith(_HUNK_PREFIX):
        return Junk(line)

    tokens = line[len(_HUNK_PREFIX) :].split(b" ")
    if len(tokens) < 2:
        return Junk(line)

    old = _parse_range(tokens[0])
    # new range carries its "+" marker
    new = _parse_range(tokens[1][1:])
    if old is None or new is None:
        return Junk(line)

    context = None
    tab = line.find(b"\t")
    if tab >= 0:
        context = strip_eol(line[tab + 1 :])

    return Hunk(
        HunkInfo(
            old_line_no=old[0],
            old_line_len=old[1],
            new_line_no=new[0],
            new_line_len=new[1],
            context=context,
        )
    )


def classify_delta(line: bytes) -> DiffLine:
    """Classify a hunk body line by its marker byte."""
    if not line:
        return Junk(line)

    marker, body = line[:1], line[1:]
    if marker == b"+":
        return Inserted(body)
    if marker == b"-":
        return Deleted(body)
    if marker == b"!":
        return Modified(body)
    if marker == b" ":
        return Context(body)
    if marker == b"\\":
        return NoNewlineAtEof()
    return Junk(line)
