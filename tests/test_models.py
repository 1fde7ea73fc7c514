"""Tests for DiffLine rendering and classify/render agreement."""

import dataclasses

import pytest

from patchstat.diff.classify import (
    classify_delta,
    classify_hunk,
    classify_new_file,
    classify_old_file,
)
from patchstat.diff.models import (
    Binaries,
    Context,
    Deleted,
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


class TestRender:
    def test_file_headers(self):
        assert OldFile(FileInfo(b"a/x.c")).render() == b"--- a/x.c\n"
        assert NewFile(FileInfo(b"b/x.c", b"rev 7")).render() == b"+++ b/x.c\trev 7\n"

    def test_binaries(self):
        assert Binaries(b"foo", b"bar").render() == b"Binary files foo and bar differ\n"

    def test_hunk_omits_unit_lengths(self):
        assert Hunk(HunkInfo(1, 1, 1, 1)).render() == b"@@ -1 +1 @@\n"
        assert Hunk(HunkInfo(3, 0, 4, 2)).render() == b"@@ -3,0 +4,2 @@\n"

    def test_hunk_context(self):
        info = HunkInfo(10, 5, 12, 7, b"def main():")
        assert info.render() == b"@@ -10,5 +12,7 @@\tdef main():\n"

    def test_body_lines(self):
        assert Context(b"x\n").render() == b" x\n"
        assert Inserted(b"x\n").render() == b"+x\n"
        assert Deleted(b"x\n").render() == b"-x\n"
        assert Modified(b"x\n").render() == b"!x\n"

    def test_no_newline_marker(self):
        assert NoNewlineAtEof().render() == b"\\ No newline at end of file\n"

    def test_junk_renders_raw(self):
        assert Junk(b"whatever\r\n").render() == b"whatever\r\n"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "event",
        [
            OldFile(FileInfo(b"a/src/main.rs")),
            OldFile(FileInfo(b"a", b"2024-01-01 00:00:00 +0000")),
            Binaries(b"a/img.png", b"b/img.png"),
        ],
    )
    def test_old_file_phase(self, event):
        assert classify_old_file(event.render()) == event

    def test_new_file_phase(self):
        event = NewFile(FileInfo(b"b/src/main.rs", b"(working copy)"))
        assert classify_new_file(event.render()) == event

    @pytest.mark.parametrize(
        "info",
        [
            HunkInfo(1, 1, 1, 1),
            HunkInfo(0, 0, 1, 12),
            HunkInfo(4294967295, 2, 7, 1, b"struct Foo {"),
        ],
    )
    def test_hunk_phase(self, info):
        assert classify_hunk(Hunk(info).render()) == Hunk(info)

    def test_delta_phase(self):
        for event in (Context(b"a\n"), Inserted(b"b\n"), Deleted(b"c"), Modified(b"d\n"), NoNewlineAtEof()):
            assert classify_delta(event.render()) == event


class TestModelShape:
    def test_kinds(self):
        assert Inserted(b"").kind == LineKind.INSERTED
        assert Junk(b"").kind == LineKind.JUNK
        assert NoNewlineAtEof.kind == LineKind.NO_NEWLINE_AT_EOF
        assert LineKind.HUNK.value == "hunk"

    def test_frozen(self):
        event = Inserted(b"x\n")
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.body = b"y\n"  # type: ignore[misc]

    def test_hunk_defaults(self):
        info = HunkInfo()
        assert info.old_line_len == 1
        assert info.new_line_len == 1
        assert info.context is None
