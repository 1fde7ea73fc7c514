"""Tests for the terminal and JSON reporters."""

import io
import json

from rich.console import Console

from patchstat.output import json_report, terminal
from patchstat.stats.models import DiffStat


def _stats():
    a = DiffStat(files=1, hunks=1, insertions=2, deletions=1, sources=["one.patch"])
    b = DiffStat(files=2, hunks=3, modifications=4, junk=5, sources=["two.patch"])
    return a.merge(b), [a, b]


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=200, color_system=None), buf


class TestJsonReport:
    def test_totals(self):
        total, _ = _stats()
        data = json.loads(json_report.render(total))
        assert data["files"] == 3
        assert data["hunks"] == 4
        assert data["insertions"] == 2
        assert data["deletions"] == 1
        assert data["modifications"] == 4
        assert data["junk"] == 5
        assert data["summary"] == total.summary()
        assert "sources" not in data

    def test_per_source(self):
        total, per_source = _stats()
        data = json_report.to_dict(total, per_source)
        assert [s["source"] for s in data["sources"]] == ["one.patch", "two.patch"]
        assert data["sources"][1]["modifications"] == 4


class TestTerminal:
    def test_summary_line(self):
        total, _ = _stats()
        console, buf = _console()
        terminal.render(total, console=console)
        assert buf.getvalue().strip() == total.summary()

    def test_table(self):
        total, per_source = _stats()
        console, buf = _console()
        terminal.render(total, per_source, show_table=True, console=console)
        out = buf.getvalue()
        assert "one.patch" in out
        assert "two.patch" in out
        assert total.summary() in out

    def test_summary_suppressed(self):
        total, _ = _stats()
        console, buf = _console()
        terminal.render(total, show_summary=False, console=console)
        assert buf.getvalue() == ""

    def test_long_sources_not_truncated(self):
        long_a = "/" + "/".join(["deeply-nested-directory"] * 4) + "/first.patch"
        long_b = "/" + "/".join(["deeply-nested-directory"] * 4) + "/second.patch"
        a = DiffStat(files=1, sources=[long_a])
        b = DiffStat(files=1, sources=[long_b])
        buf = io.StringIO()
        console = Console(file=buf, width=80, color_system=None)
        terminal.render(a.merge(b), [a, b], show_table=True, show_summary=False, console=console)

        source_cells = "".join(
            row.split("│")[1].strip()
            for row in buf.getvalue().splitlines()
            if row.startswith("│")
        )
        assert "…" not in buf.getvalue()
        assert long_a in source_cells
        assert long_b in source_cells
