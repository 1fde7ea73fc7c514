"""patchstat CLI: Typer application with stat, lines, and init commands."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional

import typer
from rich.console import Console

from patchstat import __version__

app = typer.Typer(
    name="patchstat",
    help="Summarise unified diffs: files, hunks, insertions, deletions, modifications.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

STDIN_NAME = "-"


@contextmanager
def _open_source(path: str) -> Iterator[BinaryIO]:
    """Yield a binary line source for *path*; ``-`` is stdin and is left open."""
    if path == STDIN_NAME:
        yield sys.stdin.buffer
        return
    with open(path, "rb") as fh:
        yield fh


def _load_config(config: Optional[str]):
    from patchstat.config.loader import ConfigError, load_config

    try:
        return load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _configure_logging(level_name: str, verbose: bool, debug: bool) -> None:
    import logging

    from patchstat.logging import level_from_name, setup_logging

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = min(logging.INFO, level_from_name(level_name))
    else:
        level = level_from_name(level_name)
    setup_logging(level)


# ── stat ──────────────────────────────────────────────────────────────────────


@app.command()
def stat(
    paths: Optional[List[str]] = typer.Argument(None, help="Patch files to read ('-' or nothing for stdin)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .patchstat.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    table: bool = typer.Option(False, "--table", help="Show a per-file breakdown"),
    log_junk: bool = typer.Option(False, "--log-junk", help="Log every line that could not be classified"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output, including parser resynchronisation"),
) -> None:
    """Print a diffstat summary for one or more patches."""
    from patchstat.diff.parser import DiffParser, DiffParserError
    from patchstat.output import json_report, terminal
    from patchstat.stats import DiffStat, tally

    cfg = _load_config(config)

    # --- CLI overrides ---
    if format:
        if format not in ("terminal", "json"):
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if table:
        cfg.output.show_table = True
    if log_junk:
        cfg.diagnostics.log_junk = True

    _configure_logging(cfg.diagnostics.log_level, verbose, debug)

    sources = paths or [STDIN_NAME]
    per_source: List[DiffStat] = []

    for path in sources:
        try:
            with _open_source(path) as fh:
                per_source.append(
                    tally(DiffParser(fh), source=path, log_junk=cfg.diagnostics.log_junk)
                )
        except FileNotFoundError as exc:
            console.print(f"[bold red]Error:[/bold red] no such file: {path}")
            raise typer.Exit(code=2) from exc
        except (OSError, DiffParserError) as exc:
            console.print(f"[bold red]Read error:[/bold red] {path}: {exc}")
            raise typer.Exit(code=2) from exc

        if verbose or debug:
            console.print(f"[dim]{path}: {per_source[-1].junk} junk line(s)[/dim]")

    total = DiffStat()
    for item in per_source:
        total = total.merge(item)

    breakdown = per_source if len(per_source) > 1 else None

    # --- Output ---
    report_text: Optional[str] = None

    if cfg.output.format == "terminal":
        terminal.render(
            total,
            breakdown,
            show_summary=cfg.output.show_summary,
            show_table=cfg.output.show_table,
        )
    else:
        report_text = json_report.render(total, breakdown)
        print(report_text)

    if output:
        report_text = report_text or json_report.render(total, breakdown)
        Path(output).write_text(report_text, encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")


# ── lines ─────────────────────────────────────────────────────────────────────


def _describe(event) -> str:
    """One-line human description of a classified event's payload."""
    from patchstat.diff import models

    if isinstance(event, (models.OldFile, models.NewFile)):
        raw = event.info.render()
    elif isinstance(event, models.Binaries):
        raw = event.old + b" -> " + event.new
    elif isinstance(event, models.Hunk):
        raw = event.info.render()
    elif isinstance(event, (models.Context, models.Inserted, models.Deleted, models.Modified)):
        raw = event.body
    elif isinstance(event, models.Junk):
        raw = event.raw
    else:
        raw = b""
    return raw.decode("utf-8", errors="replace").rstrip("\r\n")


@app.command()
def lines(
    path: str = typer.Argument(STDIN_NAME, help="Patch file to read ('-' for stdin)"),
    junk_only: bool = typer.Option(False, "--junk-only", help="Only show lines that could not be classified"),
) -> None:
    """Show how every line of a patch was classified."""
    from patchstat.diff.models import Junk
    from patchstat.diff.parser import DiffParser, DiffParserError

    out = Console()

    try:
        with _open_source(path) as fh:
            parser = DiffParser(fh)
            for event in parser:
                if junk_only and not isinstance(event, Junk):
                    continue
                out.print(
                    f"{parser.line_no:>6}  {event.kind.value:<18} {_describe(event)}",
                    markup=False,
                    highlight=False,
                    soft_wrap=True,
                )
    except FileNotFoundError as exc:
        console.print(f"[bold red]Error:[/bold red] no such file: {path}")
        raise typer.Exit(code=2) from exc
    except (OSError, DiffParserError) as exc:
        console.print(f"[bold red]Read error:[/bold red] {path}: {exc}")
        raise typer.Exit(code=2) from exc


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .patchstat.toml in the current directory."""
    from patchstat.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"patchstat {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """patchstat: summarise unified diffs."""
