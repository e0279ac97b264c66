"""repohygiene CLI — Typer application with secrets, patterns and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from repohygiene import __version__

if TYPE_CHECKING:
    from repohygiene.config.schema import RepoHygieneConfig

app = typer.Typer(
    name="repohygiene",
    help="Find leaked credentials in your repository before they ship.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _configure_logging(verbose: bool, debug: bool) -> None:
    """Attach a Rich handler to the package logger when asked to."""
    if not (verbose or debug):
        return
    logger = logging.getLogger("repohygiene")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))


def _die(label: str, detail: object) -> typer.Exit:
    console.print(f"[bold red]{label}:[/bold red] {detail}")
    return typer.Exit(code=2)


def _apply_cli_overrides(
    cfg: RepoHygieneConfig,
    format: Optional[str],
    fail_on: Optional[str],
    threshold: Optional[float],
    exclude: Optional[List[str]],
    workers: Optional[int],
) -> None:
    """Flags beat env vars, which beat the config file."""
    from repohygiene.config.schema import FAIL_ON_LEVELS, OUTPUT_FORMATS

    if format:
        if format not in OUTPUT_FORMATS:
            raise _die("Invalid format", format)
        cfg.output.format = format  # type: ignore[assignment]
    if fail_on:
        if fail_on not in FAIL_ON_LEVELS:
            raise _die("Invalid fail-on level", fail_on)
        cfg.output.fail_on = fail_on  # type: ignore[assignment]
    if threshold is not None:
        cfg.secrets.entropy_threshold = threshold
    if exclude:
        cfg.secrets.exclude.extend(exclude)
    if workers is not None:
        cfg.secrets.max_workers = workers


# ── secrets ───────────────────────────────────────────────────────────────────


@app.command()
def secrets(
    path: Path = typer.Argument(Path("."), help="Directory to scan"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .repohygiene.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | sarif"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
    fail_on: Optional[str] = typer.Option(None, "--fail-on", help="Severity threshold: low | medium | high | never"),
    threshold: Optional[float] = typer.Option(None, "--threshold", "-t", help="Entropy threshold (bits per char)"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-e", help="Extra exclude glob (repeatable)"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Parallel file workers"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output, including skipped files"),
    dry_run: bool = typer.Option(False, "--dry-run", help="List the files that would be scanned and exit"),
) -> None:
    """Scan files under PATH for hard-coded secrets."""
    from repohygiene.config.loader import ConfigError, load_config
    from repohygiene.config.schema import severity_at_or_above
    from repohygiene.output import json_report, sarif, terminal
    from repohygiene.patterns.models import PatternError
    from repohygiene.patterns.registry import build_registry
    from repohygiene.scanner.auditor import FileSetAuditor
    from repohygiene.scanner.files import enumerate_files

    _configure_logging(verbose, debug)

    root = path.resolve()
    if not root.is_dir():
        raise _die("Not a directory", path)

    try:
        cfg = load_config(root, config)
    except ConfigError as exc:
        raise _die("Config error", exc) from exc
    _apply_cli_overrides(cfg, format, fail_on, threshold, exclude, workers)
    options = cfg.secrets.to_scan_options()

    if dry_run:
        files = enumerate_files(root, options.include_globs, options.exclude_globs)
        console.print(f"[bold]Dry run — {len(files)} files would be scanned:[/bold]")
        for f in files:
            console.print(f"  {f.relative_to(root).as_posix()}")
        raise typer.Exit(code=0)

    try:
        registry = build_registry(custom_dir=root / cfg.secrets.patterns_dir)
    except PatternError as exc:
        raise _die("Pattern error", exc) from exc

    if verbose or debug:
        console.print(f"[dim]Patterns loaded: {len(registry)}[/dim]")
        console.print(f"[dim]Scan root: {root}[/dim]")
        console.print(f"[dim]Workers: {options.max_workers}[/dim]")

    result = FileSetAuditor(root, options, registry=registry).audit()
    summary = result.summary
    blocked = any(
        severity_at_or_above(f.severity, cfg.output.fail_on) for f in summary.findings
    )

    if debug:
        console.print(f"[dim]Scan duration: {summary.duration_ms:.0f}ms[/dim]")

    # --- Output ---
    report_text: Optional[str] = None
    if cfg.output.format == "json":
        report_text = json_report.render(summary, result.issues)
    elif cfg.output.format == "sarif":
        report_text = sarif.render(summary)

    if report_text is None:
        terminal.render(summary, blocked=blocked, console=console)
    else:
        print(report_text)

    if output:
        # A terminal run still writes a machine-readable file.
        Path(output).write_text(
            report_text or json_report.render(summary, result.issues), encoding="utf-8"
        )
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    raise typer.Exit(code=1 if blocked else 0)


# ── patterns ──────────────────────────────────────────────────────────────────


@app.command()
def patterns(
    severity: Optional[str] = typer.Option(None, "--severity", "-s", help="Only list high | medium | low"),
) -> None:
    """List the built-in secret signatures."""
    from repohygiene.patterns.registry import build_registry

    registry = build_registry()
    if severity:
        try:
            selected = registry.by_severity(severity)
        except ValueError as exc:
            console.print(f"[bold red]{exc}[/bold red]")
            raise typer.Exit(code=2) from exc
    else:
        selected = registry.all_patterns()

    table = Table(title=f"Secret patterns ({len(selected)})", border_style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Severity")
    table.add_column("Description", style="dim")
    for p in selected:
        table.add_row(p.name, p.severity, p.description)
    Console().print(table)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    path: Path = typer.Argument(Path("."), help="Directory to write .repohygiene.toml into"),
) -> None:
    """Generate a starter .repohygiene.toml."""
    from repohygiene.config.defaults import DEFAULT_TOML
    from repohygiene.config.loader import CONFIG_FILENAME

    config_path = path / CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"repohygiene {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """repohygiene — find leaked credentials before they ship."""
