"""Rich terminal reporter — colour, icons, severity pills."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from repohygiene.findings.models import ScanSummary

_SEVERITY_STYLE = {
    "high": "bold white on red",
    "medium": "bold black on yellow",
    "low": "bold black on bright_cyan",
}

_SEVERITY_ICON = {
    "high": "🔴",
    "medium": "🟡",
    "low": "🔵",
}


def _severity_pill(severity: str) -> Text:
    style = _SEVERITY_STYLE.get(severity, "")
    icon = _SEVERITY_ICON.get(severity, "")
    return Text(f" {icon} {severity.upper()} ", style=style)


def render(
    summary: ScanSummary,
    *,
    blocked: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print scan results to the terminal using Rich."""
    console = console or Console(stderr=True)

    if not summary.findings:
        console.print()
        console.print("[bold green]✅ No secrets detected.[/bold green]")
        _print_summary(console, summary)
        return

    console.print()
    table = Table(
        title="Secret Findings",
        show_lines=True,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Severity", justify="center", width=12)
    table.add_column("Type", style="cyan", min_width=20)
    table.add_column("Location", style="magenta")
    table.add_column("Match", min_width=15)
    table.add_column("Entropy", justify="right", style="green")

    for finding in summary.findings:
        table.add_row(
            _severity_pill(finding.severity),
            finding.type,
            f"{finding.file}:{finding.line}:{finding.column}",
            finding.masked_match,
            f"{finding.entropy:.2f}" if finding.entropy is not None else "-",
        )

    console.print(table)
    _print_summary(console, summary)

    console.print()
    if blocked:
        console.print(
            "[bold red]❌ FAILED — secrets detected at or above threshold. "
            "Rotate them before pushing.[/bold red]"
        )
    else:
        console.print(
            "[bold yellow]⚠️  Findings detected but below fail threshold.[/bold yellow]"
        )


def _print_summary(console: Console, summary: ScanSummary) -> None:
    console.print()
    console.print(f"[dim]Files scanned:[/dim]  {summary.scanned_file_count}")
    console.print(f"[dim]Findings:[/dim]       {summary.total_findings}")
    console.print(f"[dim]Pattern matches:[/dim] {len(summary.pattern_findings)}")
    console.print(f"[dim]Entropy-only:[/dim]   {len(summary.entropy_findings)}")
    console.print(f"[dim]Skipped:[/dim]        {len(summary.skipped_files)}")
    console.print(f"[dim]Duration:[/dim]       {summary.duration_ms:.0f}ms")
