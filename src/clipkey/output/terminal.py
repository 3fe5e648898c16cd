"""Rich terminal reporter — verdict line, score table, scan findings."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from clipkey.findings.models import ScanResult, ScoreCard, Verdict
from clipkey.findings.redactor import redact


def _verdict_pill(is_secret: bool) -> Text:
    if is_secret:
        return Text(" 🔑 SECRET ", style="bold white on red")
    return Text(" ✓ CLEAR ", style="bold black on green")


def render_verdict(
    verdict: Verdict,
    value: str,
    *,
    card: Optional[ScoreCard] = None,
    redact_all: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print a single verdict, optionally followed by its score breakdown."""
    console = console or Console(stderr=True)

    line = Text()
    line.append_text(_verdict_pill(verdict.is_secret))
    line.append(f"  {redact(value, full=redact_all)}", style="cyan")
    console.print(line)

    detail = f"[dim]stage:[/dim] {verdict.stage.value}  [dim]reason:[/dim] {verdict.reason}"
    if verdict.label:
        detail += f"  [dim]looks like:[/dim] {verdict.label}"
    console.print(detail)

    if card is not None:
        _print_card(console, card)


def _print_card(console: Console, card: ScoreCard) -> None:
    console.print()
    table = Table(
        title="Soft score",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Feature", style="cyan", min_width=24)
    table.add_column("Δ", justify="right")

    for item in card.items:
        style = "green" if item.delta > 0 else "red"
        table.add_row(item.label, Text(f"{item.delta:+.1f}", style=style))

    table.add_section()
    table.add_row("[bold]total[/bold]", f"[bold]{card.score:.1f}[/bold]")
    table.add_row("threshold", f"{card.threshold:.1f}")
    console.print(table)
    console.print(f"[dim]Entropy:[/dim] {card.entropy:.2f} bits/char  [dim]Length:[/dim] {card.length}")


def render_scan(
    result: ScanResult,
    *,
    redact_all: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print scan findings as a table."""
    console = console or Console(stderr=True)

    if not result.findings:
        console.print()
        console.print("[bold green]✅ No secret-looking lines found.[/bold green]")
        _print_summary(console, result)
        return

    console.print()
    table = Table(
        title="clipkey Findings",
        show_lines=True,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Line", justify="right", style="green")
    table.add_column("Value", min_width=15)
    table.add_column("Stage", style="magenta")
    table.add_column("Reason", style="cyan")

    for finding in result.findings:
        table.add_row(
            ", ".join(str(n) for n in finding.line_numbers),
            redact(finding.value, full=redact_all),
            finding.verdict.stage.value,
            finding.verdict.label or finding.verdict.reason,
        )

    console.print(table)
    _print_summary(console, result)


def _print_summary(console: Console, result: ScanResult) -> None:
    console.print()
    console.print(f"[dim]Lines scanned:[/dim] {result.scanned_lines}")
    console.print(f"[dim]Findings:[/dim]      {result.total_findings}")
    console.print(f"[dim]Duration:[/dim]      {result.scan_duration_ms:.0f}ms")
