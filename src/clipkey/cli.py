"""clipkey CLI — Typer application with check, scan, and init commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from clipkey import __version__

app = typer.Typer(
    name="clipkey",
    help="Tell API keys and tokens apart from ordinary clipboard text.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


def _load_classifier(config: Optional[str], format: Optional[str]):
    """Load config and build a classifier, exit 2 on failure."""
    from clipkey.classifier.engine import Classifier
    from clipkey.config.loader import ConfigError, load_config
    from clipkey.config.schema import OUTPUT_FORMATS
    from clipkey.rules.registry import RuleError

    root = Path.cwd()
    try:
        cfg = load_config(root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    try:
        classifier = Classifier.from_config(cfg, root)
    except RuleError as exc:
        console.print(f"[bold red]Rule error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    return cfg, classifier


def _read_value(value: Optional[str]) -> str:
    if value is not None:
        return value
    if sys.stdin.isatty():
        console.print("[bold red]Error:[/bold red] pass a value or pipe one on stdin")
        raise typer.Exit(code=2)
    return sys.stdin.read()


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    value: Optional[str] = typer.Argument(None, help="Value to classify (read from stdin when omitted)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .clipkey.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    explain: bool = typer.Option(False, "--explain", "-e", help="Show the soft-score breakdown"),
    redact_all: bool = typer.Option(False, "--redact-all", help="Hide every character of the value"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Classify one value. Exit 1 when it looks like a secret."""
    from clipkey.classifier.normalize import normalize
    from clipkey.output import json_report, terminal

    _configure_logging(debug)
    cfg, classifier = _load_classifier(config, format)
    raw = _read_value(value)

    verdict = classifier.classify(raw)
    card = classifier.explain(raw) if explain else None
    shown = normalize(raw)
    hide = redact_all or cfg.output.redact_all

    if cfg.output.format == "json":
        print(json_report.render_verdict(verdict, shown, card=card, redact_all=hide))
    else:
        terminal.render_verdict(verdict, shown, card=card, redact_all=hide, console=console)

    raise typer.Exit(code=1 if verdict.is_secret else 0)


# ── scan ──────────────────────────────────────────────────────────────────────


@app.command()
def scan(
    path: str = typer.Argument(..., help="Text file to scan line by line ('-' for stdin)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .clipkey.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    redact_all: bool = typer.Option(False, "--redact-all", help="Hide every character of flagged values"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Scan each line of a file. Exit 1 when any line looks like a secret."""
    from clipkey.classifier.batch import scan_text
    from clipkey.output import json_report, terminal

    _configure_logging(debug)
    cfg, classifier = _load_classifier(config, format)

    if path == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            console.print(f"[bold red]Error:[/bold red] cannot read {path}: {exc.strerror}")
            raise typer.Exit(code=2) from exc

    result = scan_text(text, classifier)
    hide = redact_all or cfg.output.redact_all

    report_text: Optional[str] = None
    if cfg.output.format == "json":
        report_text = json_report.render_scan(result, redact_all=hide)
        print(report_text)
    else:
        terminal.render_scan(result, redact_all=hide, console=console)

    if output:
        if report_text is None:
            report_text = json_report.render_scan(result, redact_all=hide)
        Path(output).write_text(report_text, encoding="utf-8")

    raise typer.Exit(code=1 if result.flagged else 0)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .clipkey.toml in the current directory."""
    from clipkey.config.defaults import DEFAULT_TOML
    from clipkey.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"clipkey {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """clipkey — tell API keys and tokens apart from ordinary clipboard text."""
