"""CLI entry point for the snapshot comparison tool."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from snapcompare.models.config import CompareConfig
from snapcompare.orchestrator import ComparisonOrchestrator
from snapcompare.reporter.markdown_report import emit_report

console = Console()

DEFAULT_CONFIG_PATH = "compare-config.json"


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _load_config(config: str | None) -> CompareConfig:
    """Load the given config, the default file if present, or built-in defaults."""
    path = Path(config or DEFAULT_CONFIG_PATH)
    try:
        if config is None and not path.exists():
            return CompareConfig()
        return CompareConfig.load(path)
    except FileNotFoundError:
        console.print(f"[red]Config file not found: {path}[/red]")
        console.print("Run 'snapcompare init' to create a default config.")
        sys.exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid config {path}:[/red]\n{escape(str(e))}")
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Reference vs. generated website screenshot comparison"""
    setup_logging(verbose)


@cli.command()
@click.option("--config", "-c", default=None, help=f"Config file path (default: {DEFAULT_CONFIG_PATH} if present)")
@click.option("--reference-url", "-r", default=None, help="Override the reference website URL")
@click.option("--local-document", "-l", default=None, help="Override the generated HTML document path")
@click.option("--output-dir", "-o", default=None, help="Directory for screenshots and reports")
@click.option("--headless/--headed", default=None, help="Run the browser without a window")
def run(
    config: str | None,
    reference_url: str | None,
    local_document: str | None,
    output_dir: str | None,
    headless: bool | None,
) -> None:
    """Capture both sites at every viewport and write the comparison report."""
    cfg = _load_config(config)
    if reference_url is not None:
        cfg = cfg.with_reference_url(reference_url)
    overrides = {
        "local_document": local_document,
        "output_dir": output_dir,
        "headless": headless,
    }
    cfg = cfg.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    console.print("[bold]Starting Website Design Comparison Process[/bold]")
    console.print(
        f"This will compare {cfg.reference_name} ({cfg.reference_url}) "
        f"with {cfg.generated_name} ({cfg.local_document})"
    )

    summary = ComparisonOrchestrator(cfg).run()

    table = Table(title=f"Capture Passes ({summary.timestamp})")
    table.add_column("Pass", style="bold")
    table.add_column("Target")
    table.add_column("Screenshots")
    table.add_column("Status")
    for p in summary.passes:
        status = "[green]ok[/green]" if p.succeeded else f"[red]{escape(p.error)}[/red]"
        table.add_row(p.role, p.target, str(len(p.artifacts)), status)
    console.print(table)

    if summary.aborted:
        console.print(f"[red]Comparison aborted:[/red] {escape(summary.error or '')}")
        sys.exit(1)

    console.print("\n[bold green]Comparison process completed successfully![/bold green]")
    for fmt, path in summary.reports.items():
        console.print(f"  {fmt.upper()} report: [blue]{path}[/blue]")
    console.print("\nNext steps:")
    console.print("  1. Review the screenshots side-by-side")
    console.print("  2. Check the comparison report for detailed analysis")
    console.print("  3. Make necessary design adjustments")
    console.print("  4. Re-run this command to verify improvements")


@cli.command()
@click.argument("timestamp")
@click.option("--config", "-c", default=None, help="Config file path")
@click.option("--output-dir", "-o", default=None, help="Directory to write the report to")
def report(timestamp: str, config: str | None, output_dir: str | None) -> None:
    """Regenerate the markdown checklist for an earlier run TIMESTAMP."""
    cfg = _load_config(config)
    path = emit_report(timestamp, cfg, Path(output_dir) if output_dir else None)
    console.print(f"[green]Comparison report saved to:[/green] {path}")


@cli.command()
@click.option("--reference-url", "-r", prompt="Reference URL", help="Website to compare against")
@click.option("--local-document", "-l", default="index.html", help="Generated HTML document path")
def init(reference_url: str, local_document: str) -> None:
    """Create a default configuration file."""
    config_path = Path(DEFAULT_CONFIG_PATH)
    if config_path.exists():
        if not click.confirm(f"{DEFAULT_CONFIG_PATH} already exists. Overwrite?"):
            return

    cfg = CompareConfig(local_document=local_document).with_reference_url(reference_url)
    cfg.save(config_path)
    console.print(f"[green]Created {config_path}[/green]")
    console.print("\nYou can now customize this file and run:")
    console.print("  [blue]snapcompare run[/blue]")


if __name__ == "__main__":
    cli()
