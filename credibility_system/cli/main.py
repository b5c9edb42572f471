"""Command-line interface for the credibility pipeline using Typer and Rich."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from credibility_system import __version__
from credibility_system.config.logging import configure_logging, get_logger
from credibility_system.config.settings import settings
from credibility_system.data_management.report_store import ReportStore
from credibility_system.data_management.schemas import AnalysisFailure, CredibilityReport
from credibility_system.pipeline import CredibilityPipeline
from credibility_system.utils.logging import configure_structured_logging

app = typer.Typer(
    help="Content credibility scoring - classifier, generative assessor and news verification",
    add_completion=False,
)

console = Console()

logger = get_logger("cli")


def _read_content(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        return file.read_text(encoding="utf-8")
    return text or ""


def _render_report(report: CredibilityReport) -> None:
    metrics = report.combined_metrics
    table = Table(title="Credibility Report", show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan", width=22)
    table.add_column("Value", style="green")

    table.add_row("Credibility score", str(metrics.credibility_score))
    table.add_row("Truth score", str(metrics.truth_score))
    table.add_row("Confidence", str(metrics.confidence))
    table.add_row("News reliability", str(metrics.news_reliability))
    table.add_row("Reliability", report.reliability_label)
    table.add_row(
        "Content type",
        f"{report.content_analysis.content_type} ({report.content_analysis.confidence}%)",
    )
    table.add_row("News verdict", report.news_verification.verdict)
    table.add_row("Sources", ", ".join(s.name for s in report.source_analysis.sources) or "-")
    console.print(table)


def _render_failure(failure: AnalysisFailure) -> None:
    body = f"{failure.details}"
    if failure.retry_after:
        body += f"\n\n[dim]Retry after {failure.retry_after}s[/dim]"
    console.print(Panel(body, title=failure.error, border_style="red"))


@app.command()
def analyze(
    text: Optional[str] = typer.Argument(None, help="Text to assess"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read text from a file"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log adapter calls at DEBUG level"),
) -> None:
    """
    Assess the credibility of a piece of text.

    Exits with status 1 when the analysis fails.
    """
    if verbose:
        configure_logging(level="DEBUG")
        configure_structured_logging(level="DEBUG")

    content = _read_content(text, file)
    logger.info("Analyze command invoked", length=len(content))

    pipeline = CredibilityPipeline()
    run = asyncio.run(pipeline.evaluate(content))
    outcome = run.result()

    if isinstance(outcome, AnalysisFailure):
        if as_json:
            console.print_json(json.dumps(outcome.to_json_dict()))
        else:
            _render_failure(outcome)
        raise typer.Exit(1)

    if settings.report_store_path:
        store = ReportStore(settings.report_store_path)
        report_id = asyncio.run(store.save_report(outcome))
        logger.info("Report saved", report_id=report_id)

    if as_json:
        console.print_json(json.dumps(outcome.to_json_dict()))
    else:
        _render_report(outcome)


@app.command()
def status() -> None:
    """Display configuration: credentials, models and retry policy."""
    table = Table(title="Credibility System Status", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan", width=20)
    table.add_column("Status", style="green", width=15)
    table.add_column("Details", style="yellow")

    table.add_row("Classifier", "✓ Configured", settings.classifier_model)
    table.add_row("Assessor", "✓ Configured", settings.mistral_model)
    table.add_row("News search", "✓ Configured", settings.news_api_url)
    table.add_row(
        "Retry policy",
        "✓ Active",
        f"{settings.max_attempts} attempts, {settings.request_timeout:g}s timeout, "
        f"backoff {settings.backoff_base:g}s..{settings.backoff_max:g}s",
    )
    table.add_row("Logging", "✓ Active", f"Level: {settings.log_level}, Format: {settings.log_format}")
    table.add_row(
        "Report store",
        "✓ Enabled" if settings.report_store_path else "✗ Disabled",
        settings.report_store_path or "memory only",
    )
    console.print(table)


@app.command()
def version() -> None:
    """Display version information."""
    console.print("[bold]Credibility System[/bold]")
    console.print(f"Version: {__version__}")


if __name__ == "__main__":
    app()
