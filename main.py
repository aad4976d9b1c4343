"""Three-card hand ranking: enumerate, score, sort and report percentiles."""

from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from config.settings import Config, load_config
from simulation.enumeration import build_report, enumerate_hands
from simulation.statistics import TypeDistribution
from threecard.cards import Card
from threecard.hand_evaluator import Hand, compare_hands
from ui.display import render_comparison, render_distribution, render_hand_summary, report_lines
from utils.logging import setup_logging

app = typer.Typer(
    name="three-card",
    help="Rank every three-card hand and report percentile cut-points.",
)
console = Console()


def _load(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return Config()
    try:
        return load_config(config_path)
    except (FileNotFoundError, TypeError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid config: {e}[/red]")
        raise typer.Exit(1)


def _parse_hand(labels: list[str]) -> Hand:
    try:
        return Hand([Card.from_string(label) for label in labels])
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context) -> None:
    """Print the full report when no command is given."""
    if ctx.invoked_subcommand is None:
        report(config_path=None, progress=False, log_file=None)


@app.command()
def report(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    progress: bool = typer.Option(False, "--progress", help="Show enumeration progress"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Print population size, sampled scores and percentile hands."""
    config = _load(config_path)
    if progress:
        config.report.show_progress = True
    setup_logging(config.logging.level, log_file or config.logging.log_file)

    result = build_report(config.report)
    for line in report_lines(result, config.report.card_width):
        print(line)


@app.command()
def classify(
    cards: list[str] = typer.Argument(..., help="Three card labels, e.g. A_P 2_H 3_C"),
) -> None:
    """Show the type and score of a single hand."""
    hand = _parse_hand(cards)
    console.print(render_hand_summary(hand))


@app.command()
def compare(
    first: str = typer.Argument(..., help="First hand, e.g. 'K_P,K_H,2_C'"),
    second: str = typer.Argument(..., help="Second hand, e.g. '2_P,5_P,9_P'"),
) -> None:
    """Compare two hands."""
    a = _parse_hand(first.split(","))
    b = _parse_hand(second.split(","))
    console.print(render_comparison(a, b, compare_hands(a, b)))


@app.command()
def distribution(
    plot: Optional[Path] = typer.Option(None, "--plot", "-p", help="Save a bar chart to this path"),
    progress: bool = typer.Option(False, "--progress", help="Show enumeration progress"),
) -> None:
    """Show how often each hand type occurs across all ordered hands."""
    dist = TypeDistribution.from_hands(enumerate_hands(show_progress=progress))
    console.print(render_distribution(dist))

    if plot is not None:
        dist.plot(save_path=plot)
        console.print(f"Plot saved to: {plot}")


@app.command()
def info(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Show the active configuration."""
    config = _load(config_path)

    table = Table()
    table.add_column("Category", style="cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")

    table.add_row("Report", "Sample count", str(config.report.sample_count))
    table.add_row("Report", "Sample multiplier", str(config.report.sample_multiplier))
    table.add_row("Report", "Probabilities", ", ".join(f"{p:g}" for p in config.report.probabilities))
    table.add_row("Report", "Card width", str(config.report.card_width))
    table.add_row("Report", "Show progress", str(config.report.show_progress))

    table.add_row("Logging", "Level", config.logging.level)
    table.add_row("Logging", "Log file", str(config.logging.log_file))

    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
