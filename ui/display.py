"""Display utilities for the hand ranking report."""

from rich.table import Table
from rich.text import Text

from simulation.enumeration import PercentileEntry, Report, SampleEntry
from simulation.statistics import TypeDistribution
from threecard.cards import Card, Suit
from threecard.hand_evaluator import Hand, format_hand

SUIT_COLORS = {
    Suit.PIKE: "white",
    Suit.HEART: "red",
    Suit.CLOVER: "white",
    Suit.TILE: "red",
}


def format_sample_line(entry: SampleEntry, width: int = 4) -> str:
    """'<hand>: <v> <v> ... ' with a trailing space after every value."""
    values = "".join(f"{v} " for v in entry.score)
    return f"{format_hand(entry.hand.cards, width)}: {values}"


def format_percentile_line(entry: PercentileEntry, width: int = 4) -> str:
    """'<p>: <index> <hand>' with p padded to 5 and index to 6 columns."""
    return f"{entry.probability:>5g}: {entry.index:>6} {format_hand(entry.hand.cards, width)}"


def report_lines(report: Report, width: int = 4) -> list[str]:
    """Plain report lines, in print order."""
    lines = [str(report.population_size)]
    lines.extend(format_sample_line(e, width) for e in report.samples)
    lines.extend(format_percentile_line(e, width) for e in report.percentiles)
    return lines


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/tiles)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}]{card}[/{color}]"


def render_hand(hand: Hand) -> str:
    return " ".join(render_card(c) for c in hand.cards)


def render_hand_summary(hand: Hand) -> Table:
    """Render one hand with its type and score."""
    info = Table(show_header=False, box=None, padding=(0, 1))
    info.add_column("Label", style="dim")
    info.add_column("Value", style="bold")

    info.add_row("Hand", render_hand(hand))
    info.add_row("Type", f"[yellow]{hand.hand_type}[/yellow]")
    info.add_row("Score", " ".join(str(v) for v in hand.score))
    return info


def render_distribution(distribution: TypeDistribution) -> Table:
    """Render hand type counts and frequencies."""
    table = Table(title=f"Hand Types ({distribution.total:,} hands)")
    table.add_column("Type", style="cyan")
    table.add_column("Count", justify="right", style="white")
    table.add_column("Frequency", justify="right", style="green")

    for hand_type, count, freq in distribution.rows():
        table.add_row(str(hand_type), f"{count:,}", f"{freq:.4%}")

    return table


def render_comparison(a: Hand, b: Hand, result: int) -> Text:
    if result > 0:
        return Text.from_markup(f"{render_hand(a)} [green]beats[/green] {render_hand(b)}")
    if result < 0:
        return Text.from_markup(f"{render_hand(a)} [red]loses to[/red] {render_hand(b)}")
    return Text.from_markup(f"{render_hand(a)} [yellow]ties[/yellow] {render_hand(b)}")
