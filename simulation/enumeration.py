"""Enumerate every ordered three-card hand and build the percentile report."""

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from tqdm import tqdm

from config.settings import ReportConfig
from threecard.cards import Card, Deck
from threecard.hand_evaluator import Hand, Score
from utils.logging import LOGGER_NAME

logger = logging.getLogger(f"{LOGGER_NAME}.{__name__}")


@dataclass(frozen=True, slots=True)
class SampleEntry:
    """A hand picked from the unsorted population."""

    index: int
    hand: Hand

    @property
    def score(self) -> Score:
        return self.hand.score


@dataclass(frozen=True, slots=True)
class PercentileEntry:
    """The hand sitting at a given probability of the sorted population."""

    probability: float
    index: int
    hand: Hand


@dataclass
class Report:
    """Everything the console report prints."""

    population_size: int
    samples: list[SampleEntry] = field(default_factory=list)
    percentiles: list[PercentileEntry] = field(default_factory=list)
    hands: list[Hand] = field(default_factory=list, repr=False)


def enumerate_hands(cards: Iterable[Card] | None = None, show_progress: bool = False) -> list[Hand]:
    """Build a Hand for every ordered triple of pairwise-distinct cards.

    Each 3-card combination appears once per permutation, so a full deck
    yields 52 * 51 * 50 = 132600 hands.
    """
    cards = list(Deck() if cards is None else cards)

    iterator: Iterable[Card] = cards
    if show_progress:
        iterator = tqdm(cards, desc="Enumerating hands", unit="cards")

    hands = []
    for card0 in iterator:
        for card1 in cards:
            if card1 == card0:
                continue
            for card2 in cards:
                if card2 != card0 and card2 != card1:
                    hands.append(Hand((card0, card1, card2)))

    logger.debug("Enumerated %d hands from %d cards", len(hands), len(cards))
    return hands


def sample_indices(population_size: int, count: int = 10, multiplier: int = 1_000_000_007) -> list[int]:
    """Deterministic pseudo-shuffle: k_i = i * multiplier mod population_size."""
    if population_size <= 0:
        raise ValueError("Cannot sample from an empty population")
    return [(i * multiplier) % population_size for i in range(count)]


def sort_hands(hands: list[Hand]) -> list[Hand]:
    """Sort hands ascending by score, in place."""
    hands.sort(key=lambda h: h.score)
    return hands


def round_half_away(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = abs(x)
    r = math.floor(magnitude)
    # fractional part, exact in floating point
    if magnitude - r >= 0.5:
        r += 1
    return -r if x < 0 else r


def percentile_index(probability: float, population_size: int) -> int:
    """Index of the hand at `probability` in a sorted population."""
    return round_half_away(probability * (population_size - 1.0))


def percentile_entries(sorted_hands: Sequence[Hand], probabilities: Iterable[float]) -> list[PercentileEntry]:
    entries = []
    for p in probabilities:
        i = percentile_index(p, len(sorted_hands))
        entries.append(PercentileEntry(probability=p, index=i, hand=sorted_hands[i]))
    return entries


def build_report(config: ReportConfig | None = None) -> Report:
    """Enumerate, sample, sort and pick percentile hands."""
    config = config or ReportConfig()
    start = time.time()

    hands = enumerate_hands(show_progress=config.show_progress)
    report = Report(population_size=len(hands), hands=hands)

    for k in sample_indices(len(hands), config.sample_count, config.sample_multiplier):
        report.samples.append(SampleEntry(index=k, hand=hands[k]))

    sort_hands(hands)
    report.percentiles = percentile_entries(hands, config.probabilities)

    logger.info("Built report over %d hands in %.2fs", report.population_size, time.time() - start)
    return report
