"""Hand classification for three-card hands."""

import functools
from enum import IntEnum
from typing import Sequence

from threecard.cards import Card

Score = tuple[int, ...]

HAND_SIZE = 3


class HandType(IntEnum):
    """Three-card hand types from lowest to highest."""

    HIGH_CARD = 0
    PAIR = 1
    FLUSH = 2
    STRAIGHT = 3
    STRAIGHT_FLUSH = 4
    BOMB = 5

    def __str__(self) -> str:
        names = {
            0: "High Card",
            1: "Pair",
            2: "Flush",
            3: "Straight",
            4: "Straight Flush",
            5: "Bomb",
        }
        return names[self.value]


def _check_cards(cards: Sequence[Card]) -> None:
    if len(cards) != HAND_SIZE:
        raise ValueError(f"Expected {HAND_SIZE} cards, got {len(cards)}")
    if len(set(cards)) != HAND_SIZE:
        raise ValueError(f"Duplicate cards in hand: {', '.join(str(c) for c in cards)}")


def _is_run(values: Sequence[int]) -> bool:
    return values[0] + 1 == values[1] and values[0] + 2 == values[2]


def classify(cards: Sequence[Card]) -> Score:
    """Score three cards, read in the order given.

    The first element of the score is the HandType, the rest are tie-breakers
    compared left to right. Aces count high (14) everywhere except in the
    raw-order straight test, which looks at the ranks exactly as given and
    therefore depends on card order. Hand always passes its cards sorted.
    """
    _check_cards(cards)

    a1 = [int(c.rank) for c in cards]
    a14 = sorted(c.rank.high_value for c in cards)

    if a1[0] == a1[1] == a1[2]:
        return (HandType.BOMB, a14[0])

    flush = cards[0].suit == cards[1].suit == cards[2].suit
    straight = _is_run(a1) or _is_run(a14)

    if flush and straight:
        return (HandType.STRAIGHT_FLUSH, a14[2])
    if straight:
        return (HandType.STRAIGHT, a14[2])
    if flush:
        return (HandType.FLUSH, a14[2], a14[1], a14[0])
    if a14[0] == a14[1]:
        return (HandType.PAIR, a14[0], a14[2])
    if a14[1] == a14[2]:
        return (HandType.PAIR, a14[1], a14[0])
    return (HandType.HIGH_CARD, a14[2], a14[1], a14[0])


@functools.total_ordering
class Hand:
    """Three distinct cards, kept sorted, compared by score."""

    __slots__ = ("cards", "score")

    def __init__(self, cards: Sequence[Card]) -> None:
        _check_cards(cards)
        self.cards: tuple[Card, ...] = tuple(sorted(cards))
        self.score: Score = tuple(int(v) for v in classify(self.cards))

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Parse a hand from comma-separated card labels like 'A_P, 2_H,3_C'."""
        return cls([Card.from_string(part) for part in s.split(",")])

    @property
    def hand_type(self) -> HandType:
        return HandType(self.score[0])

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.score < other.score

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.score == other.score

    def __hash__(self) -> int:
        return hash(self.score)

    def __str__(self) -> str:
        return format_hand(self.cards)

    def __repr__(self) -> str:
        return f"Hand({', '.join(str(c) for c in self.cards)})"


def format_hand(cards: Sequence[Card], width: int = 4) -> str:
    """Canonical hand string: card labels right-aligned to `width`, joined by ','."""
    return ",".join(f"{str(card):>{width}}" for card in cards)


def compare_hands(a: Hand, b: Hand) -> int:
    """Return 1 if a wins, -1 if b wins, 0 on a tie."""
    if a.score == b.score:
        return 0
    return 1 if a.score > b.score else -1
