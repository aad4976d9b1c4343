"""Card, Deck, Suit, and Rank definitions for three-card hands."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


class Suit(IntEnum):
    """Card suits, in deck generation order."""

    PIKE = 0
    HEART = 1
    CLOVER = 2
    TILE = 3

    def __str__(self) -> str:
        return SUIT_TOKENS[self]


class Rank(IntEnum):
    """Card ranks (1-13, where 1 is Ace)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return RANK_TOKENS[self]

    @property
    def high_value(self) -> int:
        """Value with the Ace counted high (14)."""
        return 14 if self == Rank.ACE else int(self)


SUIT_TOKENS = {
    Suit.PIKE: "P",
    Suit.HEART: "H",
    Suit.CLOVER: "C",
    Suit.TILE: "T",
}

RANK_TOKENS = {rank: str(rank.value) for rank in Rank}
RANK_TOKENS.update({Rank.ACE: "A", Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K"})

_SUIT_BY_TOKEN = {token: suit for suit, token in SUIT_TOKENS.items()}
_RANK_BY_TOKEN = {token: rank for rank, token in RANK_TOKENS.items()}


@dataclass(frozen=True, slots=True, order=True)
class Card:
    """A single playing card, ordered by rank then suit."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        # Rank(99) / Suit(7) raise ValueError
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))

    def __str__(self) -> str:
        return f"{RANK_TOKENS[self.rank]}_{SUIT_TOKENS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def to_index(self) -> int:
        """Convert to 0-51 index in deck order.

        Index = (rank - 1) * 4 + suit
        """
        return (self.rank - 1) * 4 + self.suit

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Create card from 0-51 index."""
        if not 0 <= index < 52:
            raise ValueError(f"Invalid card index: {index}")
        return cls(rank=Rank(index // 4 + 1), suit=Suit(index % 4))

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from a label like 'A_P', '10_H', 'k_t'."""
        s = s.strip()
        rank_token, sep, suit_token = s.partition("_")
        if not sep:
            raise ValueError(f"Invalid card string: {s!r}")
        rank_token = rank_token.upper()
        suit_token = suit_token.upper()
        if rank_token not in _RANK_BY_TOKEN:
            raise ValueError(f"Invalid rank: {rank_token!r}")
        if suit_token not in _SUIT_BY_TOKEN:
            raise ValueError(f"Invalid suit: {suit_token!r}")
        return cls(rank=_RANK_BY_TOKEN[rank_token], suit=_SUIT_BY_TOKEN[suit_token])


class Deck:
    """A standard 52-card deck in generation order (rank outer, suit inner)."""

    def __init__(self) -> None:
        self._cards = [Card(rank, suit) for rank in Rank for suit in Suit]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]
