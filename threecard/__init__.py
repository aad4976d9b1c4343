"""Three-card hand ranking engine."""

from threecard.cards import Card, Deck, Rank, Suit
from threecard.hand_evaluator import Hand, HandType, Score, classify, compare_hands

__all__ = ["Card", "Deck", "Hand", "HandType", "Rank", "Score", "Suit", "classify", "compare_hands"]
