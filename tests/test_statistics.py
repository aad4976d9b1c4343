"""Tests for hand type distribution (simulation/statistics.py)."""

import pytest

from simulation.statistics import TypeDistribution
from threecard.hand_evaluator import HandType
from tests.helpers.card_utils import make_hand

# Combinations per type, each enumerated six times
EXPECTED_COUNTS = {
    HandType.BOMB: 52 * 6,
    HandType.STRAIGHT_FLUSH: 48 * 6,
    HandType.STRAIGHT: 720 * 6,
    HandType.FLUSH: 1096 * 6,
    HandType.PAIR: 3744 * 6,
    HandType.HIGH_CARD: 16440 * 6,
}


class TestTypeDistribution:
    @pytest.fixture(scope="class")
    def distribution(self, population):
        return TypeDistribution.from_hands(population)

    def test_total(self, distribution):
        assert distribution.total == 132600

    @pytest.mark.parametrize("hand_type,expected", list(EXPECTED_COUNTS.items()))
    def test_counts(self, distribution, hand_type, expected):
        assert distribution.count(hand_type) == expected

    def test_frequencies_sum_to_one(self, distribution):
        assert distribution.frequencies.sum() == pytest.approx(1.0)
        assert distribution.frequencies[HandType.BOMB] == pytest.approx(312 / 132600)

    def test_rows_strongest_first(self, distribution):
        rows = distribution.rows()
        assert [r[0] for r in rows] == sorted(HandType, reverse=True)
        assert rows[0] == (HandType.BOMB, 312, pytest.approx(312 / 132600))

    def test_empty(self):
        distribution = TypeDistribution.from_hands([])
        assert distribution.total == 0
        assert distribution.frequencies.tolist() == [0.0] * len(HandType)

    def test_small_sample(self):
        hands = [make_hand(["K_P", "K_H", "2_C"]), make_hand(["2_P", "5_P", "9_P"]), make_hand(["A_P", "A_H", "5_C"])]
        distribution = TypeDistribution.from_hands(hands)
        assert distribution.count(HandType.PAIR) == 2
        assert distribution.count(HandType.FLUSH) == 1
        assert distribution.count(HandType.BOMB) == 0

    def test_plot_saves_file(self, tmp_path):
        distribution = TypeDistribution.from_hands([make_hand(["2_P", "5_P", "9_P"])])
        path = tmp_path / "plots" / "types.png"
        distribution.plot(save_path=path)
        assert path.exists()
