"""Shared pytest fixtures for three-card hand tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from simulation.enumeration import enumerate_hands, sort_hands
from threecard.cards import Deck


@pytest.fixture
def deck():
    """A fresh 52-card deck in generation order."""
    return Deck()


@pytest.fixture(scope="session")
def population():
    """All 132600 ordered hands, in enumeration order."""
    return enumerate_hands()


@pytest.fixture(scope="session")
def sorted_population(population):
    """The full population sorted by score (a copy)."""
    return sort_hands(list(population))
