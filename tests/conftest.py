"""
Shared pytest fixtures for the simple_cards tests.
"""

from typing import List

import pytest

from simple_cards import (
    Card, Suit, UniformRandom,
    PredefinedRandom, StandardRandom, FixedRandom, CryptoRandom,
)


class ConstantRandom(UniformRandom):
    """UniformRandom that always draws the same value and counts its draws"""

    def __init__(self, value: float) -> None:
        self.value = value
        self.draws = 0

    def next_uniform(self) -> float:
        self.draws += 1
        return self.value


@pytest.fixture
def fixed_random():
    """Reproducible randomness source"""
    return FixedRandom(42)


@pytest.fixture
def standard_deck() -> List[Card]:
    """52 cards: ranks 1..13 of every real suit"""
    return [
        Card(suit, rank)
        for suit in Suit.all_suits() if not suit.is_joker
        for rank in range(1, 14)
    ]


@pytest.fixture(params=["predefined", "standard", "fixed", "crypto"])
def any_random(request):
    """Every randomness source kind"""
    return {
        "predefined": PredefinedRandom,
        "standard": StandardRandom,
        "fixed": lambda: FixedRandom(2024),
        "crypto": CryptoRandom,
    }[request.param]()


@pytest.fixture
def constant_random():
    """Factory for ConstantRandom sources"""
    return ConstantRandom
