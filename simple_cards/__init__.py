"""
Simple playing cards.

Suits and card values, randomness sources, and two sequence algorithms
(shuffle, peek_random) that work with any of those sources.

    >>> from simple_cards import Card, FixedRandom, shuffle
    >>> ok, card = Card.try_parse("AH")
    >>> card.full_name
    'Ace of Hearts'
"""

from .core import (
    SuitColor, RandomKind, Suit, get_all_suits, Card, MIN_RANK, MAX_RANK,
    CardsError, InvalidArgumentError, OutOfRangeError, CardParseError,
)
from .rng import (
    RandomSource, UniformRandom, PerThreadRandom,
    PredefinedRandom, StandardRandom, FixedRandom, CryptoRandom,
    PREDEFINED_RANDOM, STANDARD_RANDOM, CRYPTO_RANDOM,
)
from .sequences import shuffle, peek_random
from .config import RandomConfig, create_random

__version__ = "1.0.0"

__all__ = [
    # card model
    'SuitColor', 'Suit', 'get_all_suits', 'Card', 'MIN_RANK', 'MAX_RANK',

    # randomness
    'RandomKind', 'RandomSource', 'UniformRandom', 'PerThreadRandom',
    'PredefinedRandom', 'StandardRandom', 'FixedRandom', 'CryptoRandom',
    'PREDEFINED_RANDOM', 'STANDARD_RANDOM', 'CRYPTO_RANDOM',
    'RandomConfig', 'create_random',

    # algorithms
    'shuffle', 'peek_random',

    # errors
    'CardsError', 'InvalidArgumentError', 'OutOfRangeError', 'CardParseError',
]
