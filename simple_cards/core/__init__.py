"""
Card model: suits, cards and the library error types
"""

from .enums import SuitColor, RandomKind
from .suit import Suit, get_all_suits
from .card import Card, MIN_RANK, MAX_RANK
from .exceptions import CardsError, InvalidArgumentError, OutOfRangeError, CardParseError

__all__ = [
    # enums
    'SuitColor', 'RandomKind',

    # cards
    'Suit', 'get_all_suits', 'Card', 'MIN_RANK', 'MAX_RANK',

    # errors
    'CardsError', 'InvalidArgumentError', 'OutOfRangeError', 'CardParseError',
]
