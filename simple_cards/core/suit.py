"""
Suit catalog.

The five suits (the Joker placeholder plus the four French suits) are enum
members created once at import time. Lookup tables by code, symbol, acronym
and title are filled right after the class body and are never modified
afterwards.

See https://en.wikipedia.org/wiki/Playing_cards_in_Unicode for symbols and
emoji code points.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from .enums import SuitColor


class Suit(Enum):
    """
    Card suit.

    Members compare, hash and sort by their numeric code.

    Examples:
        >>> Suit.from_code("h")
        <Suit.HEARTS: 3>
        >>> Suit.from_text("spades").dark_symbol
        '♠'
    """

    # code, title, dark symbol, light symbol, color, emoji prefix
    NONE = (0, "-", "-", "-", SuitColor.NONE, 0x1F0CF)
    CLUBS = (1, "Clubs", "♣", "♧", SuitColor.BLACK, 0x1F0D0)
    DIAMONDS = (2, "Diamonds", "♦", "♢", SuitColor.RED, 0x1F0C0)
    HEARTS = (3, "Hearts", "♥", "♡", SuitColor.RED, 0x1F0B0)
    SPADES = (4, "Spades", "♠", "♤", SuitColor.BLACK, 0x1F0A0)

    def __new__(cls, code: int, title: str, dark_symbol: str, light_symbol: str,
                color: SuitColor, emoji_prefix: int):
        obj = object.__new__(cls)
        obj._value_ = code
        obj.title = title
        obj.dark_symbol = dark_symbol
        obj.light_symbol = light_symbol
        obj.color = color
        obj.emoji_prefix = emoji_prefix
        return obj

    @property
    def code(self) -> int:
        """Numeric code, 0 for the Joker placeholder"""
        return self._value_

    @property
    def acronym(self) -> str:
        """First letter of the title"""
        return self.title[0] if self.title else "-"

    @property
    def is_joker(self) -> bool:
        """True for the Joker placeholder (code 0)"""
        return self.code <= 0

    def __str__(self) -> str:
        return self.title

    def __lt__(self, other):
        if not isinstance(other, Suit):
            return NotImplemented
        return self.code < other.code

    def __le__(self, other):
        if not isinstance(other, Suit):
            return NotImplemented
        return self.code <= other.code

    def __gt__(self, other):
        if not isinstance(other, Suit):
            return NotImplemented
        return self.code > other.code

    def __ge__(self, other):
        if not isinstance(other, Suit):
            return NotImplemented
        return self.code >= other.code

    @classmethod
    def from_code(cls, value: Union[int, str, None]) -> Optional['Suit']:
        """
        Look a suit up by code.

        Args:
            value: numeric code, or a single character: code digit, dark or
                light symbol, or acronym letter in either case

        Returns:
            The matching suit, None when nothing matches
        """
        if isinstance(value, str):
            if len(value) != 1:
                return None
        elif isinstance(value, bool) or not isinstance(value, int):
            return None
        return _CODES.get(value)

    @classmethod
    def from_text(cls, value: Optional[str]) -> Optional['Suit']:
        """
        Look a suit up by text.

        Blank text means the Joker placeholder, a single character is treated
        as a code (see from_code), anything else must match a title ignoring
        case.
        """
        if value is None or not value.strip():
            return cls.NONE

        value = value.strip()
        if len(value) == 1:
            return cls.from_code(value)

        return _TITLES.get(value.casefold())

    @staticmethod
    def compare(left: Optional['Suit'], right: Optional['Suit']) -> int:
        """
        Three-way comparison, None sorts before any suit.

        Returns:
            -1, 0 or 1
        """
        if left is right:
            return 0
        if left is None:
            return -1
        if right is None:
            return 1
        return (left.code > right.code) - (left.code < right.code)

    @classmethod
    def all_suits(cls) -> List['Suit']:
        """All five suits in catalog order, Joker placeholder first"""
        return list(cls)


_CODES: Dict[Union[int, str], Suit] = {}
_TITLES: Dict[str, Suit] = {}


def _register(suit: Suit) -> None:
    _TITLES[suit.title.casefold()] = suit
    _CODES[suit.code] = suit
    for key in (str(suit.code), suit.dark_symbol, suit.light_symbol,
                suit.acronym.lower(), suit.acronym.upper()):
        _CODES.setdefault(key, suit)


for _suit in Suit:
    _register(_suit)
del _suit


def get_all_suits() -> List[Suit]:
    """
    Return every suit.

    Returns:
        List[Suit]: NONE, CLUBS, DIAMONDS, HEARTS, SPADES
    """
    return Suit.all_suits()
