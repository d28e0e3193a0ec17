"""
Playing card value.

A Card is an immutable (suit, rank) pair. Cards are plain values: no pool or
cache is kept, equal cards may be distinct objects.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from .exceptions import CardParseError, InvalidArgumentError
from .suit import Suit

logger = logging.getLogger(__name__)

MIN_RANK = 1
MAX_RANK = 14  # one above King, kept for decks with a Knight / over-King card

_TITLES: Dict[int, str] = {
    0: "Joker",
    1: "Ace",
    11: "Jack",
    12: "Queen",
    13: "King",
}

_DECIMAL = re.compile(r"[+-]?[0-9]+")

_RANK_LETTERS: Dict[str, int] = {
    "a": 1,
    "j": 11,
    "q": 12,
    "k": 13,
}


@dataclass(frozen=True)
class Card:
    """
    A playing card.

    Jokers always carry rank 0, any other card a rank in [1, 14]
    (1 = Ace, 11 = Jack, 12 = Queen, 13 = King).

    Attributes:
        suit: card suit, Suit.NONE for a Joker
        rank: card rank

    Examples:
        >>> Card(Suit.HEARTS, 1).full_name
        'Ace of Hearts'
        >>> Card.from_str("10s") == Card(Suit.SPADES, 10)
        True
    """

    suit: Suit
    rank: int = 0

    def __post_init__(self) -> None:
        """
        Normalise and validate the card.

        Raises:
            InvalidArgumentError: when the suit is not a Suit, or a non-Joker
                rank is not an integer in [1, 14]
        """
        if self.suit is None:
            object.__setattr__(self, "suit", Suit.NONE)
        elif not isinstance(self.suit, Suit):
            raise InvalidArgumentError(f"suit must be a Suit, got {type(self.suit).__name__}")

        if self.suit.is_joker:
            object.__setattr__(self, "rank", 0)
            return

        if isinstance(self.rank, bool) or not isinstance(self.rank, int):
            raise InvalidArgumentError(f"rank must be an int, got {type(self.rank).__name__}")
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise InvalidArgumentError(
                f"rank {self.rank} is out of range [{MIN_RANK}, {MAX_RANK}]")

    @classmethod
    def joker(cls) -> 'Card':
        """
        Return the Joker card.

        Returns:
            Card: Suit.NONE with rank 0
        """
        return cls(Suit.NONE, 0)

    @classmethod
    def from_str(cls, text: Optional[str]) -> 'Card':
        """
        Parse a card.

        Accepted forms are "joker" in any case, a suit token followed by a
        rank token ("H10", "♠K") and a rank token followed by a suit token
        ("AH", "10s", "q♦"). Suit tokens are anything Suit.from_code accepts;
        rank tokens are decimal integers or A, J, Q, K in either case.

        Args:
            text: card text

        Returns:
            Card: the parsed card

        Raises:
            CardParseError: when the text is not a card
        """
        if text is None or not text.strip():
            raise CardParseError(text, "empty text")

        stripped = text.strip()
        if stripped.casefold() == "joker":
            return cls.joker()

        if len(stripped) < 2:
            raise CardParseError(text, "too short")

        # the first reading with a valid suit token and rank token decides
        for suit_token, rank_token in _candidates(stripped):
            suit = Suit.from_code(suit_token)
            if suit is None:
                continue
            rank = _parse_rank(rank_token)
            if rank is None:
                continue
            try:
                return cls(suit, rank)
            except InvalidArgumentError as e:
                raise CardParseError(text, str(e)) from e

        logger.debug("no suit and rank reading of %r", text)
        raise CardParseError(text, "no suit and rank reading")

    @classmethod
    def try_parse(cls, text: Optional[str]) -> Tuple[bool, Optional['Card']]:
        """
        Parse a card without raising.

        Returns:
            (True, card) on success, (False, None) otherwise
        """
        try:
            return True, cls.from_str(text)
        except CardParseError:
            return False, None

    @property
    def is_joker(self) -> bool:
        """True for the Joker card"""
        return self.suit.is_joker

    @property
    def title(self) -> str:
        """Joker, Ace, Jack, Queen, King or the decimal rank"""
        if self.is_joker:
            return _TITLES[0]
        return _TITLES.get(self.rank, str(self.rank))

    @property
    def symbol(self) -> str:
        """Short rank mark: "A", "J", "Q", "K" or the decimal rank; "Joker" for a Joker"""
        if self.is_joker:
            return self.title
        name = _TITLES.get(self.rank)
        if name:
            return name[0]
        return str(self.rank)

    @property
    def full_name(self) -> str:
        """
        Name with suit, e.g. "Queen of Hearts".

        Returns:
            str: the title alone for a Joker
        """
        if self.is_joker:
            return self.title
        return f"{self.title} of {self.suit.title}"

    @property
    def code_point(self) -> int:
        """Unicode code point of the playing card character"""
        return self.suit.emoji_prefix + self.rank

    @property
    def emoji_code_units(self) -> Tuple[int, int]:
        """
        UTF-16 surrogate pair of the playing card character.

        Returns:
            Tuple[int, int]: (high surrogate, low surrogate)
        """
        offset = self.code_point - 0x10000
        return (offset >> 10) + 0xD800, (offset & 0x3FF) + 0xDC00

    @property
    def emoji(self) -> str:
        """Playing card character, e.g. "🂱" for the Ace of Hearts"""
        high, low = self.emoji_code_units
        return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))

    def __str__(self) -> str:
        return self.full_name

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank})"


def _candidates(text: str) -> Iterator[Tuple[str, str]]:
    """Yield (suit token, rank token) readings: leading suit first, then trailing suit"""
    yield text[0], text[1:].strip()
    yield text[-1], text[:-1].strip()


def _parse_rank(token: str) -> Optional[int]:
    """ASCII decimal integer or A, J, Q, K; None for negative numbers and anything else"""
    if _DECIMAL.fullmatch(token):
        rank = int(token)
        return rank if rank >= 0 else None
    return _RANK_LETTERS.get(token.casefold())
