"""
Error types raised by the card model and the randomness helpers.

Library errors share one base class; each subclass also derives from the
builtin error callers would expect (ValueError, IndexError).
"""


class CardsError(Exception):
    """Base class for all simple_cards errors"""
    pass


class InvalidArgumentError(CardsError, ValueError):
    """Malformed or out-of-range caller input"""
    pass


class OutOfRangeError(CardsError, IndexError):
    """Operation does not apply to the current state, e.g. an empty sequence"""
    pass


class CardParseError(InvalidArgumentError):
    """Text could not be parsed into a card"""

    def __init__(self, text, reason: str = ""):
        self.text = text
        message = f"cannot parse card from {text!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
