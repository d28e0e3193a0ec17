"""
Enumerations shared by the card model and the configuration layer
"""

from enum import Enum


class SuitColor(Enum):
    """Suit colour"""
    NONE = 0    # Joker
    RED = 1
    BLACK = 2

    def __str__(self) -> str:
        return self.name.capitalize()


class RandomKind(str, Enum):
    """Available randomness sources, by configuration name"""
    STANDARD = "standard"        # OS-seeded generator per thread
    PREDEFINED = "predefined"    # seed 0 generator per thread
    FIXED = "fixed"              # caller seed, generator per thread
    CRYPTO = "crypto"            # fresh OS entropy on every draw
