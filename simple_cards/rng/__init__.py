"""
Randomness sources.

All generators implement the RandomSource protocol:
    next_uniform()        float in [0, 1)
    next_bounded(n)       int in [0, n)
    next_ranged(lo, hi)   int in [lo, hi)
"""

from .base import RandomSource, UniformRandom
from .generators import (
    PerThreadRandom,
    PredefinedRandom,
    StandardRandom,
    FixedRandom,
    CryptoRandom,
    PREDEFINED_RANDOM,
    STANDARD_RANDOM,
    CRYPTO_RANDOM,
)

__all__ = [
    'RandomSource', 'UniformRandom', 'PerThreadRandom',
    'PredefinedRandom', 'StandardRandom', 'FixedRandom', 'CryptoRandom',
    'PREDEFINED_RANDOM', 'STANDARD_RANDOM', 'CRYPTO_RANDOM',
]
