"""
Random number generators.

Three generators keep one random.Random per thread (seed 0, OS seed, caller
seed); CryptoRandom keeps no state and reads OS entropy on every draw.
"""

import logging
import os
import random
import threading
from abc import abstractmethod
from typing import Optional

from .base import UniformRandom, check_bounded, check_ranged

logger = logging.getLogger(__name__)

PREDEFINED_SEED = 0
CRYPTO_BYTES = 7


class PerThreadRandom(UniformRandom):
    """
    Generator with one random.Random per calling thread.

    The generator of a thread is created lazily on its first draw, so draws on
    one thread never disturb the sequence seen by another.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    @abstractmethod
    def _seed(self) -> Optional[int]:
        """Seed for the generator of the calling thread"""
        ...

    @property
    def generator(self) -> random.Random:
        """Generator owned by the calling thread"""
        generator = getattr(self._local, "generator", None)
        if generator is None:
            seed = self._seed()
            generator = random.Random(seed)
            self._local.generator = generator
            logger.debug("%s: new generator for thread %s",
                         type(self).__name__, threading.current_thread().name)
        return generator

    def next_uniform(self) -> float:
        return self.generator.random()

    def next_bounded(self, max_excluded: int) -> int:
        check_bounded(max_excluded)
        return self.generator.randrange(max_excluded)

    def next_ranged(self, min_included: int, max_excluded: int) -> int:
        check_ranged(min_included, max_excluded)
        return self.generator.randrange(min_included, max_excluded)


class PredefinedRandom(PerThreadRandom):
    """Reproducible generator: every thread starts from seed 0"""

    def _seed(self) -> int:
        return PREDEFINED_SEED

    def __repr__(self) -> str:
        return "PredefinedRandom()"


class StandardRandom(PerThreadRandom):
    """Every thread is seeded once from OS entropy, then draws from its own state"""

    def _seed(self) -> int:
        return int.from_bytes(os.urandom(4), "little", signed=True)

    def __repr__(self) -> str:
        return "StandardRandom()"


class FixedRandom(PerThreadRandom):
    """
    Generator with a caller supplied seed.

    Every thread gets its own generator seeded with the same value, so the
    draws of a thread are reproducible across runs.

    Examples:
        >>> FixedRandom(42).next_bounded(10) == FixedRandom(42).next_bounded(10)
        True
    """

    def __init__(self, seed: int) -> None:
        super().__init__()
        self._seed_value = seed

    @property
    def seed(self) -> int:
        """Seed every thread's generator starts from"""
        return self._seed_value

    def _seed(self) -> int:
        return self._seed_value

    def __repr__(self) -> str:
        return f"FixedRandom(seed={self._seed_value})"


class CryptoRandom(UniformRandom):
    """
    Stateless generator backed by the OS entropy source.

    Each draw reads CRYPTO_BYTES fresh bytes and weights byte i by
    256 ** -(i + 1), so consecutive draws are uncorrelated. Integer draws use
    the UniformRandom defaults.
    """

    def next_uniform(self) -> float:
        data = os.urandom(CRYPTO_BYTES)
        # sum(byte_i / 256 ** (i + 1)) rounded down to float precision;
        # summing the float terms can round 1 - 2 ** -56 up to 1.0
        return (int.from_bytes(data, "big") >> (8 * CRYPTO_BYTES - 53)) * 2.0 ** -53

    def __repr__(self) -> str:
        return "CryptoRandom()"


PREDEFINED_RANDOM = PredefinedRandom()
STANDARD_RANDOM = StandardRandom()
CRYPTO_RANDOM = CryptoRandom()
