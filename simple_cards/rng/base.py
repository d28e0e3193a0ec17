"""
Randomness source interface.

Everything that needs random numbers (shuffle, peek_random) depends only on
the RandomSource protocol, so generators can be swapped for tests or for
stronger entropy.
"""

import math
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from ..core.exceptions import InvalidArgumentError


@runtime_checkable
class RandomSource(Protocol):
    """Random number source protocol.

    Implementations draw uniformly distributed numbers. They are not required
    to be safe for concurrent use of one generator state by several threads.
    """

    def next_uniform(self) -> float:
        """Next uniformly distributed float in [0, 1)."""
        ...

    def next_bounded(self, max_excluded: int) -> int:
        """Next uniformly distributed int in [0, max_excluded).

        Raises:
            InvalidArgumentError: If max_excluded is not positive
        """
        ...

    def next_ranged(self, min_included: int, max_excluded: int) -> int:
        """Next uniformly distributed int in [min_included, max_excluded).

        Raises:
            InvalidArgumentError: If min_included >= max_excluded
        """
        ...


class UniformRandom(ABC):
    """Base class deriving integer draws from next_uniform().

    Subclasses only have to implement next_uniform(); generators with a
    native integer draw may override the other two methods.
    """

    @abstractmethod
    def next_uniform(self) -> float:
        ...

    def next_bounded(self, max_excluded: int) -> int:
        check_bounded(max_excluded)
        # u * n may round up to n for u close to 1
        return min(math.floor(self.next_uniform() * max_excluded), max_excluded - 1)

    def next_ranged(self, min_included: int, max_excluded: int) -> int:
        check_ranged(min_included, max_excluded)
        span = max_excluded - min_included
        return min_included + min(math.floor(self.next_uniform() * span), span - 1)


def check_bounded(max_excluded: int) -> None:
    if max_excluded <= 0:
        raise InvalidArgumentError(f"max_excluded should be positive, got {max_excluded}")


def check_ranged(min_included: int, max_excluded: int) -> None:
    if min_included >= max_excluded:
        raise InvalidArgumentError(
            f"max_excluded {max_excluded} should be greater than min_included {min_included}")
