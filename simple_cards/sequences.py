"""
Sequence algorithms driven by a RandomSource.

Both functions accept any finite iterable and any element type; a list of
Card values is the usual input.
"""

from collections.abc import Sequence
from typing import Iterable, Iterator, List, Optional, TypeVar

from .core.exceptions import InvalidArgumentError, OutOfRangeError
from .rng import STANDARD_RANDOM, RandomSource

T = TypeVar('T')


def shuffle(source: Iterable[T], random: Optional[RandomSource] = None) -> Iterator[T]:
    """
    Lazily shuffle a finite iterable.

    The source is copied into a buffer when iteration starts; each item is
    fixed by one Fisher-Yates step and yielded right away, so taking only the
    first k items costs k draws. Every call shuffles its own copy.

    Args:
        source: finite iterable to shuffle, it is not modified
        random: randomness source, STANDARD_RANDOM when omitted

    Returns:
        Iterator[T]: the items of source in random order

    Raises:
        InvalidArgumentError: when source is None

    Examples:
        >>> from simple_cards.rng import FixedRandom
        >>> sorted(shuffle([3, 1, 2], FixedRandom(7)))
        [1, 2, 3]
    """
    if source is None:
        raise InvalidArgumentError("source must not be None")

    return _shuffled(source, STANDARD_RANDOM if random is None else random)


def _shuffled(source: Iterable[T], random: RandomSource) -> Iterator[T]:
    data: List[T] = list(source)
    length = len(data)

    for i in range(length):
        index = i + random.next_bounded(length - i)
        data[i], data[index] = data[index], data[i]
        yield data[i]


def peek_random(source: Iterable[T], random: Optional[RandomSource] = None) -> T:
    """
    Pick one item uniformly at random.

    Sequences are indexed directly; other iterables are read into a list
    first. The source is never modified.

    Args:
        source: finite iterable to pick from
        random: randomness source, STANDARD_RANDOM when omitted

    Returns:
        T: the picked item

    Raises:
        InvalidArgumentError: when source is None
        OutOfRangeError: when source is empty
    """
    if source is None:
        raise InvalidArgumentError("source must not be None")

    if random is None:
        random = STANDARD_RANDOM

    items = source if isinstance(source, Sequence) else list(source)
    if len(items) <= 0:
        raise OutOfRangeError("source is empty; no item can be peeked")

    return items[random.next_bounded(len(items))]
