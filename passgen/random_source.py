"""
Random sources: the injected capability every draw of the engine goes through.

A source only has to expose ``next_random_integer()`` returning a
non-negative integer. Nothing here is assumed to be cryptographically
secure; the builder reduces each value modulo the range it needs.
"""

from __future__ import annotations

import logging
import random
import secrets
from typing import Callable, Iterable, Iterator, Protocol

from .errors import RandomSourceError

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def next_random_integer(self) -> int:
        ...


class SystemRandomSource:
    """
    Default host source: unsigned integers from the operating system
    generator, ``bits`` wide.
    """

    def __init__(self, bits: int = 32) -> None:
        if bits <= 0:
            raise ValueError("bits must be positive")
        self.bits = bits

    def next_random_integer(self) -> int:
        return secrets.randbits(self.bits)

    def __repr__(self) -> str:
        return f"SystemRandomSource(bits={self.bits})"


class SeededRandomSource:
    """
    Reproducible stream for tests and ``--seed``: the same seed always
    yields the same sequence of integers.
    """

    def __init__(self, seed: int | str | None = None, bits: int = 32) -> None:
        if bits <= 0:
            raise ValueError("bits must be positive")
        self.seed = seed
        self.bits = bits
        self._rng = random.Random(seed)

    def next_random_integer(self) -> int:
        return self._rng.getrandbits(self.bits)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed!r}, bits={self.bits})"


class SequenceRandomSource:
    """
    Replay a fixed iterable of integers, one per draw.

    Raises RandomSourceError once the iterable is exhausted. ``draws``
    counts how many values have been handed out so far.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values: Iterator[int] = iter(values)
        self.draws = 0

    def next_random_integer(self) -> int:
        try:
            value = next(self._values)
        except StopIteration:
            raise RandomSourceError(
                f"sequence exhausted after {self.draws} draws"
            ) from None
        self.draws += 1
        return value


class CallableRandomSource:
    """
    Adapt a zero-argument host function, e.g. a binding to a platform
    ``getRandomInt``.
    """

    def __init__(self, func: Callable[[], int]) -> None:
        self.func = func

    def next_random_integer(self) -> int:
        return self.func()


def draw(source: RandomSource) -> int:
    """
    Take one value from ``source``, turning any failure or malformed value
    into RandomSourceError.
    """
    try:
        value = source.next_random_integer()
    except RandomSourceError:
        raise
    except Exception as exc:
        logger.debug("random source %r failed: %s", source, exc)
        raise RandomSourceError(f"random source failed: {exc}") from exc

    if isinstance(value, bool) or not isinstance(value, int):
        raise RandomSourceError(
            f"random source returned a non-integer value: {value!r}"
        )
    if value < 0:
        raise RandomSourceError(f"random source returned a negative value: {value}")
    return value
