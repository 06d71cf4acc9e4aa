"""
Mapping logic: turn raw random draws into bounded indices, character
classes and finally password bytes.
"""

from __future__ import annotations

from enum import Enum

from .errors import InvalidRangeError
from .random_source import RandomSource, draw


class CharacterClass(Enum):
    """
    The four character categories, in draw order. Each value is the fixed
    ordered set of ASCII bytes for that category.
    """

    SPECIAL = b"!@#$%&*^"
    UPPER = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    LOWER = b"abcdefghijklmnopqrstuvwxyz"
    DIGIT = b"0123456789"

    @property
    def size(self) -> int:
        return len(self.value)

    def contains(self, byte: int) -> bool:
        return byte in self.value


# Index returned by a class draw -> category.
CLASS_ORDER: tuple[CharacterClass, ...] = tuple(CharacterClass)

ALL_CHARACTERS = frozenset(b for cls in CLASS_ORDER for b in cls.value)


def classify(byte: int) -> CharacterClass | None:
    """Return the category a byte belongs to, or None for anything else."""
    for cls in CLASS_ORDER:
        if cls.contains(byte):
            return cls
    return None


class IndexSampler:
    """
    Wraps a RandomSource for one generation call.

    Every method consumes draws strictly in sequence; nothing is buffered
    or reused.
    """

    def __init__(self, source: RandomSource, allow_special: bool) -> None:
        self.source = source
        self.allow_special = allow_special
        self.draws = 0

    def next_index(self, range_: int) -> int:
        """Draw one integer and reduce it into [0, range_)."""
        if range_ <= 0:
            raise InvalidRangeError(range_)
        value = draw(self.source)
        self.draws += 1
        return value % range_

    def next_class(self) -> CharacterClass:
        """
        Draw a category uniformly from the four classes. With specials
        disallowed, a Special draw is thrown away and drawn again, which
        leaves the other three exactly uniform.
        """
        while True:
            selection = self.next_index(len(CLASS_ORDER))
            if not self.allow_special and CLASS_ORDER[selection] is CharacterClass.SPECIAL:
                continue
            return CLASS_ORDER[selection]

    def char_from(self, cls: CharacterClass) -> int:
        return cls.value[self.next_index(cls.size)]

    def next_char(self) -> int:
        return self.char_from(self.next_class())
