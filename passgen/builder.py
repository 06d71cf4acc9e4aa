"""
Password construction: fixed structural template, weighted fill for the
remaining positions, then a repeated Fisher-Yates shuffle.
"""

from __future__ import annotations

import logging

from .config import GenerationConfig, DEFAULT_CONFIG
from .mapping import CharacterClass, IndexSampler
from .random_source import RandomSource

logger = logging.getLogger(__name__)

# Structural slots -> class. Slots 0 and 3 are Special only when specials
# are allowed; otherwise they use the weighted draw like any extra slot.
TEMPLATE: dict[int, CharacterClass] = {
    0: CharacterClass.SPECIAL,
    1: CharacterClass.UPPER,
    2: CharacterClass.DIGIT,
    3: CharacterClass.SPECIAL,
    4: CharacterClass.UPPER,
    5: CharacterClass.DIGIT,
    6: CharacterClass.LOWER,
    7: CharacterClass.LOWER,
}


def build_template(length: int, sampler: IndexSampler) -> bytearray:
    """
    Step 1 only: one byte per position, in order, before any shuffling.
    """
    password = bytearray()

    for i in range(length):
        cls = TEMPLATE.get(i)
        if cls is None or (cls is CharacterClass.SPECIAL and not sampler.allow_special):
            password.append(sampler.next_char())
        else:
            password.append(sampler.char_from(cls))

    return password


def shuffle(password: bytearray, sampler: IndexSampler, passes: int) -> None:
    """
    In-place Fisher-Yates, run ``passes`` times back to back. Each pass walks
    i from the end down to 1 and swaps with j drawn from [0, i].
    """
    for _ in range(passes):
        for i in range(len(password) - 1, 0, -1):
            j = sampler.next_index(i + 1)
            password[i], password[j] = password[j], password[i]


class PasswordBuilder:
    """
    Builds password bytes from an injected RandomSource.

    The builder holds no per-call state: each ``generate`` gets its own
    sampler and its own buffer.
    """

    def __init__(self, source: RandomSource) -> None:
        self.source = source

    def generate(self, config: GenerationConfig | None = None) -> bytearray:
        cfg = config or DEFAULT_CONFIG
        sampler = IndexSampler(self.source, cfg.allow_special)

        password = build_template(cfg.length, sampler)
        shuffle(password, sampler, cfg.length * 2)

        logger.debug(
            "built password: length=%d allow_special=%s draws=%d",
            cfg.length,
            cfg.allow_special,
            sampler.draws,
        )
        return password
