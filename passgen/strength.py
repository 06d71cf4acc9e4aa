"""
Heuristic strength scoring.

score = byte_length * (log2(distinct chars) + caps + num + extra) / 30,
truncated toward zero and bucketed into four labels. This is a rough
heuristic, not an entropy measurement.
"""

from __future__ import annotations

import math
from enum import IntEnum

_DIGITS = frozenset("0123456789")


class StrengthLabel(IntEnum):
    WEAK = 0
    MEDIUM = 1
    STRONG = 2
    VERY_STRONG = 3

    @property
    def text(self) -> str:
        return _LABEL_TEXT[self]

    def __str__(self) -> str:
        return self.text


_LABEL_TEXT = {
    StrengthLabel.WEAK: "Weak",
    StrengthLabel.MEDIUM: "Medium",
    StrengthLabel.STRONG: "Strong",
    StrengthLabel.VERY_STRONG: "Very Strong",
}


def strength_score(password: str) -> float:
    """
    Raw score before truncation. An empty password scores 0.0.
    """
    unique = len(set(password))
    if unique == 0:
        return 0.0
    n = math.log2(unique)

    has_digit = any(c in _DIGITS for c in password)
    not_only_digits = any(c not in _DIGITS for c in password)
    num = 1.0 if has_digit and not_only_digits else 0.0

    caps = (
        1.0
        if any(c.isupper() for c in password) and any(c.islower() for c in password)
        else 0.0
    )
    extra = 1.0 if any(not c.isalnum() for c in password) else 0.0

    # Length is measured in UTF-8 bytes; identical to len() for ASCII.
    length = len(password.encode("utf-8", "surrogatepass"))
    return length * (n + caps + num + extra) / 30.0


def score(password: str) -> StrengthLabel:
    bucket = int(strength_score(password))
    if bucket >= StrengthLabel.VERY_STRONG:
        return StrengthLabel.VERY_STRONG
    return StrengthLabel(bucket)
