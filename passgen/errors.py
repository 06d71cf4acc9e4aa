"""
Exceptions raised by the password engine.
"""


class PasswordEngineError(Exception):
    """Generic password engine error."""


class InvalidRangeError(PasswordEngineError, ValueError):
    """An index was requested from an empty range."""

    def __init__(self, range_: int) -> None:
        super().__init__(f"cannot sample an index from range {range_!r}")
        self.range = range_


class RandomSourceError(PasswordEngineError):
    """The injected random source could not produce a value."""
