import itertools

import pytest

from passgen.random_source import SeededRandomSource, SequenceRandomSource


@pytest.fixture
def seeded_source():
    return SeededRandomSource(1234)


@pytest.fixture
def cycle_source():
    """Build a SequenceRandomSource that repeats the given values forever."""

    def _make(*values):
        return SequenceRandomSource(itertools.cycle(values))

    return _make
