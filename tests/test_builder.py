from collections import Counter

import pytest

from passgen.builder import PasswordBuilder, build_template, shuffle
from passgen.config import GenerationConfig
from passgen.errors import RandomSourceError
from passgen.mapping import ALL_CHARACTERS, CharacterClass, IndexSampler, classify
from passgen.random_source import SeededRandomSource, SequenceRandomSource


def class_counts(password):
    return Counter(classify(b) for b in password)


def test_zero_length_makes_no_draws():
    source = SequenceRandomSource([])
    assert PasswordBuilder(source).generate(GenerationConfig(0, True)) == bytearray()
    assert source.draws == 0


def test_template_with_specials():
    sampler = IndexSampler(SequenceRandomSource([0] * 8), True)
    assert bytes(build_template(8, sampler)) == b"!A0!A0aa"


def test_template_truncates_for_short_lengths():
    sampler = IndexSampler(SequenceRandomSource([2, 2, 2]), True)
    assert bytes(build_template(3, sampler)) == b"#C2"
    assert sampler.draws == 3


def test_template_slots_fall_back_to_weighted_draw_without_specials(cycle_source):
    # Slots 0 and 3: class draw 1 -> Upper, index 1 -> "B"
    sampler = IndexSampler(cycle_source(1), False)
    assert bytes(build_template(8, sampler)) == b"BB1BB1bb"
    assert sampler.draws == 10


def test_template_extra_slots_use_weighted_draw():
    # Slot 8: class 3 -> Digit, index 9 -> "9"
    sampler = IndexSampler(SequenceRandomSource([0] * 8 + [3, 9]), True)
    assert bytes(build_template(9, sampler)) == b"!A0!A0aa9"


def test_shuffle_draw_order_and_bounds():
    requested = []

    class Recorder:
        def next_random_integer(self):
            return 0

    sampler = IndexSampler(Recorder(), True)
    original = sampler.next_index

    def spy(range_):
        requested.append(range_)
        return original(range_)

    sampler.next_index = spy
    shuffle(bytearray(b"abcd"), sampler, 2)
    assert requested == [4, 3, 2, 4, 3, 2]


def test_shuffle_swaps_with_drawn_index():
    password = bytearray(b"abcd")
    # i=3 j=0: dbca, i=2 j=2: dbca, i=1 j=0: bdca
    shuffle(password, IndexSampler(SequenceRandomSource([0, 2, 0]), True), 1)
    assert bytes(password) == b"bdca"


def test_generate_draw_count_with_specials():
    source = SequenceRandomSource([0] * 120)
    password = PasswordBuilder(source).generate(GenerationConfig(8, True))
    # 8 template draws + 2 * 8 passes * 7 swaps
    assert source.draws == 120
    assert sorted(password) == sorted(b"!A0!A0aa")


def test_generate_draw_count_without_specials(cycle_source):
    source = cycle_source(1)
    password = PasswordBuilder(source).generate(GenerationConfig(8, False))
    assert source.draws == 122
    assert sorted(password) == sorted(b"BB1BB1bb")


def test_source_failure_aborts_generation():
    # Enough for the template but not for the shuffle.
    source = SequenceRandomSource([0] * 10)
    with pytest.raises(RandomSourceError):
        PasswordBuilder(source).generate(GenerationConfig(8, True))


@pytest.mark.parametrize("length", [1, 2, 5, 7, 8, 9, 16, 40])
@pytest.mark.parametrize("allow_special", [True, False])
def test_generated_bytes_are_valid(length, allow_special):
    password = PasswordBuilder(SeededRandomSource(length)).generate(
        GenerationConfig(length, allow_special)
    )
    assert len(password) == length
    assert all(b in ALL_CHARACTERS for b in password)
    if not allow_special:
        assert CharacterClass.SPECIAL not in class_counts(password)


def test_structural_guarantee_with_specials(seeded_source):
    builder = PasswordBuilder(seeded_source)
    for _ in range(50):
        counts = class_counts(builder.generate(GenerationConfig(8, True)))
        assert counts == {
            CharacterClass.SPECIAL: 2,
            CharacterClass.UPPER: 2,
            CharacterClass.DIGIT: 2,
            CharacterClass.LOWER: 2,
        }


def test_structural_guarantee_without_specials(seeded_source):
    builder = PasswordBuilder(seeded_source)
    for _ in range(50):
        counts = class_counts(builder.generate(GenerationConfig(12, False)))
        assert counts[CharacterClass.UPPER] >= 2
        assert counts[CharacterClass.DIGIT] >= 2
        assert counts[CharacterClass.LOWER] >= 2


def test_same_seed_same_password():
    config = GenerationConfig(20, True)
    first = PasswordBuilder(SeededRandomSource(42)).generate(config)
    second = PasswordBuilder(SeededRandomSource(42)).generate(config)
    assert first == second


def test_shuffle_positions_are_roughly_uniform():
    sampler = IndexSampler(SeededRandomSource(2024), True)
    positions = Counter()
    trials = 4000
    for _ in range(trials):
        password = bytearray(b"01234567")
        shuffle(password, sampler, 16)
        positions[password.index(b"0")] += 1

    expected = trials / 8
    assert set(positions) == set(range(8))
    for count in positions.values():
        assert abs(count - expected) < 120
