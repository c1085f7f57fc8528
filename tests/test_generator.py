"""Tests for lightid.engine.generator."""

import copy
import itertools

import pytest

from lightid.core.numeral import (
    DEFAULT_ALPHABET,
    Alphabet,
    DegenerateAlphabetError,
    DuplicateSymbolError,
    InvalidSymbolError,
    decode,
)
from lightid.engine.generator import GeneratorConfig, SequenceGenerator


class TestConstruction:
    def test_defaults(self):
        gen = SequenceGenerator()
        assert gen.count == 0
        assert gen.min_length == 0
        assert str(gen.alphabet) == DEFAULT_ALPHABET
        assert gen.current() == "0"

    def test_initial_count(self):
        assert SequenceGenerator("abc", count=12).current() == "bba"

    def test_degenerate_alphabet_fails_fast(self):
        with pytest.raises(DegenerateAlphabetError):
            SequenceGenerator("a")

    def test_duplicate_symbol_fails_fast(self):
        with pytest.raises(DuplicateSymbolError):
            SequenceGenerator("abb")

    def test_negative_count_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            SequenceGenerator(count=-1)

    def test_negative_min_length_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            SequenceGenerator(min_length=-1)

    def test_from_config(self):
        gen = SequenceGenerator.from_config(GeneratorConfig("abc", 4), count=3)
        assert gen.current() == "aaba"

    def test_default_min_length_six(self):
        assert SequenceGenerator(min_length=6).current() == "000000"


class TestGeneratorConfig:
    def test_from_env_defaults(self):
        config = GeneratorConfig.from_env({})
        assert config.alphabet == DEFAULT_ALPHABET
        assert config.min_length == 0

    def test_from_env_values(self):
        config = GeneratorConfig.from_env({
            "LIGHT_ID_ALPHABET": "xyz",
            "LIGHT_ID_MIN_LENGTH": "3",
        })
        assert config == GeneratorConfig("xyz", 3)

    def test_from_env_bad_min_length(self):
        with pytest.raises(ValueError, match="LIGHT_ID_MIN_LENGTH"):
            GeneratorConfig.from_env({"LIGHT_ID_MIN_LENGTH": "three"})

    def test_from_os_environ(self, monkeypatch):
        monkeypatch.setenv("LIGHT_ID_ALPHABET", "01")
        monkeypatch.delenv("LIGHT_ID_MIN_LENGTH", raising=False)
        assert GeneratorConfig.from_env().alphabet == "01"


class TestNavigation:
    def test_three_increments(self, abc_gen):
        for _ in range(3):
            abc_gen.advance()
        assert abc_gen.current() == "ba"

    def test_twelve_increments(self, abc_gen):
        for _ in range(12):
            abc_gen.advance()
        assert abc_gen.current() == "bba"

    def test_twenty_six_increments(self, abc_gen):
        for _ in range(26):
            abc_gen.advance()
        assert abc_gen.current() == "ccc"

    def test_advance_by_matches_repeated_advance(self, abc_gen):
        other = abc_gen.copy()
        for _ in range(100):
            abc_gen.advance()
        other.advance(100)
        assert abc_gen.current() == other.current()

    def test_advance_negative_raises(self, abc_gen):
        with pytest.raises(ValueError, match="non-negative"):
            abc_gen.advance(-1)

    def test_retreat_walks_back_through_history(self, abc_gen):
        history = [abc_gen.take() for _ in range(100)]
        for expected in reversed(history):
            assert abc_gen.retreat().current() == expected

    def test_retreat_by(self, abc_gen):
        abc_gen.advance(100).retreat(100)
        assert abc_gen.current() == "a"

    def test_retreat_saturates_at_zero(self, abc_gen):
        abc_gen.advance(2).retreat(10)
        assert abc_gen.count == 0
        abc_gen.retreat()
        assert abc_gen.count == 0

    def test_jump_to(self, abc_gen):
        assert abc_gen.jump_to(2).current() == "c"
        assert abc_gen.jump_to(3).current() == "ba"
        assert abc_gen.jump_to(12).current() == "bba"

    def test_jump_to_matches_advance(self, abc_gen):
        expected = abc_gen.copy().advance(100).current()
        assert abc_gen.jump_to(100).current() == expected

    def test_jump_to_text(self):
        gen = SequenceGenerator().jump_to_text("abcdef")
        assert gen.current() == "abcdef"
        assert list(itertools.islice(gen, 3)) == ["abcdef", "abcdeg", "abcdeh"]

    def test_jump_to_text_invalid_symbol(self, abc_gen):
        with pytest.raises(InvalidSymbolError, match="'z'"):
            abc_gen.jump_to_text("abz")
        assert abc_gen.count == 0

    def test_huge_counter(self, abc_gen):
        abc_gen.jump_to(2 ** 70).advance(5)
        assert abc_gen.count == 2 ** 70 + 5


class TestTake:
    def test_take_sequence(self):
        gen = SequenceGenerator()
        assert [gen.take() for _ in range(3)] == ["0", "1", "2"]
        assert gen.count == 3

    def test_take_returns_current_then_advances(self, abc_gen):
        value = abc_gen.current()
        assert abc_gen.take() == value
        assert abc_gen.count == 1

    def test_take_strictly_increasing(self):
        gen = SequenceGenerator("01", min_length=4)
        counts = [decode(gen.take(), "01") for _ in range(1000)]
        assert counts == list(range(1000))

    def test_current_is_pure(self, abc_gen):
        abc_gen.advance(5)
        assert abc_gen.current() == abc_gen.current()
        assert abc_gen.count == 5

    def test_iterator_protocol(self, abc_gen):
        assert iter(abc_gen) is abc_gen
        assert next(abc_gen) == "a"
        assert list(itertools.islice(abc_gen, 3)) == ["b", "c", "ba"]


class TestReconfigure:
    def test_min_length(self, abc_gen):
        abc_gen.set_min_length(10)
        assert abc_gen.current() == "aaaaaaaaaa"

    def test_min_length_with_jump(self, abc_gen):
        abc_gen.set_min_length(10).jump_to(10)
        assert abc_gen.current() == "aaaaaaabab"

    def test_jump_then_min_length(self, abc_gen):
        abc_gen.jump_to(10).set_min_length(10)
        assert abc_gen.current() == "aaaaaaabab"

    def test_set_alphabet_keeps_counter(self):
        gen = SequenceGenerator()
        gen.advance(5)
        gen.set_alphabet("abc")
        assert gen.count == 5
        assert gen.current() == "bc"

    def test_set_alphabet_invalid(self, abc_gen):
        with pytest.raises(DegenerateAlphabetError):
            abc_gen.set_alphabet("x")
        assert abc_gen.alphabet == Alphabet.of("abc")

    def test_set_negative_min_length(self, abc_gen):
        with pytest.raises(ValueError):
            abc_gen.set_min_length(-3)


class TestLookup:
    def test_nth(self):
        gen = SequenceGenerator()
        assert gen.nth(2) == "2"
        assert gen.advance(10).current() == gen.nth(10)
        assert gen.count == 10

    def test_nth_uses_min_length(self):
        assert SequenceGenerator("abc", min_length=3).nth(1) == "aab"

    def test_index(self):
        gen = SequenceGenerator()
        assert gen.index("2") == 2
        assert gen.index("1C") == 100
        assert gen.count == 0

    def test_len(self):
        gen = SequenceGenerator()
        assert len(gen) == 1
        gen.advance(100)
        assert len(gen) == 2

    def test_len_with_min_length(self):
        gen = SequenceGenerator(min_length=4)
        assert len(gen) == 4
        gen.jump_to(62 ** 5)
        assert len(gen) == 6 == len(gen.current())


class TestCopyAndCompare:
    def test_copy_is_independent(self, abc_gen):
        clone = abc_gen.copy()
        abc_gen.advance(5)
        assert clone.count == 0
        clone.set_min_length(3)
        assert abc_gen.min_length == 0

    def test_copy_module(self, abc_gen):
        abc_gen.advance(7)
        clone = copy.copy(abc_gen)
        assert clone == abc_gen
        assert clone is not abc_gen

    def test_equality(self):
        assert SequenceGenerator("abc", count=4) == SequenceGenerator("abc", count=4)
        assert SequenceGenerator("abc", count=4) != SequenceGenerator("abc", count=5)

    def test_equality_ignores_min_length(self):
        assert SequenceGenerator("abc", 0, 4) == SequenceGenerator("abc", 8, 4)

    def test_equality_needs_same_alphabet(self):
        assert SequenceGenerator("abc", count=4) != SequenceGenerator("xyz", count=4)

    def test_ordering_by_count(self):
        low = SequenceGenerator("abc", count=3)
        high = SequenceGenerator("01", count=9)
        assert low < high
        assert high > low
        assert low <= high
        assert high >= low

    def test_ordering_different_alphabets_same_count(self):
        a = SequenceGenerator("abc", count=3)
        b = SequenceGenerator("xyz", count=3)
        assert a <= b and a >= b
        assert a != b

    def test_sorting(self):
        gens = [SequenceGenerator(count=c) for c in (5, 1, 3)]
        assert [g.count for g in sorted(gens)] == [1, 3, 5]

    def test_compare_with_other_type(self, abc_gen):
        assert abc_gen != 0
        with pytest.raises(TypeError):
            abc_gen < 1

    def test_unhashable(self, abc_gen):
        with pytest.raises(TypeError):
            hash(abc_gen)

    def test_repr(self):
        assert repr(SequenceGenerator("abc", 2, 5)) == \
            "SequenceGenerator(alphabet='abc', min_length=2, count=5)"
