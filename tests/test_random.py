"""Tests for random word generation."""

import random as stdlib_random

import pytest

from banana import InvalidAlphabet, MAX_VALUE, decode, is_valid, random


class FirstRandom:
    """Always picks the first character of an alphabet."""

    def randrange(self, n):
        return 0


class LastRandom:
    """Always picks the last character of an alphabet."""

    def randrange(self, n):
        return n - 1


class TestRandom:
    def test_default_is_valid(self):
        for _ in range(20):
            word = random()
            assert len(word) >= 1
            assert is_valid(word)

    def test_shape_with_fixed_draws(self):
        assert random(rng=FirstRandom()) == "ba"
        assert random(rng=LastRandom()) == "zu"
        assert random(min_length=5, rng=FirstRandom()) == "bababa"

    def test_fixed_draws_match_encode_extremes(self):
        """All-first draws spell zero."""
        assert decode(random(min_length=8, rng=FirstRandom())) == 0

    def test_seeded_is_reproducible(self):
        first = random(min_length=12, rng=stdlib_random.Random(42))
        second = random(min_length=12, rng=stdlib_random.Random(42))
        assert first == second

    def test_min_length(self, seeded_rng):
        for min_length in (0, 1, 2, 5, 10, 31):
            word = random(min_length=min_length, rng=seeded_rng)
            assert len(word) >= max(1, min_length)
            assert is_valid(word)

    def test_shift_and_end(self, seeded_rng):
        for shift in (0, 1, MAX_VALUE):
            for end in (0, 1, MAX_VALUE):
                for min_length in (0, 1, 10):
                    word = random(shift, end, min_length, rng=seeded_rng)
                    assert is_valid(word, shift, end)
                    assert len(word) >= max(1, min_length)

    def test_custom_alphabets(self, seeded_rng):
        alphabets = ["🐼🐵🦍", "🐶🐺🦊", "🐱🦁🐯"]
        for end in range(3):
            word = random(end=end, min_length=4, alphabets=alphabets, rng=seeded_rng)
            assert is_valid(word, end=end, alphabets=alphabets)
            assert len(word) >= 4

    def test_uses_every_character(self, seeded_rng):
        seen = set()
        for _ in range(200):
            seen.update(random(min_length=10, rng=seeded_rng))
        assert seen == set("bcdfglmnprstvzaeiou")

    def test_empty_alphabet_raises(self, seeded_rng):
        with pytest.raises(InvalidAlphabet):
            random(alphabets=["abc", ""], rng=seeded_rng)

    def test_empty_alphabet_raises_before_drawing(self):
        class NoDraws:
            def randrange(self, n):
                raise AssertionError("should not draw")

        with pytest.raises(InvalidAlphabet):
            random(alphabets=["abc", ""], rng=NoDraws())
