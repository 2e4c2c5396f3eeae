"""Alphabet tables for base banana words.

A word alternates between N alphabets. The default pair is consonants
then vowels, so plain words read like "banana", "duga" or "cenico".
"""

from __future__ import annotations

from typing import Sequence

# Consonants, then vowels
ALPHABETS = ("bcdfglmnprstvz", "aeiou")

# Per-character form of ALPHABETS, built once
_DEFAULT_TABLE = tuple(tuple(alphabet) for alphabet in ALPHABETS)

SEPARATOR = ":"


def resolve_alphabets(alphabets: Sequence[str] | None = None) -> tuple[tuple[str, ...], ...]:
    """Return the alphabets to walk, each split into code points.

    An empty or missing list falls back to the default consonant/vowel pair.
    """
    if not alphabets:
        return _DEFAULT_TABLE
    return tuple(tuple(alphabet) for alphabet in alphabets)


def parse_alphabets(text: str | None) -> list[str] | None:
    """Split a colon-separated alphabet list ("abc:qwe:123").

    Returns None only when no list was given, so callers fall back to the
    defaults. Empty segments, and an empty string, are kept as empty
    alphabets and rejected later by the codec.
    """
    if text is None:
        return None
    return text.split(SEPARATOR)
