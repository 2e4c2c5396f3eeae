"""Mixed-radix conversion between integers and base banana words.

Position i of a word draws its character from alphabet (i + shift) mod N,
so the word is a number whose radix alternates with the alphabet lengths.
The last character always comes from alphabet (N - 1 + shift + end) mod N,
which makes the word length a multiple of N offset by `end`.

    encode(1)            -> "be"
    encode(1, shift=1)   -> "ac"
    encode(1, end=1)     -> "c"
    decode("duga")       -> 1000
"""

from __future__ import annotations

from dataclasses import dataclass
from random import SystemRandom
from typing import Callable, Sequence

from ..errors import InvalidAlphabet, InvalidBanana
from ..log import get_logger
from .alphabet import resolve_alphabets

MAX_VALUE = 2**64 - 1

_system_random = SystemRandom()

logger = get_logger("codec")


def _bounds(n_alphabets: int, shift: int, end: int) -> tuple[int, int]:
    """Return (start, stop) alphabet indexes for a right-to-left walk."""
    shift %= n_alphabets
    end %= n_alphabets
    start = (n_alphabets - 1 + shift + end) % n_alphabets
    stop = (n_alphabets - 1 + shift) % n_alphabets
    return start, stop


def _walk(alphabets: Sequence[Sequence[str]], start: int, stop: int, min_length: int,
          digit: Callable[[int], int], more: Callable[[], bool] | None = None) -> str:
    """Emit characters from the last position backwards and return the word.

    `digit(size)` picks the index for an alphabet of `size` characters and
    `more()` reports whether digits are still pending. The walk stops once
    it is back on the stop alphabet, long enough, and `more()` is false.
    """
    n_alphabets = len(alphabets)
    chars = []
    idx = start
    while idx != stop or len(chars) < min_length or (more is not None and more()):
        alphabet = alphabets[idx]
        if not alphabet:
            logger.debug("Alphabet %d is empty", idx)
            raise InvalidAlphabet(idx)
        chars.append(alphabet[digit(len(alphabet))])
        idx = (idx + n_alphabets - 1) % n_alphabets
    chars.reverse()
    return "".join(chars)


def encode(value: int, shift: int = 0, end: int = 0, min_length: int = 1,
           alphabets: Sequence[str] | None = None) -> str:
    """Encode an unsigned 64-bit integer as a word.

    Raises InvalidAlphabet if an alphabet needed for the word is empty, or
    if every alphabet has a single character and `value` is not zero.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Value must be an int, got {type(value).__name__}")
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"Value must be 0-{MAX_VALUE}, got {value}")

    table = resolve_alphabets(alphabets)
    if value and all(len(alphabet) <= 1 for alphabet in table):
        # radix 1 everywhere: the value would never shrink
        logger.debug("Alphabets cannot represent %d", value)
        raise InvalidAlphabet()
    start, stop = _bounds(len(table), shift, end)
    remaining = value

    def digit(size: int) -> int:
        nonlocal remaining
        remaining, r = divmod(remaining, size)
        return r

    return _walk(table, start, stop, max(1, min_length), digit,
                 lambda: remaining != 0)


def random(shift: int = 0, end: int = 0, min_length: int = 1,
           alphabets: Sequence[str] | None = None, rng=None) -> str:
    """Generate a random valid word of at least `min_length` characters.

    `rng` is anything with a `randrange(n)` method; by default a
    SystemRandom instance is used.
    """
    if rng is None:
        rng = _system_random
    table = resolve_alphabets(alphabets)
    start, stop = _bounds(len(table), shift, end)
    return _walk(table, start, stop, max(1, min_length), rng.randrange)


def _check_length(word: str, n_alphabets: int, end: int) -> bool:
    end %= n_alphabets
    if end > len(word):
        return False
    return (len(word) - end) % n_alphabets == 0


def decode(word: str, shift: int = 0, end: int = 0,
           alphabets: Sequence[str] | None = None) -> int:
    """Decode a word back to its integer.

    Raises InvalidBanana when the length does not match `end` or a character
    is not in the alphabet for its position.
    """
    table = resolve_alphabets(alphabets)
    n_alphabets = len(table)
    shift %= n_alphabets

    if not _check_length(word, n_alphabets, end):
        logger.debug("Length %d does not end on alphabet %d", len(word), end)
        raise InvalidBanana()

    value = 0
    for i, char in enumerate(word):
        alphabet = table[(n_alphabets + i + shift) % n_alphabets]
        try:
            pos = alphabet.index(char)
        except ValueError:
            logger.debug("Character %r at position %d not in alphabet", char, i)
            raise InvalidBanana(i) from None
        value = value * len(alphabet) + pos
    return value


def is_valid(word: str, shift: int = 0, end: int = 0,
             alphabets: Sequence[str] | None = None) -> bool:
    """Check whether a word decodes under the given parameters."""
    table = resolve_alphabets(alphabets)
    n_alphabets = len(table)
    shift %= n_alphabets

    if not _check_length(word, n_alphabets, end):
        return False
    return all(
        char in table[(n_alphabets + i + shift) % n_alphabets]
        for i, char in enumerate(word)
    )


validate = is_valid


@dataclass(frozen=True)
class Codec:
    """Encoding parameters bundled for repeated use."""
    shift: int = 0
    end: int = 0
    min_length: int = 1
    alphabets: tuple[str, ...] | None = None

    def encode(self, value: int) -> str:
        return encode(value, self.shift, self.end, self.min_length, self.alphabets)

    def decode(self, word: str) -> int:
        return decode(word, self.shift, self.end, self.alphabets)

    def is_valid(self, word: str) -> bool:
        return is_valid(word, self.shift, self.end, self.alphabets)

    def random(self, rng=None) -> str:
        return random(self.shift, self.end, self.min_length, self.alphabets, rng)
