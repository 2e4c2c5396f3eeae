"""
Base banana - numbers as pronounceable words.

Integers are written in a mixed radix whose digits alternate between
alphabets (consonants and vowels by default), so 1000 becomes "duga".

Usage:
    import banana

    banana.encode(1000)          # "duga"
    banana.decode("duga")        # 1000
    banana.is_valid("123")       # False
    banana.random(min_length=6)  # e.g. "tomiva"

    codec = banana.Codec(alphabets=("abc", "qwe", "123"))
    codec.encode(27)             # "aq2aq1"
"""

from .core.alphabet import (
    ALPHABETS,
    parse_alphabets,
    resolve_alphabets,
)

from .core.codec import (
    MAX_VALUE,
    Codec,
    decode,
    encode,
    is_valid,
    random,
    validate,
)

from .errors import (
    BananaError,
    InvalidAlphabet,
    InvalidBanana,
)

__version__ = "0.1.0"

__all__ = [
    # Alphabets
    "ALPHABETS",
    "parse_alphabets",
    "resolve_alphabets",
    # Codec
    "MAX_VALUE",
    "Codec",
    "decode",
    "encode",
    "is_valid",
    "random",
    "validate",
    # Errors
    "BananaError",
    "InvalidAlphabet",
    "InvalidBanana",
]
