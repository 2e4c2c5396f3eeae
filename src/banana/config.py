"""Environment defaults for the banana command line.

    BANANA_ALPHABETS    Colon-separated alphabets (default: consonants:vowels)
    BANANA_SHIFT        Alphabet shift (default: 0)
    BANANA_END          Ending alphabet (default: 0)
    BANANA_MIN_LENGTH   Minimum word length for encode/random (default: 1)
    BANANA_LOG_LEVEL    Log level name (default: WARNING)
"""

import os

from .core.alphabet import parse_alphabets


def env_int(name: str, default: int) -> int:
    """Read an integer environment variable."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load():
    """Read the current environment into a settings dict."""
    return {
        "alphabets": parse_alphabets(os.environ.get("BANANA_ALPHABETS") or None),
        "shift": env_int("BANANA_SHIFT", 0),
        "end": env_int("BANANA_END", 0),
        "min_length": env_int("BANANA_MIN_LENGTH", 1),
        "log_level": os.environ.get("BANANA_LOG_LEVEL", "WARNING"),
    }
