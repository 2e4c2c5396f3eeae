"""Exceptions raised by the banana codec."""
from __future__ import annotations


class BananaError(ValueError):
    """Base exception for all codec errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidAlphabet(BananaError):
    """An alphabet visited while building a word is empty."""

    def __init__(self, index: int | None = None, message: str = "Invalid alphabet"):
        self.index = index
        super().__init__(message)


class InvalidBanana(BananaError):
    """A word does not fit the alphabets, shift and end it is decoded with."""

    def __init__(self, position: int | None = None, message: str = "Invalid banana number"):
        self.position = position
        super().__init__(message)
