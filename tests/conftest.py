"""Shared fixtures for banana tests."""

import logging
import random

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep BANANA_* settings from the caller's shell out of the tests."""
    for name in ("BANANA_ALPHABETS", "BANANA_SHIFT", "BANANA_END",
                 "BANANA_MIN_LENGTH", "BANANA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo handlers and levels set by setup_logging during a test."""
    logger = logging.getLogger("banana")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
