"""Shared pytest fixtures for hand engine tests."""

from random import Random

import pytest

from hand_engine.deck import create_deck


@pytest.fixture
def rng():
    """Provide a reproducible random source."""
    return Random(42)


@pytest.fixture
def deck():
    """A fresh canonical 52-card deck."""
    return create_deck()


@pytest.fixture
def float_source():
    """A seeded zero-argument callable returning floats in [0, 1)."""
    return Random(7).random
