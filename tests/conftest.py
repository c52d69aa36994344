"""Pytest configuration and fixtures."""

import random

import pytest
import structlog


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source, so property-style tests are deterministic."""
    return random.Random(20240611)


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test that configures it."""
    yield
    structlog.reset_defaults()
