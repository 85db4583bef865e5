"""Shared fixtures for splitstream tests."""

import pytest

from splitstream import SentenceStream


@pytest.fixture
def emitted():
    """Sentences received by the ``stream`` fixture's callback, in order."""
    return []


@pytest.fixture
def stream(emitted):
    return SentenceStream(emitted.append)
