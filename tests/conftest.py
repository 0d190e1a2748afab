import logging

import pytest

from passgen.core.models import Alphabet, AlphabetKind


@pytest.fixture(autouse=True)
def reset_passgen_logging():
    """Leave the ``passgen`` logger as the next test expects to find it."""
    yield
    root = logging.getLogger("passgen")
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def full():
    return Alphabet.preset(AlphabetKind.FULL)


@pytest.fixture
def lower():
    return Alphabet.preset(AlphabetKind.LOWER_CASE)


@pytest.fixture
def binary():
    """Two-character alphabet: one bit of entropy per character."""
    return Alphabet.custom("ab")
