"""Diceware-style passphrase generation."""

from __future__ import annotations

import secrets

from passgen.core.models import Password
from passgen.corpora.wordlist import WordList


def generate_passphrase(
    word_count: int,
    separator: str,
    wordlist: WordList,
) -> Password:
    """Join *word_count* words drawn uniformly, with replacement, from
    *wordlist*.

    An empty wordlist or a non-positive *word_count* gives an empty
    passphrase.
    """
    words = wordlist.words()
    if not words or word_count <= 0:
        return Password(value="")

    parts = [secrets.choice(words) for _ in range(word_count)]
    return Password(value=separator.join(parts))
