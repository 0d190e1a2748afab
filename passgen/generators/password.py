"""Random password generation over an alphabet."""

from __future__ import annotations

import secrets

from passgen.core.models import Alphabet, Password


def generate_password(length: int, alphabet: Alphabet) -> Password:
    """Draw *length* characters uniformly from *alphabet* with the OS CSPRNG.

    Characters are sampled from the alphabet string as-is, so a repeated
    character in a custom alphabet is proportionally more likely.

    Raises:
        ValueError: If *length* is negative, or positive with an empty
            alphabet.
    """
    if length < 0:
        raise ValueError(f"Password length must be >= 0, got {length}")
    if length == 0:
        return Password(value="")
    if alphabet.size == 0:
        raise ValueError("Cannot generate a password from an empty alphabet")

    chars = alphabet.chars
    return Password(value="".join(secrets.choice(chars) for _ in range(length)))
