"""Exceptions raised by the passgen engine."""

from __future__ import annotations

from passgen.core.models import AlphabetKind


class PassgenError(Exception):
    """Base class for passgen errors."""


class AlphabetMismatchError(PassgenError, ValueError):
    """The secret contains characters outside the declared alphabet.

    Attributes:
        invalid_chars: Offending characters in order of first appearance.
        alphabet: Kind of the alphabet the secret was checked against.
    """

    def __init__(self, invalid_chars: list[str], alphabet: AlphabetKind) -> None:
        self.invalid_chars = invalid_chars
        self.alphabet = alphabet
        shown = ", ".join(repr(c) for c in invalid_chars)
        super().__init__(
            f"Password contains characters not in the {alphabet.value} "
            f"alphabet: {shown}"
        )
