"""
Passgen Core Data Models
=========================

Pydantic models and closed enumerations for the passgen engine: character
alphabets, corpus and wordlist selectors, strength tiers, and the
structured results produced by strength and dictionary-safety checks.

Alphabets and corpora are closed variants. Each preset resolves through a
single lookup table; only the ``CUSTOM`` member carries caller data.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ===================================================================== #
#  Alphabets
# ===================================================================== #


class AlphabetKind(str, enum.Enum):
    """Named character universes a secret may be drawn from."""

    FULL = "full"
    LOWER_CASE = "lower-case"
    UPPER_CASE = "upper-case"
    DIGITS = "digits"
    SPECIAL_CHARS = "special-chars"
    CUSTOM = "custom"


_ALPHABET_PRESETS: dict[AlphabetKind, str] = {
    AlphabetKind.FULL: (
        "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!@#$%^&*()"
    ),
    AlphabetKind.LOWER_CASE: "abcdefghijklmnopqrstuvwxyz",
    AlphabetKind.UPPER_CASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    AlphabetKind.DIGITS: "0123456789",
    AlphabetKind.SPECIAL_CHARS: "!@#$%^&*",
}

PRESET_ALPHABETS: tuple[AlphabetKind, ...] = tuple(_ALPHABET_PRESETS)


class Alphabet(BaseModel):
    """A character universe: one of the presets or a custom string.

    The size of an alphabet is the number of code points in its string,
    duplicates included, so ``Alphabet.custom("aaaa")`` has size 4.

    Usage::

        Alphabet.preset(AlphabetKind.LOWER_CASE).size   # 26
        Alphabet.custom("abc").contains("b")            # True
    """

    model_config = ConfigDict(frozen=True)

    kind: AlphabetKind = AlphabetKind.FULL
    chars: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fill_preset(cls, data: Any) -> Any:
        if isinstance(data, dict):
            kind = AlphabetKind(data.get("kind", AlphabetKind.FULL))
            if kind is not AlphabetKind.CUSTOM and "chars" not in data:
                data = {**data, "chars": _ALPHABET_PRESETS[kind]}
        return data

    @model_validator(mode="after")
    def _check_preset(self) -> Alphabet:
        if self.kind is not AlphabetKind.CUSTOM:
            if self.chars != _ALPHABET_PRESETS[self.kind]:
                raise ValueError(
                    f"Preset alphabet '{self.kind.value}' cannot carry custom characters"
                )
        return self

    @classmethod
    def preset(cls, kind: AlphabetKind) -> Alphabet:
        return cls(kind=kind)

    @classmethod
    def custom(cls, chars: str) -> Alphabet:
        return cls(kind=AlphabetKind.CUSTOM, chars=chars)

    @classmethod
    def from_name(cls, name: str) -> Alphabet:
        """Resolve a preset by its CLI name (``"lower-case"``, ``"digits"``...).

        Underscores are accepted in place of hyphens.

        Raises:
            ValueError: If *name* is not a preset alphabet.
        """
        normalised = name.strip().lower().replace("_", "-")
        kind = AlphabetKind(normalised)
        if kind is AlphabetKind.CUSTOM:
            raise ValueError("A custom alphabet needs explicit characters")
        return cls.preset(kind)

    def contains(self, char: str) -> bool:
        """Return ``True`` iff *char* is a single character of this alphabet."""
        return len(char) == 1 and char in self.chars

    @property
    def size(self) -> int:
        return len(self.chars)

    def __len__(self) -> int:
        return len(self.chars)


# ===================================================================== #
#  Corpus / wordlist selectors
# ===================================================================== #


class CorpusName(str, enum.Enum):
    """Dictionaries a secret is checked against for predictability."""

    PASSWORDS = "passwords"
    ENGLISH = "english"
    MALE_NAMES = "male-names"
    FEMALE_NAMES = "female-names"
    LAST_NAMES = "last-names"
    ALL = "all"
    CUSTOM = "custom"


class WordListName(str, enum.Enum):
    """Diceware-style wordlists used for passphrase generation."""

    EFF_LARGE = "eff-large"
    EFF_SHORT_1 = "eff-short-1"
    EFF_SHORT_2 = "eff-short-2"
    CUSTOM = "custom"


# ===================================================================== #
#  Strength tiers
# ===================================================================== #


class Classification(str, enum.Enum):
    """Strength tier of a secret, ordered by ascending entropy.

    Members compare by tier, so ``Classification.WEAK < Classification.STRONG``.
    """

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @property
    def rank(self) -> int:
        return _CLASSIFICATION_ORDER.index(self)

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.rank >= other.rank


_CLASSIFICATION_ORDER: list[Classification] = list(Classification)


class SafetyVerdict(str, enum.Enum):
    """Why a secret was accepted or rejected by the dictionary check."""

    SAFE = "safe"
    EMPTY = "empty"
    KNOWN_WORD = "known_word"
    WORD_COMBINATION = "word_combination"


# ===================================================================== #
#  Secrets
# ===================================================================== #


def mask_secret(secret: str) -> str:
    """Show the first and last character with asterisks in between."""
    if len(secret) <= 2:
        return "*" * len(secret)
    return secret[0] + "*" * (len(secret) - 2) + secret[-1]


class Password(BaseModel):
    """A generated or user-supplied password or passphrase."""

    model_config = ConfigDict(frozen=True)

    value: str = ""

    @property
    def masked(self) -> str:
        return mask_secret(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value


# ===================================================================== #
#  Analysis results
# ===================================================================== #


class StrengthReport(BaseModel):
    """Entropy-based strength of one secret against one alphabet.

    Attributes:
        password_masked: Masked secret for display.
        length: Secret length in code points.
        alphabet: Alphabet the secret was checked against.
        alphabet_size: Code-point count of the alphabet string.
        entropy: ``length * log2(alphabet_size)`` in bits.
        classification: Resulting strength tier.
    """

    password_masked: str = ""
    length: int = 0
    alphabet: AlphabetKind = AlphabetKind.FULL
    alphabet_size: int = 0
    entropy: float = 0.0
    classification: Classification = Classification.WEAK


class SafetyReport(BaseModel):
    """Outcome of checking a secret against a word corpus."""

    corpus: CorpusName = CorpusName.ALL
    corpus_size: int = 0
    verdict: SafetyVerdict = SafetyVerdict.SAFE

    @property
    def safe(self) -> bool:
        return self.verdict is SafetyVerdict.SAFE


class PasswordCheck(BaseModel):
    """Combined strength and dictionary-safety verdict for one secret.

    ``strength`` is ``None`` when the secret contains characters outside
    the declared alphabet; ``invalid_chars`` then lists them.
    """

    password_masked: str = ""
    strength: Optional[StrengthReport] = None
    strength_error: Optional[str] = None
    invalid_chars: list[str] = Field(default_factory=list)
    safety: SafetyReport = Field(default_factory=SafetyReport)


class GeneratedSecret(BaseModel):
    """One generated password or passphrase, optionally with its tier."""

    value: str
    entropy: Optional[float] = None
    classification: Optional[Classification] = None
