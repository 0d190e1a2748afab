"""
Entropy Strength Classifier
============================

Classifies a secret by the brute-force search space it spans over a
declared alphabet. Combinatorial entropy is used, the maximum entropy
assuming uniform random selection from the alphabet:

    H = L * log2(N)

where L is the secret length and N the alphabet size, both counted in
code points. The result is bucketed into four half-open tiers:

    H < 28          weak
    28 <= H < 40    medium
    40 <= H < 60    strong
    H >= 60         very strong

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import math

from shared.logger import PassgenLogger

from passgen.core.exceptions import AlphabetMismatchError
from passgen.core.models import (
    Alphabet,
    Classification,
    StrengthReport,
    mask_secret,
)

_log = PassgenLogger("analyzers.strength")

# Lower bound (inclusive) of each tier above WEAK, in ascending order.
_TIER_THRESHOLDS: tuple[tuple[float, Classification], ...] = (
    (60.0, Classification.VERY_STRONG),
    (40.0, Classification.STRONG),
    (28.0, Classification.MEDIUM),
)


def entropy(secret_length: int, alphabet_size: int) -> float:
    """Compute combinatorial entropy in bits.

    Args:
        secret_length: Number of characters in the secret.
        alphabet_size: Number of characters in the alphabet.

    Returns:
        ``secret_length * log2(alphabet_size)``, or ``0.0`` when either
        operand is zero.
    """
    if secret_length == 0 or alphabet_size == 0:
        return 0.0
    return secret_length * math.log2(alphabet_size)


def tier_for_entropy(bits: float) -> Classification:
    """Map an entropy value to its strength tier (boundaries go up)."""
    for threshold, tier in _TIER_THRESHOLDS:
        if bits >= threshold:
            return tier
    return Classification.WEAK


def invalid_characters(secret: str, alphabet: Alphabet) -> list[str]:
    """Characters of *secret* absent from *alphabet*, first-seen order."""
    seen: dict[str, None] = {}
    for char in secret:
        if not alphabet.contains(char):
            seen.setdefault(char, None)
    return list(seen)


def classify(secret: str, alphabet: Alphabet) -> Classification:
    """Classify *secret* against *alphabet*.

    Every character is validated before entropy is computed. An empty
    secret is always WEAK, whatever the alphabet.

    Raises:
        AlphabetMismatchError: If a character of *secret* is not in
            *alphabet*.
    """
    return analyze_strength(secret, alphabet).classification


def analyze_strength(secret: str, alphabet: Alphabet) -> StrengthReport:
    """Validate, measure and classify *secret* in one pass.

    Returns:
        A :class:`StrengthReport` carrying the entropy and tier.

    Raises:
        AlphabetMismatchError: If a character of *secret* is not in
            *alphabet*.
    """
    bad = invalid_characters(secret, alphabet)
    if bad:
        _log.debug(
            "Rejected secret: %d character(s) outside %s alphabet",
            len(bad),
            alphabet.kind.value,
        )
        raise AlphabetMismatchError(bad, alphabet.kind)

    bits = entropy(len(secret), alphabet.size)
    tier = tier_for_entropy(bits)
    _log.debug(
        "Entropy %.2f bits over %d-character alphabet -> %s",
        bits,
        alphabet.size,
        tier.value,
    )
    return StrengthReport(
        password_masked=mask_secret(secret),
        length=len(secret),
        alphabet=alphabet.kind,
        alphabet_size=alphabet.size,
        entropy=bits,
        classification=tier,
    )
