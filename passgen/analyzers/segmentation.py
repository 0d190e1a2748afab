"""
Word Segmentation
==================

Decides whether a string can be tiled completely by dictionary words,
repeats allowed, using the classic word-break dynamic programme:

    reachable[0] = True
    reachable[i] = any(reachable[j] and s[j:i] in words for j < i)

The string is fully decomposable iff ``reachable[n]``. Each end position
stops at its first matching start, so the cost is O(n^2) substring
lookups against a hash set and O(n) extra space.

The empty string is trivially reachable (zero words). Callers that must
treat an empty secret as unsafe do so themselves.
"""

from __future__ import annotations

from typing import AbstractSet

_UNREACHED = -1


def is_word_combination(secret: str, words: AbstractSet[str]) -> bool:
    """Return ``True`` if *secret* is a concatenation of *words*.

    Matching is case-insensitive on the secret side: *secret* is
    lower-cased, *words* must already be lowercase.

    Args:
        secret: Candidate string.
        words: Lowercase dictionary words.
    """
    return _reachable_table(secret.lower(), words)[-1]


def split_words(secret: str, words: AbstractSet[str]) -> list[str] | None:
    """Return one decomposition of *secret* into *words*, or ``None``.

    Pieces are returned lowercase. The empty string decomposes into
    ``[]``.
    """
    text = secret.lower()
    starts = _start_table(text, words)
    if starts[-1] == _UNREACHED:
        return None

    pieces: list[str] = []
    end = len(text)
    while end > 0:
        start = starts[end]
        pieces.append(text[start:end])
        end = start
    pieces.reverse()
    return pieces


def _reachable_table(text: str, words: AbstractSet[str]) -> list[bool]:
    n = len(text)
    reachable = [False] * (n + 1)
    reachable[0] = True

    for end in range(1, n + 1):
        for start in range(end):
            if reachable[start] and text[start:end] in words:
                reachable[end] = True
                break

    return reachable


def _start_table(text: str, words: AbstractSet[str]) -> list[int]:
    # starts[i] is the start of the word ending at i on some tiling of
    # text[:i], or _UNREACHED when text[:i] has no tiling.
    n = len(text)
    starts = [_UNREACHED] * (n + 1)
    starts[0] = 0

    for end in range(1, n + 1):
        for start in range(end):
            if starts[start] != _UNREACHED and text[start:end] in words:
                starts[end] = start
                break

    return starts
