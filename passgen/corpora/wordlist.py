"""
Passphrase Wordlists
=====================

The EFF diceware wordlists, bundled as ``"<dice-id>\\t<word>"`` files:

* ``eff-large``   -- long list, five dice per word;
* ``eff-short-1`` -- short list of short, common words, four dice per word;
* ``eff-short-2`` -- short list of longer, memorable words with unique
  three-character prefixes, four dice per word.

References:
    - Bonneau, J. (2016). Deep Dive: EFF's New Wordlists for Random
      Passphrases. https://www.eff.org/deeplinks/2016/07/new-wordlists-random-passphrases
"""

from __future__ import annotations

import math
from functools import partial
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from shared.logger import PassgenLogger

from passgen.core.models import WordListName
from passgen.corpora.loader import LazyValue, load_wordlist_file

_log = PassgenLogger("corpora")

_DICE_PER_WORD: dict[WordListName, int] = {
    WordListName.EFF_LARGE: 5,
    WordListName.EFF_SHORT_1: 4,
    WordListName.EFF_SHORT_2: 4,
}

_FILES: dict[WordListName, str] = {
    WordListName.EFF_LARGE: "eff_large_wordlist.txt",
    WordListName.EFF_SHORT_1: "eff_short_wordlist_1.txt",
    WordListName.EFF_SHORT_2: "eff_short_wordlist_2_0.txt",
}


def expected_size(name: WordListName) -> int:
    """Word count of the published list: one word per dice roll, ``6 ** dice``.

    Raises:
        ValueError: For ``WordListName.CUSTOM``.
    """
    if name is WordListName.CUSTOM:
        raise ValueError("The custom wordlist has no published size")
    return 6 ** _DICE_PER_WORD[name]


def check_complete(name: WordListName, words: tuple[str, ...]) -> bool:
    """Return whether *words* is the full published list, logging a shortfall."""
    expected = expected_size(name)
    if len(words) == expected:
        return True
    _log.info(
        "Bundled %s wordlist has %d of %d words; passphrases carry %.2f bits per word",
        name.value,
        len(words),
        expected,
        math.log2(len(words)) if words else 0.0,
    )
    return False


def _load_bundled(name: WordListName) -> tuple[str, ...]:
    words = load_wordlist_file("wordlists", _FILES[name])
    check_complete(name, words)
    return words


_WORDLISTS: dict[WordListName, LazyValue[tuple[str, ...]]] = {
    name: LazyValue(partial(_load_bundled, name), name.value)
    for name in _FILES
}


def wordlist_words(name: WordListName) -> tuple[str, ...]:
    """Return the cached words of a bundled wordlist.

    Raises:
        ValueError: For ``WordListName.CUSTOM``.
    """
    if name is WordListName.CUSTOM:
        raise ValueError("The custom wordlist has no bundled words")
    return _WORDLISTS[name].get()


def is_complete(name: WordListName) -> bool:
    """``True`` when the bundled list holds its full published word count."""
    return len(wordlist_words(name)) == expected_size(name)


class WordList(BaseModel):
    """Selector for the wordlist passphrases are drawn from."""

    model_config = ConfigDict(frozen=True)

    name: WordListName = WordListName.EFF_LARGE
    custom_words: tuple[str, ...] = ()

    @classmethod
    def named(cls, name: WordListName) -> WordList:
        return cls(name=name)

    @classmethod
    def from_name(cls, name: str) -> WordList:
        """Resolve a bundled wordlist by its CLI name (``"eff-short-1"``...)."""
        wordlist = WordListName(name.strip().lower().replace("_", "-"))
        if wordlist is WordListName.CUSTOM:
            raise ValueError("A custom wordlist needs explicit words")
        return cls.named(wordlist)

    @classmethod
    def from_custom(cls, words: Iterable[str]) -> WordList:
        return cls(name=WordListName.CUSTOM, custom_words=tuple(words))

    def words(self) -> tuple[str, ...]:
        if self.name is WordListName.CUSTOM:
            return self.custom_words
        return wordlist_words(self.name)

    def bits_per_word(self) -> float:
        """Entropy one uniformly drawn word adds: ``log2(len(words))``."""
        count = len(self.words())
        return math.log2(count) if count else 0.0
