"""
Common-Word Corpora
====================

Dictionaries used to judge whether a secret is predictable: the most
common passwords, frequent English words, and popular first and last
names. ``ALL`` is the deduplicated union of the named corpora.

Corpora are returned exactly as stored; callers comparing against user
input are responsible for case-folding.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from passgen.core.models import CorpusName
from passgen.corpora.loader import LazyValue, load_word_file

_NAMED_CORPORA: dict[CorpusName, LazyValue[tuple[str, ...]]] = {
    CorpusName.PASSWORDS: LazyValue(
        lambda: load_word_file("common", "passwords.txt"), "passwords"
    ),
    CorpusName.ENGLISH: LazyValue(
        lambda: load_word_file("common", "english.txt"), "english"
    ),
    CorpusName.MALE_NAMES: LazyValue(
        lambda: load_word_file("common", "male_names.txt"), "male-names"
    ),
    CorpusName.FEMALE_NAMES: LazyValue(
        lambda: load_word_file("common", "female_names.txt"), "female-names"
    ),
    CorpusName.LAST_NAMES: LazyValue(
        lambda: load_word_file("common", "last_names.txt"), "last-names"
    ),
}


def _union_of_named() -> tuple[str, ...]:
    merged: dict[str, None] = {}
    for cell in _NAMED_CORPORA.values():
        for word in cell.get():
            merged.setdefault(word, None)
    return tuple(merged)


_ALL_CORPUS: LazyValue[tuple[str, ...]] = LazyValue(_union_of_named, "all")


def corpus_words(name: CorpusName) -> tuple[str, ...]:
    """Return the cached words of a named corpus.

    Raises:
        ValueError: For ``CorpusName.CUSTOM``, which has no bundled data.
    """
    if name is CorpusName.ALL:
        return _ALL_CORPUS.get()
    if name is CorpusName.CUSTOM:
        raise ValueError("The custom corpus has no bundled words")
    return _NAMED_CORPORA[name].get()


class CommonWords(BaseModel):
    """Selector for the corpus a secret is checked against.

    Usage::

        CommonWords().words()                          # the ALL corpus
        CommonWords.named(CorpusName.ENGLISH).words()
        CommonWords.from_custom(["mary", "lisa"]).words()
    """

    model_config = ConfigDict(frozen=True)

    name: CorpusName = CorpusName.ALL
    custom_words: tuple[str, ...] = ()

    @classmethod
    def named(cls, name: CorpusName) -> CommonWords:
        return cls(name=name)

    @classmethod
    def from_name(cls, name: str) -> CommonWords:
        """Resolve a bundled corpus by its CLI name (``"male-names"``...)."""
        corpus = CorpusName(name.strip().lower().replace("_", "-"))
        if corpus is CorpusName.CUSTOM:
            raise ValueError("A custom corpus needs explicit words")
        return cls.named(corpus)

    @classmethod
    def from_custom(cls, words: Iterable[str]) -> CommonWords:
        return cls(name=CorpusName.CUSTOM, custom_words=tuple(words))

    def words(self) -> tuple[str, ...]:
        if self.name is CorpusName.CUSTOM:
            return self.custom_words
        return corpus_words(self.name)
