"""
Dictionary Safety Check
========================

Rejects secrets an attacker would try early in a dictionary attack:

1. the empty secret;
2. a secret equal, ignoring case, to a word of the corpus;
3. a secret that is a concatenation of corpus words ("marylisa").

Anything else is accepted. A secret that merely *contains* a dictionary
word ("mypassword" against ``{"password"}``) passes, since only full
decomposition is checked.

References:
    - NIST SP 800-63B (2017), Section 5.1.1.2 -- comparison against
      lists of commonly-used, expected, or compromised values.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, Union

from shared.logger import PassgenLogger

from passgen.analyzers.segmentation import is_word_combination
from passgen.core.models import CorpusName, SafetyVerdict
from passgen.corpora.common import CommonWords, corpus_words
from passgen.corpora.loader import LazyValue

_log = PassgenLogger("analyzers.safety")

CorpusLike = Union[CommonWords, Iterable[str]]


def _lowered(name: CorpusName) -> LazyValue[frozenset[str]]:
    return LazyValue(
        lambda: frozenset(word.lower() for word in corpus_words(name)),
        f"{name.value} (lowercase)",
    )


_LOWERED_CORPORA: dict[CorpusName, LazyValue[frozenset[str]]] = {
    name: _lowered(name) for name in CorpusName if name is not CorpusName.CUSTOM
}


def lowercase_corpus(corpus: CorpusLike) -> AbstractSet[str]:
    """Return *corpus* as a lowercase word set.

    Bundled corpora are lower-cased once per process; custom corpora and
    plain iterables are lower-cased on every call.
    """
    if isinstance(corpus, CommonWords):
        if corpus.name is not CorpusName.CUSTOM:
            return _LOWERED_CORPORA[corpus.name].get()
        corpus = corpus.custom_words
    return frozenset(word.lower() for word in corpus)


def assess_safety(secret: str, corpus: CorpusLike) -> SafetyVerdict:
    """Explain whether *secret* survives a dictionary attack on *corpus*.

    Never raises.
    """
    if not secret:
        return SafetyVerdict.EMPTY

    words = lowercase_corpus(corpus)
    lowered = secret.lower()

    if lowered in words:
        verdict = SafetyVerdict.KNOWN_WORD
    elif is_word_combination(lowered, words):
        verdict = SafetyVerdict.WORD_COMBINATION
    else:
        verdict = SafetyVerdict.SAFE

    _log.debug(
        "Dictionary check over %d words: %s", len(words), verdict.value
    )
    return verdict


def is_safe(secret: str, corpus: CorpusLike) -> bool:
    """Return ``False`` if *secret* is empty, a corpus word, or a
    concatenation of corpus words; ``True`` otherwise.
    """
    return assess_safety(secret, corpus) is SafetyVerdict.SAFE
