"""Bundled word corpora and passphrase wordlists."""

from passgen.corpora.common import CommonWords, corpus_words
from passgen.corpora.wordlist import WordList, wordlist_words

__all__ = ["CommonWords", "WordList", "corpus_words", "wordlist_words"]
