"""
Corpus Loading
===============

Reads the bundled word resources and memoises them for the lifetime of
the process.

Two line formats are understood:

* plain corpora (``resources/common/*.txt``): one word per line;
* EFF wordlists (``resources/wordlists/*.txt``): ``"<dice-id>\\t<word>"``,
  where the word is the second tab-separated field.

Each resource lives behind a :class:`LazyValue`, an initialise-once cell
that is safe under concurrent first access and read-only afterwards.
"""

from __future__ import annotations

import threading
from importlib import resources
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

from shared.logger import PassgenLogger

T = TypeVar("T")

_RESOURCE_PACKAGE = "passgen.resources"

_log = PassgenLogger("corpora")

_UNSET = object()


class LazyValue(Generic[T]):
    """Compute a value at most once, on first access, then serve it forever.

    Uses double-checked locking: readers skip the lock once the value is
    published, and the factory never runs twice even when several threads
    race on the first :meth:`get`.
    """

    def __init__(self, factory: Callable[[], T], name: str = "") -> None:
        self._factory = factory
        self._name = name
        self._lock = threading.Lock()
        self._value: object = _UNSET

    def get(self) -> T:
        value = self._value
        if value is _UNSET:
            with self._lock:
                value = self._value
                if value is _UNSET:
                    value = self._factory()
                    self._value = value
        return value  # type: ignore[return-value]

    @property
    def loaded(self) -> bool:
        return self._value is not _UNSET

    def __repr__(self) -> str:
        state = "loaded" if self.loaded else "pending"
        return f"<LazyValue {self._name or self._factory.__name__} ({state})>"


def iter_lines(text: str) -> Iterator[str]:
    """Split *text* on newlines, dropping a trailing ``\\r`` from each line.

    A final newline does not produce a trailing empty line.
    """
    if not text:
        return
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def parse_wordlist_line(line: str) -> Optional[str]:
    """Extract the word from an EFF wordlist line.

    Returns the second tab-separated field, or ``None`` when the line has
    no tab. Extra fields are ignored and a lone tab yields ``""``.

    >>> parse_wordlist_line("11111\\tabacus")
    'abacus'
    >>> parse_wordlist_line("invalid line") is None
    True
    """
    fields = line.split("\t")
    if len(fields) < 2:
        return None
    return fields[1]


def read_resource(*parts: str) -> str:
    """Return the UTF-8 text of a bundled resource file."""
    ref = resources.files(_RESOURCE_PACKAGE)
    for part in parts:
        ref = ref / part
    return ref.read_text(encoding="utf-8")


def load_word_file(*parts: str) -> tuple[str, ...]:
    """Load a one-word-per-line resource."""
    label = "/".join(parts)
    with _log.timed(f"load {label}"):
        words = tuple(iter_lines(read_resource(*parts)))
    _log.debug("Loaded %d words from %s", len(words), label)
    return words


def load_wordlist_file(*parts: str) -> tuple[str, ...]:
    """Load a tab-separated EFF wordlist resource, skipping malformed lines."""
    label = "/".join(parts)
    with _log.timed(f"load {label}"):
        words = tuple(_parse_wordlist(iter_lines(read_resource(*parts))))
    _log.debug("Loaded %d words from %s", len(words), label)
    return words


def _parse_wordlist(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        word = parse_wordlist_line(line)
        if word is not None:
            yield word
