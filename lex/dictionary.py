from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from .words import load_valid, load_valid_file, normalize

logger = logging.getLogger(__name__)

# Longest word that fits a 4x4 grid.
MAX_WORD_LEN = 16


class DictionaryService:
    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        # normalized form -> spelling as found in the word list
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'DictionaryService':
        """Build from trusted words, skipping the word-list filters."""
        return cls({normalize(w): w for w in words})

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        max_len: int = MAX_WORD_LEN,
        reject_proper_nouns: bool = True,
    ) -> 'DictionaryService':
        entries = {}
        for word in load_valid(lines, max_len, reject_proper_nouns):
            entries[normalize(word)] = word
        return cls(entries)

    @classmethod
    def load_file(
        cls,
        path: str,
        max_len: int = MAX_WORD_LEN,
        reject_proper_nouns: bool = True,
    ) -> 'DictionaryService':
        entries = {}
        for word in load_valid_file(path, max_len, reject_proper_nouns):
            entries[normalize(word)] = word
        logger.info("Loaded %d words from %s", len(entries), path)
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def is_valid(self, word: str) -> bool:
        if not word:
            return False
        return normalize(word) in self._entries

    def display(self, word: str) -> Optional[str]:
        return self._entries.get(normalize(word))
