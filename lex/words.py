from __future__ import annotations
import logging
import re
from collections import Counter
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

# Tiles never carry a two-letter "QU"; a Q tile always reads as QU.
WORD_RE = re.compile(r'^(?:[a-pr-z]|qu){3,}$', re.IGNORECASE)
PROPER_RE = re.compile(r'^[A-Z]')

MIN_LEN = 3


def normalize(word: str) -> str:
    return word.upper().replace('QU', 'Q')


def denormalize(word: str) -> str:
    return normalize(word).replace('Q', 'QU')


class LetterCount(Counter):
    """Multiset of letters.

    Treat instances as values: helpers here always build a new one.
    """

    def contains(self, needle: LetterCount) -> bool:
        return all(self[l] >= c for l, c in needle.items())

    def __str__(self) -> str:
        return ''.join(sorted(self.elements()))


def count(word: str) -> LetterCount:
    return count_letters(normalize(word))


def count_letters(letters: Iterable[str]) -> LetterCount:
    return LetterCount(letters)


def max_count(*counts: LetterCount) -> LetterCount:
    # The result contains every input: used to size a tile set covering a word list.
    res = LetterCount()
    for cm in counts:
        for l, c in cm.items():
            if res[l] < c:
                res[l] = c
    return res


def load_valid(lines: Iterable[str], max_len: int, reject_proper_nouns: bool = True) -> Iterator[str]:
    """Yield the playable words of a word list, one entry per line.

    A word is playable if it is made only of letters other than a bare Q
    (Q must be followed by U), and its normalized length is within
    [MIN_LEN, max_len]. Lines starting with a capital are taken to be proper
    nouns and skipped unless `reject_proper_nouns` is False.
    """
    for line in lines:
        word = line.rstrip('\r\n')
        if not WORD_RE.match(word):
            continue
        if reject_proper_nouns and PROPER_RE.match(word):
            continue
        if not MIN_LEN <= len(normalize(word)) <= max_len:
            continue
        yield word


def load_valid_file(path: str, max_len: int, reject_proper_nouns: bool = True) -> Iterator[str]:
    logger.info("Reading %s", path)
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        yield from load_valid(f, max_len, reject_proper_nouns)
