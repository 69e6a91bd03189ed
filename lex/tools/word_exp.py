"""Word-list experiments.

  filter: print the words a game would accept from the given lists.
  max:    print the smallest tile set that can spell every accepted word.
"""
from __future__ import annotations
import argparse
import itertools
import logging
import sys
from typing import Iterator, List, Optional

from ..words import LetterCount, count, load_valid_file, max_count

logger = logging.getLogger(__name__)

DEFAULT_FILES = ['/usr/share/dict/words']


def read_words(files: List[str], max_len: int, reject_proper_nouns: bool = True) -> Iterator[str]:
    logger.info("Reading files: %s", files)
    return itertools.chain.from_iterable(
        load_valid_file(f, max_len, reject_proper_nouns) for f in files)


def cover(words: Iterator[str]) -> LetterCount:
    res = LetterCount()
    for word in words:
        res = max_count(res, count(word))
    return res


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('files', nargs='*', help="word lists, one word per line")
    parser.add_argument('--max-length', type=int, default=16, help="max word length")
    parser.add_argument('--exp', choices=['filter', 'max'], default='filter', help="what experiment to do")
    parser.add_argument('--keep-proper-nouns', action='store_true',
                        help="don't skip words starting with a capital")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)

    words = read_words(args.files or DEFAULT_FILES, args.max_length, not args.keep_proper_nouns)
    if args.exp == 'max':
        res = cover(words)
        print(f"Max: {res} (length={len(str(res))})")
    else:
        for word in words:
            print(word)
    return 0


if __name__ == '__main__':
    sys.exit(main())
