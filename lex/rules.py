from __future__ import annotations
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from . import settings
from .dictionary import DictionaryService, MAX_WORD_LEN
from .letter_gen import LetterGen
from .points import point_values

logger = logging.getLogger(__name__)

GRID_LEN = 4
GRID_SIZE = GRID_LEN * GRID_LEN

DEFAULT_GAME_LEN = 10


@dataclass(frozen=True)
class Rules:
    """Everything a game needs besides its own seed and moves.

    Built once at startup and shared read-only by every game.
    """
    dictionary: DictionaryService
    letter_gen: LetterGen
    points: Mapping[str, int] = field(default_factory=lambda: MappingProxyType(point_values()))
    game_len: int = DEFAULT_GAME_LEN

    def __post_init__(self):
        if self.game_len < 1:
            raise ValueError(f"game_len must be positive, got {self.game_len}")
        if not isinstance(self.points, MappingProxyType):
            object.__setattr__(self, 'points', MappingProxyType(dict(self.points)))


def build_rules(
    words_path: Optional[str] = None,
    game_len: Optional[int] = None,
    letter_source: Optional[str] = None,
    reject_proper_nouns: Optional[bool] = None,
) -> Rules:
    """Build Rules from arguments, falling back to lex.settings."""
    words_path = words_path or settings.words_path
    if game_len is None:
        game_len = settings.game_len
    letter_source = letter_source or settings.letter_source
    if reject_proper_nouns is None:
        reject_proper_nouns = settings.reject_proper_nouns

    dictionary = DictionaryService.load_file(words_path, MAX_WORD_LEN, reject_proper_nouns)
    points = point_values()
    if letter_source == 'points':
        letter_gen = LetterGen.from_points(points)
    elif letter_source == 'corpus':
        letter_gen = LetterGen.from_corpus(dictionary)
    else:
        raise ValueError(f"unknown letter source: {letter_source!r}")
    logger.info("Rules ready: %d words, %d moves per game, %s letters",
                len(dictionary), game_len, letter_source)
    return Rules(dictionary=dictionary, letter_gen=letter_gen, points=points, game_len=game_len)
