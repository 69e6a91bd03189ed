from __future__ import annotations
from typing import Iterable, Mapping, Sequence

from .dictionary import DictionaryService
from .errors import InsufficientTiles, UnknownWord
from .words import count, count_letters, normalize


def validate_move(move: str, letters: Sequence[str], dictionary: DictionaryService) -> str:
    """Check `move` against the tiles on the board and the dictionary.

    Returns the normalized move. The empty move is a pass and always legal.
    Raises InsufficientTiles if the board can't spell the word, otherwise
    UnknownWord if the dictionary doesn't have it.
    """
    norm = normalize(move)
    if not norm:
        return norm
    board = count_letters(letters)
    if not board.contains(count(norm)):
        raise InsufficientTiles(norm, str(board))
    if not dictionary.is_valid(norm):
        raise UnknownWord(norm)
    return norm


def score_word(word: str, points: Mapping[str, int]) -> int:
    if not word:
        return 0
    score = 1
    for l in normalize(word):
        score += points.get(l, 0)
    return score * score


def score_moves(moves: Iterable[str], points: Mapping[str, int]) -> int:
    return sum(score_word(move, points) for move in moves)
