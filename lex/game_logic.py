from __future__ import annotations
import logging
import random
import secrets
import time
from typing import Dict, Iterable, List, Optional

from .errors import GameOver, MoveError, ReplayError
from .rules import GRID_LEN, GRID_SIZE, Rules
from .scoring import score_moves, score_word, validate_move
from .words import count, count_letters

logger = logging.getLogger(__name__)

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MASK = (1 << 64) - 1


def rand_int64() -> int:
    return int.from_bytes(secrets.token_bytes(8), 'little', signed=True)


class Game:
    """A game rebuilt from its seed, start time and moves.

    Nothing here is stored between requests: the letters on the board are
    always the result of replaying `moves` from the random stream that
    `seed ^ started` picks, so a given history gives the same board every
    time.
    """

    def __init__(self, rules: Rules, seed: int, started: int):
        self.rules = rules
        self.seed = seed
        self.started = started
        self.moves: List[str] = []
        self.letters: List[str] = []
        self.over = False
        # Owned by this game alone. random.Random drops the sign of an int seed.
        self._rng = random.Random((seed ^ started) & UINT64_MASK)
        self.draw()

    @classmethod
    def new(cls, rules: Rules) -> 'Game':
        logger.info("Starting new game")
        return cls(rules, rand_int64(), int(time.time()))

    @classmethod
    def resume(cls, rules: Rules, seed: int, started: int, moves: Iterable[str]) -> 'Game':
        game = cls(rules, seed, started)
        game.unwind(moves)
        return game

    def unwind(self, moves: Iterable[str]) -> None:
        for i, move in enumerate(moves):
            try:
                self.do_move(move)
            except MoveError as e:
                raise ReplayError(i, e) from e

    def draw(self) -> None:
        while len(self.letters) < GRID_SIZE:
            self.letters.append(self.rand_letter())

    def rand_letter(self) -> str:
        # Redraw letters already on the board, expensive ones more eagerly,
        # so the grid stays varied.
        on_board = count_letters(self.letters)
        l = self.rules.letter_gen.next(self._rng)
        while self._rng.randrange(1 + self.rules.points.get(l, 0) * on_board[l]) > 0:
            l = self.rules.letter_gen.next(self._rng)
        return l

    def do_move(self, move: str) -> str:
        if self.over:
            raise GameOver(move, self.rules.game_len)
        norm = validate_move(move, self.letters, self.rules.dictionary)
        if not norm:
            self.letters = []
            self.draw()
        self.moves.append(norm)
        if len(self.moves) >= self.rules.game_len:
            self.over = True
            logger.info("Game completed: seed=%d started=%d score=%d moves=%s",
                        self.seed, self.started, self.score(), self.moves)
        owed = count(norm)
        for i, l in enumerate(self.letters):
            if owed[l] > 0:
                self.letters[i] = self.rand_letter()
                owed[l] -= 1
        return norm

    def board(self) -> List[List[str]]:
        b = [['' for _ in range(GRID_LEN)] for _ in range(GRID_LEN)]
        for i, l in enumerate(self.letters[:GRID_SIZE]):
            b[i // GRID_LEN][i % GRID_LEN] = l
        return b

    def score(self) -> int:
        return score_moves(self.moves, self.rules.points)

    def move_scores(self) -> List[int]:
        return [score_word(move, self.rules.points) for move in self.moves]

    def identity(self) -> Optional[Dict]:
        """What a high score table needs to key and re-check a finished game."""
        if not self.over:
            return None
        return {
            'seed': self.seed,
            'startedAt': self.started,
            'moves': list(self.moves),
            'score': self.score(),
        }

    def __repr__(self) -> str:
        return f"Game(seed={self.seed}, started={self.started}, moves={self.moves}, over={self.over})"
