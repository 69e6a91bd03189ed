from __future__ import annotations
import logging
from typing import List, Tuple

from ..errors import MalformedResumeRequest, MoveError
from ..game_logic import Game
from ..points import point_letters
from ..rules import Rules
from ..schemas import GameIdentity, HelpView, PuzzleRequest, PuzzleView, WordCheck
from ..words import normalize

logger = logging.getLogger(__name__)


def resume_identity(req: PuzzleRequest) -> Tuple[int, int]:
    if req.seed is None:
        raise MalformedResumeRequest("missing or unparseable seed")
    if req.startedAt is None:
        raise MalformedResumeRequest("missing or unparseable start time")
    return req.seed, req.startedAt


class GameManager:
    """Turns puzzle requests into games and games into views.

    Holds no per-game state: every call replays the game it is handed.
    """

    def __init__(self, rules: Rules):
        self.rules = rules

    def new_game(self) -> Game:
        return Game.new(self.rules)

    def resume_game(self, req: PuzzleRequest) -> Game:
        # ReplayError propagates: a bad history is the caller's problem.
        try:
            seed, started = resume_identity(req)
        except MalformedResumeRequest as e:
            if req.seed is not None or req.startedAt is not None or req.moves:
                logger.warning("can't resume game (%s); starting a new one", e)
            return self.new_game()
        return Game.resume(self.rules, seed, started, req.moves)

    def make_move(self, req: PuzzleRequest) -> Tuple[Game, List[str]]:
        game = self.resume_game(req)
        errors: List[str] = []
        if req.move == '' and not req.pass_:
            return game, errors
        try:
            game.do_move(req.move)
        except MoveError as e:
            logger.debug("rejected move %r: %s", req.move, e)
            errors.append(str(e))
        return game, errors

    def to_view(self, game: Game, errors: List[str]) -> PuzzleView:
        identity = game.identity()
        return PuzzleView(
            seed=game.seed,
            startedAt=game.started,
            moves=game.moves,
            moveScores=game.move_scores(),
            letters=game.letters,
            board=game.board(),
            score=game.score(),
            over=game.over,
            gameLen=self.rules.game_len,
            errors=errors,
            identity=GameIdentity(**identity) if identity else None,
        )

    def puzzle(self, req: PuzzleRequest) -> PuzzleView:
        game, errors = self.make_move(req)
        return self.to_view(game, errors)

    def help(self) -> HelpView:
        return HelpView(points=point_letters(dict(self.rules.points)), gameLen=self.rules.game_len)

    def check_word(self, word: str) -> WordCheck:
        d = self.rules.dictionary
        return WordCheck(word=normalize(word), valid=d.is_valid(word), display=d.display(word))
