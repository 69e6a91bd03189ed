from __future__ import annotations
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Request

from ..errors import ReplayError
from ..managers.game import GameManager
from ..schemas import HelpView, PuzzleRequest, PuzzleView, WordCheck

router = APIRouter()


def _games(request: Request) -> GameManager:
    return request.app.state.games


def _play(games: GameManager, req: PuzzleRequest) -> PuzzleView:
    try:
        return games.puzzle(req)
    except ReplayError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get('/puzzle', response_model=PuzzleView)
async def puzzle_get(
    request: Request,
    seed: Optional[str] = None,
    startedAt: Optional[str] = None,
    moves: List[str] = Query(default=[]),
    move: str = '',
    pass_: Optional[str] = Query(default=None, alias='pass'),
):
    req = PuzzleRequest.model_validate({
        'seed': seed,
        'startedAt': startedAt,
        'moves': moves,
        'move': move,
        'pass': pass_ or False,
    })
    return _play(_games(request), req)


@router.post('/puzzle', response_model=PuzzleView)
async def puzzle_post(request: Request, req: PuzzleRequest):
    return _play(_games(request), req)


@router.get('/help', response_model=HelpView)
async def help_page(request: Request):
    return _games(request).help()


@router.get('/dict/validate', response_model=WordCheck)
async def validate_word(request: Request, word: str):
    return _games(request).check_word(word)
