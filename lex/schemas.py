from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional

from .game_logic import INT64_MAX, INT64_MIN


def _parse_go_int(text: str) -> int:
    # Same prefixes as strconv.ParseInt(s, 0, 64): 0x, 0o, 0b, and a bare
    # leading 0 for octal.
    try:
        return int(text, 0)
    except ValueError:
        sign, body = (-1, text[1:]) if text[:1] == "-" else (1, text.lstrip("+"))
        if len(body) > 1 and body[0] == "0":
            return sign * int(body, 8)
        raise


def _parse_int64(value) -> Optional[int]:
    # Anything unusable means "no game to resume", never a request error.
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        n = value
    else:
        try:
            n = _parse_go_int(str(value).strip())
        except ValueError:
            return None
    if not INT64_MIN <= n <= INT64_MAX:
        return None
    return n


class PuzzleRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    seed: Optional[int] = None
    startedAt: Optional[int] = None
    moves: List[str] = []
    move: str = ''
    pass_: bool = Field(False, alias='pass')

    @field_validator('seed', 'startedAt', mode='before')
    @classmethod
    def lenient_int64(cls, v):
        return _parse_int64(v)

    @field_validator('moves', mode='before')
    @classmethod
    def no_null_moves(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return ['' if m is None else m for m in v]

    @field_validator('move', mode='before')
    @classmethod
    def strip_move(cls, v):
        return '' if v is None else str(v).strip()

    @field_validator('pass_', mode='before')
    @classmethod
    def pass_button(cls, v):
        # The form button submits its label.
        if isinstance(v, str):
            v = v.strip().lower()
            # Any other label means the button wasn't pressed.
            return v in ('pass', 'true', '1', 'yes', 'on')
        return v


class GameIdentity(BaseModel):
    seed: int
    startedAt: int
    moves: List[str]
    score: int


class PuzzleView(BaseModel):
    seed: int
    startedAt: int
    moves: List[str]
    moveScores: List[int]
    letters: List[str]
    board: List[List[str]]
    score: int
    over: bool
    gameLen: int
    errors: List[str] = []
    identity: Optional[GameIdentity] = None


class HelpView(BaseModel):
    points: Dict[int, List[str]]
    gameLen: int


class WordCheck(BaseModel):
    word: str
    valid: bool
    display: Optional[str] = None
