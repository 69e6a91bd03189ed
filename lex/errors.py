from __future__ import annotations
from typing import Optional


class LexError(Exception):
    pass


class SamplerMisconfiguration(LexError):
    # Startup-time bug in the letter weights; never handled per request.
    pass


class MalformedResumeRequest(LexError):
    """Seed or start time missing or unparseable; callers start a new game."""


class MoveError(LexError):
    def __init__(self, word: str, message: str):
        super().__init__(message)
        self.word = word


class InsufficientTiles(MoveError):
    def __init__(self, word: str, letters: str):
        super().__init__(word, f"can't spell {word} with {letters}")
        self.letters = letters


class UnknownWord(MoveError):
    def __init__(self, word: str):
        super().__init__(word, f"unknown word: {word}")


class GameOver(MoveError):
    def __init__(self, word: str, game_len: int):
        super().__init__(word, f"game is over after {game_len} moves")


class ReplayError(LexError):
    def __init__(self, index: int, cause: Optional[MoveError]):
        super().__init__(f"illegal move in unwind step #{index}: {cause}")
        self.index = index
        self.cause = cause
