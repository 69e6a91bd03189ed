import pytest

from lex.dictionary import DictionaryService
from lex.letter_gen import LetterGen
from lex.points import point_values
from lex.rules import Rules

# Fixed game identity so boards are reproducible across runs.
SEED = 1234567890123
STARTED = 1500000000

SMALL_DICT = ["moon", "starer", "astronomer", "quart", "cat", "tea", "eat"]


@pytest.fixture
def points():
    return point_values()


@pytest.fixture
def make_rules(points):
    def _make(words=SMALL_DICT, game_len=10):
        return Rules(
            dictionary=DictionaryService.from_words(words),
            letter_gen=LetterGen.from_points(points),
            points=points,
            game_len=game_len,
        )
    return _make


@pytest.fixture
def rules(make_rules):
    return make_rules()
