from dataclasses import FrozenInstanceError

import pytest

from lex.dictionary import DictionaryService
from lex.letter_gen import LetterGen
from lex.rules import Rules, build_rules


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("moon\nstarer\nParis\nzzz\n")
    return str(path)


def test_build_rules_from_points(words_file):
    rules = build_rules(words_path=words_file, game_len=5, letter_source="points")
    assert rules.game_len == 5
    assert sorted(rules.dictionary) == ["MOON", "STARER", "ZZZ"]
    assert rules.points["Q"] == 3
    assert rules.letter_gen.freqs["E"] == 1000


def test_build_rules_from_corpus(words_file):
    rules = build_rules(words_path=words_file, letter_source="corpus")
    assert rules.letter_gen.freqs["Z"] == 3
    assert "P" not in rules.letter_gen.freqs


def test_build_rules_keeps_proper_nouns(words_file):
    rules = build_rules(words_path=words_file, reject_proper_nouns=False)
    assert rules.dictionary.is_valid("paris")


def test_unknown_letter_source(words_file):
    with pytest.raises(ValueError):
        build_rules(words_path=words_file, letter_source="dice")


def test_rules_are_read_only(points):
    rules = Rules(dictionary=DictionaryService(), letter_gen=LetterGen({"A": 1}), points=points)
    with pytest.raises(FrozenInstanceError):
        rules.game_len = 3
    with pytest.raises(TypeError):
        rules.points["A"] = 99


def test_game_len_must_be_positive():
    with pytest.raises(ValueError):
        Rules(dictionary=DictionaryService(), letter_gen=LetterGen({"A": 1}), game_len=0)


def test_build_rules_rejects_zero_game_len(words_file):
    with pytest.raises(ValueError):
        build_rules(words_path=words_file, game_len=0)
