import pytest
from fastapi.testclient import TestClient

from lex.game_logic import Game
from lex.main import create_app

from conftest import SEED, STARTED


@pytest.fixture
def client(rules):
    with TestClient(create_app(rules)) as c:
        yield c


def test_new_game(client):
    res = client.get("/puzzle")
    assert res.status_code == 200
    body = res.json()
    assert len(body["letters"]) == 16
    assert len(body["board"]) == 4
    assert body["moves"] == []
    assert body["score"] == 0
    assert body["over"] is False
    assert body["errors"] == []
    assert body["identity"] is None


def test_resume_matches_replay(client, rules):
    res = client.get("/puzzle", params={"seed": str(SEED), "startedAt": str(STARTED), "moves": ["", ""]})
    assert res.status_code == 200
    body = res.json()
    game = Game.resume(rules, SEED, STARTED, ["", ""])
    assert body["seed"] == SEED
    assert body["startedAt"] == STARTED
    assert body["moves"] == ["", ""]
    assert body["letters"] == game.letters


def test_unparseable_seed_starts_new_game(client):
    res = client.get("/puzzle", params={"seed": "not-a-number", "startedAt": str(STARTED), "moves": [""]})
    assert res.status_code == 200
    assert res.json()["moves"] == []


def test_out_of_range_seed_starts_new_game(client):
    res = client.get("/puzzle", params={"seed": str(1 << 64), "startedAt": str(STARTED)})
    assert res.status_code == 200
    assert res.json()["moves"] == []


def test_pass_button(client, rules):
    res = client.get("/puzzle", params={"seed": str(SEED), "startedAt": str(STARTED), "pass": "PASS"})
    body = res.json()
    assert body["moves"] == [""]
    assert body["letters"] == Game.resume(rules, SEED, STARTED, [""]).letters


def test_empty_move_without_pass_is_ignored(client):
    res = client.get("/puzzle", params={"seed": str(SEED), "startedAt": str(STARTED), "move": "  "})
    assert res.json()["moves"] == []


def test_rejected_move_is_reported(client, rules):
    letters = Game(rules, SEED, STARTED).letters
    res = client.post("/puzzle", json={"seed": SEED, "startedAt": STARTED, "moves": [], "move": "Z" * 17})
    assert res.status_code == 200
    body = res.json()
    assert body["moves"] == []
    assert body["letters"] == letters
    assert body["errors"] and body["errors"][0].startswith("can't spell")


def test_tampered_history_is_rejected(client):
    res = client.post("/puzzle", json={"seed": SEED, "startedAt": STARTED, "moves": ["", "Z" * 17]})
    assert res.status_code == 400
    assert "unwind step #1" in res.json()["detail"]


def test_finished_game_has_identity(make_rules):
    rules = make_rules(game_len=2)
    with TestClient(create_app(rules)) as client:
        res = client.post("/puzzle", json={"seed": SEED, "startedAt": STARTED, "moves": [""], "pass": True})
    body = res.json()
    assert body["over"] is True
    assert body["identity"] == {"seed": SEED, "startedAt": STARTED, "moves": ["", ""], "score": 0}


def test_help(client):
    body = client.get("/help").json()
    assert body["gameLen"] == 10
    assert body["points"]["3"] == ["J", "K", "Q", "X", "Z"]
    assert "E" in body["points"]["1"]


def test_validate_word(client):
    body = client.get("/dict/validate", params={"word": "Quart"}).json()
    assert body == {"word": "QART", "valid": True, "display": "quart"}
    body = client.get("/dict/validate", params={"word": "xyzzy"}).json()
    assert body["valid"] is False
    assert body["display"] is None


@pytest.mark.parametrize("label", ["nope", "", "false"])
def test_other_pass_labels_do_not_pass(client, label):
    res = client.get("/puzzle", params={"seed": str(SEED), "startedAt": str(STARTED), "pass": label})
    assert res.status_code == 200
    assert res.json()["moves"] == []


def test_octal_seed_resumes(client, rules):
    res = client.get("/puzzle", params={"seed": "010", "startedAt": str(STARTED), "moves": [""]})
    body = res.json()
    assert body["seed"] == 8
    assert body["moves"] == [""]
    assert body["letters"] == Game.resume(rules, 8, STARTED, [""]).letters
