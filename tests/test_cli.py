import json
import logging

import pytest

from showdown.__main__ import main, parse_player_hand


def test_parse_player_hand_reads_name_and_cards():
    seat = parse_player_hand("alice=4c,4d,7h,2c,9s")
    assert seat.player_id == "alice"
    assert seat.hand is not None
    assert [card.label for card in seat.hand] == ["4c", "4d", "7h", "2c", "9s"]

    folded = parse_player_hand("bob=")
    assert folded.player_id == "bob"
    assert folded.hand is None


def test_main_prints_ranking(capsys):
    code = main(["--hand", "p1=4c,4d,7h,2c,9s", "--hand", "p2=4s,4h,7h,2c,Js"])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["1. p2: pair (219)", "2. p1: pair (217)"]


def test_main_prints_json(capsys):
    code = main(["--json", "--hand", "solo="])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == [{"player_id": "solo", "hand": None, "category": "win via fold", "score": 10000}]


def test_main_applies_score_overrides(capsys):
    code = main(["--top-score", "2000", "--category-step", "200", "--hand", "a=2d,5d,9d,Jd,Kd", "--hand", "b=2c,2d,5h,5s,9c"])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["1. a: flush (1240)", "2. b: two pairs (623)"]


def test_main_reports_missing_hand(caplog):
    with caplog.at_level(logging.ERROR, logger="showdown"):
        code = main(["--hand", "p1=4c,4d,7h,2c,9s", "--hand", "p2="])
    assert code == 1
    assert "missing hand for player p2" in caplog.text


def test_main_rejects_bad_card_labels(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--hand", "p1=4c,4d,7h,2c,Zz"])
    assert excinfo.value.code == 2
    assert "Invalid rank" in capsys.readouterr().err


def test_main_requires_a_hand():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
