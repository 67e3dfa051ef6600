"""Tests for round/match export and config serialization."""
import json
import random

import pytest

from rook.agents import HeuristicPlayer
from rook.config import AIConfig, ai_config_from_dict, load_ai_config, save_ai_config
from rook.deck import WILD, make_deck_57
from rook.game import run_match
from rook.persistence import (
    SCHEMA_VERSION,
    ai_config_from_json,
    ai_config_to_json,
    card_from_str,
    card_to_str,
    match_result_to_dict,
    match_result_to_json,
)


def test_card_ids():
    assert card_to_str(WILD) == "wild"
    for card in make_deck_57():
        assert card_from_str(card_to_str(card)) == card
    with pytest.raises(ValueError):
        card_from_str("purple-3")


def test_match_export():
    match = run_match([HeuristicPlayer() for _ in range(4)], rng=random.Random(21), max_rounds=2)
    d = match_result_to_dict(match, metadata={"seed": 21})
    assert d["schema_version"] == SCHEMA_VERSION
    assert d["metadata"] == {"seed": 21}
    assert len(d["rounds"]) == len(match.rounds)
    first = d["rounds"][0]
    assert len(first["trick_winners"]) == 13
    assert sum(first["captured"]) == 200
    assert isinstance(first["bid_made"], bool)
    assert len(first["kitty_returned"]) == 5
    # JSON-compatible
    assert json.loads(match_result_to_json(match))["final_score"] == list(match.final_score)


def test_ai_config_json():
    cfg = AIConfig(aggression=2.0, strength_floor=40.0, large_increment=15)
    assert ai_config_from_json(ai_config_to_json(cfg)) == cfg
    assert ai_config_from_json('{"void": 3}') == AIConfig(void=3.0)


def test_ai_config_file(tmp_path):
    path = tmp_path / "ai.json"
    cfg = AIConfig(high_card=9.0)
    save_ai_config(cfg, path)
    assert load_ai_config(path) == cfg
    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(ai_config_to_json(cfg), encoding="utf-8")
    assert load_ai_config(wrapped) == cfg


def test_unknown_config_keys_rejected():
    with pytest.raises(ValueError):
        ai_config_from_dict({"bluff": 1.0})
