"""Tests for point capture, settlement and match end."""
import pytest

from rook.config import RuleConfig
from rook.deal import Team
from rook.deck import WILD, Suit, make_suit_card
from rook.errors import InvariantViolation
from rook.scoring import (
    TeamScoreLedger,
    capture_trick_points,
    check_match_end,
    settle_round,
    verify_round_total,
)

O, Y = Suit.ORANGE, Suit.YELLOW


def test_capture_trick_points():
    trick = [(0, make_suit_card(O, 1)), (1, make_suit_card(O, 14)), (2, make_suit_card(Y, 5)), (3, make_suit_card(Y, 2))]
    assert capture_trick_points(trick, 0) == 30


def test_last_trick_takes_kitty_and_bonus():
    trick = [make_suit_card(O, 1), make_suit_card(O, 14), make_suit_card(Y, 5), make_suit_card(Y, 2)]
    kitty = [make_suit_card(Y, 10), WILD, make_suit_card(Y, 3), make_suit_card(Y, 4), make_suit_card(Y, 6)]
    assert capture_trick_points(trick, 2, is_last_trick=True, kitty=kitty) == 30 + 30 + 20


def test_verify_round_total():
    verify_round_total([120, 80])
    with pytest.raises(InvariantViolation):
        verify_round_total([120, 70])


def test_settle_bid_made():
    s = settle_round(130, 120, 70, declarer_team=Team.TEAM_B)
    assert s.bid_made
    assert s.deltas == (70, 130)
    assert s.bid_amount == 120
    assert s.final_score == (70, 130)


def test_settle_bid_set():
    ledger = TeamScoreLedger(scores=(300, 250))
    s = settle_round(110, 120, 90, declarer_team=Team.TEAM_A, ledger=ledger)
    assert not s.bid_made
    assert s.deltas == (-120, 90)
    assert s.final_score == (180, 340)
    assert ledger.apply(s).scores == (180, 340)
    # ledger itself unchanged
    assert ledger.scores == (300, 250)


def test_exact_bid_is_made():
    s = settle_round(100, 100, 100, declarer_team=Team.TEAM_A)
    assert s.bid_made
    assert s.deltas == (100, 100)


def test_settle_defenders_default_to_rest_of_round():
    s = settle_round(120, 100)
    assert s.deltas == (120, 80)
    assert s.captured == (120, 80)

    s = settle_round(60, 100, declarer_team=Team.TEAM_B)
    assert not s.bid_made
    assert s.deltas == (140, -100)


def test_settle_defaults_follow_round_points():
    s = settle_round(90, 80, rules=RuleConfig(round_points=180))
    assert s.deltas == (90, 90)


def test_match_continues_below_target():
    assert check_match_end((499, 300), (100, 50)) is None


def test_match_ends_at_target():
    assert check_match_end((500, 320), (100, 50)) == Team.TEAM_A
    assert check_match_end(TeamScoreLedger(scores=(200, 510))) == Team.TEAM_B


def test_both_cross_higher_wins():
    assert check_match_end((520, 560), (120, 80)) == Team.TEAM_B


def test_tie_goes_to_round_delta():
    assert check_match_end((540, 540), (60, 140)) == Team.TEAM_B
    assert check_match_end((540, 540), (140, 60)) == Team.TEAM_A
    assert check_match_end((540, 540), (100, 100)) is None


def test_custom_target():
    assert check_match_end((300, 100), (0, 0), target=300) == Team.TEAM_A
