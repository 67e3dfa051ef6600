"""Tests for legal plays, trick resolution and round transitions."""
from itertools import permutations

import pytest

from rook.deal import Seat
from rook.deck import WILD, Suit, make_suit_card
from rook.errors import IllegalPlay, OutOfTurn
from rook.play import (
    current_seat,
    is_teammate_winning,
    legal_plays,
    play_card,
    resolve_trick,
    start_play,
)

O, Y, B, G = Suit.ORANGE, Suit.YELLOW, Suit.BLUE, Suit.GREEN


def c(suit, rank):
    return make_suit_card(suit, rank)


def test_legal_plays_empty_trick():
    hand = [c(Y, 10), c(O, 5), WILD]
    assert legal_plays(hand, [], O) == hand


def test_must_follow_led_suit():
    hand = [c(Y, 10), c(O, 5), c(Y, 2), WILD]
    trick = [(0, c(Y, 14))]
    assert legal_plays(hand, trick, O) == [c(Y, 10), c(Y, 2)]


def test_void_in_led_suit_plays_anything():
    hand = [c(B, 10), c(O, 5), WILD]
    trick = [(0, c(Y, 14))]
    assert legal_plays(hand, trick, O) == hand


def test_wild_follows_power_suit():
    hand = [c(O, 5), WILD, c(Y, 3)]
    trick = [(0, c(O, 14))]
    assert legal_plays(hand, trick, O) == [c(O, 5), WILD]


def test_wild_alone_must_follow_power_lead():
    hand = [WILD, c(Y, 3)]
    assert legal_plays(hand, [(0, c(O, 2))], O) == [WILD]


def test_wild_lead_calls_power_suit():
    hand = [c(O, 5), c(Y, 1)]
    assert legal_plays(hand, [(0, WILD)], O) == [c(O, 5)]


def test_power_one_wins_regardless_of_position():
    cards = [c(O, 1), c(O, 2), c(Y, 14), c(B, 1)]
    for order in permutations(cards):
        plays = [(seat, card) for seat, card in enumerate(order)]
        expected = order.index(c(O, 1))
        assert resolve_trick(plays, O) == Seat(expected)


def test_wild_led_beats_top_power_card():
    plays = [(0, WILD), (1, c(O, 5)), (2, c(Y, 1)), (3, c(O, 14))]
    assert resolve_trick(plays, O) == Seat.SOUTH


def test_wild_beats_power_one():
    plays = [(0, c(O, 1)), (1, WILD), (2, c(O, 14)), (3, c(O, 13))]
    assert resolve_trick(plays, O) == Seat.WEST


def test_highest_led_card_wins_without_power():
    plays = [(0, c(Y, 2)), (1, c(B, 1)), (2, c(G, 1)), (3, c(Y, 3))]
    assert resolve_trick(plays, O) == Seat.EAST


def test_one_beats_fourteen_in_led_suit():
    plays = [(1, c(Y, 14)), (2, c(Y, 1)), (3, c(Y, 13)), (0, c(B, 1))]
    assert resolve_trick(plays, O) == Seat.NORTH


def _small_round():
    hands = [
        [c(Y, 10), c(O, 3)],
        [c(Y, 2), c(B, 4)],
        [c(Y, 1), c(G, 5)],
        [c(B, 9), c(O, 1)],
    ]
    return start_play(hands, kitty=(), declarer=Seat.SOUTH, power_suit=O, bid=70)


def test_play_card_turn_and_legality():
    state = _small_round()
    assert current_seat(state) == Seat.SOUTH
    with pytest.raises(OutOfTurn):
        play_card(state, Seat.WEST, c(Y, 2))
    with pytest.raises(IllegalPlay):
        play_card(state, Seat.SOUTH, c(B, 4))

    s1 = play_card(state, Seat.SOUTH, c(Y, 10))
    with pytest.raises(IllegalPlay):
        play_card(s1, Seat.WEST, c(B, 4))
    # original state untouched
    assert state.current_trick == ()
    assert len(state.hands[0]) == 2
    assert s1.version == state.version + 1


def test_completed_trick_credits_winner():
    state = _small_round()
    state = play_card(state, Seat.SOUTH, c(Y, 10))
    state = play_card(state, Seat.WEST, c(Y, 2))
    state = play_card(state, Seat.NORTH, c(Y, 1))
    assert is_teammate_winning(state, Seat.SOUTH)
    assert not is_teammate_winning(state, Seat.EAST)
    state = play_card(state, Seat.EAST, c(O, 1))
    # EAST trumps with the power 1: 10 + 15 + 15 points to team B
    assert state.trick_winners == (Seat.EAST,)
    assert state.leader == Seat.EAST
    assert state.captured_points == (0, 40)
    assert state.trick_number == 1
    assert state.current_trick == ()
    assert current_seat(state) == Seat.EAST
