"""Tests for seat controllers."""
import random

from rook.agents import HeuristicPlayer, RandomPlayer
from rook.bidding import start_round, submit_pass
from rook.deal import Seat, shuffle_and_deal
from rook.deck import Suit
from rook.play import legal_cards, play_card, start_play


def test_random_player_respects_legal_cards():
    dealt = shuffle_and_deal(random.Random(4))
    state = start_play(dealt.hands, dealt.kitty, Seat.SOUTH, Suit.BLUE, bid=70)
    player = RandomPlayer(seed=123)
    for _ in range(8):
        seat = Seat((state.leader + len(state.current_trick)) % 4)
        card = player.play(state, seat)
        assert card in legal_cards(state, seat)
        state = play_card(state, seat, card)


def test_random_player_must_open():
    state = start_round(Seat.SOUTH)
    for seat in (Seat.SOUTH, Seat.WEST, Seat.NORTH):
        state = submit_pass(state, seat)
    player = RandomPlayer(seed=1, pass_probability=1.0)
    assert player.bid(state, Seat.EAST, ()) == 70


def test_heuristic_player_must_open_even_when_weak():
    state = start_round(Seat.SOUTH)
    for seat in (Seat.SOUTH, Seat.WEST, Seat.NORTH):
        state = submit_pass(state, seat)
    dealt = shuffle_and_deal(random.Random(0))
    assert HeuristicPlayer().bid(state, Seat.EAST, dealt.hands[3]) == 70


def test_heuristic_exchange_shapes():
    dealt = shuffle_and_deal(random.Random(9))
    result = HeuristicPlayer().exchange(dealt.hands[2], dealt.kitty)
    assert len(result.hand) == 13
    assert len(result.kitty) == 5


def test_random_exchange_is_valid():
    dealt = shuffle_and_deal(random.Random(10))
    result = RandomPlayer(seed=3).exchange(dealt.hands[1], dealt.kitty)
    assert set(result.hand) | set(result.kitty) == set(dealt.hands[1]) | set(dealt.kitty)
    assert result.power_suit in list(Suit)
