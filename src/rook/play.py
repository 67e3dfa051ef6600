"""
Trick-taking: legal moves, trick winner, and the round state during play.
Follow the led suit if possible (a wild lead calls for the power suit).
The wild card is a power-suit card above the power suit's 1.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Sequence

from .config import DEFAULT_RULES, RuleConfig
from .deal import NUM_SEATS, Seat, Team, partner_of, team_of
from .deck import Card, Suit
from .errors import IllegalPlay, InvariantViolation, OutOfTurn
from .scoring import capture_trick_points, verify_round_total

log = logging.getLogger(__name__)

Trick = Sequence[tuple[int, Card]]


def led_suit(trick: Trick, power_suit: Suit | None) -> Suit | None:
    """Suit of the first card; the wild leads as the power suit."""
    if not trick:
        return None
    return trick[0][1].effective_suit(power_suit)


def legal_plays(hand: Sequence[Card], trick: Trick, power_suit: Suit | None) -> list[Card]:
    """
    Cards that can be legally played from hand given the current trick.
    trick: list of (seat, card) in order played.
    """
    if not trick:
        return list(hand)
    led = led_suit(trick, power_suit)
    following = [c for c in hand if c.effective_suit(power_suit) == led]
    if following:
        return following
    return list(hand)


def is_legal_play(card: Card, hand: Sequence[Card], trick: Trick, power_suit: Suit | None) -> bool:
    return card in hand and card in legal_plays(hand, trick, power_suit)


def beats(card: Card, best: Card, led: Suit | None, power_suit: Suit | None) -> bool:
    """True if ``card`` takes the trick from the current ``best``."""
    if card.is_power(power_suit):
        return not best.is_power(power_suit) or card.strength() > best.strength()
    if best.is_power(power_suit):
        return False
    if card.suit != led:
        return False
    return best.suit != led or card.strength() > best.strength()


def winning_play(trick: Trick, power_suit: Suit | None) -> tuple[int, Card]:
    """(seat, card) currently holding the trick."""
    if not trick:
        raise ValueError("Empty trick has no winner")
    led = led_suit(trick, power_suit)
    best = trick[0]
    for play in trick[1:]:
        if beats(play[1], best[1], led, power_suit):
            best = play
    return best


def resolve_trick(plays: Trick, power_suit: Suit | None) -> Seat:
    """Seat that wins the trick."""
    return Seat(winning_play(plays, power_suit)[0])


@dataclass(frozen=True)
class RoundState:
    """
    Immutable snapshot of a round during trick play.

    hands: indexed by Seat
    captured_points / captured_cards: indexed by Team
    """

    power_suit: Suit
    declarer: Seat
    bid: int
    hands: tuple[tuple[Card, ...], ...]
    kitty: tuple[Card, ...]
    leader: Seat
    trick_number: int = 0
    current_trick: tuple[tuple[Seat, Card], ...] = ()
    captured_points: tuple[int, int] = (0, 0)
    captured_cards: tuple[tuple[Card, ...], tuple[Card, ...]] = ((), ())
    trick_winners: tuple[Seat, ...] = ()
    last_trick: tuple[tuple[Seat, Card], ...] = ()
    version: int = 0

    @property
    def declarer_team(self) -> Team:
        return team_of(self.declarer)


def start_play(
    hands: Sequence[Sequence[Card]],
    kitty: Sequence[Card],
    declarer: int,
    power_suit: Suit,
    bid: int,
    leader: int | None = None,
) -> RoundState:
    """The declarer leads the first trick unless ``leader`` is given."""
    return RoundState(
        power_suit=Suit(power_suit),
        declarer=Seat(declarer),
        bid=bid,
        hands=tuple(tuple(h) for h in hands),
        kitty=tuple(kitty),
        leader=Seat(declarer if leader is None else leader),
    )


def tricks_per_round(rules: RuleConfig = DEFAULT_RULES) -> int:
    return rules.hand_size


def is_complete(state: RoundState, rules: RuleConfig = DEFAULT_RULES) -> bool:
    return state.trick_number >= tricks_per_round(rules)


def current_seat(state: RoundState) -> Seat:
    return Seat((state.leader + len(state.current_trick)) % NUM_SEATS)


def legal_cards(state: RoundState, seat: int) -> list[Card]:
    return legal_plays(state.hands[seat], state.current_trick, state.power_suit)


def is_teammate_winning(state: RoundState, seat: int) -> bool:
    """True if ``seat``'s partner currently holds the trick."""
    if not state.current_trick:
        return False
    holder, _ = winning_play(state.current_trick, state.power_suit)
    return Seat(holder) == partner_of(seat)


def play_card(
    state: RoundState,
    seat: int,
    card: Card,
    rules: RuleConfig = DEFAULT_RULES,
) -> RoundState:
    """
    Play ``card`` for ``seat`` and return the new state. A fourth card
    resolves the trick: its points go to the winner's team and the winner
    leads next. The 13th trick also takes the kitty and the last-trick bonus.
    """
    if is_complete(state, rules):
        raise OutOfTurn(f"Round is over; seat {seat} cannot play")
    expected = current_seat(state)
    if Seat(seat) != expected:
        raise OutOfTurn(f"Seat {seat} played but it is seat {int(expected)}'s turn")
    seat = Seat(seat)
    hand = state.hands[seat]
    if card not in hand:
        raise IllegalPlay(f"Card {card} not in hand of seat {int(seat)}")
    if card not in legal_plays(hand, state.current_trick, state.power_suit):
        raise IllegalPlay(f"Card {card} does not follow suit; legal {legal_cards(state, seat)}")

    remaining = list(hand)
    remaining.remove(card)
    hands = tuple(tuple(remaining) if i == seat else h for i, h in enumerate(state.hands))
    trick = state.current_trick + ((seat, card),)

    if len(trick) < NUM_SEATS:
        return replace(state, hands=hands, current_trick=trick, version=state.version + 1)

    winner = resolve_trick(trick, state.power_suit)
    team = team_of(winner)
    is_last = state.trick_number == tricks_per_round(rules) - 1
    kitty = state.kitty if is_last else ()
    points = capture_trick_points(trick, winner, is_last_trick=is_last, kitty=kitty, rules=rules)

    captured_points = list(state.captured_points)
    captured_points[team] += points
    captured_cards = list(state.captured_cards)
    captured_cards[team] = captured_cards[team] + tuple(c for _, c in trick) + tuple(kitty)
    log.debug("trick %d won by %s (%d points)", state.trick_number + 1, winner.name, points)

    new_state = replace(
        state,
        hands=hands,
        leader=winner,
        trick_number=state.trick_number + 1,
        current_trick=(),
        captured_points=(captured_points[0], captured_points[1]),
        captured_cards=(captured_cards[0], captured_cards[1]),
        trick_winners=state.trick_winners + (winner,),
        last_trick=trick,
        kitty=() if is_last else state.kitty,
        version=state.version + 1,
    )
    if is_last:
        verify_round_total(new_state.captured_points, rules)
        if any(new_state.hands):
            raise InvariantViolation("Cards left in hand after the last trick")
    return new_state


__all__ = [
    "led_suit",
    "legal_plays",
    "is_legal_play",
    "beats",
    "winning_play",
    "resolve_trick",
    "RoundState",
    "start_play",
    "is_complete",
    "current_seat",
    "legal_cards",
    "is_teammate_winning",
    "play_card",
]
