"""
Bidding auction for 4 players.
Bids run from 70 to 200 in steps of 5, each above the current high bid.
Play goes clockwise from the left of the dealer; a pass is final for the round.
The auction ends at once on a 200 bid, otherwise when three seats have passed.
Someone must open: the last seat left in an unopened auction cannot pass.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from .config import DEFAULT_RULES, RuleConfig
from .deal import NUM_SEATS, Seat, next_seat
from .errors import InvalidBid, OutOfTurn

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BiddingState:
    """Immutable auction snapshot. Every transition returns a new one."""

    turn: Seat
    highest_bid: int = 0
    highest_bidder: Seat | None = None
    passed: tuple[bool, ...] = (False,) * NUM_SEATS
    history: tuple[tuple[Seat, int | None], ...] = ()
    complete: bool = False
    version: int = 0


class BiddingResult:
    """Result of the bidding phase."""
    __slots__ = ("declarer", "bid", "history")

    def __init__(self, declarer: Seat, bid: int, history: tuple[tuple[Seat, int | None], ...]):
        self.declarer = declarer
        self.bid = bid
        # history: (seat, amount) in order, amount None for a pass
        self.history = history

    def __repr__(self) -> str:
        return f"BiddingResult(declarer={self.declarer!r}, bid={self.bid})"


def start_round(first_seat: int) -> BiddingState:
    return BiddingState(turn=Seat(first_seat))


def current_seat(state: BiddingState) -> Seat | None:
    """Seat expected to act, or None once the auction is over."""
    return None if state.complete else state.turn


def is_complete(state: BiddingState) -> bool:
    return state.complete


def winner(state: BiddingState) -> tuple[Seat, int] | None:
    """(declarer, amount) once complete, else None."""
    if not state.complete or state.highest_bidder is None:
        return None
    return state.highest_bidder, state.highest_bid


def active_seats(state: BiddingState) -> list[Seat]:
    return [Seat(i) for i, p in enumerate(state.passed) if not p]


def min_next_bid(state: BiddingState, rules: RuleConfig = DEFAULT_RULES) -> int:
    if state.highest_bidder is None:
        return rules.min_bid
    return state.highest_bid + rules.bid_increment


def can_pass(state: BiddingState) -> bool:
    """False when the acting seat is the last one left and nobody has opened."""
    return not (state.highest_bidder is None and len(active_seats(state)) == 1)


def _check_turn(state: BiddingState, seat: int) -> None:
    if state.complete:
        raise OutOfTurn(f"Bidding is over; seat {seat} cannot act")
    if Seat(seat) != state.turn:
        raise OutOfTurn(f"Seat {seat} acted but it is seat {int(state.turn)}'s turn")


def _next_active(passed: tuple[bool, ...], seat: Seat) -> Seat:
    nxt = next_seat(seat)
    for _ in range(NUM_SEATS):
        if not passed[nxt]:
            return nxt
        nxt = next_seat(nxt)
    return seat


def validate_bid(state: BiddingState, amount: int, rules: RuleConfig = DEFAULT_RULES) -> None:
    """Raise InvalidBid unless ``amount`` is a legal bid in ``state``."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidBid(f"Bid must be an integer, got {amount!r}")
    if amount % rules.bid_increment != 0:
        raise InvalidBid(f"Bid {amount} is not a multiple of {rules.bid_increment}")
    if amount < rules.min_bid or amount > rules.max_bid:
        raise InvalidBid(f"Bid {amount} outside [{rules.min_bid}, {rules.max_bid}]")
    if amount < min_next_bid(state, rules):
        raise InvalidBid(f"Bid {amount} must be at least {min_next_bid(state, rules)}")


def submit_bid(
    state: BiddingState,
    seat: int,
    amount: int,
    rules: RuleConfig = DEFAULT_RULES,
) -> BiddingState:
    _check_turn(state, seat)
    validate_bid(state, amount, rules)
    seat = Seat(seat)
    complete = amount == rules.max_bid or sum(state.passed) >= NUM_SEATS - 1
    log.debug("seat %s bids %d", seat.name, amount)
    return replace(
        state,
        turn=seat if complete else _next_active(state.passed, seat),
        highest_bid=amount,
        highest_bidder=seat,
        history=state.history + ((seat, amount),),
        complete=complete,
        version=state.version + 1,
    )


def submit_pass(state: BiddingState, seat: int) -> BiddingState:
    _check_turn(state, seat)
    if not can_pass(state):
        raise InvalidBid("An opening bid is required; the last seat cannot pass")
    seat = Seat(seat)
    passed = tuple(p or i == seat for i, p in enumerate(state.passed))
    complete = state.highest_bidder is not None and sum(passed) >= NUM_SEATS - 1
    log.debug("seat %s passes", seat.name)
    return replace(
        state,
        turn=state.highest_bidder if complete else _next_active(passed, seat),
        passed=passed,
        history=state.history + ((seat, None),),
        complete=complete,
        version=state.version + 1,
    )


def run_bidding(
    first_seat: int,
    get_bid: Callable[[BiddingState, Seat], int | None],
    rules: RuleConfig = DEFAULT_RULES,
) -> BiddingResult:
    """
    Run the auction. get_bid(state, seat) returns an amount or None (pass).
    Invalid answers propagate as InvalidBid.
    """
    state = start_round(first_seat)
    while not state.complete:
        seat = state.turn
        amount = get_bid(state, seat)
        if amount is None:
            state = submit_pass(state, seat)
        else:
            state = submit_bid(state, seat, amount, rules)
    declarer, bid = winner(state)  # type: ignore[misc]
    log.debug("bidding won by %s at %d", declarer.name, bid)
    return BiddingResult(declarer=declarer, bid=bid, history=state.history)
