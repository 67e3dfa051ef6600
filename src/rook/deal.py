"""
Seats, teams and the deal for 4 players.
13 cards each, dealt one at a time clockwise from the left of the dealer; the
last 5 cards form the kitty.
"""
from __future__ import annotations

import random
from enum import IntEnum
from typing import NamedTuple, Sequence

from .deck import Card, make_deck_57, shuffle
from .errors import InvariantViolation

NUM_SEATS = 4
HAND_SIZE = 13
KITTY_SIZE = 5


class Seat(IntEnum):
    """Seats clockwise around the table. Partners sit opposite (0+2, 1+3)."""
    SOUTH = 0
    WEST = 1
    NORTH = 2
    EAST = 3


class Team(IntEnum):
    TEAM_A = 0  # SOUTH + NORTH
    TEAM_B = 1  # WEST + EAST


def team_of(seat: int) -> Team:
    return Team(int(seat) % 2)


def partner_of(seat: int) -> Seat:
    return Seat((int(seat) + 2) % NUM_SEATS)


def other_team(team: Team) -> Team:
    return Team(1 - int(team))


def next_seat(seat: int) -> Seat:
    """Clockwise neighbour."""
    return Seat((int(seat) + 1) % NUM_SEATS)


def next_dealer(dealer: int) -> Seat:
    """Dealer rotates clockwise (0 -> 1 -> 2 -> 3 -> 0)."""
    return next_seat(dealer)


def first_to_bid(dealer: int) -> Seat:
    """Player to the left of the dealer speaks first."""
    return next_seat(dealer)


class Deal(NamedTuple):
    """Result of a deal. ``hands[i]`` belongs to ``Seat(i)``."""
    hands: tuple[tuple[Card, ...], ...]
    kitty: tuple[Card, ...]


def deal(
    deck: Sequence[Card],
    seats: int = NUM_SEATS,
    hand_size: int = HAND_SIZE,
    kitty_size: int = KITTY_SIZE,
) -> Deal:
    """
    Deal ``hand_size`` cards to each of ``seats`` round-robin, then ``kitty_size``
    cards to the kitty. The deck must be consumed exactly.
    """
    if seats * hand_size + kitty_size != len(deck):
        raise InvariantViolation(
            f"Cannot deal {len(deck)} cards as {seats}x{hand_size} + {kitty_size}"
        )
    hands: list[list[Card]] = [[] for _ in range(seats)]
    idx = 0
    for _ in range(hand_size):
        for player in range(seats):
            hands[player].append(deck[idx])
            idx += 1
    kitty = tuple(deck[idx: idx + kitty_size])
    return Deal(hands=tuple(tuple(h) for h in hands), kitty=kitty)


def shuffle_and_deal(
    rng: random.Random | None = None,
    hand_size: int = HAND_SIZE,
    kitty_size: int = KITTY_SIZE,
) -> Deal:
    """Fresh deck, shuffled with ``rng``, dealt 4 × 13 + 5 unless sized otherwise."""
    return deal(shuffle(make_deck_57(), rng=rng), hand_size=hand_size, kitty_size=kitty_size)
