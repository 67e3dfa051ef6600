"""
Rook deck: 57 cards (4 suits × 14, plus the wild card).
Point cards: 1 = 15, 14 = 10, 10 = 10, 5 = 5, wild = 20. 180 points in the deck.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional


class Suit(IntEnum):
    """Orange, Yellow, Blue, Green. Order used for display and tie-break."""
    ORANGE = 0
    YELLOW = 1
    BLUE = 2
    GREEN = 3


# Rank in a suit: 1 is the top card, then 14, 13, ..., 2.
RANK_ONE = 1
RANK_TOP = 14
RANKS = tuple(range(1, 15))

# The wild card is a power-suit card above the power suit's 1.
WILD_STRENGTH = 16

RANK_POINTS = {1: 15, 14: 10, 10: 10, 5: 5}
WILD_POINTS = 20

DECK_SIZE = 57
DECK_POINTS = 180


def rank_order(rank: int) -> int:
    """Strength of a rank within its suit: 1 -> 15, otherwise the rank itself."""
    return 15 if rank == RANK_ONE else rank


@dataclass(frozen=True)
class Card:
    """
    A single Rook card. Either:
    - suit: suit + rank (1..14, 1 ranks highest)
    - wild: no suit/rank; always plays as the power suit
    """

    kind: str  # "suit" | "wild"
    suit: Optional[Suit] = None
    rank: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind == "suit":
            assert self.suit is not None and self.rank is not None
            assert 1 <= self.rank <= 14
        elif self.kind == "wild":
            assert self.suit is None and self.rank is None
        else:
            raise ValueError(f"Unknown card kind: {self.kind}")

    def is_wild(self) -> bool:
        return self.kind == "wild"

    def is_suit(self) -> bool:
        return self.kind == "suit"

    @property
    def points(self) -> int:
        if self.kind == "wild":
            return WILD_POINTS
        return RANK_POINTS.get(self.rank, 0)

    def is_point_card(self) -> bool:
        return self.points > 0

    def effective_suit(self, power_suit: Suit | None) -> Suit | None:
        """Suit the card plays as: the wild belongs to the power suit."""
        if self.kind == "wild":
            return power_suit
        return self.suit

    def is_power(self, power_suit: Suit | None) -> bool:
        if self.kind == "wild":
            return True
        return power_suit is not None and self.suit == power_suit

    def strength(self) -> int:
        """Trick-taking strength within the card's (effective) suit."""
        if self.kind == "wild":
            return WILD_STRENGTH
        return rank_order(self.rank)

    def __str__(self) -> str:
        if self.kind == "wild":
            return "Wild"
        suit_name = ("Orange", "Yellow", "Blue", "Green")[self.suit]
        return f"{suit_name}-{self.rank}"

    def __repr__(self) -> str:
        return str(self)


WILD = Card(kind="wild")


def make_suit_card(suit: Suit, rank: int) -> Card:
    return Card(kind="suit", suit=suit, rank=rank)


def make_deck_57() -> list[Card]:
    """Build the full 57-card deck (suit-major, ranks 1..14, wild last)."""
    deck: list[Card] = []
    for s in Suit:
        for rank in RANKS:
            deck.append(make_suit_card(s, rank))
    deck.append(WILD)
    return deck


def shuffle(deck: Iterable[Card], rng: random.Random | None = None) -> list[Card]:
    """Return a shuffled copy of ``deck``; the input is left untouched."""
    if rng is None:
        rng = random.Random()
    shuffled = list(deck)
    rng.shuffle(shuffled)
    return shuffled


def cards_point_total(cards: Iterable[Card]) -> int:
    """Total points in a set of cards (180 for the full deck)."""
    return sum(c.points for c in cards)


def cards_of_suit(hand: Iterable[Card], suit: Suit, power_suit: Suit | None = None) -> list[Card]:
    """Cards playing as ``suit``; the wild counts only when ``suit`` is the power suit."""
    return [c for c in hand if c.effective_suit(power_suit) == suit]


def sort_hand(hand: Iterable[Card], power_suit: Suit | None = None) -> list[Card]:
    """
    Display order: power suit first (wild on top of it), then the other suits
    in Suit order, strongest card first. With no power suit the wild goes last.
    """

    def key(c: Card) -> tuple[int, int]:
        if power_suit is not None and c.is_power(power_suit):
            group = -1
        elif c.is_wild():
            group = len(Suit)
        else:
            group = int(c.suit)
        return group, -c.strength()

    return sorted(hand, key=key)
