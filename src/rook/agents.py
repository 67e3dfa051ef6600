"""
Seat controllers and the generic player interface.

The ``Player`` protocol is the contract used by the session controller in
``rook.game``: one method per decision point (bid, kitty exchange, card).
``HeuristicPlayer`` is the computer opponent; ``RandomPlayer`` is a seeded
baseline that picks uniformly among legal actions.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol, Sequence

from .bidding import BiddingState, can_pass, min_next_bid
from .config import DEFAULT_AI_CONFIG, DEFAULT_RULES, AIConfig, RuleConfig
from .deal import Seat
from .deck import Card, Suit
from .heuristic import choose_bid, choose_card
from .kitty import KittyExchange, exchange
from .play import RoundState, is_teammate_winning, legal_cards


class Player(Protocol):
    """Decision maker for one seat."""

    def bid(self, state: BiddingState, seat: Seat, hand: Sequence[Card]) -> int | None:
        """Amount to bid, or None to pass. Must be legal in ``state``."""

    def exchange(self, hand: Sequence[Card], kitty: Sequence[Card]) -> KittyExchange:
        """Keep 13 of the 18 cards and name the power suit."""

    def play(self, state: RoundState, seat: Seat) -> Card:
        """A card from ``legal_cards(state, seat)``."""


@dataclass
class HeuristicPlayer:
    """Computer opponent driven by ``rook.heuristic``."""

    config: AIConfig = DEFAULT_AI_CONFIG
    rules: RuleConfig = DEFAULT_RULES

    def bid(self, state: BiddingState, seat: Seat, hand: Sequence[Card]) -> int | None:
        current = state.highest_bid if state.highest_bidder is not None else None
        amount = choose_bid(hand, current, self.config, self.rules)
        if amount is None and not can_pass(state):
            return min_next_bid(state, self.rules)
        return amount

    def exchange(self, hand: Sequence[Card], kitty: Sequence[Card]) -> KittyExchange:
        return exchange(hand, kitty, config=self.config, rules=self.rules)

    def play(self, state: RoundState, seat: Seat) -> Card:
        return choose_card(
            state.hands[seat],
            state.current_trick,
            state.power_suit,
            is_teammate_winning(state, seat),
        )


@dataclass
class RandomPlayer:
    """
    Baseline that samples uniformly among legal actions.

    Usage:
        player = RandomPlayer(seed=42)
    """

    seed: int | None = None
    pass_probability: float = 0.7
    rules: RuleConfig = DEFAULT_RULES

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def bid(self, state: BiddingState, seat: Seat, hand: Sequence[Card]) -> int | None:
        lowest = min_next_bid(state, self.rules)
        if can_pass(state) and (lowest > self.rules.max_bid or self._rng.random() < self.pass_probability):
            return None
        return lowest

    def exchange(self, hand: Sequence[Card], kitty: Sequence[Card]) -> KittyExchange:
        pool = list(hand) + list(kitty)
        discard = self._rng.sample(pool, self.rules.kitty_size)
        suit = self._rng.choice(list(Suit))
        return exchange(hand, kitty, power_suit=suit, discard=discard, rules=self.rules)

    def play(self, state: RoundState, seat: Seat) -> Card:
        legal = legal_cards(state, seat)
        if not legal:
            raise ValueError("No legal plays available for RandomPlayer")
        return self._rng.choice(legal)


__all__ = ["Player", "HeuristicPlayer", "RandomPlayer"]
