"""
Heuristic opponent: fast, deterministic scoring and choosing.

No lookahead. Every decision is a pure function of the visible hand and
table, driven by the weights in ``AIConfig``:

- ``hand_strength`` scores a hand against a candidate power suit.
- ``choose_power_suit`` picks the candidate with the best score.
- ``choose_bid`` sizes a bid from that score, or passes.
- ``choose_kitty`` keeps the best 13 of the 18 cards after the exchange.
- ``choose_card`` plays a card with simple teammate-support / point-denial rules.

All choices are legal by construction: card choices come from ``legal_plays``
and bids are checked against the table rules.
"""
from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Sequence

from .config import DEFAULT_AI_CONFIG, DEFAULT_RULES, AIConfig, RuleConfig
from .deck import Card, Suit
from .play import Trick, beats, led_suit, legal_plays, winning_play

log = logging.getLogger(__name__)

TOP_RANKS = (1, 14, 13)
CONTROL_RANKS = (1, 14)


def hand_strength(
    hand: Iterable[Card],
    power_suit: Suit,
    config: AIConfig = DEFAULT_AI_CONFIG,
) -> float:
    """Score of ``hand`` if ``power_suit`` were named. Higher is stronger."""
    hand = list(hand)
    score = 0.0
    for c in hand:
        if c.is_wild():
            score += config.wild_card
            continue
        if c.rank in TOP_RANKS:
            score += config.high_card
        if c.suit == power_suit:
            score += config.power_suit_length
            if c.rank in CONTROL_RANKS:
                score += config.control_card

    for suit in Suit:
        if suit == power_suit:
            continue
        n = sum(1 for c in hand if c.is_suit() and c.suit == suit)
        if n == 0:
            score += config.void
        elif n > 3:
            score += config.suit_length * (n - 3)
    return score


def choose_power_suit(hand: Iterable[Card], config: AIConfig = DEFAULT_AI_CONFIG) -> Suit:
    """Suit maximizing ``hand_strength``; ties go to the earlier suit."""
    hand = list(hand)
    return max(Suit, key=lambda s: (hand_strength(hand, s, config), -int(s)))


def _round_up(value: int, step: int) -> int:
    return -(-value // step) * step


def bid_ceiling(
    strength: float,
    config: AIConfig = DEFAULT_AI_CONFIG,
    rules: RuleConfig = DEFAULT_RULES,
) -> int:
    """Highest bid a hand of ``strength`` is willing to reach."""
    raw = rules.min_bid + (strength - config.strength_floor) * config.aggression
    ceiling = int(raw) // rules.bid_increment * rules.bid_increment
    return max(rules.min_bid, min(rules.max_bid, ceiling))


def choose_bid(
    hand: Iterable[Card],
    current_high_bid: int | None,
    config: AIConfig = DEFAULT_AI_CONFIG,
    rules: RuleConfig = DEFAULT_RULES,
) -> int | None:
    """
    Amount to bid over ``current_high_bid`` (0 or None when unopened), or None
    to pass. Unopened auctions are always opened at the table minimum.
    """
    if not current_high_bid:
        return rules.min_bid
    hand = list(hand)
    suit = choose_power_suit(hand, config)
    strength = hand_strength(hand, suit, config)
    if strength < config.strength_floor:
        return None

    ceiling = bid_ceiling(strength, config, rules)
    small = _round_up(max(config.small_increment, rules.bid_increment), rules.bid_increment)
    large = _round_up(max(config.large_increment, small), rules.bid_increment)
    step = large if strength >= config.strong_hand else small

    amount = current_high_bid + step
    if amount > ceiling:
        amount = current_high_bid + rules.bid_increment
    if amount > ceiling or amount > rules.max_bid:
        return None
    log.debug("strength %.1f in %s: bid %d (ceiling %d)", strength, suit.name, amount, ceiling)
    return amount


class KittyChoice(NamedTuple):
    keep: tuple[Card, ...]
    discard: tuple[Card, ...]
    power_suit: Suit


def keep_priority(card: Card, power_suit: Suit, suit_counts: dict[Suit | None, int]) -> tuple[int, int, int]:
    """Power-suit and wild cards first, then rank order, then longer suits."""
    return (
        1 if card.is_power(power_suit) else 0,
        card.strength(),
        suit_counts.get(card.suit, 0),
    )


def choose_kitty(
    hand: Sequence[Card],
    kitty: Sequence[Card],
    power_suit: Suit | None = None,
    config: AIConfig = DEFAULT_AI_CONFIG,
    hand_size: int = DEFAULT_RULES.hand_size,
) -> KittyChoice:
    """
    Keep/return split for the declarer. Names the power suit over the whole
    pool unless one is given, then keeps the ``hand_size`` best cards.
    """
    pool = list(hand) + list(kitty)
    if power_suit is None:
        power_suit = choose_power_suit(pool, config)
    suit_counts: dict[Suit | None, int] = {}
    for c in pool:
        suit_counts[c.suit] = suit_counts.get(c.suit, 0) + 1
    ranked = sorted(pool, key=lambda c: keep_priority(c, power_suit, suit_counts), reverse=True)
    keep = tuple(ranked[:hand_size])
    discard = tuple(ranked[hand_size:])
    return KittyChoice(keep=keep, discard=discard, power_suit=power_suit)


def _cheapest(card: Card, power_suit: Suit) -> tuple[int, int, int]:
    return (1 if card.is_power(power_suit) else 0, card.strength(), card.points)


def choose_card(
    hand: Sequence[Card],
    trick: Trick,
    power_suit: Suit,
    is_teammate_winning: bool = False,
) -> Card:
    """
    Card to play. Leading: the highest power card, else the highest card.
    Following: the cheapest card that takes the trick; else feed points to a
    winning teammate; else the lowest non-point card, leaking the lowest
    point card only when forced.
    """
    legal = legal_plays(hand, trick, power_suit)
    if not legal:
        raise ValueError("No legal plays available")

    if not trick:
        power = [c for c in legal if c.is_power(power_suit)]
        return max(power or legal, key=lambda c: (c.strength(), c.points, -int(c.suit or 0)))

    _, best = winning_play(trick, power_suit)
    led = led_suit(trick, power_suit)
    # a winning card is played before the teammate check
    winners = [c for c in legal if beats(c, best, led, power_suit)]
    if winners:
        return min(winners, key=lambda c: _cheapest(c, power_suit))

    if is_teammate_winning:
        point_cards = [c for c in legal if c.points > 0]
        if point_cards:
            return max(point_cards, key=lambda c: (c.points, -c.strength()))
        return min(legal, key=lambda c: _cheapest(c, power_suit))

    blanks = [c for c in legal if c.points == 0]
    if blanks:
        return min(blanks, key=lambda c: _cheapest(c, power_suit))
    return min(legal, key=lambda c: (c.points, c.strength()))


__all__ = [
    "hand_strength",
    "choose_power_suit",
    "bid_ceiling",
    "choose_bid",
    "KittyChoice",
    "choose_kitty",
    "choose_card",
]
