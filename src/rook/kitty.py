"""
Kitty exchange: the declarer picks up the 5-card kitty, keeps 13 of the 18
cards, returns 5 face down and names the power suit.
"""
from __future__ import annotations

import logging
from collections import Counter
from typing import NamedTuple, Sequence

from .config import DEFAULT_AI_CONFIG, DEFAULT_RULES, AIConfig, RuleConfig
from .deck import Card, Suit
from .errors import InvalidKittySelection, InvariantViolation
from .heuristic import choose_kitty

log = logging.getLogger(__name__)


class KittyExchange(NamedTuple):
    """Declarer's new hand, the returned kitty and the named power suit."""
    hand: tuple[Card, ...]
    kitty: tuple[Card, ...]
    power_suit: Suit


def _check_partition(pool: Sequence[Card], keep: Sequence[Card], discard: Sequence[Card]) -> None:
    if Counter(pool) != Counter(keep) + Counter(discard):
        raise InvariantViolation("Kitty exchange does not partition the 18-card pool")


def _select(
    pool: list[Card],
    chosen: Sequence[Card],
    size: int,
    label: str,
) -> tuple[tuple[Card, ...], tuple[Card, ...]]:
    """Split ``pool`` into (chosen, rest); ``chosen`` must be ``size`` cards from it."""
    chosen = list(chosen)
    if len(chosen) != size:
        raise InvalidKittySelection(f"Must {label} exactly {size} cards, got {len(chosen)}")
    rest = list(pool)
    for c in chosen:
        if c not in rest:
            raise InvalidKittySelection(f"Card {c} is not in the hand or kitty (or chosen twice)")
        rest.remove(c)
    return tuple(chosen), tuple(rest)


def exchange(
    hand: Sequence[Card],
    kitty: Sequence[Card],
    power_suit: Suit | None = None,
    keep: Sequence[Card] | None = None,
    discard: Sequence[Card] | None = None,
    config: AIConfig = DEFAULT_AI_CONFIG,
    rules: RuleConfig = DEFAULT_RULES,
) -> KittyExchange:
    """
    Resolve the exchange.

    Human path: pass ``discard`` (the 5 cards returned) or ``keep`` (the 13
    kept) together with ``power_suit``. Heuristic path: pass neither; the
    power suit is chosen if not given and the best 13 cards are kept.
    """
    if len(hand) != rules.hand_size or len(kitty) != rules.kitty_size:
        raise InvariantViolation(
            f"Exchange needs {rules.hand_size} + {rules.kitty_size} cards, got {len(hand)} + {len(kitty)}"
        )
    pool = list(hand) + list(kitty)

    if keep is not None or discard is not None:
        if keep is not None and discard is not None:
            raise InvalidKittySelection("Give either the cards to keep or to discard, not both")
        if power_suit is None:
            raise InvalidKittySelection("A power suit must be named with an explicit selection")
        if discard is not None:
            returned, kept = _select(pool, discard, rules.kitty_size, "discard")
        else:
            kept, returned = _select(pool, keep, rules.hand_size, "keep")
        suit = Suit(power_suit)
    else:
        choice = choose_kitty(hand, kitty, power_suit, config=config, hand_size=rules.hand_size)
        kept, returned, suit = choice.keep, choice.discard, choice.power_suit

    _check_partition(pool, kept, returned)
    log.debug("declarer returns %s, power suit %s", list(returned), suit.name)
    return KittyExchange(hand=tuple(kept), kitty=tuple(returned), power_suit=suit)


__all__ = ["KittyExchange", "exchange"]
