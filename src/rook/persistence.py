"""
Round and match serialization for export.

Produces JSON-compatible dicts the presentation layer can store or replay
(e.g. to update a player's win/loss/points record from ``final_score``,
``bid_amount`` and ``bid_made``).
"""
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Iterable

from .config import AIConfig, ai_config_from_dict, ai_config_to_dict
from .deck import Card, Suit, WILD, make_suit_card
from .game import MatchResult, RoundResult

SCHEMA_VERSION = 1


def card_to_str(card: Card) -> str:
    """'orange-14' style id; the wild is 'wild'."""
    if card.is_wild():
        return "wild"
    return f"{card.suit.name.lower()}-{card.rank}"


def card_from_str(s: str) -> Card:
    if s == "wild":
        return WILD
    suit_name, _, rank = s.partition("-")
    try:
        return make_suit_card(Suit[suit_name.upper()], int(rank))
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Not a card id: {s!r}") from exc


def _cards(cards: Iterable[Card]) -> list[str]:
    return [card_to_str(c) for c in cards]


def round_result_to_dict(rnd: RoundResult) -> Dict[str, Any]:
    state = rnd.final_state
    s = rnd.settlement
    return {
        "dealer": int(rnd.dealer),
        "declarer": int(rnd.declarer),
        "bid_amount": s.bid_amount,
        "bid_made": s.bid_made,
        "power_suit": rnd.exchange.power_suit.name.lower(),
        "bids": [[int(seat), amount] for seat, amount in rnd.bidding.history],
        "kitty_dealt": _cards(rnd.deal.kitty),
        "kitty_returned": _cards(rnd.exchange.kitty),
        "trick_winners": [int(w) for w in state.trick_winners],
        "captured": list(s.captured),
        "deltas": list(s.deltas),
        "final_score": list(s.final_score),
    }


def match_result_to_dict(
    match: MatchResult,
    *,
    metadata: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    """
    Serialize a MatchResult to a JSON-compatible dict.

    Args:
        match: The finished (or abandoned) match.
        metadata: Optional extra metadata (e.g. seed, AI config).

    Returns:
        Dict with schema_version, exported_at, winner, final_score and rounds.
    """
    result: Dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "exported_at": datetime.now(timezone.utc).isoformat(),
        "winner": None if match.winner is None else int(match.winner),
        "final_score": list(match.final_score),
        "rounds": [round_result_to_dict(r) for r in match.rounds],
    }
    if metadata:
        result["metadata"] = metadata
    return result


def match_result_to_json(
    match: MatchResult,
    *,
    metadata: Dict[str, Any] | None = None,
) -> str:
    return json.dumps(match_result_to_dict(match, metadata=metadata), indent=2)


def ai_config_to_json(cfg: AIConfig) -> str:
    return json.dumps(
        {"schema_version": SCHEMA_VERSION, "ai_config": ai_config_to_dict(cfg)},
        indent=2,
    )


def ai_config_from_json(s: str) -> AIConfig:
    """Accepts the wrapped form above or a bare dict of weights."""
    d = json.loads(s)
    if "schema_version" in d:
        d = d.get("ai_config", {})
    return ai_config_from_dict(d)


__all__ = [
    "SCHEMA_VERSION",
    "card_to_str",
    "card_from_str",
    "round_result_to_dict",
    "match_result_to_dict",
    "match_result_to_json",
    "ai_config_to_json",
    "ai_config_from_json",
]
