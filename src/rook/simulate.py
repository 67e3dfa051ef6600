"""
Batch simulation of computer-vs-computer matches and summary statistics.

Used by ``rook simulate`` to sanity-check heuristic weights: win rates per
team, how often declarers make their bid, typical bids and match lengths.
"""
from __future__ import annotations

import random
from typing import Any, Dict, Sequence

import numpy as np

from .agents import HeuristicPlayer, Player, RandomPlayer
from .config import DEFAULT_AI_CONFIG, DEFAULT_RULES, AIConfig, RuleConfig
from .deal import NUM_SEATS
from .game import MatchResult, run_match

SEAT_KINDS = ("heuristic", "random")


def make_players(
    kinds: Sequence[str],
    config: AIConfig = DEFAULT_AI_CONFIG,
    seed: int = 0,
    rules: RuleConfig = DEFAULT_RULES,
) -> list[Player]:
    """One player per seat from names in SEAT_KINDS."""
    if len(kinds) != NUM_SEATS:
        raise ValueError(f"Need {NUM_SEATS} seat kinds, got {len(kinds)}")
    players: list[Player] = []
    for i, kind in enumerate(kinds):
        if kind == "heuristic":
            players.append(HeuristicPlayer(config=config, rules=rules))
        elif kind == "random":
            players.append(RandomPlayer(seed=seed * NUM_SEATS + i, rules=rules))
        else:
            raise ValueError(f"Unknown seat kind {kind!r}; expected one of {SEAT_KINDS}")
    return players


def run_matches(
    num_matches: int,
    players: Sequence[Player],
    seed: int = 0,
    max_rounds: int = 100,
    rules: RuleConfig = DEFAULT_RULES,
) -> list[MatchResult]:
    rng = random.Random(seed)
    results: list[MatchResult] = []
    for m in range(num_matches):
        results.append(run_match(players, rng=rng, dealer=m % NUM_SEATS, max_rounds=max_rounds, rules=rules))
    return results


def summarize_matches(results: Sequence[MatchResult]) -> Dict[str, Any]:
    """Aggregate statistics over finished matches."""
    if not results:
        return {"matches": 0}
    winners = np.array([-1 if r.winner is None else int(r.winner) for r in results])
    lengths = np.array([len(r.rounds) for r in results], dtype=float)
    margins = np.array([r.final_score[0] - r.final_score[1] for r in results], dtype=float)
    bids = np.array([rnd.bid_amount for r in results for rnd in r.rounds], dtype=float)
    made = np.array([rnd.bid_made for r in results for rnd in r.rounds], dtype=bool)
    return {
        "matches": len(results),
        "team_a_wins": int(np.sum(winners == 0)),
        "team_b_wins": int(np.sum(winners == 1)),
        "unfinished": int(np.sum(winners < 0)),
        "rounds_mean": float(lengths.mean()),
        "rounds_max": int(lengths.max()),
        "margin_mean": float(margins.mean()),
        "margin_std": float(margins.std()),
        "bid_mean": float(bids.mean()) if bids.size else 0.0,
        "bid_p90": float(np.percentile(bids, 90)) if bids.size else 0.0,
        "bid_made_rate": float(made.mean()) if made.size else 0.0,
    }


__all__ = ["SEAT_KINDS", "make_players", "run_matches", "summarize_matches"]
