"""
Score calculation: captured point cards, bid settlement, match end.
200 points per round: 180 in the cards plus 20 for the last trick.
The last-trick winner also takes the kitty's points.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from .config import DEFAULT_RULES, RuleConfig
from .deal import Seat, Team, other_team
from .deck import Card, cards_point_total
from .errors import InvariantViolation

log = logging.getLogger(__name__)


def _trick_cards(trick: Iterable[Card | tuple[int, Card]]) -> list[Card]:
    return [item[1] if isinstance(item, tuple) else item for item in trick]


def capture_trick_points(
    trick: Iterable[Card | tuple[int, Card]],
    winning_seat: int | None = None,
    is_last_trick: bool = False,
    kitty: Iterable[Card] = (),
    rules: RuleConfig = DEFAULT_RULES,
) -> int:
    """
    Points credited to the winning team for one trick. ``trick`` holds cards or
    (seat, card) pairs. The 13th trick adds the kitty's points and the bonus.
    ``winning_seat`` is informational (used for logging).
    """
    points = cards_point_total(_trick_cards(trick))
    if is_last_trick:
        points += cards_point_total(kitty) + rules.last_trick_bonus
    if winning_seat is not None:
        log.debug("seat %s captures %d points", Seat(winning_seat).name, points)
    return points


def verify_round_total(points_by_team: Sequence[int], rules: RuleConfig = DEFAULT_RULES) -> None:
    total = sum(points_by_team)
    if total != rules.round_points:
        raise InvariantViolation(
            f"Round points total {total}, expected {rules.round_points}: {list(points_by_team)}"
        )


def bid_made(declarer_team_points: int, bid_amount: int) -> bool:
    return declarer_team_points >= bid_amount


def declarer_delta(declarer_team_points: int, bid_amount: int) -> int:
    """+points if the bid is made, -bid otherwise."""
    if bid_made(declarer_team_points, bid_amount):
        return declarer_team_points
    return -bid_amount


@dataclass(frozen=True)
class TeamScoreLedger:
    """Cumulative match score per team. Only settlement changes it."""

    scores: tuple[int, int] = (0, 0)

    def __getitem__(self, team: int) -> int:
        return self.scores[team]

    def apply(self, settlement: "Settlement") -> "TeamScoreLedger":
        return TeamScoreLedger(
            scores=(
                self.scores[0] + settlement.deltas[0],
                self.scores[1] + settlement.deltas[1],
            )
        )


@dataclass(frozen=True)
class Settlement:
    """
    Outcome of one round.

    deltas: score change per team (indexed by Team)
    final_score: ledger scores after applying the deltas
    """

    declarer_team: Team
    bid_amount: int
    bid_made: bool
    captured: tuple[int, int]
    deltas: tuple[int, int]
    final_score: tuple[int, int]


def settle_round(
    declarer_team_points: int,
    bid_amount: int,
    other_team_points: int | None = None,
    declarer_team: Team = Team.TEAM_A,
    ledger: TeamScoreLedger | None = None,
    rules: RuleConfig = DEFAULT_RULES,
) -> Settlement:
    """
    Settle one round. The non-declaring team always scores what it captured,
    which is the rest of the round's points when ``other_team_points`` is omitted.
    ``final_score`` is computed against ``ledger`` (a fresh ledger if omitted).
    """
    if other_team_points is None:
        other_team_points = rules.round_points - declarer_team_points
    if ledger is None:
        ledger = TeamScoreLedger()
    declarer_team = Team(declarer_team)
    defenders = other_team(declarer_team)
    made = bid_made(declarer_team_points, bid_amount)

    deltas = [0, 0]
    deltas[declarer_team] = declarer_delta(declarer_team_points, bid_amount)
    deltas[defenders] = other_team_points
    captured = [0, 0]
    captured[declarer_team] = declarer_team_points
    captured[defenders] = other_team_points

    final = (ledger.scores[0] + deltas[0], ledger.scores[1] + deltas[1])
    log.debug(
        "%s bid %d, captured %d: %s (deltas %s)",
        declarer_team.name, bid_amount, declarer_team_points,
        "made" if made else "set", deltas,
    )
    return Settlement(
        declarer_team=declarer_team,
        bid_amount=bid_amount,
        bid_made=made,
        captured=(captured[0], captured[1]),
        deltas=(deltas[0], deltas[1]),
        final_score=final,
    )


def check_match_end(
    scores: Sequence[int] | TeamScoreLedger,
    last_deltas: Sequence[int] = (0, 0),
    target: int = DEFAULT_RULES.target_score,
) -> Team | None:
    """
    Winner once a team reaches ``target``. If both have, the higher score
    wins; on equal scores the higher delta of the round just played wins.
    Equal on both counts: no winner yet.
    """
    if isinstance(scores, TeamScoreLedger):
        scores = scores.scores
    a, b = scores[0], scores[1]
    if a < target and b < target:
        return None
    if a != b:
        return Team.TEAM_A if a > b else Team.TEAM_B
    if last_deltas[0] != last_deltas[1]:
        return Team.TEAM_A if last_deltas[0] > last_deltas[1] else Team.TEAM_B
    return None


__all__ = [
    "capture_trick_points",
    "verify_round_total",
    "bid_made",
    "declarer_delta",
    "TeamScoreLedger",
    "Settlement",
    "settle_round",
    "check_match_end",
]
