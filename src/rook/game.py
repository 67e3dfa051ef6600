"""
Round and match orchestration: deal, bid, kitty exchange, thirteen tricks, then settle.

The session controller owns the one authoritative state value and threads it
through the pure transitions of the engine modules. Seats are driven by
``Player`` objects (see ``rook.agents``); a human seat is any object with the
same three methods.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Sequence

from .agents import Player
from .bidding import BiddingResult, run_bidding
from .config import DEFAULT_RULES, RuleConfig
from .deal import NUM_SEATS, Deal, Seat, Team, first_to_bid, next_dealer, other_team, shuffle_and_deal, team_of
from .errors import IllegalPlay
from .kitty import KittyExchange
from .play import RoundState, current_seat, is_complete, legal_cards, play_card, start_play
from .scoring import Settlement, TeamScoreLedger, check_match_end, settle_round

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundResult:
    """Everything the presentation layer needs about a finished round."""

    dealer: Seat
    deal: Deal
    bidding: BiddingResult
    exchange: KittyExchange
    final_state: RoundState
    settlement: Settlement

    @property
    def declarer(self) -> Seat:
        return self.bidding.declarer

    @property
    def bid_amount(self) -> int:
        return self.settlement.bid_amount

    @property
    def bid_made(self) -> bool:
        return self.settlement.bid_made

    @property
    def final_score(self) -> tuple[int, int]:
        return self.settlement.final_score


@dataclass
class MatchResult:
    winner: Team | None
    ledger: TeamScoreLedger
    rounds: list[RoundResult] = field(default_factory=list)

    @property
    def final_score(self) -> tuple[int, int]:
        return self.ledger.scores


def _check_players(players: Sequence[Player]) -> None:
    if len(players) != NUM_SEATS:
        raise ValueError(f"Need {NUM_SEATS} players, got {len(players)}")


def play_tricks(
    state: RoundState,
    players: Sequence[Player],
    rules: RuleConfig = DEFAULT_RULES,
) -> RoundState:
    """Play out all remaining tricks of ``state``."""
    while not is_complete(state, rules):
        seat = current_seat(state)
        card = players[seat].play(state, seat)
        if card not in legal_cards(state, seat):
            raise IllegalPlay(f"Seat {int(seat)} proposed {card}; legal {legal_cards(state, seat)}")
        state = play_card(state, seat, card, rules)
    return state


def play_one_round(
    players: Sequence[Player],
    dealer: int = 0,
    rng: random.Random | None = None,
    ledger: TeamScoreLedger | None = None,
    rules: RuleConfig = DEFAULT_RULES,
) -> RoundResult:
    """Deal, bid, exchange, play and settle one round."""
    _check_players(players)
    if rng is None:
        rng = random.Random()
    if ledger is None:
        ledger = TeamScoreLedger()
    dealer = Seat(dealer)
    dealt = shuffle_and_deal(rng, hand_size=rules.hand_size, kitty_size=rules.kitty_size)

    bidding = run_bidding(
        first_to_bid(dealer),
        lambda state, seat: players[seat].bid(state, seat, dealt.hands[seat]),
        rules,
    )
    declarer = bidding.declarer
    swap = players[declarer].exchange(dealt.hands[declarer], dealt.kitty)
    hands = [swap.hand if i == declarer else h for i, h in enumerate(dealt.hands)]

    state = start_play(hands, swap.kitty, declarer, swap.power_suit, bidding.bid)
    state = play_tricks(state, players, rules)

    team = team_of(declarer)
    settlement = settle_round(
        state.captured_points[team],
        bidding.bid,
        state.captured_points[other_team(team)],
        declarer_team=team,
        ledger=ledger,
        rules=rules,
    )
    log.info(
        "round: %s bid %d in %s, captured %s, score %s",
        declarer.name, bidding.bid, swap.power_suit.name,
        state.captured_points, settlement.final_score,
    )
    return RoundResult(
        dealer=dealer,
        deal=dealt,
        bidding=bidding,
        exchange=swap,
        final_state=state,
        settlement=settlement,
    )


def run_match(
    players: Sequence[Player],
    rng: random.Random | None = None,
    dealer: int = 0,
    max_rounds: int = 100,
    rules: RuleConfig = DEFAULT_RULES,
) -> MatchResult:
    """
    Play rounds until a team reaches the target score. Dealer rotates
    clockwise. Stops after ``max_rounds`` with no winner if the target is
    never reached.
    """
    _check_players(players)
    if rng is None:
        rng = random.Random()
    result = MatchResult(winner=None, ledger=TeamScoreLedger())
    for _ in range(max_rounds):
        rnd = play_one_round(players, dealer=dealer, rng=rng, ledger=result.ledger, rules=rules)
        result.rounds.append(rnd)
        result.ledger = result.ledger.apply(rnd.settlement)
        winner = check_match_end(result.ledger, rnd.settlement.deltas, rules.target_score)
        if winner is not None:
            result.winner = winner
            log.info("match won by %s after %d rounds: %s", winner.name, len(result.rounds), result.ledger.scores)
            break
        dealer = next_dealer(dealer)
    return result


__all__ = ["RoundResult", "MatchResult", "play_tricks", "play_one_round", "run_match"]
