"""Rook rules engine and heuristic opponent (Kentucky Rook, 4 players)."""

__version__ = "0.1.0"

from .deck import Card, Suit, WILD, make_deck_57, make_suit_card, shuffle, cards_point_total, sort_hand
from .deal import Deal, Seat, Team, deal, shuffle_and_deal, team_of, partner_of, first_to_bid
from .errors import (
    RookError,
    InvalidBid,
    OutOfTurn,
    InvalidKittySelection,
    IllegalPlay,
    InvariantViolation,
)
from .config import AIConfig, RuleConfig, DEFAULT_AI_CONFIG, DEFAULT_RULES, load_ai_config
from .bidding import (
    BiddingState,
    BiddingResult,
    start_round,
    submit_bid,
    submit_pass,
    run_bidding,
)
from .kitty import KittyExchange, exchange
from .play import RoundState, legal_plays, resolve_trick, start_play, play_card
from .scoring import (
    Settlement,
    TeamScoreLedger,
    capture_trick_points,
    settle_round,
    check_match_end,
)
from .heuristic import hand_strength, choose_power_suit, choose_bid, choose_kitty, choose_card
from .agents import Player, HeuristicPlayer, RandomPlayer
from .game import RoundResult, MatchResult, play_one_round, run_match
