"""
Command-line interface for running and inspecting the Rook engine.

Usage examples (after installing the package):

    rook simulate --matches 50 --seed 1 --seats heuristic random heuristic random
    rook show-config > ai.json
    rook simulate --config ai.json --json-out runs/sim.json
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional

from .config import DEFAULT_AI_CONFIG, AIConfig, load_ai_config
from .persistence import ai_config_to_json, match_result_to_dict
from .simulate import SEAT_KINDS, make_players, run_matches, summarize_matches


def _load_config(path: Optional[str]) -> AIConfig:
    return load_ai_config(path) if path else DEFAULT_AI_CONFIG


def _add_simulate_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "simulate",
        help="Play computer-vs-computer matches and print statistics.",
    )
    parser.add_argument(
        "--matches",
        type=int,
        default=20,
        help="Number of matches to play.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed for shuffles and random seats.",
    )
    parser.add_argument(
        "--seats",
        nargs=4,
        choices=SEAT_KINDS,
        default=["heuristic"] * 4,
        help="Controller for each seat (South, West, North, East).",
    )
    parser.add_argument(
        "--max-rounds",
        type=int,
        default=100,
        help="Abandon a match after this many rounds.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON file with AIConfig weights (see show-config).",
    )
    parser.add_argument(
        "--json-out",
        type=str,
        default=None,
        help="Write every match (rounds, bids, scores) to this JSON file.",
    )
    parser.set_defaults(func=_cmd_simulate)


def _cmd_simulate(args: argparse.Namespace) -> None:
    config = _load_config(args.config)
    players = make_players(args.seats, config=config, seed=args.seed)
    results = run_matches(args.matches, players, seed=args.seed, max_rounds=args.max_rounds)
    summary = summarize_matches(results)

    print(
        f"{summary['matches']} matches: "
        f"team A {summary.get('team_a_wins', 0)} / team B {summary.get('team_b_wins', 0)} "
        f"(unfinished {summary.get('unfinished', 0)})"
    )
    if results:
        print(
            f"rounds mean={summary['rounds_mean']:.1f} max={summary['rounds_max']} | "
            f"margin mean={summary['margin_mean']:.1f} std={summary['margin_std']:.1f}"
        )
        print(
            f"bid mean={summary['bid_mean']:.1f} p90={summary['bid_p90']:.0f} "
            f"made={summary['bid_made_rate']:.1%}"
        )

    if args.json_out:
        out = Path(args.json_out)
        out.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "summary": summary,
            "seats": list(args.seats),
            "seed": args.seed,
            "matches": [match_result_to_dict(r) for r in results],
        }
        with out.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        print(f"Wrote {out.resolve()}")


def _add_show_config_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "show-config",
        help="Print the heuristic opponent's weights as JSON.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Load this JSON file instead of the defaults.",
    )
    parser.set_defaults(func=_cmd_show_config)


def _cmd_show_config(args: argparse.Namespace) -> None:
    print(ai_config_to_json(_load_config(args.config)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rook", description="Rook rules engine and heuristic opponent.")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for engine messages.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_simulate_parser(subparsers)
    _add_show_config_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
