"""
Table rules and heuristic-opponent weights.

Both are plain dataclasses with defaults. ``AIConfig`` can be saved to and
loaded from a JSON file so tuned weights can be shared between runs.
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True)
class RuleConfig:
    """Table constants for a Kentucky Rook match."""

    min_bid: int = 70
    max_bid: int = 200
    bid_increment: int = 5
    hand_size: int = 13
    kitty_size: int = 5
    last_trick_bonus: int = 20
    target_score: int = 500
    round_points: int = 200


DEFAULT_RULES = RuleConfig()


@dataclass(frozen=True)
class AIConfig:
    """
    Weights for hand evaluation and bid sizing.

    - high_card: per card of rank 1, 14 or 13
    - wild_card: holding the wild
    - suit_length: per off-suit card beyond three in a suit
    - void: per empty off suit (wild excluded)
    - power_suit_length: per power-suit card
    - control_card: extra for the power suit's 1 and 14
    - aggression: ceiling slope over the strength floor
    """

    high_card: float = 8.0
    wild_card: float = 15.0
    suit_length: float = 2.0
    void: float = 8.0
    power_suit_length: float = 6.0
    control_card: float = 5.0
    aggression: float = 1.5
    strength_floor: float = 50.0
    strong_hand: float = 90.0
    small_increment: int = 5
    large_increment: int = 10


DEFAULT_AI_CONFIG = AIConfig()


def ai_config_to_dict(cfg: AIConfig) -> Dict[str, Any]:
    return asdict(cfg)


def ai_config_from_dict(d: Dict[str, Any]) -> AIConfig:
    """Build an AIConfig from a dict; missing keys keep their defaults."""
    known = {f.name: f for f in fields(AIConfig)}
    unknown = sorted(set(d) - set(known))
    if unknown:
        raise ValueError(f"Unknown AIConfig keys: {unknown}")
    kwargs: Dict[str, Any] = {}
    for name, value in d.items():
        default = getattr(DEFAULT_AI_CONFIG, name)
        kwargs[name] = int(value) if isinstance(default, int) else float(value)
    return AIConfig(**kwargs)


def load_ai_config(path: str | Path) -> AIConfig:
    """Read weights from a bare dict or the {"schema_version", "ai_config"} export."""
    with open(path, "r", encoding="utf-8") as f:
        d = json.load(f)
    if "schema_version" in d:
        d = d.get("ai_config", {})
    return ai_config_from_dict(d)


def save_ai_config(cfg: AIConfig, path: str | Path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(ai_config_to_dict(cfg), f, indent=2)


__all__ = [
    "RuleConfig",
    "AIConfig",
    "DEFAULT_RULES",
    "DEFAULT_AI_CONFIG",
    "ai_config_to_dict",
    "ai_config_from_dict",
    "load_ai_config",
    "save_ai_config",
]
