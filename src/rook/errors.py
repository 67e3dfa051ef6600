"""
Engine errors. Each carries a stable ``kind`` code for callers that
re-prompt a human or flag a heuristic bug.
"""
from __future__ import annotations


class RookError(Exception):
    """Base class for all engine errors."""

    kind: str = "ROOK_ERROR"


class InvalidBid(RookError, ValueError):
    """Bid out of range, not a multiple of the increment, or not above the high bid."""

    kind = "INVALID_BID"


class OutOfTurn(RookError, ValueError):
    """A seat tried to act when it is not its turn (or the phase is over)."""

    kind = "OUT_OF_TURN"


class InvalidKittySelection(RookError, ValueError):
    """Kitty exchange selection is not exactly 5 cards from the 18-card pool."""

    kind = "INVALID_KITTY_SELECTION"


class IllegalPlay(RookError, ValueError):
    """Card not held, or a follow-suit violation."""

    kind = "ILLEGAL_PLAY"


class InvariantViolation(RookError, RuntimeError):
    """Deck or point reconciliation failed. Fatal for the round."""

    kind = "INVARIANT_VIOLATION"


__all__ = [
    "RookError",
    "InvalidBid",
    "OutOfTurn",
    "InvalidKittySelection",
    "IllegalPlay",
    "InvariantViolation",
]
