"""End-of-game scoring helpers for Scoundrel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .cards import Card, monsters


@dataclass(frozen=True)
class GameResult:
    survived: bool
    score: int
    health: int
    remaining_threat: int
    cards_left: int


def remaining_threat(cards: Iterable[Card]) -> int:
    """Sum of the ranks of every monster still in play."""
    return sum(card.rank for card in monsters(cards))


def final_score(*, survived: bool, health: int, remaining: Iterable[Card]) -> int:
    if survived:
        return health
    return -remaining_threat(remaining)


def remaining_summary_line(remaining: Iterable[Card]) -> str:
    left = monsters(remaining)
    if not left:
        return "No monsters remain. You defeated them all!"
    return f"Remaining monsters total threat: -{remaining_threat(left)}"
