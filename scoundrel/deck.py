"""Deck creation utilities for Scoundrel."""

from __future__ import annotations

from collections import deque
from random import Random
from typing import Deque, Iterable, Iterator, List, Optional, Sequence

from .cards import MIN_RANK, Card, Suit, max_rank_for_suit

DECK_SIZE = 44


def build_deck() -> List[Card]:
    """Return the ordered 44-card dungeon deck."""
    return [
        Card(suit, rank)
        for suit in Suit
        for rank in range(MIN_RANK, max_rank_for_suit(suit) + 1)
    ]


def shuffled_deck(rng: Optional[Random] = None) -> List[Card]:
    """Return a freshly built deck shuffled once with ``rng``."""
    cards = build_deck()
    if rng is None:
        rng = Random()
    rng.shuffle(cards)
    return cards


def validate_deck(cards: Sequence[Card]) -> None:
    if len(cards) != DECK_SIZE:
        raise ValueError(f"Deck must contain exactly {DECK_SIZE} cards.")
    if len(set(cards)) != len(cards):
        raise ValueError("Deck must not contain duplicate cards.")
    illegal = [card for card in cards if not card.is_legal()]
    if illegal:
        raise ValueError(f"Deck contains cards outside the dungeon deck: {illegal}")


class Deck:
    """Draw pile: cards are drawn from the front and returned to the back."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: Deque[Card] = deque(cards)

    def draw(self) -> Optional[Card]:
        if not self._cards:
            return None
        return self._cards.popleft()

    def return_to_bottom(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)

    def is_empty(self) -> bool:
        return not self._cards

    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
