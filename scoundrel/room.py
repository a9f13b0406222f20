"""Fixed four-slot room handling."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .cards import Card
from .deck import Deck

ROOM_SIZE = 4


class RoomSlots:
    """Four positional card slots; emptied slots keep their position."""

    def __init__(self) -> None:
        self._slots: List[Optional[Card]] = [None] * ROOM_SIZE

    def fill_from(self, deck: Deck) -> int:
        """Fill empty slots left to right from the deck front. Return the number drawn."""
        drawn = 0
        for index, card in enumerate(self._slots):
            if card is not None:
                continue
            next_card = deck.draw()
            if next_card is None:
                break
            self._slots[index] = next_card
            drawn += 1
        return drawn

    def take(self, index: int) -> Optional[Card]:
        if not 0 <= index < ROOM_SIZE:
            return None
        card = self._slots[index]
        self._slots[index] = None
        return card

    def take_all(self) -> List[Card]:
        """Empty every slot and return the cards in slot order."""
        taken = [card for card in self._slots if card is not None]
        self._slots = [None] * ROOM_SIZE
        return taken

    def get(self, index: int) -> Optional[Card]:
        if not 0 <= index < ROOM_SIZE:
            return None
        return self._slots[index]

    def is_empty(self) -> bool:
        return all(card is None for card in self._slots)

    def cards(self) -> List[Card]:
        return [card for card in self._slots if card is not None]

    def occupied_indices(self) -> List[int]:
        return [index for index, card in enumerate(self._slots) if card is not None]

    def as_tuple(self) -> tuple[Optional[Card], ...]:
        return tuple(self._slots)

    def __iter__(self) -> Iterator[Optional[Card]]:
        return iter(self._slots)

    def __len__(self) -> int:
        return ROOM_SIZE
