"""Card-related data structures and helpers for Scoundrel."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterable, List


class Suit(Enum):
    SPADES = auto()
    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()

    def __str__(self) -> str:
        return self.name.lower()


class Role(Enum):
    MONSTER = auto()
    WEAPON = auto()
    POTION = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Dark suits are monsters, diamonds are weapons and hearts are potions.
SUIT_ROLES: dict[Suit, Role] = {
    Suit.SPADES: Role.MONSTER,
    Suit.CLUBS: Role.MONSTER,
    Suit.DIAMONDS: Role.WEAPON,
    Suit.HEARTS: Role.POTION,
}

MONSTER_SUITS: tuple[Suit, ...] = (Suit.SPADES, Suit.CLUBS)
UTILITY_SUITS: tuple[Suit, ...] = (Suit.DIAMONDS, Suit.HEARTS)

MIN_RANK = 2
MAX_MONSTER_RANK = 14
# Red face cards and aces are removed from the dungeon deck.
MAX_UTILITY_RANK = 10

JACK = 11
QUEEN = 12
KING = 13
ACE = 14

RANK_NAMES: Dict[int, str] = {JACK: "Jack", QUEEN: "Queen", KING: "King", ACE: "Ace"}
RANK_LABELS: Dict[int, str] = {JACK: "J", QUEEN: "Q", KING: "K", ACE: "A"}

SUIT_SYMBOLS: Dict[Suit, str] = {
    Suit.SPADES: "♠",
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
}


def max_rank_for_suit(suit: Suit) -> int:
    return MAX_MONSTER_RANK if suit in MONSTER_SUITS else MAX_UTILITY_RANK


@dataclass(frozen=True)
class Card:
    """Immutable representation of a dungeon card."""

    suit: Suit
    rank: int

    @property
    def role(self) -> Role:
        return SUIT_ROLES[self.suit]

    def is_monster(self) -> bool:
        return self.role is Role.MONSTER

    def is_weapon(self) -> bool:
        return self.role is Role.WEAPON

    def is_potion(self) -> bool:
        return self.role is Role.POTION

    def is_legal(self) -> bool:
        """Return True if the card belongs to the 44-card dungeon deck."""
        return MIN_RANK <= self.rank <= max_rank_for_suit(self.suit)

    def __str__(self) -> str:
        return card_text(self)


def monsters(cards: Iterable[Card]) -> List[Card]:
    return [card for card in cards if card.is_monster()]


def rank_label(rank: int) -> str:
    """Short rank label: 2-10 as digits, face cards and aces as letters."""
    return RANK_LABELS.get(rank, str(rank))


def rank_name(rank: int) -> str:
    return RANK_NAMES.get(rank, str(rank))


def card_text(card: Card) -> str:
    """Compact label such as ``Q♠`` or ``7♦``."""
    return f"{rank_label(card.rank)}{SUIT_SYMBOLS[card.suit]}"


def card_label(card: Card) -> str:
    return f"{rank_name(card.rank)} of {card.suit.name.title()}"


def serialize_card(card: Card) -> dict[str, object]:
    return {"suit": card.suit.name.lower(), "rank": card.rank, "role": card.role.name.lower()}
