"""Baseline greedy bot."""

from __future__ import annotations

from typing import List, Optional

from scoundrel.cards import Card
from scoundrel.combat import unarmed_damage, weapon_damage
from scoundrel.game import Game

from .base import BotStrategy, RoomDecision

# A fresh weapon is not spent on monsters this weak.
SMALL_MONSTER_RANK = 4


def effective_damage(game: Game, monster: Card) -> int:
    """Damage the monster would deal if fought in the best allowed way."""
    if game.weapon is not None and game.can_use_weapon_on(monster):
        return weapon_damage(game.weapon, monster)
    return unarmed_damage(monster)


def room_threat(game: Game) -> int:
    return sum(effective_damage(game, card) for card in game.room_slots.cards() if card.is_monster())


def _weapon_value(weapon: Optional[Card], last_slain: Optional[int]) -> int:
    if weapon is None:
        return 0
    if last_slain is None:
        return weapon.rank
    # A degraded weapon is only worth what it can still block.
    return min(weapon.rank, max(last_slain - 1, 0))


class GreedyBot(BotStrategy):
    name = "Greedy"

    def choose_room(self, game: Game) -> RoomDecision:
        if game.can_skip and room_threat(game) >= game.health:
            return "skip"
        return "face"

    def choose_slot(self, game: Game) -> int:
        slots: List[tuple[int, Card]] = [
            (index, card) for index, card in enumerate(game.room_slots) if card is not None
        ]
        if not slots:
            raise RuntimeError("No cards available for bot.")

        current = _weapon_value(game.weapon, game.last_monster_slain_with_weapon)
        weapons = [(i, c) for i, c in slots if c.is_weapon() and c.rank > current]
        if weapons:
            return max(weapons, key=lambda item: item[1].rank)[0]

        hurt = game.health < game.max_health
        if hurt and not game.potion_used_this_room:
            potions = [(i, c) for i, c in slots if c.is_potion()]
            if potions:
                return max(potions, key=lambda item: item[1].rank)[0]

        fights = [(i, c) for i, c in slots if c.is_monster()]
        if fights:
            return min(fights, key=lambda item: (effective_damage(game, item[1]), item[1].rank))[0]

        # Only leftovers: a spare potion or a weaker weapon.
        return slots[0][0]

    def use_weapon(self, game: Game) -> bool:
        monster = game.current_monster
        if monster is None:
            return False
        fresh = game.last_monster_slain_with_weapon is None
        return not (fresh and monster.rank <= SMALL_MONSTER_RANK)
