"""Random baseline bot."""

from __future__ import annotations

import random
from typing import Optional

from scoundrel.game import Game

from .base import BotStrategy, RoomDecision


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def choose_room(self, game: Game) -> RoomDecision:
        if game.can_skip and self._rng.random() < 0.5:
            return "skip"
        return "face"

    def choose_slot(self, game: Game) -> int:
        occupied = game.room_slots.occupied_indices()
        if not occupied:
            raise RuntimeError("No cards available for bot.")
        return self._rng.choice(occupied)

    def use_weapon(self, game: Game) -> bool:
        return self._rng.random() < 0.5
