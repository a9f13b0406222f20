"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import Literal

from scoundrel.game import Game

RoomDecision = Literal["face", "skip"]


class BotStrategy:
    """Base class for bot policies.

    Bots only read the game; the arena applies their decisions through the
    public Game operations.
    """

    name: str = "BaseBot"

    def on_game_start(self, game: Game) -> None:
        """Optional hook invoked before the first room is dealt."""
        return None

    def choose_room(self, game: Game) -> RoomDecision:
        """Return 'face' or 'skip' for the current room."""
        return "face"

    def choose_slot(self, game: Game) -> int:
        """Return the index of the room slot to play next."""
        occupied = game.room_slots.occupied_indices()
        if not occupied:
            raise RuntimeError("No cards available for bot.")
        return occupied[0]

    def use_weapon(self, game: Game) -> bool:
        """Answer the weapon prompt for ``game.current_monster``."""
        return True
