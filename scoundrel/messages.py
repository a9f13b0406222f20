"""Shared user-facing strings."""

from __future__ import annotations

from .cards import Card, card_text

# Hint lines, one per control state.
HINT_MAIN = "Main menu: type 'start' then 'enter'."
HINT_ROOM_CHOICE_CAN_SKIP = "Room: 'f' to face • 's' to skip."
HINT_ROOM_CHOICE_NO_SKIP = "Room: 'f' to face (skip already used)."
HINT_CARD_SELECTION = "Select: click a card, or type 1-4 then 'enter'."
HINT_PROMPT_WEAPON = "Prompt: type 'y' or 'n' then 'enter'."
HINT_INTERACTION_ACK = "Battle won. Press 'enter' to continue."
HINT_GAME_OVER = "Game over: type 'restart' to play again, or 'exit' to quit."

# Status messages.
ENTERED_DUNGEON = "Entered the dungeon."
FACE_ROOM = "Facing the room. Choose a card."
SKIPPED_ROOM = "Skipped the room."
ROOM_RESOLVED = "Room resolved. Face or skip the next room."
YOU_SURVIVED = "You survived the dungeon!"
YOU_DIED = "You succumbed to the dungeon's monsters."
POTION_WASTED = "Potion wasted (only 1 per room)."

# Validation and guidance.
NEED_START = "Type 'start' then 'enter'."
NEED_FACE_OR_SKIP = "Type 'f' to face, or 's' to skip."
NEED_FACE_ONLY = "Type 'f' to face (skip already used)."
NEED_SELECT_CARD = "Type 1-4 to select a card, or click a card."
INVALID_CARD_SELECTION = "Invalid card selection."
MUST_FACE_FIRST = "You must face the room ('f') before selecting."
NEED_Y_OR_N = "Type 'y' or 'n' then 'enter'."
NEED_CONTINUE = "Press 'enter' to continue."
RESTART_HELP = "Type 'restart' to play again, 'exit' to quit."

CMD_PREFIX = "> "


def weapon_prompt(monster: Card, weapon: Card) -> str:
    return f"Monster {card_text(monster)} - use weapon {card_text(weapon)}? (y/n)"


def fought_monster(damage: int) -> str:
    return f"Fought monster! Took {damage} damage."


def fought_with_weapon(damage: int) -> str:
    return f"Fought with weapon! Took {damage} damage."


def equipped(weapon: Card) -> str:
    return f"Equipped {card_text(weapon)}!"


def healed(amount: int) -> str:
    return f"Healed for {amount} HP."
