"""Convenience service layer for terminal drivers and bots."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Optional

from . import messages as msg
from .cards import Card, card_label, card_text, serialize_card
from .game import Game, GamePhase
from .logging_utils import get_logger
from .room import ROOM_SIZE

logger = get_logger(__name__)


@dataclass(frozen=True)
class SlotView:
    index: int
    card: Optional[dict]
    label: Optional[str]
    text: Optional[str]


@dataclass(frozen=True)
class GameView:
    state: str
    room: list[SlotView]
    health: int
    max_health: int
    health_line: str
    weapon: Optional[dict]
    weapon_line: str
    weapon_limit: Optional[int]
    can_skip: bool
    interactions_left: int
    awaiting_weapon_choice: bool
    awaiting_continue: bool
    current_monster: Optional[dict]
    deck_size: int
    message: str
    last_command: str
    hint: str
    placeholder: str
    score: Optional[int]
    summary: Optional[str]


# Presentation helpers ------------------------------------------------------


def health_bar(hp: int, max_hp: int) -> str:
    """Fixed-width HP bar like ``█████░░░░░``, clamped to ``[0, max_hp]``."""
    max_hp = max(max_hp, 0)
    hp = min(max(hp, 0), max_hp)
    return "█" * hp + "░" * (max_hp - hp)


def health_line(hp: int, max_hp: int) -> str:
    return f"Health: {hp}/{max_hp} |{health_bar(hp, max_hp)}|"


def weapon_line(weapon: Optional[Card], last_slain: Optional[int]) -> str:
    if weapon is None:
        return "Weapon: None"
    limit = f" (must be < {last_slain})" if last_slain is not None else ""
    return f"Weapon: {card_text(weapon)}{limit}"


def command_placeholder(game: Game) -> str:
    parts: list[str] = []
    if game.state == GamePhase.MAIN_MENU:
        parts.append("start")
    elif game.state == GamePhase.ROOM_CHOICE:
        parts.append("f")
        if game.can_skip:
            parts.append("s")
    elif game.state == GamePhase.CARD_SELECTION:
        parts.append("1..4")
    elif game.state == GamePhase.CARD_INTERACTION:
        parts.append("y/n" if game.awaiting_weapon_choice else "(Enter)")
    # Always-available commands go last.
    parts.append("restart")
    parts.append("exit")
    return " | ".join(parts)


def _parse_slot(command: str) -> Optional[int]:
    """Zero-based slot for a typed card number, or None when it is not one.

    Accepts what ``int`` accepts (``"+2"``, ``" 3"``); ``"0"`` maps to the first slot.
    """
    try:
        number = int(command)
    except ValueError:
        return None
    if number < 0:
        return None
    return max(number - 1, 0)


class GameService:
    """Facade around Game that interprets typed commands and clicks."""

    def __init__(self, game: Optional[Game] = None, *, seed: Optional[int] = None) -> None:
        self.game = game if game is not None else Game(rng=Random(seed))
        self.last_command_feedback = ""
        self.should_quit = False

    # Commands ----------------------------------------------------------

    def submit(self, raw: str) -> GameView:
        """Apply one line of player input and return the updated view."""
        game = self._require_game()
        command = raw.strip()

        # An empty line only acknowledges a resolved interaction.
        if not command:
            if game.awaiting_continue:
                game.continue_after_interaction()
            return self.view()

        self.last_command_feedback = f"{msg.CMD_PREFIX}{command}"
        lowered = command.lower()
        logger.debug("Command %r in state %s", command, game.state.name)

        if lowered in ("exit", "quit"):
            self.should_quit = True
            return self.view()
        if lowered == "restart":
            game.reset_to_playing()
            return self.view()

        if game.state == GamePhase.MAIN_MENU:
            if lowered in ("start", "s"):
                game.start()
            else:
                game.message = msg.NEED_START
        elif game.state == GamePhase.ROOM_CHOICE:
            if lowered in ("f", "face"):
                game.face_room()
            elif lowered in ("s", "skip"):
                game.skip_room()
            elif game.can_skip:
                game.message = msg.NEED_FACE_OR_SKIP
            else:
                game.message = msg.NEED_FACE_ONLY
        elif game.state == GamePhase.CARD_SELECTION:
            slot = _parse_slot(command)
            if slot is None:
                game.message = msg.NEED_SELECT_CARD
            else:
                game.play_card_from_slot(slot)
        elif game.state == GamePhase.CARD_INTERACTION:
            if game.awaiting_weapon_choice:
                if lowered == "y":
                    game.answer_weapon_prompt(True)
                elif lowered == "n":
                    game.answer_weapon_prompt(False)
                else:
                    game.message = msg.NEED_Y_OR_N
            elif lowered == "ok":
                game.continue_after_interaction()
        else:
            game.message = msg.RESTART_HELP

        # The Game alone would only notice death from a weapon answer at continue.
        game.check_death()
        return self.view()

    def click_slot(self, index: int) -> GameView:
        """Mouse path: clicking a card only plays it during card selection."""
        game = self._require_game()
        if game.state == GamePhase.CARD_SELECTION:
            game.play_card_from_slot(index)
            game.check_death()
        elif game.state == GamePhase.MAIN_MENU:
            game.message = msg.NEED_START
        elif game.state == GamePhase.ROOM_CHOICE:
            game.message = msg.NEED_FACE_OR_SKIP
        elif game.state == GamePhase.CARD_INTERACTION:
            game.message = msg.NEED_Y_OR_N if game.awaiting_weapon_choice else msg.HINT_INTERACTION_ACK
        else:
            game.message = msg.RESTART_HELP
        return self.view()

    # Views -------------------------------------------------------------

    def view(self) -> GameView:
        game = self._require_game()
        finished = game.state == GamePhase.GAME_OVER
        return GameView(
            state=game.state.name.lower(),
            room=[self._slot_view(game, index) for index in range(ROOM_SIZE)],
            health=game.health,
            max_health=game.max_health,
            health_line=health_line(game.health, game.max_health),
            weapon=serialize_card(game.weapon) if game.weapon else None,
            weapon_line=weapon_line(game.weapon, game.last_monster_slain_with_weapon),
            weapon_limit=game.last_monster_slain_with_weapon,
            can_skip=game.can_skip,
            interactions_left=game.interactions_left_in_room,
            awaiting_weapon_choice=game.awaiting_weapon_choice,
            awaiting_continue=game.awaiting_continue,
            current_monster=serialize_card(game.current_monster) if game.current_monster else None,
            deck_size=len(game.deck),
            message=game.message,
            last_command=self.last_command_feedback,
            hint=game.hint,
            placeholder=command_placeholder(game),
            score=game.final_score() if finished else None,
            summary=game.remaining_summary_line() if finished else None,
        )

    def _slot_view(self, game: Game, index: int) -> SlotView:
        card = game.room_slots.get(index)
        if card is None:
            return SlotView(index=index, card=None, label=None, text=None)
        return SlotView(index=index, card=serialize_card(card), label=card_label(card), text=card_text(card))

    def _require_game(self) -> Game:
        if self.game is None:
            raise RuntimeError("No active game.")
        return self.game
