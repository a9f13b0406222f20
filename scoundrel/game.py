"""Game orchestration for Scoundrel."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import List, Optional, Sequence

from . import messages as msg
from .cards import Card, Role
from .combat import can_use_weapon, heal, unarmed_damage, weapon_damage
from .deck import Deck, shuffled_deck, validate_deck
from .logging_utils import get_logger
from .room import RoomSlots
from .rules_schema import RuleSet
from .scoring import GameResult, final_score, remaining_summary_line, remaining_threat

logger = get_logger(__name__)


class GamePhase(Enum):
    MAIN_MENU = auto()
    ROOM_CHOICE = auto()
    CARD_SELECTION = auto()
    # Both the weapon prompt and the acknowledgement step; see awaiting_weapon_choice.
    CARD_INTERACTION = auto()
    GAME_OVER = auto()


class ResolveOutcome(Enum):
    """Whether the driver must acknowledge before the next intent."""

    NONE = auto()
    AWAIT_CONTINUE = auto()


@dataclass
class Game:
    """A single dungeon run.

    Every operation validates its preconditions. Invalid requests leave the
    state untouched and only replace ``message`` with guidance.
    """

    rng: Optional[Random] = None
    initial_deck: Optional[Sequence[Card]] = None
    rules: RuleSet = field(default_factory=RuleSet)

    deck: Deck = field(init=False)
    room_slots: RoomSlots = field(init=False)
    health: int = field(init=False)
    max_health: int = field(init=False)
    weapon: Optional[Card] = field(init=False, default=None)
    last_monster_slain_with_weapon: Optional[int] = field(init=False, default=None)
    potion_used_this_room: bool = field(init=False, default=False)
    can_skip: bool = field(init=False, default=True)
    state: GamePhase = field(init=False, default=GamePhase.MAIN_MENU)
    survived: bool = field(init=False, default=False)
    message: str = field(init=False, default="")
    current_monster: Optional[Card] = field(init=False, default=None)
    awaiting_weapon_choice: bool = field(init=False, default=False)
    interactions_left_in_room: int = field(init=False, default=0)
    discard: List[Card] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = Random()
        if self.initial_deck is not None:
            self.initial_deck = list(self.initial_deck)
            validate_deck(self.initial_deck)
        self._new_game()

    def _new_game(self) -> None:
        assert self.rng is not None
        if self.initial_deck is not None:
            cards = list(self.initial_deck)
        else:
            cards = shuffled_deck(self.rng)
        self.deck = Deck(cards)
        self.room_slots = RoomSlots()
        self.health = self.rules.starting_health
        self.max_health = self.rules.max_health
        self.weapon = None
        self.last_monster_slain_with_weapon = None
        self.potion_used_this_room = False
        self.can_skip = True
        self.state = GamePhase.MAIN_MENU
        self.survived = False
        self.message = ""
        self.current_monster = None
        self.awaiting_weapon_choice = False
        self.interactions_left_in_room = 0
        self.discard = []

    # Lifecycle ---------------------------------------------------------

    def start(self) -> None:
        if self.state != GamePhase.MAIN_MENU:
            self.message = self._guidance()
            return
        self._enter_dungeon()

    def reset_to_playing(self) -> None:
        """Throw the current run away and start a new one in the first room."""
        self._new_game()
        self._enter_dungeon()

    def _enter_dungeon(self) -> None:
        self.fill_room()
        self.state = GamePhase.ROOM_CHOICE
        self.message = msg.ENTERED_DUNGEON
        logger.debug("Entered dungeon, room=%s deck=%d", self.room_slots.cards(), len(self.deck))

    # Room management ---------------------------------------------------

    def fill_room(self) -> None:
        self.room_slots.fill_from(self.deck)

    def room_is_empty(self) -> bool:
        return self.room_slots.is_empty()

    def face_room(self) -> None:
        if self.state != GamePhase.ROOM_CHOICE:
            self.message = self._guidance()
            return
        self.potion_used_this_room = False
        self.interactions_left_in_room = self.rules.interactions_per_room
        self.state = GamePhase.CARD_SELECTION
        self.message = msg.FACE_ROOM
        logger.debug("Facing room %s", self.room_slots.cards())

    def skip_room(self) -> None:
        if self.state != GamePhase.ROOM_CHOICE:
            self.message = self._guidance()
            return
        if not self.can_skip:
            self.message = msg.NEED_FACE_ONLY
            return

        skipped = self.room_slots.take_all()
        # TODO: make "shuffled" the default once the fairness of slot order is settled.
        if self.rules.skip_order == "shuffled":
            assert self.rng is not None
            self.rng.shuffle(skipped)
        self.deck.return_to_bottom(skipped)
        self.can_skip = False
        self.fill_room()
        logger.debug("Skipped room %s", skipped)

        if self._dungeon_cleared():
            self._finish(survived=True)
        else:
            self.message = msg.SKIPPED_ROOM

    # Combat ------------------------------------------------------------

    def can_use_weapon_on(self, monster: Card) -> bool:
        return can_use_weapon(self.weapon, self.last_monster_slain_with_weapon, monster)

    def handle_monster_with_weapon(self, monster: Card) -> int:
        if self.weapon is None:
            return unarmed_damage(monster)
        damage = weapon_damage(self.weapon, monster)
        self.last_monster_slain_with_weapon = monster.rank
        return damage

    def handle_monster_without_weapon(self, monster: Card) -> int:
        return unarmed_damage(monster)

    # Card play ---------------------------------------------------------

    def play_card_from_slot(self, idx: int) -> ResolveOutcome:
        """Play the card in room slot ``idx`` and apply its effect."""
        if self.state != GamePhase.CARD_SELECTION:
            if self.state == GamePhase.ROOM_CHOICE:
                self.message = msg.MUST_FACE_FIRST
            else:
                self.message = self._guidance()
            return ResolveOutcome.NONE

        card = self.room_slots.take(idx)
        if card is None:
            self.message = msg.INVALID_CARD_SELECTION
            return ResolveOutcome.NONE

        logger.debug("Playing %s from slot %d", card, idx)
        if card.role is Role.MONSTER:
            self._play_monster(card)
        elif card.role is Role.WEAPON:
            self._play_weapon(card)
        else:
            self._play_potion(card)
        return ResolveOutcome.NONE

    def _play_monster(self, monster: Card) -> None:
        if self.can_use_weapon_on(monster):
            assert self.weapon is not None
            self.current_monster = monster
            self.awaiting_weapon_choice = True
            self.state = GamePhase.CARD_INTERACTION
            self.message = msg.weapon_prompt(monster, self.weapon)
            return

        damage = self.handle_monster_without_weapon(monster)
        self.health -= damage
        self.discard.append(monster)
        self.state = GamePhase.CARD_INTERACTION
        self.message = msg.fought_monster(damage)
        logger.debug("Fought %s bare-handed for %d damage, health=%d", monster, damage, self.health)
        self._advance()

    def _play_weapon(self, weapon: Card) -> None:
        if self.weapon is not None:
            self.discard.append(self.weapon)
        self.weapon = weapon
        self.last_monster_slain_with_weapon = None
        self.state = GamePhase.CARD_INTERACTION
        self.message = msg.equipped(weapon)
        self._advance()

    def _play_potion(self, potion: Card) -> None:
        self.discard.append(potion)
        self.state = GamePhase.CARD_INTERACTION
        if not self.potion_used_this_room:
            self.health = heal(self.health, potion.rank, self.max_health)
            self.potion_used_this_room = True
            self.message = msg.healed(potion.rank)
        else:
            self.message = msg.POTION_WASTED
        self._advance()

    def answer_weapon_prompt(self, use_weapon: bool) -> ResolveOutcome:
        """Resolve the pending monster. The driver must then call continue_after_interaction."""
        if not self.awaiting_weapon_choice:
            self.message = self._guidance()
            return ResolveOutcome.NONE

        monster = self.current_monster
        assert monster is not None
        if use_weapon:
            damage = self.handle_monster_with_weapon(monster)
            self.message = msg.fought_with_weapon(damage)
        else:
            damage = self.handle_monster_without_weapon(monster)
            self.message = msg.fought_monster(damage)

        self.health -= damage
        self.discard.append(monster)
        self.current_monster = None
        self.awaiting_weapon_choice = False
        logger.debug(
            "Fought %s (weapon=%s) for %d damage, health=%d", monster, use_weapon, damage, self.health
        )
        return ResolveOutcome.AWAIT_CONTINUE

    def continue_after_interaction(self) -> None:
        if not self.awaiting_continue:
            self.message = self._guidance()
            return
        self._advance()

    def _advance(self) -> None:
        if self.health <= 0:
            self._finish(survived=False)
            return

        if self.interactions_left_in_room > 0:
            self.interactions_left_in_room -= 1

        if self.interactions_left_in_room == 0:
            self.can_skip = True
            self.fill_room()
            if self._dungeon_cleared():
                self._finish(survived=True)
            else:
                self.state = GamePhase.ROOM_CHOICE
                self.message = msg.ROOM_RESOLVED
            return

        if self._dungeon_cleared():
            self._finish(survived=True)
            return
        self.state = GamePhase.CARD_SELECTION

    def check_death(self) -> None:
        """End the run at once if health has dropped to zero or below."""
        if self.health <= 0 and self.state != GamePhase.GAME_OVER:
            self._finish(survived=False)

    def _dungeon_cleared(self) -> bool:
        return self.room_is_empty() and self.deck.is_empty()

    def _finish(self, *, survived: bool) -> None:
        self.survived = survived
        self.state = GamePhase.GAME_OVER
        self.message = msg.YOU_SURVIVED if survived else msg.YOU_DIED
        logger.debug("Game over: survived=%s score=%d", survived, self.final_score())

    # Observations ------------------------------------------------------

    @property
    def awaiting_continue(self) -> bool:
        return self.state == GamePhase.CARD_INTERACTION and not self.awaiting_weapon_choice

    @property
    def hint(self) -> str:
        if self.state == GamePhase.MAIN_MENU:
            return msg.HINT_MAIN
        if self.state == GamePhase.ROOM_CHOICE:
            return msg.HINT_ROOM_CHOICE_CAN_SKIP if self.can_skip else msg.HINT_ROOM_CHOICE_NO_SKIP
        if self.state == GamePhase.CARD_SELECTION:
            return msg.HINT_CARD_SELECTION
        if self.state == GamePhase.CARD_INTERACTION:
            return msg.HINT_PROMPT_WEAPON if self.awaiting_weapon_choice else msg.HINT_INTERACTION_ACK
        return msg.HINT_GAME_OVER

    def _guidance(self) -> str:
        if self.state == GamePhase.MAIN_MENU:
            return msg.NEED_START
        if self.state == GamePhase.ROOM_CHOICE:
            return msg.NEED_FACE_OR_SKIP if self.can_skip else msg.NEED_FACE_ONLY
        if self.state == GamePhase.CARD_SELECTION:
            return msg.NEED_SELECT_CARD
        if self.state == GamePhase.CARD_INTERACTION:
            return msg.NEED_Y_OR_N if self.awaiting_weapon_choice else msg.NEED_CONTINUE
        return msg.RESTART_HELP

    def remaining_cards(self) -> List[Card]:
        """Cards still to be resolved: the room (slot order) followed by the deck."""
        return self.room_slots.cards() + list(self.deck)

    def accounted_cards(self) -> List[Card]:
        """Every card of the run, wherever it currently is."""
        cards = self.remaining_cards() + list(self.discard)
        if self.weapon is not None:
            cards.append(self.weapon)
        if self.current_monster is not None:
            cards.append(self.current_monster)
        return cards

    # Scoring -----------------------------------------------------------

    def final_score(self) -> int:
        return final_score(survived=self.survived, health=self.health, remaining=self.remaining_cards())

    def remaining_summary_line(self) -> str:
        return remaining_summary_line(self.remaining_cards())

    def result(self) -> GameResult:
        remaining = self.remaining_cards()
        return GameResult(
            survived=self.survived,
            score=self.final_score(),
            health=self.health,
            remaining_threat=remaining_threat(remaining),
            cards_left=len(remaining),
        )
