import dataclasses

import pytest

from scoundrel import messages as msg
from scoundrel.cards import Card, Suit
from scoundrel.deck import build_deck
from scoundrel.game import Game
from scoundrel.rules_schema import RuleSet
from scoundrel.service import GameService, health_bar, health_line, weapon_line


def deck_with_front(*front):
    return list(front) + [card for card in build_deck() if card not in front]


def service_for(*front, rules=None):
    return GameService(Game(initial_deck=deck_with_front(*front), rules=rules or RuleSet()))


def test_initial_view():
    service = GameService(seed=9)
    view = service.view()
    assert view.state == "main_menu"
    assert view.placeholder == "start | restart | exit"
    assert view.hint == msg.HINT_MAIN
    assert all(slot.card is None for slot in view.room)
    assert view.deck_size == 44
    assert view.score is None


def test_start_and_room_choice_guidance():
    service = service_for()
    service.submit("hello")
    assert service.game.message == msg.NEED_START

    view = service.submit("start")
    assert view.state == "room_choice"
    assert [slot.index for slot in view.room] == [0, 1, 2, 3]
    assert all(slot.card is not None for slot in view.room)
    assert view.placeholder == "f | s | restart | exit"

    view = service.submit("dance")
    assert view.message == msg.NEED_FACE_OR_SKIP
    assert view.last_command == "> dance"


def test_skip_then_face_only():
    service = service_for()
    service.submit("start")
    view = service.submit("skip")
    assert view.message == msg.SKIPPED_ROOM
    assert view.placeholder == "f | restart | exit"
    assert view.hint == msg.HINT_ROOM_CHOICE_NO_SKIP

    view = service.submit("s")
    assert view.message == msg.NEED_FACE_ONLY

    view = service.submit("face")
    assert view.state == "card_selection"
    assert view.interactions_left == 3


def test_card_selection_parsing():
    service = service_for(Card(Suit.DIAMONDS, 7), Card(Suit.HEARTS, 3), Card(Suit.SPADES, 2), Card(Suit.CLUBS, 2))
    service.submit("start")
    service.submit("f")

    view = service.submit("two")
    assert view.message == msg.NEED_SELECT_CARD
    view = service.submit("-1")
    assert view.message == msg.NEED_SELECT_CARD

    # "0" saturates to the first slot.
    view = service.submit("0")
    assert view.weapon == {"suit": "diamonds", "rank": 7, "role": "weapon"}
    assert view.weapon_line == "Weapon: 7♦"
    assert view.room[0].card is None

    view = service.submit("1")
    assert view.message == msg.INVALID_CARD_SELECTION
    view = service.submit("9")
    assert view.message == msg.INVALID_CARD_SELECTION


def test_card_selection_rejects_non_ascii_digits():
    service = service_for(Card(Suit.DIAMONDS, 7), Card(Suit.HEARTS, 3), Card(Suit.SPADES, 2), Card(Suit.CLUBS, 2))
    service.submit("start")
    service.submit("f")

    for command in ("²", "①"):
        view = service.submit(command)
        assert view.message == msg.NEED_SELECT_CARD
        assert view.state == "card_selection"
        assert all(slot.card is not None for slot in view.room)


def test_card_selection_accepts_leading_plus():
    service = service_for(Card(Suit.DIAMONDS, 7), Card(Suit.HEARTS, 3), Card(Suit.SPADES, 2), Card(Suit.CLUBS, 2))
    service.submit("start")
    service.submit("f")

    view = service.submit("+1")
    assert view.weapon == {"suit": "diamonds", "rank": 7, "role": "weapon"}
    assert view.room[0].card is None


def test_weapon_prompt_through_commands():
    service = service_for(Card(Suit.DIAMONDS, 7), Card(Suit.SPADES, 9), Card(Suit.CLUBS, 2), Card(Suit.HEARTS, 2))
    service.submit("start")
    service.submit("f")
    service.submit("1")

    view = service.submit("2")
    assert view.awaiting_weapon_choice
    assert view.current_monster == {"suit": "spades", "rank": 9, "role": "monster"}
    assert view.placeholder == "y/n | restart | exit"

    view = service.submit("maybe")
    assert view.message == msg.NEED_Y_OR_N

    view = service.submit("y")
    assert view.awaiting_continue
    assert view.health == 18
    assert view.weapon_line == "Weapon: 7♦ (must be < 9)"
    assert view.placeholder == "(Enter) | restart | exit"

    view = service.submit("whatever")
    assert view.awaiting_continue

    view = service.submit("")
    assert view.state == "card_selection"
    assert view.interactions_left == 1


def test_ok_also_continues():
    service = service_for(Card(Suit.DIAMONDS, 7), Card(Suit.SPADES, 9), Card(Suit.CLUBS, 2), Card(Suit.HEARTS, 2))
    for command in ("start", "f", "1", "2", "n"):
        service.submit(command)
    assert service.game.health == 11
    view = service.submit("ok")
    assert view.state == "card_selection"


def test_lethal_weapon_answer_ends_game_immediately():
    service = service_for(
        Card(Suit.DIAMONDS, 2),
        Card(Suit.SPADES, 14),
        Card(Suit.CLUBS, 2),
        Card(Suit.HEARTS, 2),
        rules=RuleSet(starting_health=5),
    )
    for command in ("start", "f", "1", "2"):
        service.submit(command)
    view = service.submit("y")

    assert view.state == "game_over"
    assert view.message == msg.YOU_DIED
    assert view.score is not None and view.score < 0
    assert view.summary.startswith("Remaining monsters total threat: -")

    view = service.submit("f")
    assert view.message == msg.RESTART_HELP


def test_restart_and_exit():
    service = service_for()
    service.submit("start")
    service.submit("f")
    service.submit("1")

    view = service.submit("RESTART")
    assert view.state == "room_choice"
    assert view.health == 20
    assert view.deck_size == 40

    service.submit("exit")
    assert service.should_quit


def test_blank_line_outside_acknowledgement_does_nothing():
    service = service_for()
    view = service.submit("   ")
    assert view.state == "main_menu"
    assert view.last_command == ""


def test_click_slot():
    service = service_for(Card(Suit.HEARTS, 4), Card(Suit.SPADES, 3), Card(Suit.CLUBS, 2), Card(Suit.DIAMONDS, 2))
    view = service.click_slot(0)
    assert view.message == msg.NEED_START

    service.submit("start")
    view = service.click_slot(0)
    assert view.message == msg.NEED_FACE_OR_SKIP
    assert view.room[0].text == "4♥"

    service.submit("f")
    view = service.click_slot(1)
    assert view.health == 17
    assert view.room[1].card is None


def test_presentation_helpers():
    assert health_bar(3, 5) == "███░░"
    assert health_bar(-4, 3) == "░░░"
    assert health_bar(9, 3) == "███"
    assert health_line(12, 20) == "Health: 12/20 |" + "█" * 12 + "░" * 8 + "|"
    assert weapon_line(None, None) == "Weapon: None"
    assert weapon_line(Card(Suit.DIAMONDS, 10), 12) == "Weapon: 10♦ (must be < 12)"


def test_views_are_read_only():
    view = service_for().view()
    with pytest.raises(dataclasses.FrozenInstanceError):
        view.message = "changed"
    with pytest.raises(dataclasses.FrozenInstanceError):
        view.room[0].label = "changed"
