from collections import Counter
from random import Random

import pytest

from scoundrel.cards import Card, Role, Suit, card_label, card_text, rank_label, serialize_card
from scoundrel.deck import DECK_SIZE, Deck, build_deck, shuffled_deck, validate_deck


def test_fresh_deck_composition():
    deck = build_deck()
    assert len(deck) == DECK_SIZE == 44
    assert len(set(deck)) == 44

    per_suit = Counter(card.suit for card in deck)
    assert per_suit[Suit.SPADES] == 13
    assert per_suit[Suit.CLUBS] == 13
    assert per_suit[Suit.DIAMONDS] == 9
    assert per_suit[Suit.HEARTS] == 9

    for suit in (Suit.SPADES, Suit.CLUBS):
        assert sorted(card.rank for card in deck if card.suit is suit) == list(range(2, 15))
    for suit in (Suit.DIAMONDS, Suit.HEARTS):
        assert sorted(card.rank for card in deck if card.suit is suit) == list(range(2, 11))


def test_roles_follow_suits():
    assert Card(Suit.SPADES, 9).role is Role.MONSTER
    assert Card(Suit.CLUBS, 14).is_monster()
    assert Card(Suit.DIAMONDS, 7).is_weapon()
    assert Card(Suit.HEARTS, 3).is_potion()
    assert not Card(Suit.HEARTS, 11).is_legal()
    assert Card(Suit.SPADES, 11).is_legal()


def test_shuffle_is_reproducible_with_seed():
    first = shuffled_deck(Random(1234))
    second = shuffled_deck(Random(1234))
    assert first == second
    assert sorted(first, key=lambda c: (c.suit.value, c.rank)) == build_deck()
    assert first != build_deck()


def test_validate_deck_rejects_bad_decks():
    deck = build_deck()
    with pytest.raises(ValueError):
        validate_deck(deck[:-1])
    with pytest.raises(ValueError):
        validate_deck(deck[:-1] + [deck[0]])
    with pytest.raises(ValueError):
        validate_deck(deck[:-1] + [Card(Suit.HEARTS, 12)])
    validate_deck(deck)


def test_deck_draws_from_front_and_returns_to_back():
    a, b, c = Card(Suit.SPADES, 2), Card(Suit.CLUBS, 3), Card(Suit.HEARTS, 4)
    deck = Deck([a, b])
    assert deck.draw() == a
    deck.return_to_bottom([c])
    assert deck.cards() == (b, c)
    assert deck.draw() == b
    assert deck.draw() == c
    assert deck.draw() is None
    assert deck.is_empty()


def test_face_card_labels():
    assert rank_label(11) == "J"
    assert rank_label(12) == "Q"
    assert rank_label(13) == "K"
    assert rank_label(14) == "A"
    assert rank_label(7) == "7"
    assert card_text(Card(Suit.SPADES, 12)) == "Q♠"
    assert card_label(Card(Suit.CLUBS, 14)) == "Ace of Clubs"
    assert card_label(Card(Suit.DIAMONDS, 7)) == "7 of Diamonds"
    assert serialize_card(Card(Suit.HEARTS, 5)) == {"suit": "hearts", "rank": 5, "role": "potion"}
