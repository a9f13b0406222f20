from scoundrel.cards import Card, Suit
from scoundrel.scoring import final_score, remaining_summary_line, remaining_threat


def test_survivor_scores_remaining_health():
    assert final_score(survived=True, health=13, remaining=[]) == 13


def test_death_scores_negative_threat():
    remaining = [Card(Suit.SPADES, 14), Card(Suit.HEARTS, 9), Card(Suit.CLUBS, 3), Card(Suit.DIAMONDS, 10)]
    assert remaining_threat(remaining) == 17
    assert final_score(survived=False, health=-4, remaining=remaining) == -17


def test_death_without_monsters_left_scores_zero():
    assert final_score(survived=False, health=0, remaining=[Card(Suit.HEARTS, 2)]) == 0


def test_summary_line():
    assert remaining_summary_line([Card(Suit.HEARTS, 2)]) == "No monsters remain. You defeated them all!"
    assert remaining_summary_line([Card(Suit.CLUBS, 11), Card(Suit.SPADES, 2)]) == (
        "Remaining monsters total threat: -13"
    )
