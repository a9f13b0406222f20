"""Combat resolution helpers for Scoundrel."""

from __future__ import annotations

from typing import Optional

from .cards import Card


def can_use_weapon(weapon: Optional[Card], last_slain: Optional[int], monster: Card) -> bool:
    """Return True if ``weapon`` may be used against ``monster``.

    Each kill degrades the weapon: afterwards it only works on monsters
    strictly weaker than the last one it slew.
    """
    if weapon is None:
        return False
    if last_slain is None:
        return True
    return monster.rank < last_slain


def weapon_damage(weapon: Card, monster: Card) -> int:
    return max(0, monster.rank - weapon.rank)


def unarmed_damage(monster: Card) -> int:
    return monster.rank


def heal(health: int, amount: int, max_health: int) -> int:
    """Return the new health after drinking a potion; overheal is lost."""
    return min(health + amount, max_health)
