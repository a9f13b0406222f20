"""Validation schema for Scoundrel rules configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class RuleSet(BaseModel):
    """Tunable rules. The defaults reproduce the standard game."""

    starting_health: int = Field(20, ge=1, description="Health at the start of a game.")
    max_health: int = Field(20, ge=1, description="Potions never heal above this value.")
    interactions_per_room: int = Field(
        3,
        description="Cards resolved in a faced room before the next room is dealt.",
    )
    skip_order: Literal["slot_order", "shuffled"] = Field(
        "slot_order",
        description="Order in which a skipped room's cards go back under the deck.",
    )

    @field_validator("interactions_per_room")
    @classmethod
    def validate_interactions(cls, value: int) -> int:
        if not 1 <= value <= 4:
            raise ValueError("A faced room allows between 1 and 4 interactions.")
        return value

    @model_validator(mode="after")
    def validate_health(self) -> "RuleSet":
        if self.starting_health > self.max_health:
            raise ValueError("Starting health cannot exceed max health.")
        return self
