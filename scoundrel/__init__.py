"""Core rules engine package for Scoundrel."""

__all__ = [
    "cards",
    "deck",
    "room",
    "combat",
    "scoring",
    "messages",
    "rules_schema",
    "game",
    "service",
    "logging_utils",
]
