#!/usr/bin/env python3
"""Interactive CLI to play a Scoundrel dungeon run in the terminal."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from scoundrel.logging_utils import LOG_LEVEL, setup_logging
from scoundrel.service import GameService, GameView


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Scoundrel, a solitaire dungeon crawl.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible deck.")
    parser.add_argument("--log-level", type=str, default=LOG_LEVEL)
    return parser.parse_args()


def print_view(view: GameView) -> None:
    print("\n============================")
    print(view.health_line)
    print(view.weapon_line)
    print(f"Deck: {view.deck_size} cards | Skip: {'available' if view.can_skip else 'used'}")
    if view.state in ("card_selection", "card_interaction"):
        print(f"Interactions left: {view.interactions_left}")
    print("Room:")
    for slot in view.room:
        print(f"  [{slot.index + 1}] {slot.text or '--'}")
    if view.last_command:
        print(view.last_command)
    print(view.message)
    print(view.hint)
    if view.score is not None:
        print(view.summary)
        print(f"Final score: {view.score}")


def main() -> None:
    args = parse_args()
    setup_logging(args.log_level)
    service = GameService(seed=args.seed)
    view = service.view()
    while not service.should_quit:
        print_view(view)
        try:
            line = input(f"({view.placeholder}) > ")
        except (EOFError, KeyboardInterrupt):
            print("\nExiting early.")
            break
        view = service.submit(line)


if __name__ == "__main__":
    main()
