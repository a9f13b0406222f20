#!/usr/bin/env python3
"""Compare bot strategies over many seeded dungeon runs."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from bots.arena import BOT_REGISTRY, run_games
from scoundrel.logging_utils import setup_logging
from scoundrel.rules_schema import RuleSet


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate Scoundrel bots.")
    parser.add_argument("--games", type=int, default=200, help="Games per bot.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument(
        "--bots",
        nargs="+",
        default=sorted(BOT_REGISTRY),
        choices=sorted(BOT_REGISTRY),
    )
    parser.add_argument("--shuffle-skips", action="store_true", help="Shuffle skipped rooms back into the deck.")
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(args.log_level)
    rules = RuleSet(skip_order="shuffled" if args.shuffle_skips else "slot_order")
    for name in args.bots:
        bot = BOT_REGISTRY[name]()
        results = run_games(bot, n_games=args.games, seed=args.seed, rules=rules)
        best = max(result.score for result in results["results"])
        print(
            f"{bot.name:>8}: survival {results['survival_rate']:.1%} | "
            f"mean score {results['mean_score']:.2f} | best {best}"
        )


if __name__ == "__main__":
    main()
