"""Simple bot arena for Scoundrel."""

from __future__ import annotations

import argparse
from random import Random
from statistics import mean
from typing import Dict, Iterable, List, Optional

from scoundrel.game import Game, GamePhase, ResolveOutcome
from scoundrel.logging_utils import get_logger, setup_logging
from scoundrel.rules_schema import RuleSet
from scoundrel.scoring import GameResult

from .base import BotStrategy
from .baseline_greedy import GreedyBot
from .random_bot import RandomBot

logger = get_logger(__name__)

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "greedy": GreedyBot,
    "random": RandomBot,
}

MAX_STEPS = 1000


def _step(game: Game, bot: BotStrategy) -> None:
    if game.state == GamePhase.ROOM_CHOICE:
        if bot.choose_room(game) == "skip" and game.can_skip:
            game.skip_room()
        else:
            game.face_room()
    elif game.state == GamePhase.CARD_SELECTION:
        game.play_card_from_slot(bot.choose_slot(game))
    elif game.state == GamePhase.CARD_INTERACTION:
        if game.awaiting_weapon_choice:
            outcome = game.answer_weapon_prompt(bot.use_weapon(game))
            if outcome is ResolveOutcome.AWAIT_CONTINUE:
                game.continue_after_interaction()
        else:
            game.continue_after_interaction()


def play_game(game: Game, bot: BotStrategy, *, max_steps: int = MAX_STEPS) -> GameResult:
    """Drive ``game`` to the end with ``bot`` making every decision."""
    bot.on_game_start(game)
    if game.state == GamePhase.MAIN_MENU:
        game.start()
    for _ in range(max_steps):
        if game.state == GamePhase.GAME_OVER:
            return game.result()
        _step(game, bot)
    if game.state == GamePhase.GAME_OVER:
        return game.result()
    raise RuntimeError(f"{bot.name} did not finish the game within {max_steps} steps.")


def run_games(
    bot: BotStrategy,
    *,
    n_games: int = 100,
    seed: Optional[int] = None,
    rules: Optional[RuleSet] = None,
) -> dict:
    rng = Random(seed)
    results: List[GameResult] = []
    for idx in range(n_games):
        game = Game(rng=rng, rules=rules or RuleSet())
        result = play_game(game, bot)
        logger.info("Game %d: survived=%s score=%d", idx, result.survived, result.score)
        results.append(result)
    survived = sum(1 for result in results if result.survived)
    return {
        "results": results,
        "survived": survived,
        "survival_rate": survived / n_games if n_games else 0.0,
        "mean_score": mean(result.score for result in results) if results else 0.0,
    }


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a batch of bot games.")
    parser.add_argument("--bot", default="greedy", choices=BOT_REGISTRY.keys())
    parser.add_argument("--n", type=int, default=100, help="Number of games to play.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    bot = BOT_REGISTRY[args.bot]()
    results = run_games(bot, n_games=args.n, seed=args.seed)

    print(f"{bot.name}: survived {results['survived']}/{args.n} games")
    print(f"Mean score: {results['mean_score']:.2f}")


if __name__ == "__main__":
    main()
