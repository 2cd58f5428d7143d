from __future__ import annotations

import argparse
import logging
import random

from falling_blocks.game import Action, FallingBlocksGame, GameConfig, print_board


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play a headless game with random actions")
    p.add_argument("--steps", type=int, default=500)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--verbose", action="store_true", help="Log engine events")
    return p


def run_game_demo(steps: int = 500, seed: int | None = 0) -> FallingBlocksGame:
    game = FallingBlocksGame(GameConfig(random_seed=seed))
    policy = random.Random(seed)
    moves = [Action.LEFT, Action.RIGHT, Action.ROTATE, Action.SOFT_DROP, Action.HARD_DROP]
    for _ in range(steps):
        if game.state.game_over:
            break
        game.step(policy.choice(moves))
    return game


def main() -> None:  # pragma: no cover
    args = build_parser().parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    game = run_game_demo(args.steps, args.seed)
    print("=== Falling Blocks Demo ===")
    print_board(game.board_with_piece())
    print(f"Lines cleared: {game.state.score}")
    print(f"Game over: {game.state.game_over}")


if __name__ == "__main__":  # pragma: no cover
    main()
