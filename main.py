#!/usr/bin/env python3
"""
Lights Out - Main entry point.

Usage:
    python main.py play [--rows N] [--cols N] [--chance P] [--seed S]
    python main.py evaluate [--agent {random,solver}] [--games N]
    python main.py compare [--games N]
"""
import argparse
from typing import Dict, Optional, Tuple

from src.game.board import Board, BoardConfig
from src.game.environment import LightsOutEnv
from src.game.view import render_screen
from src.agents import BaseAgent, RandomAgent, SolverAgent


QUIT_COMMANDS = ("q", "quit", "exit")


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """Parse "row col" (or "row,col") into a position, or None."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def play(args: argparse.Namespace) -> None:
    """Play Lights Out in the terminal."""
    board = Board(build_config(args))
    if args.seed is not None:
        board.seed(args.seed)
        board.reset()

    while True:
        print()
        print(render_screen(board))
        print()

        try:
            if board.is_won:
                answer = input("Play again? [y/n] ").strip().lower()
                if answer not in ("y", "yes", ""):
                    return
                board.reset()
                continue

            text = input("Move (row col, q to quit): ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            return

        if text in QUIT_COMMANDS:
            return

        move = parse_move(text)
        if move is None:
            print(f"Could not read move: {text!r}")
            continue

        row, col = move
        if board.get_cell(row, col) is None:
            print(
                f"({row}, {col}) is off the board "
                f"({board.config.n_rows}x{board.config.n_cols})"
            )
            continue

        board.cells()[row][col].click()


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Create a board configuration from command line flags."""
    try:
        return BoardConfig(args.rows, args.cols, args.chance)
    except ValueError as exc:
        raise SystemExit(f"Invalid board: {exc}")


def make_agent(name: str, config: BoardConfig) -> BaseAgent:
    """Create an agent by name."""
    if name == "random":
        return RandomAgent(config.n_rows, config.n_cols)
    if name == "solver":
        return SolverAgent(config.n_rows, config.n_cols)
    raise ValueError(f"Unknown agent: {name}")


def run_games(
    agent: BaseAgent,
    config: BoardConfig,
    num_games: int,
    max_presses: int,
    seed: Optional[int] = None,
) -> Dict[str, float]:
    """
    Let an agent play a number of games.

    Returns:
        Dictionary with the win rate and, for the solver, the share of
        starting boards that could be cleared at all.
    """
    env = LightsOutEnv(config=config)
    wins = 0
    solvable = 0

    for game in range(num_games):
        game_seed = None if seed is None else seed + game
        obs, _ = env.reset(seed=game_seed)
        agent.reset()
        done = env.board.is_won

        for _ in range(max_presses):
            if done:
                break
            action = agent.select_action(obs, env.get_action_mask())
            obs, _, terminated, truncated, _ = env.step(action)
            done = terminated or truncated

        if env.board.is_won:
            wins += 1
        if getattr(agent, "solvable", None):
            solvable += 1

    return {
        "win_rate": wins / num_games if num_games else 0.0,
        "solvable_rate": solvable / num_games if num_games else 0.0,
    }


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate a specific agent."""
    config = build_config(args)
    agent = make_agent(args.agent, config)

    print(f"Evaluating {args.agent} over {args.games} games...")
    results = run_games(agent, config, args.games, args.max_presses, args.seed)

    print(f"Results for {args.agent}:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    if args.agent == "solver":
        print(f"  Solvable boards: {results['solvable_rate']:.1%}")


def compare(args: argparse.Namespace) -> None:
    """Compare all agents."""
    config = build_config(args)

    print("\n" + "=" * 40)
    print("Agent Comparison Results")
    print("=" * 40)
    print(f"{'Agent':<20} {'Win Rate':<12}")
    print("-" * 40)

    for name in ("random", "solver"):
        agent = make_agent(name, config)
        results = run_games(
            agent, config, args.games, args.max_presses, args.seed
        )
        print(f"{name:<20} {results['win_rate']:>10.1%}")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add board configuration flags to a subcommand."""
    parser.add_argument("--rows", type=int, default=5, help="Number of rows")
    parser.add_argument("--cols", type=int, default=5, help="Number of columns")
    parser.add_argument(
        "--chance",
        type=float,
        default=0.25,
        help="Chance each light starts on",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Lights Out - Play or watch agents play"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--agent",
        choices=["random", "solver"],
        default="solver",
        help="Agent to evaluate",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--max-presses", type=int, default=200, help="Press limit per game"
    )

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Compare all agents")
    add_board_arguments(compare_parser)
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )
    compare_parser.add_argument(
        "--max-presses", type=int, default=200, help="Press limit per game"
    )

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    elif args.command == "compare":
        compare(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
