#!/usr/bin/env python3
"""Watch the Solver agent play Lights Out."""
import time
import os

from src.game.environment import LightsOutEnv
from src.game.board import BoardConfig
from src.agents import SolverAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.5, games: int = 5, size: int = 5, chance: float = 0.25):
    """Run demo games with visualization."""
    config = BoardConfig(n_rows=size, n_cols=size, chance_light_starts_on=chance)
    env = LightsOutEnv(config=config, render_mode="ansi")
    agent = SolverAgent(size, size)

    print(f"Board: {size}x{size}, {100*chance:.0f}% of lights start on")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, info = env.reset()
        agent.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = info["game_state"] == "WON"

        while not done:
            valid_actions = env.get_action_mask()
            action = agent.select_action(obs, valid_actions)
            row, col = agent.action_to_position(action)

            if not agent.solvable:
                print("\n*** No solution from this start, skipping ***")
                break

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated

            clear_screen()
            print(f"=== Game {game + 1}/{games} ===")
            print(f"Wins so far: {wins}")
            print(f"Last press: ({row}, {col}) | Lights on: {info['lit']}\n")
            print(env.render())

            time.sleep(delay)

        if env.board.is_won:
            wins += 1
            print("\n*** You Win! ***")

        time.sleep(1.0)  # Pause between games

    rate = 100 * wins / games if games else 0.0
    print(f"\n=== Final: {wins}/{games} cleared ({rate:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.5, help="Delay between presses")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=5, help="Board size (NxN)")
    parser.add_argument("--chance", type=float, default=0.25, help="Chance each light starts on")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, chance=args.chance)
