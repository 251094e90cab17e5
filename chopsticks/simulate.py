"""
Play or simulate Chopsticks from the command line.

``play`` runs an interactive console game, each seat either human or a
computer strategy. ``simulate`` plays many computer-vs-computer games and
prints win rates and game length statistics.

Usage:
    chopsticks play --player2 greedy
    chopsticks simulate --games 500 --player1 random --player2 minimax
"""

import argparse
import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from chopsticks.adapters import CLIAdapter, DummyAdapter
from chopsticks.ai.strategy import STRATEGIES
from chopsticks.common.io_interface import LoggingIOInterface
from chopsticks.engine import ChopsticksEngine
from chopsticks.game.constants import PLAYERS, Player

HUMAN = "human"
LOG_LEVEL_ENV = "CHOPSTICKS_LOG_LEVEL"


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one simulated game."""

    winner: Optional[Player]
    turns: int


def summarize(results: List[SimulationResult]) -> Dict[str, Any]:
    """
    Compute win rates and game length statistics.

    Args:
        results: Outcomes of the simulated games

    Returns:
        Dictionary of summary statistics

    Raises:
        ValueError: If there are no results
    """
    if not results:
        raise ValueError("Cannot summarize an empty list of results.")

    winners = np.array([r.winner.value if r.winner else "" for r in results])
    turns = np.array([r.turns for r in results])

    summary = {"games": len(results)}
    for player in PLAYERS:
        summary[f"{player.value}_win_rate"] = float(np.mean(winners == player.value))
    summary["unfinished_rate"] = float(np.mean(winners == ""))
    summary["mean_turns"] = float(np.mean(turns))
    summary["median_turns"] = float(np.median(turns))
    summary["longest_game"] = int(np.max(turns))
    return summary


async def run_simulation(
    games: int,
    strategies: Dict[str, str],
    seed: Optional[int] = None,
    max_turns: int = 200,
    transcript: Optional[str] = None,
) -> List[SimulationResult]:
    """
    Play computer-vs-computer games.

    Args:
        games: Number of games to play
        strategies: Strategy name for each seat
        seed: Seed for the strategies' random choices
        max_turns: Turn limit per game
        transcript: Optional file to append every move to

    Returns:
        One result per game
    """
    adapter = DummyAdapter()
    engine = ChopsticksEngine(
        adapter,
        {
            "strategies": strategies,
            "ai_delay_ms": 0,
            "max_turns": max_turns,
            "seed": seed,
        },
    )
    log = LoggingIOInterface(transcript) if transcript else None

    await engine.initialize()
    results = []
    try:
        for number in range(1, games + 1):
            winner = await engine.run_game()
            results.append(SimulationResult(winner=winner, turns=len(engine.history)))
            if log:
                await log.output_async(f"# Game {number}")
                for entry in engine.history:
                    await log.output_async(
                        f"{entry.turn}. {entry.player.value} {entry.notation}  {entry.description}"
                    )
                await log.output_async(
                    f"# Winner: {winner.value if winner else 'none'}"
                )
            # Keep the dummy adapter from growing across games
            adapter.clear()
    finally:
        await engine.shutdown()
    return results


async def play(args: argparse.Namespace) -> None:
    strategies = {
        player.value: choice
        for player, choice in zip(PLAYERS, (args.player1, args.player2))
        if choice != HUMAN
    }
    names = dict(zip((p.value for p in PLAYERS), args.names))
    engine = ChopsticksEngine(
        CLIAdapter(),
        {
            "strategies": strategies,
            "player_names": names,
            "ai_delay_ms": args.delay_ms,
            "max_turns": args.max_turns,
            "seed": args.seed,
        },
    )
    await engine.initialize()
    try:
        await engine.run_game()
    finally:
        await engine.shutdown()


def print_summary(summary: Dict[str, Any], strategies: Dict[str, str]) -> None:
    print(f"Games Played: {summary['games']}")
    for player in PLAYERS:
        rate = summary[f"{player.value}_win_rate"] * 100
        print(f"{player.value} ({strategies[player.value]}) won {rate:.2f}% of games.")
    print(f"Unfinished (turn limit): {summary['unfinished_rate'] * 100:.2f}%")
    print(
        f"Game length: mean {summary['mean_turns']:.1f}, "
        f"median {summary['median_turns']:.0f}, max {summary['longest_game']}"
    )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play or simulate Chopsticks.")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--max-turns",
        type=int,
        default=200,
        help="stop a game after this many turns (default: 200)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    strategy_choices = sorted(STRATEGIES)

    play_parser = subparsers.add_parser("play", help="play in the console")
    play_parser.add_argument(
        "--player1", choices=[HUMAN] + strategy_choices, default=HUMAN
    )
    play_parser.add_argument(
        "--player2", choices=[HUMAN] + strategy_choices, default="greedy"
    )
    play_parser.add_argument(
        "-n",
        "--names",
        nargs=2,
        default=["Player 1", "Player 2"],
        help="names of the players (default: Player 1, Player 2)",
    )
    play_parser.add_argument(
        "--delay-ms",
        type=int,
        default=350,
        help="pause before a computer move in milliseconds (default: 350)",
    )

    sim_parser = subparsers.add_parser("simulate", help="simulate computer games")
    sim_parser.add_argument(
        "-g",
        "--games",
        type=int,
        default=1000,
        help="number of games to play (default: 1000)",
    )
    sim_parser.add_argument("--player1", choices=strategy_choices, default="random")
    sim_parser.add_argument("--player2", choices=strategy_choices, default="greedy")
    sim_parser.add_argument(
        "--transcript", default=None, help="append every move to this file"
    )
    return parser.parse_args(argv)


async def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "play":
        await play(args)
        return

    strategies = {"player1": args.player1, "player2": args.player2}
    results = await run_simulation(
        args.games,
        strategies,
        seed=args.seed,
        max_turns=args.max_turns,
        transcript=args.transcript,
    )
    print_summary(summarize(results), strategies)


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
