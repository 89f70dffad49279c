#!/usr/bin/env python3
"""
Minesweeper - command line entry point.

Usage:
    minesweeper play [--difficulty NAME] [--seed N]
    minesweeper demo [--difficulty NAME] [--games N] [--delay S]
"""
import argparse
import logging
import sys
import time
from typing import Optional, Sequence, TextIO

from .agents import RandomAgent
from .board import Difficulty
from .environment import MinesweeperEnv, render_ansi
from .errors import OutOfBoundsCoordinate
from .session import GameSession, new_session

HELP_TEXT = "Commands: o X Y (open), f X Y (flag), q (quit)"


def _print_board(session: GameSession, out: TextIO) -> None:
    obs = session.snapshot() if session.is_playing else session.final_snapshot()
    print(render_ansi(obs, axes=True), file=out)
    print(
        f"Mines: {session.mine_count}  Flags left: {session.flags_remaining}",
        file=out,
    )


def play(
    args: argparse.Namespace,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Play one interactive game on the terminal."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    session = new_session(Difficulty.from_name(args.difficulty), args.seed)
    print(HELP_TEXT, file=out)
    _print_board(session, out)

    while session.is_playing:
        print("> ", end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break
        parts = line.split()
        if not parts:
            continue
        command = parts[0].lower()
        if command == "q":
            break
        if command not in ("o", "f") or len(parts) != 3:
            print(HELP_TEXT, file=out)
            continue
        try:
            coordinate = (int(parts[1]), int(parts[2]))
        except ValueError:
            print(HELP_TEXT, file=out)
            continue

        try:
            if command == "o":
                session.open(coordinate)
            else:
                session.toggle_flag(coordinate)
        except OutOfBoundsCoordinate as exc:
            print(exc, file=out)
            continue
        _print_board(session, out)

    if session.is_won:
        print("*** WIN! ***", file=out)
    elif session.is_lost:
        print("*** LOST (hit mine) ***", file=out)
    return 0


def demo(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
    """Watch a random agent play several games."""
    out = out or sys.stdout
    env = MinesweeperEnv(Difficulty.from_name(args.difficulty), render_mode="ansi")
    agent = RandomAgent(args.seed)
    wins = 0

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        env.reset(seed=seed)
        done = False
        step = 0
        info = {}

        while not done:
            action = agent.select_action(env.get_action_mask())
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1
            if args.delay:
                time.sleep(args.delay)

        print(f"=== Game {game + 1}/{args.games} | Steps {step} ===", file=out)
        print(env.render(), file=out)
        if info.get("game_state") == "WON":
            wins += 1
            print("*** WIN! ***", file=out)
        else:
            print("*** LOST (hit mine) ***", file=out)

    print(f"\n=== Final: {wins}/{args.games} wins ===", file=out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    difficulties = [member.name.lower() for member in Difficulty]

    play_parser = subparsers.add_parser("play", help="Play an interactive game")
    play_parser.add_argument(
        "--difficulty", choices=difficulties, default="beginner", help="Board preset"
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    demo_parser = subparsers.add_parser("demo", help="Watch a random agent play")
    demo_parser.add_argument(
        "--difficulty", choices=difficulties, default="beginner", help="Board preset"
    )
    demo_parser.add_argument("--games", type=int, default=5, help="Number of games")
    demo_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    demo_parser.add_argument(
        "--delay", type=float, default=0.0, help="Delay between moves"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return play(args)
    if args.command == "demo":
        return demo(args)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
