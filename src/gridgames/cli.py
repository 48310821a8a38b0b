"""
Command-line interface for playing grid games.
"""

import argparse
import logging
from typing import List, Optional

from gridgames.api import play_session
from gridgames.utils.config import Config, GAMES
from gridgames.utils.factory import create_session


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play turn-based grid games in the terminal"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="chess",
        help="Game to play (default: chess)",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default=None,
        help="Comma-separated player names in turn order (e.g., 'Alice,Bob')",
    )
    parser.add_argument(
        "--markers", "-m",
        type=str,
        default=None,
        help="Comma-separated board tokens, one per player (e.g., 'X,O')",
    )
    parser.add_argument(
        "--no-instructions",
        action="store_true",
        help="Skip the how-to-play text",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log moves and rejected input to stderr",
    )
    return parser.parse_args(argv)


def parse_names(names_str: Optional[str], option: str = "--players") -> Optional[List[str]]:
    """Split a comma-separated option value, rejecting empty entries."""
    if names_str is None:
        return None

    names = [n.strip() for n in names_str.split(",")]
    if not all(names):
        raise ValueError(
            f"Invalid {option} format: '{names_str}'. "
            "Expected comma-separated, non-empty values (e.g., 'Alice,Bob')."
        )
    return names


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = Config(
        game_name=args.game,
        player_names=parse_names(args.players),
        markers=parse_names(args.markers, "--markers"),
        show_instructions=not args.no_instructions,
    )
    session = create_session(config)

    print(f"Welcome to {session.game}!")
    if config.show_instructions:
        print(session.game.instructions + "Type 'exit' anytime to exit the game fully")
    print(f"Starting {session.game}...")

    winner = play_session(session, read_line=input, write=print)
    if winner is None and session.is_draw:
        print("No winner this time.")


if __name__ == "__main__":
    main()
