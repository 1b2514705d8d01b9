"""
Console front end for pocketjack.

    python -m pocketjack --players 3

Without ``--players`` the setup prompt asks for the table size. After each
game the table can replay with the same players, go back to setup, or quit.
"""

import argparse
import asyncio
import logging
from typing import Optional

from pocketjack.adapters import CLIAdapter
from pocketjack.blackjack.constants import MAX_PLAYERS, MIN_PLAYERS, clamp_player_count
from pocketjack.common.io_interface import (
    ConsoleIOInterface,
    IOInterface,
    LoggingIOInterface,
)
from pocketjack.engine import BlackjackEngine


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play multi-player blackjack.")
    parser.add_argument(
        "-p",
        "--players",
        type=int,
        default=None,
        help=f"number of players, {MIN_PLAYERS}-{MAX_PLAYERS} (default: ask)",
    )
    parser.add_argument(
        "-n",
        "--names",
        nargs="+",
        default=None,
        help="names of the players (default: Player 1, Player 2, ...)",
    )
    parser.add_argument(
        "-s", "--seed", type=int, default=None, help="seed for a reproducible deck"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="play one unattended game and append the transcript to this file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def ask_player_count(io_interface: IOInterface) -> int:
    """Setup screen: ask for the table size and clamp it to the supported range."""
    count = io_interface.check_numeric_response(
        f"Number of players ({MIN_PLAYERS}-{MAX_PLAYERS}): "
    )
    return clamp_player_count(count)


def ask_next_step(io_interface: IOInterface) -> str:
    choice = io_interface.input("[r]eplay, [h]ome or [q]uit? ").strip().lower()
    return choice[:1] or "q"


async def run(args, io_interface: Optional[IOInterface] = None) -> None:
    unattended = args.log_file is not None
    if io_interface is None:
        io_interface = (
            LoggingIOInterface(args.log_file) if unattended else ConsoleIOInterface()
        )

    player_count = args.players
    if player_count is None:
        player_count = ask_player_count(io_interface)

    config = {
        "player_count": player_count,
        "seed": args.seed,
        "player_names": args.names,
    }
    engine = BlackjackEngine(CLIAdapter(io_interface), config)
    await engine.initialize()
    try:
        await engine.start_game()
        while True:
            await engine.play()
            if unattended:
                break
            step = ask_next_step(io_interface)
            if step == "r":
                await engine.reset_game()
            elif step == "h":
                await engine.reset_game(ask_player_count(io_interface))
            else:
                break
    finally:
        await engine.shutdown()


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
