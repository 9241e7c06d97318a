#!/usr/bin/env python3
"""
Minefield - play a game of Minesweeper in the terminal.

Usage:
    python main.py [--width W] [--height H] [--seed N] [--start X Y] [-v]

Commands at the prompt:
    r X Y    reveal the cell in column X, row Y
    f X Y    flag a cell
    u X Y    remove a flag
    q        quit
"""
import argparse
import logging
import random
from typing import Callable, Dict, List, Optional

from minefield import Board, BoardConfig, MinefieldError, render_board


HELP = "Commands: r X Y (reveal), f X Y (flag), u X Y (unflag), q (quit)"


def parse_command(line: str) -> Optional[List[str]]:
    """Split a prompt line into a command letter and two coordinates."""
    parts = line.split()
    if len(parts) != 3 or parts[0] not in ("r", "f", "u"):
        return None
    if not (parts[1].isdigit() and parts[2].isdigit()):
        return None
    return parts


def play(board: Board) -> None:
    """Run the prompt loop until the game ends or the player quits."""
    actions: Dict[str, Callable[[int, int], bool]] = {
        "r": board.reveal,
        "f": board.flag,
        "u": board.unflag,
    }

    print(HELP)
    while board.is_playing:
        print()
        print(render_board(board))
        print(f"Mines left: {board.flags_left}")
        try:
            line = input("> ").strip().lower()
        except EOFError:
            return
        if line == "q":
            return

        command = parse_command(line)
        if command is None:
            print(HELP)
            continue

        x, y = int(command[1]), int(command[2])
        try:
            changed = actions[command[0]](x, y)
        except MinefieldError as exc:
            print(f"Error: {exc}")
            continue
        if not changed:
            print("Nothing to do there.")

    print()
    print(render_board(board, reveal_all=True))
    if board.is_won:
        print("\n*** WIN! ***")
    else:
        print("\n*** LOST (hit mine) ***")


def main() -> None:
    """Parse arguments and start a game."""
    parser = argparse.ArgumentParser(
        description="Minefield - play Minesweeper in the terminal"
    )
    parser.add_argument("--width", type=int, default=16, help="Board columns")
    parser.add_argument("--height", type=int, default=16, help="Board rows")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for the layout"
    )
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Cell to reveal before the first prompt",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = BoardConfig(args.width, args.height)
    except MinefieldError as exc:
        parser.error(str(exc))

    board = Board(config, random.Random(args.seed))
    print(
        f"Board: {config.width}x{config.height} with {board.num_mines} mines"
    )

    if args.start is not None:
        try:
            board.reveal(*args.start)
        except MinefieldError as exc:
            parser.error(str(exc))

    play(board)


if __name__ == "__main__":
    main()
