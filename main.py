#!/usr/bin/env python3
"""
Gomoku - move chooser
Reads a board position and prints the AI's move for the given side.

Board text uses one row per line: '.' empty, 'X' black, 'O' white.
"""

import argparse
import logging
import sys

from gomoku.game.board import Board, BLACK, WHITE
from gomoku.ai.config import AIDifficulty, EngineConfig
from gomoku.ai.engine import AIEngine
from gomoku.ai.patterns import LINE_EVALUATORS

COLORS = {'black': BLACK, 'white': WHITE}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Choose a Gomoku move.")
    parser.add_argument("board", nargs="?", default="-",
                        help="board file, '-' for stdin (default)")
    parser.add_argument("--color", choices=sorted(COLORS), default="black",
                        help="side to move")
    parser.add_argument("--difficulty", choices=[d.label for d in AIDifficulty],
                        default=AIDifficulty.HARD.label)
    parser.add_argument("--depth", type=int, default=None,
                        help="search depth in plies (overrides --difficulty)")
    parser.add_argument("--strategy", choices=sorted(LINE_EVALUATORS),
                        default="patterns", help="line scoring strategy")
    parser.add_argument("--size", type=int, default=None,
                        help="expected board size (default: size of the input)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the opening move")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def read_board(path: str) -> Board:
    if path == "-":
        return Board.from_strings(sys.stdin.read().splitlines())
    with open(path, encoding="utf-8") as f:
        return Board.from_strings(f.read().splitlines())


def run(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        board = read_board(args.board)
        depth = args.depth
        if depth is None:
            depth = AIDifficulty.from_label(args.difficulty).depth
        config = EngineConfig(
            max_depth=depth,
            board_size=args.size or board.size,
            strategy=args.strategy,
            seed=args.seed,
        )
        engine = AIEngine(config)
        move = engine.choose_move(board, COLORS[args.color])
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(board)
    if move is None:
        print("No move available.")
    else:
        print(f"{args.color} plays {move[0]} {move[1]}")
    return 0


def main():
    """Entry point."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(0)


if __name__ == "__main__":
    main()
