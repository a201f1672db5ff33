"""CLI / terminal mode for the best-move finder."""

from __future__ import annotations

import argparse
import logging
import os
import time

from scrabbler.board import Grid
from scrabbler.context import Context, build_context
from scrabbler.dictionary import find_word_list, load_words, minimal_words
from scrabbler.engine import MoveEngine
from scrabbler.errors import DataError
from scrabbler.move import Move
from scrabbler.rack import BLANK_SLOT, Rack
from scrabbler.tiles import load_tiles, tile_values

log = logging.getLogger("scrabbler")

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
DEFAULT_BOARD = os.path.join(DATA_DIR, "board.txt")
DEFAULT_TILES = os.path.join(DATA_DIR, "tiles.txt")

HELP = """Commands:
  t LETTER ROW COL  -- set a tile, '.' clears it, lowercase = blank (e.g. t E 4 7)
  r RACK            -- replace the rack, ? or * for blanks  (e.g. r ENTIRE?)
  f                 -- find the best move
  p                 -- play the last move found
  s                 -- show the board
  anything else     -- exit"""


def print_move(grid: Grid, move: Move) -> None:
    """Report *move* and preview the board after it."""
    print("\nBEST MOVE")
    print(f"Points: {move.score}")
    if not move:
        print("No valid moves found. Check your board and rack.")
        return
    first = move.tiles[0]
    way = "horizontally >" if move.direction == "H" else "vertically v"
    print(f"Play '{move.word}' at ({first.row},{first.col}) {way}")
    if move.is_bingo:
        print("   BINGO (all 7 tiles) -- +50 bonus!")
    print("   Tiles to place: " + " ".join(
        f"{t.board_letter}>({t.row},{t.col})" for t in move.tiles
    ))
    preview = grid.copy()
    for t in move.tiles:
        preview.set_letter(t.row, t.col, t.board_letter)
    print()
    print(preview)


def find_and_report(engine: MoveEngine, grid: Grid, rack: Rack) -> Move:
    print(f"\nRack: {rack}")
    print("Searching for the best move...")
    t0 = time.time()
    move = engine.find_best_move(grid, rack)
    print(f"Searched in {time.time() - t0:.2f}s.")
    print_move(grid, move)
    return move


def run_cli(context: Context, grid: Grid, rack: Rack) -> None:
    """Interactive loop: edit the board and rack, find and play moves."""
    engine = MoveEngine(context)
    last: Move | None = None

    print(grid)
    print(HELP)
    while True:
        try:
            inp = input("\nscrabbler> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        parts = inp.split()
        cmd = parts[0].lower() if parts else ""

        if cmd == "t" and len(parts) == 4:
            try:
                grid.set_letter(int(parts[2]), int(parts[3]), parts[1])
            except ValueError as exc:
                print(f"  Invalid tile input: {exc}")
                continue
            grid.annotate(context.words)
            last = None
            print(grid)
        elif cmd == "r" and len(parts) == 2:
            rack = Rack.from_string(parts[1].upper())
            last = None
            print(f"  Rack: {rack}")
        elif cmd == "f":
            last = find_and_report(engine, grid, rack)
        elif cmd == "p":
            if not last:
                print("  No move to play -- use 'f' first.")
                continue
            slots = [BLANK_SLOT if letter == "?" else ord(letter) - ord("A")
                     for letter in last.rack_letters()]
            try:
                remaining = rack.copy()
                for slot in slots:
                    remaining.take(slot)
            except ValueError:
                print(f"  Rack {rack} cannot play '{last.word}' -- use 'f' again.")
                continue
            grid.commit(last, context.words)
            for slot in slots:
                rack.take(slot)
            print(f"  Played '{last.word}' for {last.score} points.  Rack: {rack}")
            last = None
            print(grid)
        elif cmd == "s":
            print(grid)
            print(f"  Rack: {rack}")
        elif cmd in ("t", "r"):
            print(HELP)
        else:
            break


def load_context(words_path: str | None, tiles_path: str) -> Context:
    path = find_word_list(words_path)
    if words_path and path != words_path:
        log.warning("Word list %s not found.", words_path)
    if path is None:
        log.warning("No dictionary file found -- using built-in minimal word list.")
        words = minimal_words()
    else:
        words = load_words(path)
    tiles = load_tiles(tiles_path)
    if not tiles:
        raise DataError(f"no tile table in {tiles_path}")
    return build_context(words, tile_values(tiles))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Scrabbler -- finds the highest-scoring move for a board and rack",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--tiles", type=str, default=DEFAULT_TILES,
                        help="Tile table: 'LETTER POINTS TOTAL' per line")
    parser.add_argument("--board", type=str, default=DEFAULT_BOARD,
                        help="Board layout file (W w L l . x)")
    parser.add_argument("--game", type=str, default=None,
                        help="Letters already on the board, '.' for empty squares")
    parser.add_argument("--rack", type=str, default="",
                        help="Rack letters, ? or * for blanks")
    parser.add_argument("--once", action="store_true",
                        help="Print the best move and exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        context = load_context(args.words, args.tiles)
        grid = Grid.from_file(args.board)
        if args.game:
            grid.load_letters_file(args.game)
    except DataError as exc:
        log.error("%s", exc)
        return 1
    grid.annotate(context.words)
    rack = Rack.from_string(args.rack.upper())

    if args.once:
        print(grid)
        find_and_report(MoveEngine(context), grid, rack)
        return 0

    print("SCRABBLER -- Best Move Finder")
    run_cli(context, grid, rack)
    return 0
