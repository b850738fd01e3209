"""
cli.py — Command-Line Entry Point
==================================

Usage:
    python -m cubenet input.txt              # flat wraparound
    python -m cubenet input.txt --cube       # folded cube
    python -m cubenet input.txt --cube -v    # also print face mapping
    python -m cubenet - --cube < input.txt   # read stdin
"""

import argparse
import sys
import time

from .board import parse_input
from .topology import build_cube_topology, build_wraparound_topology
from .walker import walk_board, password


def build_parser():
    parser = argparse.ArgumentParser(
        prog='cubenet',
        description="Walk a path over a flat or cube-folded net and print its password.")
    parser.add_argument('input', help="puzzle file, or '-' for stdin")
    parser.add_argument('--cube', action='store_true',
                        help="fold the net into a cube instead of wrapping flat")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="print face mapping and timing")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.input == '-':
        text = sys.stdin.read()
    else:
        with open(args.input) as f:
            text = f.read()

    board, instructions = parse_input(text)
    if args.verbose:
        print(f"Board {board.width}x{board.height}, {len(instructions)} instructions")

    start = time.time()
    if args.cube:
        topology = build_cube_topology(board, verbose=args.verbose)
    else:
        topology = build_wraparound_topology(board)
    final = walk_board(board, topology, instructions)

    if args.verbose:
        print(f"Final position: row {final.y + 1}, column {final.x + 1}, "
              f"facing {final.facing.name} ({time.time() - start:.3f} s)")
    print(password(final))
    return 0
