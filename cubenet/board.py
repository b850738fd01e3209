"""
board.py — Tile Grid and Puzzle Text Parsing
=============================================

The net arrives as text rows of ' ' (void), '.' (open) and '#' (wall),
ragged on the right.  Rows are padded with VOID into a rectangular
(H, W) uint8 array so that every accessor can treat out-of-net cells
uniformly.

Input file layout:
    <board rows>
    <blank line>
    <path line, e.g. 10R5L5R10L4R5L5>

Coordinates are 0-based (x = column, y = row).  Anything outside the
array is VOID.
"""

from enum import IntEnum

import numpy as np

from .directions import Direction
from .errors import MalformedNetError
from .walker import parse_path


class Tile(IntEnum):
    VOID = 0
    OPEN = 1
    WALL = 2


TILE_CHARS = {' ': Tile.VOID, '.': Tile.OPEN, '#': Tile.WALL}


class Board:
    """Read-only occupancy view over a rectangular tile array."""

    def __init__(self, tiles):
        tiles = np.array(tiles, dtype=np.uint8)
        if tiles.ndim != 2:
            raise MalformedNetError(f"Board must be 2-D, got shape {tiles.shape}")
        self.tiles = tiles
        self.tiles.setflags(write=False)

    @property
    def shape(self):
        """(height, width) of the padded grid."""
        return self.tiles.shape

    @property
    def height(self):
        return self.tiles.shape[0]

    @property
    def width(self):
        return self.tiles.shape[1]

    def at(self, x, y):
        if 0 <= y < self.height and 0 <= x < self.width:
            return Tile(int(self.tiles[y, x]))
        return Tile.VOID

    def occupied(self, x, y):
        return self.at(x, y) != Tile.VOID

    def is_wall(self, x, y):
        return self.at(x, y) == Tile.WALL

    def occupancy(self):
        """(H, W) boolean mask of non-void cells."""
        return self.tiles != Tile.VOID

    def walls(self):
        """(H, W) boolean mask of wall cells."""
        return self.tiles == Tile.WALL

    def cells(self):
        """Occupied (x, y) cells in row-major order."""
        ys, xs = np.nonzero(self.occupancy())
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def start(self):
        """Leftmost open cell of the top row, facing right."""
        open_x = np.flatnonzero(self.tiles[0] == Tile.OPEN)
        if open_x.size == 0:
            raise MalformedNetError("No open tile in the first row")
        return int(open_x[0]), 0, Direction.RIGHT

    def render(self, marks=None):
        """
        Text picture of the board.

        Args:
            marks: optional {(x, y): Direction} drawn as >v<^

        Returns:
            str with one line per row, trailing void trimmed
        """
        marks = marks or {}
        chars = {Tile.VOID: ' ', Tile.OPEN: '.', Tile.WALL: '#'}
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if (x, y) in marks:
                    row.append(marks[(x, y)].symbol)
                else:
                    row.append(chars[Tile(int(self.tiles[y, x]))])
            lines.append(''.join(row).rstrip())
        return '\n'.join(lines)


# ============================================================
# Text parsing
# ============================================================

def parse_board(lines):
    """
    Build a Board from text rows.

    Args:
        lines: iterable of strings (trailing newlines are stripped)

    Returns:
        Board with rows right-padded with VOID to the widest row
    """
    rows = [line.rstrip('\r\n') for line in lines]
    if not rows:
        raise MalformedNetError("Empty board")

    width = max(len(row) for row in rows)
    tiles = np.zeros((len(rows), width), dtype=np.uint8)
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch not in TILE_CHARS:
                raise MalformedNetError(f"Invalid tile {ch!r} at row {y}, column {x}")
            tiles[y, x] = TILE_CHARS[ch]
    return Board(tiles)


def parse_input(text):
    """
    Split puzzle text into board and path.

    Returns:
        board: Board
        instructions: list of walker.Instruction
    """
    lines = text.splitlines()
    try:
        blank = next(i for i, line in enumerate(lines) if not line.strip())
    except StopIteration:
        raise MalformedNetError("Expected a blank line after the board") from None

    board = parse_board(lines[:blank])
    rest = [line.strip() for line in lines[blank + 1:] if line.strip()]
    if len(rest) != 1:
        raise MalformedNetError(f"Expected exactly one path line, got {len(rest)}")
    return board, parse_path(rest[0])
