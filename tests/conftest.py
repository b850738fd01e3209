"""
conftest.py — Shared pytest fixtures for the cubenet test suite
"""

import itertools

import pytest
import numpy as np

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cubenet.board import Board, Tile, parse_board, parse_input


# ============================================================
# --runslow: large nets are skipped unless requested
# ============================================================

def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False,
        help="also run @pytest.mark.slow tests (E=50 nets)"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip = pytest.mark.skip(reason="large net, pass --runslow to run")
    for item in items:
        if item.get_closest_marker("slow") is not None:
            item.add_marker(skip)


EXAMPLE = """\
        ...#
        .#..
        #...
        ....
...#.......#
........#...
..#....#....
..........#.
        ...#....
        .....#..
        .#......
        ......#.

10R5L5R10L4R5L5
"""

# The 11 hexomino cube nets, '#' = one face
CUBE_NETS = {
    '141_a': ["#   ", "####", "#   "],
    '141_b': ["#   ", "####", " #  "],
    '141_c': ["#   ", "####", "  # "],
    '141_d': ["#   ", "####", "   #"],
    '141_e': [" #  ", "####", " #  "],
    '141_f': [" #  ", "####", "  # "],
    '231_a': ["##  ", " ###", " #  "],
    '231_b': ["##  ", " ###", "  # "],
    '231_c': ["##  ", " ###", "   #"],
    '222':   ["##  ", " ## ", "  ##"],
    '33':    ["###  ", "  ###"],
}

# 8 symmetries of the square: (quarter turns, mirrored)
SYMMETRIES = list(itertools.product(range(4), (False, True)))


def layout_mask(layout, turns=0, mirror=False):
    """Block-level boolean mask of a net layout, optionally rotated/mirrored."""
    width = max(len(row) for row in layout)
    mask = np.array([[ch == '#' for ch in row.ljust(width)] for row in layout])
    if mirror:
        mask = mask[:, ::-1]
    return np.rot90(mask, turns)


def net_board(mask, size):
    """Board whose faces are size×size open squares at the mask's blocks."""
    occ = np.kron(mask.astype(np.uint8), np.ones((size, size), dtype=np.uint8)) > 0
    return Board(np.where(occ, int(Tile.OPEN), int(Tile.VOID)))


@pytest.fixture
def example_text():
    """Worked example: cross layout, E=4, with walls and a path."""
    return EXAMPLE


@pytest.fixture
def example_board():
    board, _ = parse_input(EXAMPLE)
    return board


@pytest.fixture
def cross_board():
    """Single-cell faces (E=1) in a cross."""
    return parse_board([" .", "...", " .", " ."])


@pytest.fixture
def make_net():
    """Factory: net_board(layout_mask(CUBE_NETS[name], ...), size)."""
    def _make(name, size, turns=0, mirror=False):
        return net_board(layout_mask(CUBE_NETS[name], turns, mirror), size)
    return _make


@pytest.fixture(params=[(name, turns, mirror)
                        for name in sorted(CUBE_NETS)
                        for turns, mirror in SYMMETRIES],
                ids=lambda p: f"{p[0]}-r{p[1]}{'-m' if p[2] else ''}")
def any_net(request, make_net):
    """Every cube net in every orientation, E=3."""
    name, turns, mirror = request.param
    return make_net(name, 3, turns, mirror)
