"""
cubenet — Cube Topology from an Unlabeled 2-D Net
==================================================

Folds a flat net of six equal squares into a cube and tabulates, for every
cell and every walking direction, where a step off that cell lands and
which way the walker then faces.

Modules:
    directions — Direction / Rotation cyclic groups
    errors     — MalformedNetError, InvalidCubeError, TopologyMismatchError
    board      — Tile grid, occupancy accessors, puzzle text parsing
    faces      — Face nodes, face-size detection, block location, net links
    reference  — Canonical 6-face reference cube with inverted edges
    mapping    — Lock-step DFS matching net faces onto the reference cube
    edges      — Ordered boundary cell ranges per face side
    topology   — Dense (x, y, direction) transition table builders
    walker     — jax-jitted path walker and password checksum
    cli        — Command-line entry point
"""

from .directions import Direction, Rotation
from .errors import (CubeNetError, MalformedNetError, InvalidCubeError,
                     TopologyMismatchError)
from .board import Board, Tile, parse_board, parse_input
from .topology import (Position, Topology, build_cube_topology,
                       build_wraparound_topology)

__all__ = [
    'Direction', 'Rotation',
    'CubeNetError', 'MalformedNetError', 'InvalidCubeError',
    'TopologyMismatchError',
    'Board', 'Tile', 'parse_board', 'parse_input',
    'Position', 'Topology', 'build_cube_topology',
    'build_wraparound_topology',
]
