"""
faces.py — Face Nodes, Face-Size Detection, Block Location, Net Links
======================================================================

A net is cut into E×E blocks; each fully occupied block is one cube face.

    E = gcd of every row run and every column run of occupied cells

Faces live in an arena (a plain list) and refer to each other by integer
handle, so both the concrete net graph and the reference cube can be
walked and re-walked without object identity concerns.

Connection convention: faces[a].connections[d] = (b, s, invert) means that
leaving face a through its side d enters face b through its side s.  The
relation is symmetric: faces[b].connections[s] = (a, d, invert).
"""

from math import gcd
from typing import NamedTuple, Optional

import numpy as np

from .directions import Direction, Rotation, NUM_DIRECTIONS
from .errors import MalformedNetError, InvalidCubeError


NUM_FACES = 6


class Bindings(NamedTuple):
    """Pixel rectangle of one face: top-left (min_x, min_y) and edge length."""
    min_x: int
    min_y: int
    size: int


class Connection(NamedTuple):
    face: int            # handle into the owning arena
    side: Direction      # side of the neighbor where the edge lands
    invert: bool = False


class Face:
    """One square of the cube, either located in a net or abstract."""

    def __init__(self, bindings=None, block=None):
        self.bindings: Optional[Bindings] = bindings
        self.block = block
        self.orientation = Rotation.NONE
        self.reference: Optional[int] = None
        self.connections = [None] * NUM_DIRECTIONS

    def bind(self, bindings):
        if self.bindings is not None:
            raise ValueError(f"Face already bound to {self.bindings}")
        self.bindings = bindings

    def connect(self, direction, face, side, invert=False):
        self.connections[direction] = Connection(face, Direction(side), invert)

    def neighbors(self):
        """(direction, Connection) for every live connection."""
        return [(Direction(d), conn) for d, conn in enumerate(self.connections)
                if conn is not None]

    def __repr__(self):
        return (f"Face(block={self.block}, bindings={self.bindings}, "
                f"orientation={self.orientation.name})")


# ============================================================
# Face-size detection
# ============================================================

def _run_length(line):
    """Length from first to last occupied cell of a 1-D mask."""
    idx = np.flatnonzero(line)
    if idx.size == 0:
        return 0
    return int(idx[-1] - idx[0] + 1)


def detect_face_size(board):
    """
    Cube edge length E of a net.

    Every row and every column must contain at least one occupied cell;
    the first-to-last run lengths are reduced with gcd.

    Args:
        board: Board (anything with .occupancy() → (H, W) bool)

    Returns:
        int E >= 1
    """
    occ = board.occupancy()
    size = 0
    for axis_name, lines in (('row', occ), ('column', occ.T)):
        for k, line in enumerate(lines):
            run = _run_length(line)
            if run == 0:
                raise MalformedNetError(f"Unexpected empty {axis_name} {k}")
            size = gcd(size, run)
    if size == 0:
        raise MalformedNetError("Empty net")
    return size


# ============================================================
# Face location
# ============================================================

def locate_faces(board, size=None):
    """
    Cut the net into E×E blocks and return the occupied ones.

    Args:
        board: Board
        size: edge length; detected with detect_face_size() if None

    Returns:
        faces: list of 6 Face, row-major by block, with bindings and block set
    """
    if size is None:
        size = detect_face_size(board)
    occ = board.occupancy()
    height, width = occ.shape
    if height % size != 0 or width % size != 0:
        raise MalformedNetError(
            f"Grid {width}x{height} is not a multiple of face size {size}")

    faces = []
    for by in range(height // size):
        for bx in range(width // size):
            block = occ[by * size:(by + 1) * size, bx * size:(bx + 1) * size]
            if block.all():
                faces.append(Face(Bindings(bx * size, by * size, size), (bx, by)))
            elif block.any():
                raise MalformedNetError(
                    f"Block ({bx}, {by}) is partially occupied")

    if len(faces) != NUM_FACES:
        raise InvalidCubeError(f"Expected {NUM_FACES} faces, found {len(faces)}")
    return faces


# ============================================================
# Net adjacency
# ============================================================

def connect_adjacent(faces):
    """
    Link faces whose blocks touch in the flat net.

    Pure 2-D adjacency: A → B through d lands on B's side d.opposite(),
    never inverted.  Mutates faces in place.
    """
    by_block = {face.block: handle for handle, face in enumerate(faces)}
    for face in faces:
        bx, by = face.block
        for direction in Direction:
            dx, dy = direction.delta()
            other = by_block.get((bx + dx, by + dy))
            if other is not None:
                face.connect(direction, other, direction.opposite())
    return faces
