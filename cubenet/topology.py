"""
topology.py — Transition Tables for Walking a Net
==================================================

A Topology maps (x, y, direction) → (x', y', facing') for one step.  It is
stored densely over the padded board as int32

    table[y, x, direction] = (x', y', facing')      (-1 where undefined)

Two builders:

  1. build_wraparound_topology() — flat torus: leaving the net wraps to the
     other end of the same row/column, facing unchanged.

  2. build_cube_topology() — folded cube:
       detect E → locate 6 faces → link net neighbors → build reference
       cube → match net onto reference → zip paired edge ranges.

     Inner moves (destination occupied in the flat net) are entered first.
     Cube edges that are also adjacent in the net are then derived a second
     time from the reference cube and must agree, which cross-checks the
     mapping on every net-adjacent edge.

Entry count for a cube net: 6 · E² · 4.
"""

from typing import NamedTuple

import numpy as np

from .directions import Direction, NUM_DIRECTIONS
from .edges import edge_range
from .errors import TopologyMismatchError
from .faces import NUM_FACES, detect_face_size, locate_faces, connect_adjacent
from .mapping import map_onto_reference, describe_faces
from .reference import build_reference_cube


class Position(NamedTuple):
    x: int
    y: int
    facing: Direction


class Topology:
    """Dense (x, y, direction) → Position table over a board grid."""

    def __init__(self, shape):
        height, width = shape
        self.table = np.full((height, width, NUM_DIRECTIONS, 3), -1, dtype=np.int32)

    @property
    def shape(self):
        return self.table.shape[:2]

    def set(self, x, y, direction, to):
        """Enter one transition; an existing different entry is an error."""
        new = [int(to.x), int(to.y), int(to.facing)]
        current = self.table[y, x, direction].tolist()
        if current[0] >= 0 and current != new:
            raise TopologyMismatchError(
                f"Mismatch at ({x}, {y}) {Direction(direction).name}: "
                f"{_fmt(current)} != {_fmt(new)}")
        self.table[y, x, direction] = new

    def lookup(self, position, direction):
        """
        One step from `position` = (x, y) heading `direction`.

        Returns:
            Position(x, y, facing) after the step
        """
        x, y = position[0], position[1]
        entry = self.table[y, x, direction]
        if entry[0] < 0:
            raise KeyError(f"No transition from ({x}, {y}) {Direction(direction).name}")
        return Position(int(entry[0]), int(entry[1]), Direction(int(entry[2])))

    def defined(self):
        """(H, W, 4) boolean mask of populated entries."""
        return self.table[..., 0] >= 0

    def items(self):
        """((x, y, Direction), Position) for every populated entry."""
        ys, xs, ds = np.nonzero(self.defined())
        for y, x, d in zip(ys.tolist(), xs.tolist(), ds.tolist()):
            entry = self.table[y, x, d]
            yield ((x, y, Direction(d)),
                   Position(int(entry[0]), int(entry[1]), Direction(int(entry[2]))))

    def __len__(self):
        return int(np.count_nonzero(self.defined()))

    def freeze(self):
        self.table.setflags(write=False)
        return self


def _fmt(entry):
    x, y, facing = entry
    return f"({x}, {y}) {Direction(facing).name}"


# ============================================================
# Flat moves
# ============================================================

def build_inner_topology(board, topology):
    """Enter every single step whose destination is an occupied cell."""
    for x, y in board.cells():
        for direction in Direction:
            dx, dy = direction.delta()
            if board.occupied(x + dx, y + dy):
                topology.set(x, y, direction, Position(x + dx, y + dy, direction))
    return topology


def build_wraparound_topology(board):
    """
    Flat torus topology: steps wrap to the next occupied cell cyclically
    along the same row or column, skipping void.

    Returns:
        frozen Topology
    """
    topology = Topology(board.shape)
    occ = board.occupancy()

    for y in range(board.height):
        xs = np.flatnonzero(occ[y]).tolist()
        for k, x in enumerate(xs):
            nxt = xs[(k + 1) % len(xs)]
            prv = xs[k - 1]
            topology.set(x, y, Direction.RIGHT, Position(nxt, y, Direction.RIGHT))
            topology.set(x, y, Direction.LEFT, Position(prv, y, Direction.LEFT))

    for x in range(board.width):
        ys = np.flatnonzero(occ[:, x]).tolist()
        for k, y in enumerate(ys):
            nxt = ys[(k + 1) % len(ys)]
            prv = ys[k - 1]
            topology.set(x, y, Direction.DOWN, Position(x, nxt, Direction.DOWN))
            topology.set(x, y, Direction.UP, Position(x, prv, Direction.UP))

    return topology.freeze()


# ============================================================
# Cube edges
# ============================================================

def link_face_edges(topology, faces, reference, matches, ref_handle):
    """
    Enter the 4·E edge transitions leaving one matched face.

    For each reference side d with connection (n, d_n, invert):
        exit  = d.rotate(face.orientation.inverse())          (net frame)
        entry = d_n.opposite().rotate(neighbor.orientation.inverse())
    and the two edge ranges are zipped cell by cell.
    """
    face = faces[matches[ref_handle]]
    for direction in Direction:
        conn = reference[ref_handle].connections[direction]
        neighbor = faces[matches[conn.face]]

        cells = edge_range(face, direction)
        neighbor_cells = edge_range(neighbor, conn.side)
        if conn.invert:
            neighbor_cells.reverse()
        if len(cells) != len(neighbor_cells):
            raise TopologyMismatchError(
                f"Edge length mismatch: {len(cells)} != {len(neighbor_cells)}")

        exit_dir = direction.rotate(face.orientation.inverse())
        entry_dir = conn.side.opposite().rotate(neighbor.orientation.inverse())
        for (x, y), (nx, ny) in zip(cells, neighbor_cells):
            topology.set(x, y, exit_dir, Position(nx, ny, entry_dir))


def fold_cube(board, root=0):
    """
    Locate, link and match the faces of a cube net.

    Returns:
        faces: net arena, each face with reference and orientation set
        reference: reference cube arena
        matches: matches[reference handle] = net handle
    """
    size = detect_face_size(board)
    faces = connect_adjacent(locate_faces(board, size))
    reference = build_reference_cube()
    matches = map_onto_reference(faces, reference, root=root)
    return faces, reference, matches


def build_cube_topology(board, root=0, verbose=False):
    """
    Folded-cube topology of a net.

    Args:
        board: Board holding exactly one cube net
        root: net face handle used as the matching root
        verbose: print the face mapping

    Returns:
        frozen Topology with 6·E²·4 entries
    """
    faces, reference, matches = fold_cube(board, root=root)
    size = faces[0].bindings.size

    if verbose:
        print(f"Face size E = {size}, root block {faces[root].block}")
        print(describe_faces(faces, reference, matches))

    topology = Topology(board.shape)
    build_inner_topology(board, topology)
    for ref_handle in range(NUM_FACES):
        link_face_edges(topology, faces, reference, matches, ref_handle)

    expected = NUM_FACES * size * size * NUM_DIRECTIONS
    if len(topology) != expected:
        raise TopologyMismatchError(
            f"Topology has {len(topology)} entries, expected {expected}")

    if verbose:
        print(f"Cube topology: {len(topology)} transitions")

    return topology.freeze()
