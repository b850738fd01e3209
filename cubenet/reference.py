"""
reference.py — Canonical Cube Connectivity
===========================================

Six abstract faces, never bound to a net: a band of four side faces in a
ring plus a top and a bottom.

Face layout (handles), drawn as the cross net the construction describes:

            4
        1   2   3   0
            5

    0-3: band faces, band[i].RIGHT meets band[i+1].LEFT
    4:   top,    band[i].UP   meets top side t_i,    t = UP, LEFT, DOWN, RIGHT
    5:   bottom, band[i].DOWN meets bottom side b_i, b = DOWN, LEFT, UP, RIGHT

t_i turns counter-clockwise and b_i clockwise as i increases: walking
around the band, the edge shared with top/bottom rotates around that face.

Edge ranges run along local RIGHT on horizontal sides and along local DOWN
on vertical sides.  An edge is inverted when the two ranges run in
opposite directions on the solid.  Exactly four edges (eight endpoints)
are inverted; tests re-derive them from a 3-D cube.
"""

from .directions import Direction, Rotation, NUM_DIRECTIONS
from .faces import Face


BAND = (0, 1, 2, 3)
TOP = 4
BOTTOM = 5

FACE_NAMES = ('band0', 'band1', 'band2', 'band3', 'top', 'bottom')

# (face handle, side) endpoints whose edge ranges meet reversed
REFERENCE_INVERTED = frozenset([
    (0, Direction.UP),
    (0, Direction.DOWN),
    (1, Direction.DOWN),
    (3, Direction.UP),
    (TOP, Direction.UP),
    (TOP, Direction.RIGHT),
    (BOTTOM, Direction.DOWN),
    (BOTTOM, Direction.LEFT),
])


def build_reference_cube():
    """
    Build the six-face reference cube.

    Returns:
        faces: list of 6 Face (handles as in BAND / TOP / BOTTOM), unbound
    """
    faces = [Face() for _ in range(6)]

    top_side = Direction.UP
    bottom_side = Direction.DOWN
    for i in BAND:
        right = (i + 1) % NUM_DIRECTIONS
        left = (i - 1) % NUM_DIRECTIONS

        faces[i].connect(Direction.RIGHT, right, Direction.LEFT)
        faces[i].connect(Direction.LEFT, left, Direction.RIGHT)

        faces[i].connect(Direction.UP, TOP, top_side)
        faces[TOP].connect(top_side, i, Direction.UP)

        faces[i].connect(Direction.DOWN, BOTTOM, bottom_side)
        faces[BOTTOM].connect(bottom_side, i, Direction.DOWN)

        top_side = top_side.rotate(Rotation.CCW)
        bottom_side = bottom_side.rotate(Rotation.CW)

    for handle, side in REFERENCE_INVERTED:
        faces[handle].connections[side] = faces[handle].connections[side]._replace(invert=True)

    return faces
