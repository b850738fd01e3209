"""
edges.py — Ordered Boundary Cells of a Face
============================================

side_range() lists the E cells of one side of a pixel rectangle in
increasing coordinate order:

    RIGHT / LEFT: top → bottom     (x fixed, y increasing)
    DOWN  / UP:   left → right     (y fixed, x increasing)

edge_range() does the same for a side named in the face's reference
frame.  The rectangle side is direction.rotate(orientation.inverse()), and
the list is reversed whenever the rotation flips the axis it runs along,
so that ranges always run along the reference face's local RIGHT/DOWN:

    orientation   reversed for
    NONE          —
    CW            UP, DOWN
    OPPOSITE      all sides
    CCW           LEFT, RIGHT
"""

from .directions import Direction, Rotation


def side_range(bindings, side):
    """(x, y) cells along one side of a rectangle, increasing order."""
    x0, y0, size = bindings
    last = size - 1
    if side == Direction.RIGHT:
        return [(x0 + last, y0 + k) for k in range(size)]
    elif side == Direction.DOWN:
        return [(x0 + k, y0 + last) for k in range(size)]
    elif side == Direction.LEFT:
        return [(x0, y0 + k) for k in range(size)]
    elif side == Direction.UP:
        return [(x0 + k, y0) for k in range(size)]
    else:
        raise ValueError(f"Unknown side: {side}")


def reverses(orientation, direction):
    """Does a face with this orientation list this side backwards?"""
    if orientation == Rotation.OPPOSITE:
        return True
    elif orientation == Rotation.CW:
        return direction.is_vertical()
    elif orientation == Rotation.CCW:
        return not direction.is_vertical()
    return False


def edge_range(face, direction):
    """
    Net cells along a side of a matched face.

    Args:
        face: Face with bindings and orientation set
        direction: side in the reference frame

    Returns:
        list of E (x, y) cells in the reference face's canonical order
    """
    if face.bindings is None:
        raise ValueError(f"Unbound face: {face}")
    cells = side_range(face.bindings,
                       direction.rotate(face.orientation.inverse()))
    if reverses(face.orientation, direction):
        cells.reverse()
    return cells
