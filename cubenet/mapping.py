"""
mapping.py — Matching Net Faces onto the Reference Cube
========================================================

Walks the net-adjacency graph and the reference cube in lock-step from a
pair of roots.  Each net face receives:

    reference   — handle of the reference face it folds onto
    orientation — rotation r such that net direction d on this face is
                  reference direction d.rotate(r)

Propagation across a net edge (src →d→ n, landing on n's side s):

    c        = ref[dst].connections[d.rotate(rot)]
    n ↦ (c.face, required_rotation(c.side, s))

Every net edge is seen from both ends, so a revisit must reproduce the
pair recorded the first time; anything else means the net does not fold.
"""

from .directions import Direction, Rotation, required_rotation
from .errors import InvalidCubeError
from .faces import NUM_FACES
from .reference import FACE_NAMES


def map_onto_reference(faces, reference, root=0, reference_root=0):
    """
    Assign reference faces and orientations to all net faces.

    Args:
        faces: net arena from locate_faces() + connect_adjacent()
        reference: arena from build_reference_cube()
        root: net face handle matched first (any face works)
        reference_root: reference handle the root is matched to

    Returns:
        matches: list, matches[reference handle] = net handle
    """
    matched = {}
    stack = [(root, reference_root, Rotation.NONE)]

    while stack:
        src, dst, rot = stack.pop()
        if src in matched:
            if matched[src] != (dst, rot):
                raise InvalidCubeError(
                    f"Net face {faces[src].block} folds onto both "
                    f"{FACE_NAMES[matched[src][0]]} ({matched[src][1].name}) and "
                    f"{FACE_NAMES[dst]} ({rot.name})")
            continue

        matched[src] = (dst, rot)
        faces[src].reference = dst
        faces[src].orientation = rot

        for direction, conn in faces[src].neighbors():
            target = reference[dst].connections[direction.rotate(rot)]
            stack.append((conn.face, target.face,
                          required_rotation(target.side, conn.side)))

    if len(matched) != NUM_FACES:
        raise InvalidCubeError(
            f"Net is disconnected: reached {len(matched)} of {NUM_FACES} faces")

    matches = [None] * NUM_FACES
    for src, (dst, _) in matched.items():
        if matches[dst] is not None:
            raise InvalidCubeError(
                f"Net faces {faces[matches[dst]].block} and {faces[src].block} "
                f"both fold onto {FACE_NAMES[dst]}")
        matches[dst] = src
    return matches


def describe_faces(faces, reference, matches):
    """
    Text dump of the folded cube, one block per reference face.

    Returns:
        str, e.g.
            top <- block (0, 1) orientation NONE bindings (0, 4, 4)
              > band3 at <
              ...
    """
    lines = []
    for ref_handle, net_handle in enumerate(matches):
        face = faces[net_handle]
        lines.append(f"{FACE_NAMES[ref_handle]} <- block {face.block} "
                     f"orientation {face.orientation.name} "
                     f"bindings {tuple(face.bindings)}")
        for direction in Direction:
            conn = reference[ref_handle].connections[direction]
            inv = " (inverted)" if conn.invert else ""
            lines.append(f"  {direction.symbol} {FACE_NAMES[conn.face]} "
                         f"at {conn.side.symbol}{inv}")
    return '\n'.join(lines)
