"""
directions.py — Walking Directions and Quarter-Turn Rotations
==============================================================

Both groups are cyclic of order 4.  Directions are numbered clockwise
starting from RIGHT, which is also the facing score used by the password:

        UP (3)
    LEFT (2)  RIGHT (0)
        DOWN (1)

Screen coordinates throughout: x grows to the right, y grows downward.
"""

from enum import IntEnum


NUM_DIRECTIONS = 4


class Rotation(IntEnum):
    """Clockwise quarter turns."""
    NONE = 0
    CW = 1
    OPPOSITE = 2
    CCW = 3

    def compose(self, other):
        return Rotation((self + other) % NUM_DIRECTIONS)

    def inverse(self):
        return Rotation(-self % NUM_DIRECTIONS)


class Direction(IntEnum):
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    def opposite(self):
        return Direction((self + 2) % NUM_DIRECTIONS)

    def rotate(self, rotation):
        return Direction((self + rotation) % NUM_DIRECTIONS)

    def is_vertical(self):
        return self in (Direction.UP, Direction.DOWN)

    def delta(self):
        """Unit step (dx, dy) in screen coordinates."""
        return _DELTAS[self]

    @property
    def symbol(self):
        return '>v<^'[self]


_DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}


def required_rotation(target, source):
    """Rotation that turns direction `source` into direction `target`."""
    return Rotation((target - source) % NUM_DIRECTIONS)
