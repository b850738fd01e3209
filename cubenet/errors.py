"""
errors.py — Failure Taxonomy
=============================

Every failure is fatal: the input is either a valid cube net or it is not,
and a defect in the reference cube must never yield a silently wrong table.

    MalformedNetError     — the grid cannot be cut into uniform square faces
    InvalidCubeError      — the faces do not fold into a cube
    TopologyMismatchError — two derivations disagree about one table entry
"""


class CubeNetError(ValueError):
    """Base class for all cube-net failures."""


class MalformedNetError(CubeNetError):
    """Empty run, non-multiple grid size, partially occupied block, bad text."""


class InvalidCubeError(CubeNetError):
    """Wrong face count, disconnected faces, or a shape that does not fold."""


class TopologyMismatchError(CubeNetError):
    """Internal consistency failure while filling the transition table."""
