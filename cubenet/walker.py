"""
walker.py — Path Walking over a Topology
=========================================

The path is a run of step counts separated by turns:

    10R5L5R10L4R5L5  →  (NONE,10) (CW,5) (CCW,5) (CW,10) (CCW,4) (CW,5) (CCW,5)

Each instruction turns first, then advances up to `steps` cells, stopping
in front of the first wall.

The walk itself is a jax.lax.fori_loop over a gather from the dense
topology table, JIT-compiled once per (topology, board) pair:

    state = int32 (x, y, facing)
    step:   cand = table[y, x, facing];  state = wall[cand] ? state : cand
"""

import re
from typing import NamedTuple

import jax
import jax.numpy as jnp

from .directions import Direction, Rotation
from .errors import MalformedNetError
from .topology import Position


class Instruction(NamedTuple):
    rotate: Rotation
    steps: int


_TOKEN = re.compile(r'\d+|[LR]')


def parse_path(line):
    """
    Parse a path line into instructions.

    Returns:
        list of Instruction; the first one never turns
    """
    line = line.strip()
    tokens = _TOKEN.findall(line)
    if not tokens or ''.join(tokens) != line:
        raise MalformedNetError(f"Invalid path: {line!r}")

    instructions = []
    rotate = Rotation.NONE
    expect_steps = True
    for token in tokens:
        if token.isdigit():
            if not expect_steps:
                raise MalformedNetError(f"Two step counts in a row in {line!r}")
            instructions.append(Instruction(rotate, int(token)))
            expect_steps = False
        else:
            if expect_steps:
                raise MalformedNetError(f"Turn without step count in {line!r}")
            rotate = Rotation.CCW if token == 'L' else Rotation.CW
            expect_steps = True
    if expect_steps:
        raise MalformedNetError(f"Path ends with a turn: {line!r}")
    return instructions


def make_walk_fn(topology, board):
    """
    Build a JIT-compiled straight-line walker.

    Args:
        topology: Topology (frozen)
        board: Board supplying wall cells

    Returns:
        walk(state, steps) → state, with state an int32 array (x, y, facing)
    """
    table = jnp.asarray(topology.table)
    walls = jnp.asarray(board.walls())

    @jax.jit
    def walk(state, steps):
        def body(_, s):
            cand = table[s[1], s[0], s[2]]
            return jnp.where(walls[cand[1], cand[0]], s, cand)
        return jax.lax.fori_loop(0, steps, body, state)

    return walk


def apply_path(walk, start, instructions):
    """
    Follow all instructions from a start position.

    Args:
        walk: function from make_walk_fn()
        start: (x, y, facing)
        instructions: list of Instruction

    Returns:
        Position after the last instruction
    """
    x, y, facing = start
    state = jnp.asarray([x, y, int(facing)], dtype=jnp.int32)
    for ins in instructions:
        turned = (state[2] + int(ins.rotate)) % 4
        state = walk(state.at[2].set(turned), ins.steps)
    x, y, facing = (int(v) for v in state)
    return Position(x, y, Direction(facing))


def password(position):
    """Checksum 1000·row + 4·column + facing, with 1-based row and column."""
    return 1000 * (position.y + 1) + 4 * (position.x + 1) + int(position.facing)


def walk_board(board, topology, instructions):
    """Walk the path from the board's start and return the final Position."""
    walk = make_walk_fn(topology, board)
    return apply_path(walk, board.start(), instructions)
