"""
test_faces.py — Face-Size Detection, Location and Net Linking Tests
====================================================================

Verifies:
  - E = gcd of row/column runs on the example, the E=1 cross and scaled nets
  - Exactly 6 faces, row-major by block, with pixel bindings
  - Malformed nets: empty rows/columns, non-multiple grid, mixed blocks
  - Invalid cubes: 5 or 7 blocks
  - Net links are symmetric and never inverted
"""

import pytest

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cubenet.board import parse_board
from cubenet.directions import Direction
from cubenet.errors import MalformedNetError, InvalidCubeError
from cubenet.faces import (Bindings, Face, detect_face_size, locate_faces,
                           connect_adjacent)


class TestFaceSize:

    def test_example(self, example_board):
        assert detect_face_size(example_board) == 4

    def test_unit_cross(self, cross_board):
        assert detect_face_size(cross_board) == 1

    @pytest.mark.parametrize("size", [1, 2, 5, 7])
    def test_scaled_nets(self, make_net, size):
        for name in ('141_a', '222', '33'):
            assert detect_face_size(make_net(name, size)) == size

    def test_empty_row(self):
        board = parse_board([".", " ", "."])
        with pytest.raises(MalformedNetError, match="empty row 1"):
            detect_face_size(board)

    def test_empty_column(self):
        board = parse_board(["  ..", "  .."])
        with pytest.raises(MalformedNetError, match="empty column 0"):
            detect_face_size(board)


class TestLocateFaces:

    def test_example_blocks(self, example_board):
        faces = locate_faces(example_board)
        assert [f.block for f in faces] == [(2, 0), (0, 1), (1, 1),
                                            (2, 1), (2, 2), (3, 2)]
        assert faces[0].bindings == Bindings(8, 0, 4)
        assert faces[5].bindings == Bindings(12, 8, 4)

    def test_unit_cross(self, cross_board):
        faces = locate_faces(cross_board)
        assert len(faces) == 6
        assert all(f.bindings.size == 1 for f in faces)

    def test_grid_not_multiple(self):
        """E=2 from the runs, but the grid is 3 columns wide."""
        board = parse_board(["..", "..", " ..", " .."])
        assert detect_face_size(board) == 2
        with pytest.raises(MalformedNetError, match="not a multiple"):
            locate_faces(board)

    def test_mixed_block(self):
        board = parse_board([" ..", " ..", "....", "...."])
        assert detect_face_size(board) == 2
        with pytest.raises(MalformedNetError, match=r"Block \(0, 0\)"):
            locate_faces(board)

    def test_five_blocks(self):
        board = parse_board([" .", "...", " ."])
        with pytest.raises(InvalidCubeError, match="found 5"):
            locate_faces(board)

    def test_seven_blocks(self):
        board = parse_board([".", "....", ".", "."])
        with pytest.raises(InvalidCubeError, match="found 7"):
            locate_faces(board)

    def test_explicit_size(self, make_net):
        """A smaller explicit size splits each face into several blocks."""
        board = make_net('141_a', 2)
        with pytest.raises(InvalidCubeError, match="found 24"):
            locate_faces(board, size=1)


class TestFaceNode:

    def test_defaults(self):
        face = Face()
        assert face.bindings is None
        assert face.connections == [None] * 4
        assert face.neighbors() == []

    def test_bind_once(self):
        face = Face()
        face.bind(Bindings(0, 0, 3))
        with pytest.raises(ValueError, match="already bound"):
            face.bind(Bindings(3, 0, 3))


class TestConnectAdjacent:

    def test_example_links(self, example_board):
        faces = connect_adjacent(locate_faces(example_board))
        # (2,0) only touches (2,1) below it
        assert [(d, c.face) for d, c in faces[0].neighbors()] == [(Direction.DOWN, 3)]
        # (2,1) touches (1,1) left, (2,0) up, (2,2) down
        links = {d: c.face for d, c in faces[3].neighbors()}
        assert links == {Direction.DOWN: 4, Direction.LEFT: 2, Direction.UP: 0}

    def test_tree_with_five_links(self, any_net):
        """Cube nets never contain a 2x2 block: 5 net edges, 10 endpoints."""
        faces = connect_adjacent(locate_faces(any_net))
        assert sum(len(f.neighbors()) for f in faces) == 10

    def test_symmetric_and_not_inverted(self, any_net):
        faces = connect_adjacent(locate_faces(any_net))
        for handle, face in enumerate(faces):
            for direction, conn in face.neighbors():
                assert conn.side == direction.opposite()
                assert not conn.invert
                back = faces[conn.face].connections[conn.side]
                assert back.face == handle
                assert back.side == direction
