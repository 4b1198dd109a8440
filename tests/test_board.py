"""Tests for the Hex grid model."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexengine.games.hex import EMPTY, BoardShape, Cell, HexBoard, Side


def test_new_board_is_empty():
    """Every playable cell starts empty."""
    board = HexBoard(5)
    assert board.size == 5
    assert board.playable_count == 25
    assert board.empty_count() == 25
    for row in range(5):
        for col in range(5):
            assert board.is_empty(row, col)
            assert board.owner(row, col) is None


def test_invalid_size():
    with pytest.raises(ValueError):
        HexBoard(0)


def test_validate_positions():
    board = HexBoard(5)
    assert board.is_playable(0, 0)
    assert board.is_playable(4, 4)
    assert not board.is_playable(-1, 0)
    assert not board.is_playable(0, -1)
    assert not board.is_playable(5, 0)
    assert not board.is_playable(0, 5)


def test_place():
    """Placement succeeds once and fails on occupied or invalid cells."""
    board = HexBoard(5)
    assert board.place(0, 0, Side.A)
    assert board.owner(0, 0) is Side.A
    assert board.cell(0, 0) == Cell(0, 0, Side.A)

    before = board.snapshot()
    assert not board.place(0, 0, Side.B)
    assert not board.place(-1, 0, Side.A)
    assert not board.place(0, 5, Side.A)
    assert not board.place(1, 1, 2)
    assert not board.place(1, 1, None)
    np.testing.assert_array_equal(board.cells, before)


def test_cell_view():
    board = HexBoard(5)
    board.place(1, 2, Side.B)
    cell = board.cell(1, 2)
    assert not cell.is_empty()
    assert cell.is_owned_by(Side.B)
    assert not cell.is_owned_by(Side.A)
    assert board.cell(1, 3).is_empty()
    assert board.cell(9, 9) is None


@pytest.mark.parametrize(
    "coord,expected",
    [
        ((0, 0), 2),
        ((4, 4), 2),
        ((0, 4), 3),
        ((4, 0), 3),
        ((0, 2), 4),
        ((2, 0), 4),
        ((4, 2), 4),
        ((2, 4), 4),
        ((2, 2), 6),
        ((1, 3), 6),
    ],
)
def test_neighbor_counts(coord, expected):
    """Acute corners have 2 neighbors, obtuse corners 3, edges 4, interior 6."""
    board = HexBoard(5)
    assert len(board.neighbors(*coord)) == expected


def test_neighbor_order():
    board = HexBoard(5)
    assert board.neighbors(2, 2) == [(1, 2), (1, 3), (2, 3), (3, 2), (3, 1), (2, 1)]
    assert board.neighbors(0, 0) == [(0, 1), (1, 0)]


def test_empty_cells_raster_order_and_restartable():
    board = HexBoard(3)
    board.place(0, 1, Side.A)
    board.place(2, 0, Side.B)

    view = board.empty_cells()
    first = list(view)
    second = list(view)
    assert first == second == [(0, 0), (0, 2), (1, 0), (1, 1), (1, 2), (2, 1), (2, 2)]
    assert len(view) == 7
    assert view

    # The view is live.
    board.place(2, 2, Side.A)
    assert len(view) == 6


def test_empty_cells_on_full_board():
    board = HexBoard(2)
    for row, col in list(board.empty_cells()):
        board.place(row, col, Side.A)
    assert list(board.empty_cells()) == []
    assert not board.empty_cells()


def test_cell_count_invariant():
    """Empty plus owned cells always equals the playable count."""
    rng = np.random.default_rng(0)
    for shape in BoardShape:
        board = HexBoard(7, shape)
        side = Side.A
        for _ in range(20):
            empties = list(board.empty_cells())
            row, col = empties[int(rng.integers(len(empties)))]
            assert board.place(row, col, side)
            side = side.opponent
            total = board.empty_count() + board.count(Side.A) + board.count(Side.B)
            assert total == board.playable_count


def test_undo_fidelity():
    """Placing then clearing any empty cell restores the board exactly."""
    board = HexBoard(5)
    for row, col, side in [(0, 0, Side.A), (2, 2, Side.B), (3, 1, Side.A)]:
        board.place(row, col, side)

    for row, col in list(board.empty_cells()):
        for side in (Side.A, Side.B):
            before = board.snapshot()
            assert board.place(row, col, side)
            board.clear(row, col)
            np.testing.assert_array_equal(board.cells, before)


def test_speculative_restores_on_every_exit():
    board = HexBoard(4)
    board.place(1, 1, Side.B)
    before = board.snapshot()

    with board.speculative(0, 0, Side.A):
        assert board.owner(0, 0) is Side.A
    np.testing.assert_array_equal(board.cells, before)

    for row, col in list(board.empty_cells()):
        with board.speculative(row, col, Side.A):
            break
    np.testing.assert_array_equal(board.cells, before)

    with pytest.raises(RuntimeError):
        with board.speculative(3, 3, Side.B):
            raise RuntimeError("boom")
    np.testing.assert_array_equal(board.cells, before)


def test_speculative_rejects_illegal_placement():
    board = HexBoard(4)
    board.place(1, 1, Side.B)
    with pytest.raises(ValueError):
        with board.speculative(1, 1, Side.A):
            pass
    assert board.owner(1, 1) is Side.B


def test_copy_is_independent():
    board = HexBoard(4, "diamond")
    board.place(2, 2, Side.A)
    clone = board.copy()
    clone.place(1, 2, Side.B)
    assert board.is_empty(1, 2)
    assert clone.owner(2, 2) is Side.A
    np.testing.assert_array_equal(clone.playable, board.playable)


def test_reset():
    board = HexBoard(4)
    board.place(0, 0, Side.A)
    board.reset()
    assert board.empty_count() == 16
    assert np.all(board.cells == EMPTY)


def test_side_opponent():
    assert Side.A.opponent is Side.B
    assert Side.B.opponent is Side.A


@pytest.mark.parametrize(
    "shape,expected",
    [
        ("hexagon", 25),
        ("parallelogram", 25),
        ("diamond", 13),
        ("triangle", 15),
        (BoardShape.DIAMOND, 13),
        ("Triangle", 15),
    ],
)
def test_shape_playable_counts(shape, expected):
    board = HexBoard(5, shape)
    assert board.playable_count == expected
    assert board.empty_count() == expected


def test_unknown_shape():
    with pytest.raises(ValueError):
        HexBoard(5, "octagon")


def test_custom_shape_predicate():
    board = HexBoard(4, lambda row, col, size: (row + col) % 2 == 0)
    assert board.playable_count == 8
    assert board.is_playable(0, 0)
    assert not board.is_playable(0, 1)
    # Only diagonal offsets (-1,+1) and (+1,-1) keep parity.
    assert board.neighbors(1, 1) == [(0, 2), (2, 0)]


def test_non_playable_cells_behave_as_missing():
    board = HexBoard(5, "diamond")
    assert not board.is_playable(0, 0)
    assert not board.is_empty(0, 0)
    assert board.owner(0, 0) is None
    assert board.cell(0, 0) is None
    assert not board.place(0, 0, Side.A)
    assert board.neighbors(0, 0) == []
    assert board.neighbors(0, 2) == [(1, 2), (1, 1)]
    assert (0, 0) not in list(board.empty_cells())


def test_triangle_shape():
    board = HexBoard(4, BoardShape.TRIANGLE)
    assert board.is_playable(3, 0)
    assert board.is_playable(2, 2)
    assert not board.is_playable(0, 1)
    assert board.neighbors(0, 0) == [(1, 0)]
