"""Hex grid model: cell ownership, shape-aware adjacency and placements."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, List, Optional, Tuple, Union

import numpy as np

from .shapes import BoardShape, ShapePredicate, resolve_shape

EMPTY = 0

# Axial hex offsets; the order fixes neighbor enumeration.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 0),
    (1, -1),
    (0, -1),
)

Coord = Tuple[int, int]


class Side(IntEnum):
    """
    Competing sides.

    * ``A`` connects row 0 to row N-1.
    * ``B`` connects column 0 to column N-1.
    """

    A = 1
    B = -1

    @property
    def opponent(self) -> "Side":
        return Side.B if self is Side.A else Side.A


@dataclass(frozen=True)
class Cell:
    row: int
    col: int
    owner: Optional[Side]

    def is_empty(self) -> bool:
        return self.owner is None

    def is_owned_by(self, side: int) -> bool:
        return self.owner is not None and self.owner == side


class EmptyCells:
    """Lazy, restartable view over the empty playable coordinates of a board."""

    def __init__(self, board: "HexBoard") -> None:
        self._board = board

    def _mask(self) -> np.ndarray:
        return self._board.playable & (self._board.cells == EMPTY)

    def __iter__(self) -> Iterator[Coord]:
        # np.argwhere walks the grid in row-major order.
        for row, col in np.argwhere(self._mask()):
            yield int(row), int(col)

    def __len__(self) -> int:
        return int(np.count_nonzero(self._mask()))

    def __bool__(self) -> bool:
        return bool(self._mask().any())


class HexBoard:
    """
    Square N x N Hex grid restricted by a shape predicate.

    Owners live in an ``int8`` array (``EMPTY``, ``Side.A``, ``Side.B``);
    coordinates outside the shape behave as if they did not exist.
    """

    def __init__(
        self,
        size: int = 11,
        shape: Union[str, BoardShape, ShapePredicate] = BoardShape.HEXAGON,
    ) -> None:
        if size < 1:
            raise ValueError(f"Board size must be >= 1, got {size}")
        self.size = size
        self.shape = shape
        predicate = resolve_shape(shape)
        self.playable = np.array(
            [[bool(predicate(r, c, size)) for c in range(size)] for r in range(size)],
            dtype=bool,
        )
        self.playable_count = int(np.count_nonzero(self.playable))
        self._neighbors: Dict[Coord, List[Coord]] = {
            (r, c): self._compute_neighbors(r, c)
            for r in range(size)
            for c in range(size)
            if self.playable[r, c]
        }
        self.reset()

    def reset(self) -> None:
        self.cells = np.zeros((self.size, self.size), dtype=np.int8)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_playable(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and bool(self.playable[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.is_playable(row, col) and self.cells[row, col] == EMPTY

    def owner(self, row: int, col: int) -> Optional[Side]:
        if not self.is_playable(row, col):
            return None
        value = int(self.cells[row, col])
        return Side(value) if value != EMPTY else None

    def cell(self, row: int, col: int) -> Optional[Cell]:
        if not self.is_playable(row, col):
            return None
        return Cell(row, col, self.owner(row, col))

    @property
    def adjacency(self) -> Dict[Coord, List[Coord]]:
        """Precomputed neighbor lists keyed by playable coordinate (read-only)."""
        return self._neighbors

    def neighbors(self, row: int, col: int) -> List[Coord]:
        """Playable neighbors of ``(row, col)`` in ``NEIGHBOR_OFFSETS`` order."""
        return list(self._neighbors.get((row, col), ()))

    def _compute_neighbors(self, row: int, col: int) -> List[Coord]:
        out = []
        for dr, dc in NEIGHBOR_OFFSETS:
            r, c = row + dr, col + dc
            if self.is_playable(r, c):
                out.append((r, c))
        return out

    def empty_cells(self) -> EmptyCells:
        return EmptyCells(self)

    def empty_count(self) -> int:
        return len(EmptyCells(self))

    def count(self, side: int) -> int:
        return int(np.count_nonzero(self.playable & (self.cells == int(side))))

    def place(self, row: int, col: int, side: int) -> bool:
        """
        Put ``side``'s mark on ``(row, col)``.

        Returns:
            False (and leaves the board untouched) when the coordinate is
            out of bounds, not playable or already owned, or ``side`` is
            not a valid side; True otherwise.
        """
        if side not in (Side.A, Side.B):
            return False
        if not self.is_empty(row, col):
            return False
        self.cells[row, col] = int(side)
        return True

    def clear(self, row: int, col: int) -> None:
        """Undo a speculative placement. Not part of normal play."""
        if self.is_playable(row, col):
            self.cells[row, col] = EMPTY

    @contextmanager
    def speculative(self, row: int, col: int, side: int) -> Iterator["HexBoard"]:
        """Place ``side`` at ``(row, col)`` for the duration of the block."""
        if not self.place(row, col, side):
            raise ValueError(f"Cannot place {side!r} at ({row}, {col})")
        try:
            yield self
        finally:
            self.cells[row, col] = EMPTY

    def snapshot(self) -> np.ndarray:
        return self.cells.copy()

    def copy(self) -> "HexBoard":
        board = HexBoard(self.size, self.shape)
        board.cells = self.cells.copy()
        return board

    def __repr__(self) -> str:
        return (
            f"HexBoard(size={self.size}, shape={self.shape!r}, "
            f"empty={self.empty_count()}/{self.playable_count})"
        )
