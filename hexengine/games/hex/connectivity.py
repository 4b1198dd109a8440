"""Win detection and connected components over a HexBoard."""

from __future__ import annotations

from collections import deque
from typing import List, Optional, Set

from .board import Coord, HexBoard, Side


def connection_axis(side: Side) -> int:
    """Index into ``(row, col)`` along which ``side`` must connect."""
    return 0 if side is Side.A else 1


def _start_cells(board: HexBoard, side: Side) -> List[Coord]:
    n = board.size
    if side is Side.A:
        candidates = [(0, c) for c in range(n)]
    else:
        candidates = [(r, 0) for r in range(n)]
    return [rc for rc in candidates if board.owner(*rc) is side]


def has_won(board: HexBoard, side: int) -> bool:
    """
    True if ``side`` owns a chain joining its start and goal boundaries.

    Side A: row 0 -> row N-1. Side B: column 0 -> column N-1.
    Any other ``side`` value yields False.
    """
    if side not in (Side.A, Side.B):
        return False
    side = Side(side)
    axis = connection_axis(side)
    goal = board.size - 1
    token = int(side)
    cells = board.cells

    visited: Set[Coord] = set()
    q = deque()
    for rc in _start_cells(board, side):
        visited.add(rc)
        q.append(rc)

    while q:
        rc = q.popleft()
        if rc[axis] == goal:
            return True
        for nb in board.adjacency[rc]:
            if nb not in visited and cells[nb] == token:
                visited.add(nb)
                q.append(nb)
    return False


def winner(board: HexBoard) -> Optional[Side]:
    for side in (Side.A, Side.B):
        if has_won(board, side):
            return side
    return None


def connected_components(board: HexBoard, side: int) -> List[List[Coord]]:
    """
    Partition ``side``'s cells into maximal same-side components.

    Components are discovered in raster order; each lists its cells in
    discovery order.
    """
    if side not in (Side.A, Side.B):
        return []
    token = int(side)
    cells = board.cells
    visited: Set[Coord] = set()
    components: List[List[Coord]] = []

    for r in range(board.size):
        for c in range(board.size):
            if (r, c) in visited or not board.playable[r, c] or cells[r, c] != token:
                continue
            component = []
            stack = [(r, c)]
            visited.add((r, c))
            while stack:
                rc = stack.pop()
                component.append(rc)
                for nb in board.adjacency[rc]:
                    if nb not in visited and cells[nb] == token:
                        visited.add(nb)
                        stack.append(nb)
            components.append(component)
    return components
