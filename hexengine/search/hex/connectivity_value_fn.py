"""Connected-component heuristic for Hex minimax leaves."""

from __future__ import annotations

from typing import Sequence

from hexengine.games.hex.board import Coord, HexBoard, Side
from hexengine.games.hex.connectivity import connected_components, connection_axis
from ..value_fn import BoardValueFn

CELL_WEIGHT = 10
SPAN_WEIGHT = 50
EDGE_BONUS = 100


def component_score(component: Sequence[Coord], size: int, side: Side) -> int:
    """
    Score one connected component of ``side``.

    size * 10, plus 50 per unit of extent along the connection axis, plus
    100 for touching the start edge and 100 for touching the goal edge.
    """
    if not component:
        return 0
    axis = connection_axis(side)
    values = [rc[axis] for rc in component]
    lo, hi = min(values), max(values)

    score = len(component) * CELL_WEIGHT
    score += (hi - lo) * SPAN_WEIGHT
    if lo == 0:
        score += EDGE_BONUS
    if hi == size - 1:
        score += EDGE_BONUS
    return score


def connectivity_strength(board: HexBoard, side: Side) -> int:
    return sum(
        component_score(component, board.size, side)
        for component in connected_components(board, side)
    )


class HexConnectivityValueFn(BoardValueFn):
    """Own connectivity strength minus the opponent's."""

    def evaluate(self, board: HexBoard, side: Side) -> float:
        side = Side(side)
        return float(
            connectivity_strength(board, side)
            - connectivity_strength(board, side.opponent)
        )
