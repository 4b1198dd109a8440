"""Minimax search policy with alpha-beta pruning over a shared HexBoard."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from hexengine.games.hex.board import Coord, HexBoard, Side
from hexengine.games.hex.connectivity import has_won
from .action_policy import MovePolicy
from .value_fn import BoardValueFn

logger = logging.getLogger(__name__)


@dataclass
class MinimaxConfig:
    depth: Optional[int] = None  # fixed depth; None -> depth_schedule
    use_alpha_beta: bool = True
    win_score: float = 10000.0
    # (more than N empty cells, depth), checked in order
    depth_schedule: Tuple[Tuple[int, int], ...] = ((20, 3), (10, 4))
    endgame_depth: int = 5


@dataclass
class SearchStats:
    depth: int = 0
    nodes: int = 0
    cutoffs: int = 0
    best_score: float = -math.inf


def select_depth(empty_count: int, config: Optional[MinimaxConfig] = None) -> int:
    """
    Search depth for a board with ``empty_count`` empty cells.

    With the default schedule: >20 -> 3, 11..20 -> 4, <=10 -> 5.
    """
    config = config or MinimaxConfig()
    if config.depth is not None:
        return config.depth
    for threshold, depth in config.depth_schedule:
        if empty_count > threshold:
            return depth
    return config.endgame_depth


class MinimaxPolicy(MovePolicy):
    """
    Depth-limited minimax for one side, mutating the board in place.

    Every candidate is placed through ``HexBoard.speculative`` so the board
    is restored on all exits, including cutoffs.
    """

    def __init__(
        self,
        value_fn: Optional[BoardValueFn] = None,
        config: Optional[MinimaxConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if value_fn is None:
            from .hex.connectivity_value_fn import HexConnectivityValueFn

            value_fn = HexConnectivityValueFn()
        self.value_fn = value_fn
        self.config = config or MinimaxConfig()
        self.rng = rng or np.random.default_rng()
        self.last_stats = SearchStats()

    def select_move(self, board: HexBoard, side: Side) -> Optional[Coord]:
        side = Side(side)
        candidates = list(board.empty_cells())
        if not candidates:
            return None

        depth = select_depth(len(candidates), self.config)
        if depth <= 0:
            raise ValueError("Minimax depth must be >= 1")
        self.last_stats = SearchStats(depth=depth)

        best_score = -math.inf
        best_move: Optional[Coord] = None
        for row, col in candidates:
            with board.speculative(row, col, side):
                score = self._search(
                    board,
                    side,
                    depth=depth - 1,
                    maximizing=False,
                    alpha=-math.inf,
                    beta=math.inf,
                )
            if score > best_score:
                best_score = score
                best_move = (row, col)

        self.last_stats.best_score = best_score
        logger.debug(
            "minimax side=%s depth=%d nodes=%d cutoffs=%d best=%s score=%s",
            side.name,
            depth,
            self.last_stats.nodes,
            self.last_stats.cutoffs,
            best_move,
            best_score,
        )

        if best_move is None:
            # Only reachable if every score is -inf.
            idx = int(self.rng.integers(len(candidates)))
            return candidates[idx]
        return best_move

    def _search(
        self,
        board: HexBoard,
        side: Side,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
    ) -> float:
        self.last_stats.nodes += 1

        if has_won(board, side):
            return self.config.win_score
        if has_won(board, side.opponent):
            return -self.config.win_score

        candidates = list(board.empty_cells())
        if not candidates:
            return 0.0
        if depth == 0:
            return self.value_fn.evaluate(board, side)

        to_move = side if maximizing else side.opponent
        value = -math.inf if maximizing else math.inf

        for row, col in candidates:
            with board.speculative(row, col, to_move):
                child_value = self._search(
                    board,
                    side,
                    depth=depth - 1,
                    maximizing=not maximizing,
                    alpha=alpha,
                    beta=beta,
                )

            if maximizing:
                value = max(value, child_value)
                alpha = max(alpha, child_value)
            else:
                value = min(value, child_value)
                beta = min(beta, child_value)

            if self.config.use_alpha_beta and beta <= alpha:
                self.last_stats.cutoffs += 1
                break

        return value
