"""Heuristic agent implementation."""

import logging
from typing import List, Optional

import numpy as np

from hexengine.games.hex.board import Coord, HexBoard, Side
from hexengine.games.hex.connectivity import has_won
from hexengine.search.action_policy import MovePolicy
from .random_agent import RandomAgent

logger = logging.getLogger(__name__)

NEIGHBOR_WEIGHT = 10


class HeuristicAgent(MovePolicy):
    """
    Heuristic agent that uses simple rules:
    1. Win if possible
    2. Block opponent from winning
    3. Otherwise play next to own stones, near the middle of the board
       across the connection direction
    4. Random if nothing scores
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize heuristic agent.

        Args:
            seed: Random seed for reproducibility (ignored when ``rng`` is given)
            rng: Generator used for the random fallback
        """
        self.rng = rng or np.random.default_rng(seed)
        self._fallback = RandomAgent(rng=self.rng)

    def select_move(self, board: HexBoard, side: Side) -> Optional[Coord]:
        side = Side(side)
        candidates = list(board.empty_cells())
        if not candidates:
            return None

        # Try to win
        move = self._winning_cell(board, candidates, side)
        if move is not None:
            logger.debug("heuristic side=%s wins at %s", side.name, move)
            return move

        # Try to block opponent
        move = self._winning_cell(board, candidates, side.opponent)
        if move is not None:
            logger.debug("heuristic side=%s blocks at %s", side.name, move)
            return move

        best_move = None
        best_score = 0
        for row, col in candidates:
            score = self.placement_score(board, row, col, side)
            if score > best_score:
                best_score = score
                best_move = (row, col)

        if best_move is None:
            return self._fallback.select_move(board, side)
        return best_move

    @staticmethod
    def _winning_cell(
        board: HexBoard, candidates: List[Coord], side: Side
    ) -> Optional[Coord]:
        for row, col in candidates:
            with board.speculative(row, col, side):
                if has_won(board, side):
                    return row, col
        return None

    @staticmethod
    def placement_score(board: HexBoard, row: int, col: int, side: Side) -> int:
        """
        Score an empty cell for ``side``.

        +10 per neighbor owned by ``side``, plus ``size - |x - size // 2|``
        where ``x`` is the column for side A and the row for side B.
        """
        score = 0
        for r, c in board.neighbors(row, col):
            if board.cells[r, c] == side:
                score += NEIGHBOR_WEIGHT

        middle = board.size // 2
        across = col if side is Side.A else row
        score += board.size - abs(across - middle)
        return score
