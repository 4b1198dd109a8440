"""Random agent implementation."""

from typing import Optional

import numpy as np

from hexengine.games.hex.board import Coord, HexBoard, Side
from hexengine.search.action_policy import MovePolicy


class RandomAgent(MovePolicy):
    """Agent that samples uniformly among empty cells."""

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducibility (ignored when ``rng`` is given)
            rng: Generator to draw from
        """
        self.rng = rng or np.random.default_rng(seed)

    def select_move(self, board: HexBoard, side: Side) -> Optional[Coord]:
        candidates = list(board.empty_cells())
        if not candidates:
            return None
        return candidates[int(self.rng.integers(len(candidates)))]
