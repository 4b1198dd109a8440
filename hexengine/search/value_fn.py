"""Abstract board value function for search algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hexengine.games.hex.board import HexBoard, Side


class BoardValueFn(ABC):
    """
    Heuristic evaluator for non-terminal boards.
    """

    @abstractmethod
    def evaluate(self, board: HexBoard, side: Side) -> float:
        """
        Higher is better for ``side``.
        """
        ...
