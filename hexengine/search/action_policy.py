from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from hexengine.games.hex.board import Coord, HexBoard, Side


class MovePolicy(ABC):
    """
    Anything that can produce a move for a side on a board.

    Knows only about:
      - a ``HexBoard`` (which it may mutate speculatively but must restore)
      - the ``Side`` to move
    """

    @abstractmethod
    def select_move(self, board: HexBoard, side: Side) -> Optional[Coord]:
        """
        Choose a coordinate for ``side``.

        Returns:
            ``(row, col)`` of an empty playable cell, or ``None`` when the
            board has no empty cell left.
        """
        raise NotImplementedError
