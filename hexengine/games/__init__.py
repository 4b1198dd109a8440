from __future__ import annotations

from .hex import BoardShape, HexBoard, Side, has_won, winner

__all__ = ["BoardShape", "HexBoard", "Side", "has_won", "winner"]
