"""Hex connection-game engine: grid model, win detection and computer players.

Usage examples:
    from hexengine import HexBoard, Side, has_won, choose_move
"""
from __future__ import annotations

from .games.hex import BoardShape, HexBoard, Side, has_won, winner
from .agents import ComputerPlayer, Strength, choose_move

__all__ = [
    "BoardShape",
    "ComputerPlayer",
    "HexBoard",
    "Side",
    "Strength",
    "choose_move",
    "has_won",
    "winner",
]
