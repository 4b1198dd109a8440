"""Hex grid model and connectivity rules."""

from .board import EMPTY, NEIGHBOR_OFFSETS, Cell, Coord, EmptyCells, HexBoard, Side
from .connectivity import connected_components, connection_axis, has_won, winner
from .shapes import SHAPE_PREDICATES, BoardShape, resolve_shape

__all__ = [
    "EMPTY",
    "NEIGHBOR_OFFSETS",
    "SHAPE_PREDICATES",
    "BoardShape",
    "Cell",
    "Coord",
    "EmptyCells",
    "HexBoard",
    "Side",
    "connected_components",
    "connection_axis",
    "has_won",
    "resolve_shape",
    "winner",
]
