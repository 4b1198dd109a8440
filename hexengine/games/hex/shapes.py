"""Board shapes: which coordinates of the N x N grid are playable."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Union

ShapePredicate = Callable[[int, int, int], bool]


class BoardShape(str, Enum):
    HEXAGON = "hexagon"
    DIAMOND = "diamond"
    TRIANGLE = "triangle"
    PARALLELOGRAM = "parallelogram"


def _all_cells(row: int, col: int, size: int) -> bool:
    return True


def _diamond(row: int, col: int, size: int) -> bool:
    center = size // 2
    return abs(row - center) + abs(col - center) <= center


def _triangle(row: int, col: int, size: int) -> bool:
    return col <= row


SHAPE_PREDICATES: Dict[BoardShape, ShapePredicate] = {
    BoardShape.HEXAGON: _all_cells,
    BoardShape.DIAMOND: _diamond,
    BoardShape.TRIANGLE: _triangle,
    BoardShape.PARALLELOGRAM: _all_cells,
}


def resolve_shape(shape: Union[str, BoardShape, ShapePredicate]) -> ShapePredicate:
    """
    Turn a shape identifier into a playability predicate.

    Args:
        shape: ``BoardShape`` member, its string value, or a callable
            ``(row, col, size) -> bool``.

    Returns:
        Predicate deciding whether a coordinate is playable.
    """
    if isinstance(shape, BoardShape):
        return SHAPE_PREDICATES[shape]
    if isinstance(shape, str):
        try:
            return SHAPE_PREDICATES[BoardShape(shape.lower())]
        except ValueError:
            known = ", ".join(s.value for s in BoardShape)
            raise ValueError(f"Unknown board shape: {shape!r} (expected one of {known})") from None
    if callable(shape):
        return shape
    raise ValueError(f"Unsupported shape specification: {shape!r}")
