"""Hex-specific value functions and search policies."""

from .connectivity_value_fn import (
    HexConnectivityValueFn,
    component_score,
    connectivity_strength,
)
from .minimax import make_hex_minimax_policy

__all__ = [
    "HexConnectivityValueFn",
    "component_score",
    "connectivity_strength",
    "make_hex_minimax_policy",
]
