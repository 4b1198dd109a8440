"""Search algorithms and value functions."""

from .action_policy import MovePolicy
from .value_fn import BoardValueFn
from .minimax_policy import MinimaxConfig, MinimaxPolicy, SearchStats, select_depth

__all__ = [
    "MovePolicy",
    "BoardValueFn",
    "MinimaxPolicy",
    "MinimaxConfig",
    "SearchStats",
    "select_depth",
]
