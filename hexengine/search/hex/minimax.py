"""Connectivity-heuristic minimax policy for Hex."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..minimax_policy import MinimaxConfig, MinimaxPolicy
from .connectivity_value_fn import HexConnectivityValueFn


def make_hex_minimax_policy(
    *,
    depth: Optional[int] = None,
    use_alpha_beta: bool = True,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> MinimaxPolicy:
    config = MinimaxConfig(depth=depth, use_alpha_beta=use_alpha_beta)
    return MinimaxPolicy(
        value_fn=HexConnectivityValueFn(),
        config=config,
        rng=rng or np.random.default_rng(seed),
    )
