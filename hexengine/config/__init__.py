"""Config package exports."""

from .schema import (
    AppConfig,
    BoardConfig,
    MatchConfig,
    PlayerConfig,
    load_config,
)

__all__ = [
    "AppConfig",
    "BoardConfig",
    "MatchConfig",
    "PlayerConfig",
    "load_config",
]
