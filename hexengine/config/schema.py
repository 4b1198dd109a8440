"""Configuration schema for engine runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass
class BoardConfig:
    size: int = 11
    shape: str = "hexagon"


@dataclass
class PlayerConfig:
    strength: str = "heuristic"
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class MatchConfig:
    num_games: int = 1
    randomize_first_player: bool = False


@dataclass
class AppConfig:
    player_a: PlayerConfig
    player_b: PlayerConfig
    board: BoardConfig = field(default_factory=BoardConfig)
    match: MatchConfig = field(default_factory=MatchConfig)
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        players = data.get("players")
        if not isinstance(players, dict) or "a" not in players or "b" not in players:
            raise ValueError("players.a and players.b are required")

        def _player(raw: Dict[str, Any]) -> PlayerConfig:
            return PlayerConfig(
                strength=str(raw.get("strength", "heuristic")),
                params=dict(raw.get("params") or {}),
            )

        board_data = data.get("board", {})
        board = BoardConfig(
            size=int(board_data.get("size", 11)),
            shape=str(board_data.get("shape", "hexagon")),
        )

        match_data = data.get("match", {})
        match = MatchConfig(
            num_games=int(match_data.get("num_games", 1)),
            randomize_first_player=bool(match_data.get("randomize_first_player", False)),
        )

        seed = data.get("seed")
        if seed is not None:
            seed = int(seed)

        return cls(
            player_a=_player(players["a"]),
            player_b=_player(players["b"]),
            board=board,
            match=match,
            seed=seed,
        )


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
