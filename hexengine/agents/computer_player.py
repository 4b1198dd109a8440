"""Strength-parameterised computer player."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from hexengine.games.hex.board import Coord, HexBoard, Side
from hexengine.registry import make_policy
from hexengine.search.action_policy import MovePolicy


class Strength(str, Enum):
    SAMPLING = "sampling"
    HEURISTIC = "heuristic"
    SEARCH = "search"

    @classmethod
    def parse(cls, value: Union[str, "Strength"]) -> "Strength":
        """Accept members, their values, and the easy/medium/hard aliases."""
        if isinstance(value, Strength):
            return value
        key = str(value).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            known = ", ".join([s.value for s in cls] + list(_ALIASES))
            raise ValueError(f"Unknown strength: {value!r} (expected one of {known})") from None


_ALIASES = {
    "easy": Strength.SAMPLING.value,
    "medium": Strength.HEURISTIC.value,
    "hard": Strength.SEARCH.value,
}


class ComputerPlayer:
    """
    A computer player for one side.

    Strength only selects which registered policy produces the moves.
    """

    def __init__(
        self,
        side: Side,
        strength: Union[str, Strength] = Strength.HEURISTIC,
        seed: Optional[int] = None,
        **params: Any,
    ) -> None:
        self.side = Side(side)
        self.strength = Strength.parse(strength)
        self.policy: MovePolicy = make_policy(self.strength.value, seed=seed, **params)

    def select_move(self, board: HexBoard) -> Optional[Coord]:
        return self.policy.select_move(board, self.side)

    def __repr__(self) -> str:
        return f"ComputerPlayer(side={self.side.name}, strength={self.strength.value})"


def choose_move(
    board: HexBoard,
    side: Side,
    strength: Union[str, Strength] = Strength.HEURISTIC,
    seed: Optional[int] = None,
) -> Optional[Coord]:
    """
    Ask for a move for ``side`` at the given strength.

    Returns:
        ``(row, col)``, or ``None`` when no empty cell remains.
    """
    return ComputerPlayer(side, strength, seed=seed).select_move(board)
