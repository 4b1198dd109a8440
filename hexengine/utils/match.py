"""Utilities for playing matches between computer players."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple, Union

import numpy as np

from hexengine.games.hex.board import HexBoard, Side
from hexengine.games.hex.connectivity import has_won
from hexengine.games.hex.shapes import BoardShape, ShapePredicate
from hexengine.search.action_policy import MovePolicy

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    winner: Optional[Side]  # None -> board filled without a connection
    moves: int


def play_game(
    policies: Mapping[Side, MovePolicy],
    board: Optional[HexBoard] = None,
    first: Side = Side.A,
) -> GameResult:
    """
    Alternate placements until one side connects or the board is full.

    Args:
        policies: Policy for each side.
        board: Board to play on (a fresh 11x11 hexagon board if None).
        first: Side that places first.

    Returns:
        GameResult with the winning side (or None) and the number of placements.
    """
    if board is None:
        board = HexBoard()
    side = Side(first)
    moves = 0

    while True:
        move = policies[side].select_move(board, side)
        if move is None:
            return GameResult(winner=None, moves=moves)
        if not board.place(move[0], move[1], side):
            raise RuntimeError(f"{type(policies[side]).__name__} returned illegal move {move} for {side.name}")
        moves += 1
        if has_won(board, side):
            return GameResult(winner=side, moves=moves)
        side = side.opponent


def play_match(
    agent1: MovePolicy,
    agent2: MovePolicy,
    num_games: int = 10,
    size: int = 11,
    shape: Union[str, BoardShape, ShapePredicate] = BoardShape.HEXAGON,
    seed: Optional[int] = None,
    randomize_first_player: bool = False,
) -> Tuple[int, int, int]:
    """
    Play a match between two agents.

    Side A always places first; ``randomize_first_player`` decides per game
    whether agent1 plays side A (otherwise agent1 is always side A).

    Returns:
        Tuple of (agent1_wins, draws, agent2_wins).
    """
    rng = np.random.default_rng(seed)
    agent1_wins = 0
    draws = 0
    agent2_wins = 0

    for game_idx in range(num_games):
        if randomize_first_player:
            agent1_side = Side.A if rng.random() < 0.5 else Side.B
        else:
            agent1_side = Side.A
        policies = {agent1_side: agent1, agent1_side.opponent: agent2}

        result = play_game(policies, board=HexBoard(size, shape), first=Side.A)
        if result.winner is None:
            draws += 1
        elif result.winner is agent1_side:
            agent1_wins += 1
        else:
            agent2_wins += 1
        logger.debug(
            "game %d: agent1=%s winner=%s moves=%d",
            game_idx,
            agent1_side.name,
            result.winner.name if result.winner else "draw",
            result.moves,
        )

    return agent1_wins, draws, agent2_wins
