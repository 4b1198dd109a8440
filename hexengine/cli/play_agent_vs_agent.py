"""CLI for playing computer vs computer."""

from typing import Literal, Optional

import tyro

from hexengine.agents import ComputerPlayer
from hexengine.config import AppConfig, BoardConfig, MatchConfig, PlayerConfig, load_config
from hexengine.games.hex import Side
from hexengine.utils import play_match

StrengthName = Literal["sampling", "heuristic", "search"]
ShapeName = Literal["hexagon", "diamond", "triangle", "parallelogram"]


def play_agent_vs_agent(
    agent1_type: StrengthName = "heuristic",
    agent2_type: StrengthName = "sampling",
    size: int = 7,
    shape: ShapeName = "hexagon",
    num_games: int = 1,
    randomize_first_player: bool = False,
    seed: int = 42,
    config: Optional[str] = None,
):
    """
    Play computer vs computer games.

    Args:
        agent1_type: Strength of agent1 ('sampling', 'heuristic' or 'search')
        agent2_type: Strength of agent2 ('sampling', 'heuristic' or 'search')
        size: Board size N (N x N grid)
        shape: Board shape
        num_games: Number of games to play
        randomize_first_player: Randomly pick which agent plays side A each game
        seed: Random seed
        config: Optional YAML config; when given it replaces the options above
    """
    if config is not None:
        cfg = load_config(config)
    else:
        cfg = AppConfig(
            player_a=PlayerConfig(strength=agent1_type),
            player_b=PlayerConfig(strength=agent2_type),
            board=BoardConfig(size=size, shape=shape),
            match=MatchConfig(num_games=num_games, randomize_first_player=randomize_first_player),
            seed=seed,
        )

    base_seed = cfg.seed if cfg.seed is not None else 0
    agent1 = ComputerPlayer(Side.A, cfg.player_a.strength, seed=base_seed, **cfg.player_a.params)
    agent2 = ComputerPlayer(Side.B, cfg.player_b.strength, seed=base_seed + 1, **cfg.player_b.params)

    print("=" * 50)
    print("Hex - Agent vs Agent")
    print("=" * 50)
    print(f"Agent 1: {agent1.strength.value}")
    print(f"Agent 2: {agent2.strength.value}")
    print(f"Board: {cfg.board.size}x{cfg.board.size} {cfg.board.shape}")
    print(f"Games: {cfg.match.num_games}")
    print("=" * 50)

    agent1_wins, draws, agent2_wins = play_match(
        agent1.policy,
        agent2.policy,
        num_games=cfg.match.num_games,
        size=cfg.board.size,
        shape=cfg.board.shape,
        seed=cfg.seed,
        randomize_first_player=cfg.match.randomize_first_player,
    )

    total = max(cfg.match.num_games, 1)
    print("=" * 50)
    print("Results Summary")
    print("=" * 50)
    print(f"Agent 1 wins: {agent1_wins} ({agent1_wins/total*100:.1f}%)")
    print(f"Agent 2 wins: {agent2_wins} ({agent2_wins/total*100:.1f}%)")
    print(f"Draws: {draws} ({draws/total*100:.1f}%)")
    print("=" * 50)
    return agent1_wins, draws, agent2_wins


def main() -> None:
    tyro.cli(play_agent_vs_agent)


if __name__ == "__main__":
    main()
