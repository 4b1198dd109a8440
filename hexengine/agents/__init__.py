"""Computer-player policies."""

from .random_agent import RandomAgent
from .heuristic_agent import HeuristicAgent
from .computer_player import ComputerPlayer, Strength, choose_move
from ..registry import list_policies, register_policy
from ..search.hex import make_hex_minimax_policy

if Strength.SAMPLING.value not in list_policies():
    register_policy(Strength.SAMPLING.value, RandomAgent)
if Strength.HEURISTIC.value not in list_policies():
    register_policy(Strength.HEURISTIC.value, HeuristicAgent)
if Strength.SEARCH.value not in list_policies():
    register_policy(Strength.SEARCH.value, make_hex_minimax_policy)

__all__ = [
    "RandomAgent",
    "HeuristicAgent",
    "ComputerPlayer",
    "Strength",
    "choose_move",
]
