"""Utility modules."""

from .match import GameResult, play_game, play_match

__all__ = ["GameResult", "play_game", "play_match"]
