"""Tests for configuration schemas."""

from __future__ import annotations

import pytest

from hexengine.config import AppConfig, load_config


def test_app_config_parsing():
    data = {
        "board": {"size": 9, "shape": "diamond"},
        "players": {
            "a": {"strength": "search", "params": {"depth": 2}},
            "b": {"strength": "sampling"},
        },
        "match": {"num_games": 5, "randomize_first_player": True},
        "seed": "7",
    }

    cfg = AppConfig.from_dict(data)
    assert cfg.board.size == 9
    assert cfg.board.shape == "diamond"
    assert cfg.player_a.strength == "search"
    assert cfg.player_a.params == {"depth": 2}
    assert cfg.player_b.strength == "sampling"
    assert cfg.player_b.params == {}
    assert cfg.match.num_games == 5
    assert cfg.match.randomize_first_player is True
    assert cfg.seed == 7


def test_app_config_defaults():
    cfg = AppConfig.from_dict({"players": {"a": {}, "b": {"strength": "hard"}}})
    assert cfg.board.size == 11
    assert cfg.board.shape == "hexagon"
    assert cfg.player_a.strength == "heuristic"
    assert cfg.player_b.strength == "hard"
    assert cfg.match.num_games == 1
    assert cfg.seed is None


def test_app_config_requires_players():
    with pytest.raises(ValueError):
        AppConfig.from_dict({"board": {"size": 5}})
    with pytest.raises(ValueError):
        AppConfig.from_dict({"players": {"a": {}}})


def test_load_config(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text(
        "board:\n"
        "  size: 5\n"
        "players:\n"
        "  a:\n"
        "    strength: heuristic\n"
        "  b:\n"
        "    strength: search\n"
        "    params:\n"
        "      use_alpha_beta: false\n"
        "seed: 3\n"
    )
    cfg = load_config(path)
    assert cfg.board.size == 5
    assert cfg.player_b.params == {"use_alpha_beta": False}
    assert cfg.seed == 3


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(path)
