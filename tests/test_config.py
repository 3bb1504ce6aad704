import logging

import pytest

from tictactoe_engine import config
from tictactoe_engine.board import Mark


def test_defaults_without_env(monkeypatch):
    monkeypatch.delenv("TTT_ENGINE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TTT_ENGINE_SEAT", raising=False)
    monkeypatch.delenv("TTT_ENGINE_SEED", raising=False)
    assert config.log_level() == logging.INFO
    assert config.engine_seat() is Mark.O
    assert config.default_seed() is None


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TTT_ENGINE_LOG_LEVEL", "debug")
    monkeypatch.setenv("TTT_ENGINE_SEAT", "x")
    monkeypatch.setenv("TTT_ENGINE_SEED", "17")
    assert config.log_level() == logging.DEBUG
    assert config.engine_seat() is Mark.X
    assert config.default_seed() == 17


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("TTT_ENGINE_LOG_LEVEL", "chatty")
    assert config.log_level() == logging.INFO


def test_bad_seat_rejected(monkeypatch):
    monkeypatch.setenv("TTT_ENGINE_SEAT", "Z")
    with pytest.raises(ValueError):
        config.engine_seat()
