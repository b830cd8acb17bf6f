import pytest

from ttt_minimax.config import DEFAULT_DEPTH, DEFAULT_SIDE, EngineConfig


def test_defaults_without_env(monkeypatch):
    monkeypatch.delenv("TTT_DEPTH", raising=False)
    monkeypatch.delenv("TTT_SIDE", raising=False)
    cfg = EngineConfig.from_env()
    assert cfg == EngineConfig(depth=DEFAULT_DEPTH, side=DEFAULT_SIDE)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TTT_DEPTH", "4")
    monkeypatch.setenv("TTT_SIDE", " ")
    cfg = EngineConfig.from_env()
    assert cfg.depth == 4
    assert cfg.side == DEFAULT_SIDE


def test_malformed_env_rejected(monkeypatch):
    monkeypatch.setenv("TTT_SIDE", "three")
    with pytest.raises(ValueError):
        EngineConfig.from_env()
