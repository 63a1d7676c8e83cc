"""Configuration defaults, environment overrides and validation."""

from __future__ import annotations

import dataclasses

import pytest

from jeopardy.backend.engine.boardbuilder import BoardBuilder
from jeopardy.backend.errors import ConfigError
from jeopardy.config import GameConfig


def test_defaults() -> None:
    cfg = GameConfig.from_env({})
    assert (cfg.category_count, cfg.clue_count, cfg.pool_size) == (6, 5, 100)
    assert cfg.api_url == "http://jservice.io/api"
    assert cfg.seed is None


def test_env_overrides() -> None:
    cfg = GameConfig.from_env(
        {
            "JEOPARDY_CATEGORIES": "4",
            "JEOPARDY_CLUES": "3",
            "JEOPARDY_API_URL": "http://localhost:3000/api",
            "JEOPARDY_TIMEOUT": "2.5",
            "JEOPARDY_SEED": "11",
        }
    )
    assert cfg.category_count == 4
    assert cfg.clue_count == 3
    assert cfg.api_url == "http://localhost:3000/api"
    assert cfg.timeout == 2.5
    assert cfg.seed == 11


def test_blank_env_value_keeps_default() -> None:
    assert GameConfig.from_env({"JEOPARDY_CLUES": "  "}).clue_count == 5


def test_bad_env_value_raises_config_error() -> None:
    with pytest.raises(ConfigError):
        GameConfig.from_env({"JEOPARDY_CATEGORIES": "six"})


@pytest.mark.parametrize(
    "changes",
    [
        {"category_count": 0},
        {"clue_count": 0},
        {"category_count": 101},
        {"timeout": 0},
    ],
)
def test_validate_rejects_bad_values(changes) -> None:
    with pytest.raises(ConfigError):
        dataclasses.replace(GameConfig(), **changes).validate()


def test_make_builder_uses_config() -> None:
    builder = GameConfig(pool_size=50, seed=3).make_builder()
    assert isinstance(builder, BoardBuilder)
    assert builder.pool_size == 50
    assert builder.source.base_url == "http://jservice.io/api"
