"""Command-line entry point: option handling and frontend dispatch."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from jeopardy import main as cli
from jeopardy.config import GameConfig

runner = CliRunner()


@pytest.fixture
def launched(monkeypatch) -> list[tuple[cli.Frontend, GameConfig]]:
    calls: list[tuple[cli.Frontend, GameConfig]] = []
    monkeypatch.setattr(cli, "_launch", lambda f, c: calls.append((f, c)))
    for var in ("CATEGORIES", "CLUES", "POOL_SIZE", "API_URL", "TIMEOUT", "SEED"):
        monkeypatch.delenv(f"JEOPARDY_{var}", raising=False)
    return calls


def test_options_override_defaults(launched) -> None:
    result = runner.invoke(
        cli.app, ["-f", "rich", "-c", "4", "-n", "3", "--seed", "9"]
    )
    assert result.exit_code == 0, result.output
    [(frontend, config)] = launched
    assert frontend is cli.Frontend.rich
    assert (config.category_count, config.clue_count, config.seed) == (4, 3, 9)


def test_environment_is_read(launched, monkeypatch) -> None:
    monkeypatch.setenv("JEOPARDY_API_URL", "http://mirror.test/api")
    result = runner.invoke(cli.app, ["-f", "vanilla"])
    assert result.exit_code == 0, result.output
    assert launched[0][1].api_url == "http://mirror.test/api"


def test_option_beats_environment(launched, monkeypatch) -> None:
    monkeypatch.setenv("JEOPARDY_CATEGORIES", "2")
    runner.invoke(cli.app, ["-f", "pyqt", "-c", "5"])
    assert launched[0][1].category_count == 5


def test_out_of_range_option_is_rejected(launched) -> None:
    result = runner.invoke(cli.app, ["-f", "rich", "-c", "0"])
    assert result.exit_code != 0
    assert launched == []


def test_invalid_environment_is_rejected(launched, monkeypatch) -> None:
    monkeypatch.setenv("JEOPARDY_TIMEOUT", "soon")
    result = runner.invoke(cli.app, ["-f", "rich"])
    assert result.exit_code != 0
    assert launched == []
