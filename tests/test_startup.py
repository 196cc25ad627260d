"""Tests for application startup behavior."""

import pytest

from backend import main
from backend.api import routes


@pytest.mark.asyncio
async def test_app_lifespan_fails_when_settings_invalid(monkeypatch):
    monkeypatch.setattr(
        main, "_get_settings", lambda: (None, "SUDOKU_COUNT_LIMIT must be >= 2, got 1")
    )

    with pytest.raises(RuntimeError, match="Invalid engine configuration at startup"):
        async with main._app_lifespan(main.app):
            pass


@pytest.mark.asyncio
async def test_app_lifespan_succeeds_when_settings_valid(monkeypatch):
    monkeypatch.setattr(
        main, "_get_settings", lambda: (routes.EngineSettings(), None)
    )

    async with main._app_lifespan(main.app):
        pass


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setattr(routes, "_SETTINGS", None)
    monkeypatch.setenv("SUDOKU_COUNT_LIMIT", "3")
    monkeypatch.setenv("SUDOKU_COUNT_MAX_SIZE", "6")
    monkeypatch.setenv("SUDOKU_SOLVE_MAX_NODES", "5000")

    settings, error = routes._get_settings()

    assert error is None
    assert settings == routes.EngineSettings(
        count_limit=3, count_max_size=6, solve_max_nodes=5000
    )


def test_settings_reject_count_limit_below_two(monkeypatch):
    monkeypatch.setattr(routes, "_SETTINGS", None)
    monkeypatch.setenv("SUDOKU_COUNT_LIMIT", "1")

    settings, error = routes._get_settings()

    assert settings is None
    assert "SUDOKU_COUNT_LIMIT" in error


def test_invalid_env_value_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("SUDOKU_COUNT_MAX_SIZE", "sixteen")

    assert routes._env("SUDOKU_COUNT_MAX_SIZE", 9) == 9


def test_settings_reject_non_positive_node_budget(monkeypatch):
    monkeypatch.setattr(routes, "_SETTINGS", None)
    monkeypatch.delenv("SUDOKU_COUNT_LIMIT", raising=False)
    monkeypatch.setenv("SUDOKU_SOLVE_MAX_NODES", "0")

    settings, error = routes._get_settings()

    assert settings is None
    assert "SUDOKU_SOLVE_MAX_NODES" in error
