"""Tests for application startup behavior."""

import pytest

from backend import main


@pytest.mark.asyncio
async def test_app_lifespan_fails_when_solver_misconfigured(monkeypatch):
    monkeypatch.setattr(
        main, "_get_solver_settings", lambda: (None, "SOLVER_MAX_STEPS must be >= 0")
    )

    with pytest.raises(RuntimeError, match="Invalid solver configuration at startup"):
        async with main._app_lifespan(main.app):
            pass


@pytest.mark.asyncio
async def test_app_lifespan_fails_on_negative_budget_env(monkeypatch):
    monkeypatch.setenv("SOLVER_MAX_STEPS", "-10")

    with pytest.raises(RuntimeError, match="must be >= 0"):
        async with main._app_lifespan(main.app):
            pass


@pytest.mark.asyncio
async def test_app_lifespan_succeeds_with_default_settings(monkeypatch):
    monkeypatch.delenv("SOLVER_MAX_STEPS", raising=False)

    async with main._app_lifespan(main.app):
        pass


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
    assert main._cors_origins() == ["http://a.test", "http://b.test"]

    monkeypatch.delenv("CORS_ALLOW_ORIGINS")
    assert main._cors_origins() == ["http://localhost:4200"]
