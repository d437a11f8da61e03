"""Tests for the server entry point."""

import pytest

import app as app_module


@pytest.fixture
def env(monkeypatch):
    monkeypatch.delenv("REDIS_URL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    return monkeypatch


class TestEntryPoint:
    """Test application wiring and server startup."""

    def test_build_app_wires_lifespan(self, env):
        env.setenv("PLUGIN_NAME", "Diagrams")

        application = app_module.build_app()

        assert application.title == "Diagrams"
        assert application.state.config.plugin_name == "Diagrams"
        assert application.router.lifespan_context is app_module.lifespan

    def test_multiple_workers_use_factory(self, env):
        env.setenv("WORKERS", "3")
        calls = []
        env.setattr(app_module.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

        app_module.main()

        assert len(calls) == 1
        args, kwargs = calls[0]
        assert args == ("app:build_app",)
        assert kwargs["factory"] is True
        assert kwargs["workers"] == 3
