import importlib
import os

import pytest

import settings


@pytest.fixture
def reload_settings(monkeypatch):
    """Reload :mod:`settings` after tweaking the environment."""

    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(settings)

    yield _reload
    monkeypatch.undo()
    importlib.reload(settings)


def test_environment_overrides(reload_settings):
    mod = reload_settings(
        KS_LANGUAGE="en",
        KS_DEFAULT_WALL_LEVEL="1",
        KS_LOG_LEVEL="debug",
        KS_ASSETS_DIR=os.pathsep.join(["/a", "", "/b"]),
    )
    assert mod.LANGUAGE == "en"
    assert mod.DEFAULT_WALL_LEVEL == 1
    assert mod.LOG_LEVEL == "DEBUG"
    assert mod.ASSETS_DIRS == ["/a", "/b"]


def test_invalid_integer_falls_back_to_default(reload_settings):
    mod = reload_settings(KS_DEFAULT_WALL_LEVEL="high")
    assert mod.DEFAULT_WALL_LEVEL == 3
