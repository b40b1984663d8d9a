import pytest

from nerdcave.engine import GameEngine


@pytest.fixture
def engine():
    return GameEngine()


@pytest.fixture
def lit_engine():
    eng = GameEngine()
    eng.execute("use light")
    return eng


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so teardown also removes values a loaded .env file wrote
    for name in ("NERDCAVE_CONFIG", "NERDCAVE_LOG_LEVEL", "NERDCAVE_LOG_DIR"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
