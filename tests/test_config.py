import pytest

from boardkit.config import DEFAULT_SIZE, Settings, load_settings
from boardkit.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("BOARDKIT_SIZE", "BOARDKIT_PRESENTER", "BOARDKIT_EMPTY"):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    assert load_settings() == Settings(size=DEFAULT_SIZE, presenter="console", empty=".")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BOARDKIT_SIZE", "5")
    monkeypatch.setenv("BOARDKIT_PRESENTER", "Browser")
    monkeypatch.setenv("BOARDKIT_EMPTY", "_")
    assert load_settings() == Settings(size=5, presenter="browser", empty="_")


@pytest.mark.parametrize("var,value", [
    ("BOARDKIT_SIZE", "three"),
    ("BOARDKIT_SIZE", "0"),
    ("BOARDKIT_EMPTY", ".."),
    ("BOARDKIT_EMPTY", ""),
    ("BOARDKIT_PRESENTER", "curses"),
])
def test_bad_values_name_the_variable(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ConfigError) as ei:
        load_settings()
    assert ei.value.variable == var
    assert var in str(ei.value)
