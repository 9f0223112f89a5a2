from __future__ import annotations

import pytest

from common import settings


@pytest.mark.usefixtures("clean_env")
def test_defaults() -> None:
    s = settings.get()
    assert s.LOG_LEVEL == "INFO"
    assert s.PASS_THRESHOLD == 4.5
    assert s.DEFAULT_THEME == "light"
    assert s.CONFIG_DISABLED is False


@pytest.mark.usefixtures("clean_env")
def test_reload_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAMP_LOG_LEVEL", "debug")
    monkeypatch.setenv("RAMP_PASS_THRESHOLD", "3")
    monkeypatch.setenv("RAMP_DEFAULT_THEME", "DARK")
    monkeypatch.setenv("RAMP_CONFIG_DISABLED", "1")
    settings.reload_from_env()
    s = settings.get()
    assert s.LOG_LEVEL == "DEBUG"
    assert s.PASS_THRESHOLD == 3.0
    assert s.DEFAULT_THEME == "dark"
    assert s.CONFIG_DISABLED is True


@pytest.mark.usefixtures("clean_env")
def test_invalid_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAMP_LOG_LEVEL", "chatty")
    monkeypatch.setenv("RAMP_PASS_THRESHOLD", "99")
    monkeypatch.setenv("RAMP_DEFAULT_THEME", "sepia")
    settings.reload_from_env()
    s = settings.get()
    assert s.LOG_LEVEL == "INFO"
    assert s.PASS_THRESHOLD == 21.0
    assert s.DEFAULT_THEME == "light"
