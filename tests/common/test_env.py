from __future__ import annotations

import pytest

from common.env import env_bool, env_float, env_int, env_str


def test_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RAMP_TEST_INT", raising=False)
    assert env_int("RAMP_TEST_INT", 3) == 3
    monkeypatch.setenv("RAMP_TEST_INT", "7")
    assert env_int("RAMP_TEST_INT", 3) == 7
    monkeypatch.setenv("RAMP_TEST_INT", "-2")
    assert env_int("RAMP_TEST_INT", 3, min_value=0) == 0
    monkeypatch.setenv("RAMP_TEST_INT", "x")
    assert env_int("RAMP_TEST_INT", 3) == 3


def test_env_float_clamps_and_rejects_nan(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAMP_TEST_FLOAT", "30")
    assert env_float("RAMP_TEST_FLOAT", 4.5, min_value=1.0, max_value=21.0) == 21.0
    monkeypatch.setenv("RAMP_TEST_FLOAT", "0.5")
    assert env_float("RAMP_TEST_FLOAT", 4.5, min_value=1.0) == 1.0
    monkeypatch.setenv("RAMP_TEST_FLOAT", "nan")
    assert env_float("RAMP_TEST_FLOAT", 4.5) == 4.5
    monkeypatch.setenv("RAMP_TEST_FLOAT", "abc")
    assert env_float("RAMP_TEST_FLOAT", 4.5) == 4.5


def test_env_str_choices(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAMP_TEST_STR", " Dark ")
    assert env_str("RAMP_TEST_STR", "light", choices=("light", "dark")) == "dark"
    monkeypatch.setenv("RAMP_TEST_STR", "sepia")
    assert env_str("RAMP_TEST_STR", "light", choices=("light", "dark")) == "light"
    monkeypatch.setenv("RAMP_TEST_STR", "")
    assert env_str("RAMP_TEST_STR", "light") == "light"


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("true", True), ("Off", False), ("yes", True), ("maybe", False)],
)
def test_env_bool(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("RAMP_TEST_BOOL", raw)
    assert env_bool("RAMP_TEST_BOOL", False) is expected
