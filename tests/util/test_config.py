from __future__ import annotations

import logging
from pathlib import Path

import pytest

from common import settings
from util.config import _find_project_root, load_config


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.mark.usefixtures("clean_env")
def test_default_then_root_override(tmp_path: Path) -> None:
    _write(tmp_path / "configs" / "default.yaml", "ramp:\n  anchor_stop: 500\nother: 1\n")
    _write(tmp_path / "config.yaml", "ramp:\n  anchor_theme: dark\n")
    cfg = load_config(tmp_path)
    # top-level keys are replaced, not merged
    assert cfg == {"ramp": {"anchor_theme": "dark"}, "other": 1}


@pytest.mark.usefixtures("clean_env")
def test_missing_files_give_empty_dict(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}


@pytest.mark.usefixtures("clean_env")
def test_invalid_yaml_is_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    _write(tmp_path / "configs" / "default.yaml", "ramp: [unclosed\n")
    _write(tmp_path / "config.yaml", "- just\n- a list\n")
    with caplog.at_level(logging.WARNING, logger="util.config"):
        assert load_config(tmp_path) == {}
    assert "failed to load" in caplog.text


@pytest.mark.usefixtures("clean_env")
def test_disabled_by_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(tmp_path / "configs" / "default.yaml", "ramp:\n  anchor_stop: 500\n")
    monkeypatch.setenv("RAMP_CONFIG_DISABLED", "1")
    settings.reload_from_env()
    assert load_config(tmp_path) == {}


@pytest.mark.usefixtures("clean_env")
def test_repository_default_config_is_readable() -> None:
    cfg = load_config()
    assert cfg["ramp"]["anchor_stop"] == 500


def test_find_project_root_fallback(tmp_path: Path) -> None:
    # tmp_path/a/b のような構造（上流に .git/pyproject.toml/configs が無い）では
    # フォールバックで start.parent.parent を返す
    start = tmp_path / "a" / "b"
    start.mkdir(parents=True)
    assert _find_project_root(start) == start.resolve().parent.parent


def test_find_project_root_marker(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    start = tmp_path / "src" / "util"
    start.mkdir(parents=True)
    assert _find_project_root(start) == tmp_path.resolve()
