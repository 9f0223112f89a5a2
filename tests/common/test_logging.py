from __future__ import annotations

import logging

import pytest

from common.logging import _resolve_level, setup_default_logging


@pytest.mark.usefixtures("clean_env")
def test_resolve_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert _resolve_level("debug") == logging.DEBUG
    assert _resolve_level(logging.ERROR) == logging.ERROR
    assert _resolve_level("nonsense") == logging.INFO
    assert _resolve_level(None) == logging.INFO


def test_noop_when_root_has_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [logging.NullHandler()])
    assert setup_default_logging("debug") is False
    assert len(root.handlers) == 1


def test_applies_basic_config_once(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    assert setup_default_logging("warning") is True
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert setup_default_logging("debug") is False
