"""共通フィクスチャ。

- 代表的なシード/ストップ構成
- 設定キャッシュの環境変数リセット
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from ramp import PaletteConfig
from tests._utils.samples import STANDARD_STOPS


@pytest.fixture()
def blue_config() -> PaletteConfig:
    return PaletteConfig(seed="#18A0FB", stops=[100, 500, 900], anchor_stop=500)


@pytest.fixture()
def full_config() -> PaletteConfig:
    return PaletteConfig(seed="#9600FF", stops=list(STANDARD_STOPS))


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    # テスト内で設定された値を残さない
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()


_ENV_NAMES = (
    "RAMP_LOG_LEVEL",
    "RAMP_PASS_THRESHOLD",
    "RAMP_DEFAULT_THEME",
    "RAMP_CONFIG_DISABLED",
)
