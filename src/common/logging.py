"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- ライブラリ側（`ramp`）は `logging.getLogger(__name__)` でロガーを取得するだけで、ハンドラは付けない。
- スクリプト/ホスト側で設定が無い場合に、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging

from . import settings

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> bool:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 未指定時は設定 `RAMP_LOG_LEVEL` を使う
    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - 設定を適用したら True を返す
    """
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return False
    logging.basicConfig(level=_resolve_level(level), format=_FORMAT)
    return True


__all__ = ["setup_default_logging"]
