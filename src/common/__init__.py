"""
どこで: `common` パッケージ。
何を: 環境変数パース・設定スナップショット・ロギング初期化の軽量ユーティリティ。
なぜ: スクリプト/ホスト層から共有する基盤を `ramp` 本体から分離し、生成関数を純粋に保つため。
"""

from . import settings
from .logging import setup_default_logging

__all__ = [
    "settings",
    "setup_default_logging",
]
