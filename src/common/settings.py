"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

注意: `ramp` の生成関数はこの設定を直接読まない（純関数のまま保つ）。
      スクリプトやホスト連携層が値を取り出して明示的に渡す。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_str

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # Export / contrast
    PASS_THRESHOLD: float = 4.5
    DEFAULT_THEME: str = "light"

    # Config files
    CONFIG_DISABLED: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 文字列は `env_str`（選択肢外は既定値）、数値は `env_float`（範囲に丸める）。
    """
    _settings.LOG_LEVEL = env_str("RAMP_LOG_LEVEL", "info", choices=_LOG_LEVELS).upper()
    _settings.PASS_THRESHOLD = env_float(
        "RAMP_PASS_THRESHOLD", 4.5, min_value=1.0, max_value=21.0
    )
    _settings.DEFAULT_THEME = env_str("RAMP_DEFAULT_THEME", "light", choices=("light", "dark"))
    _settings.CONFIG_DISABLED = env_bool("RAMP_CONFIG_DISABLED", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
