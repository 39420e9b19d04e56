"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

環境変数:
- `LINEGEN_LOG_LEVEL`      : ロギングレベル（既定 "INFO"）。
- `LINEGEN_DEBUG_LINES`    : 生成ごとの debug ログを出すか（既定 False）。
- `LINEGEN_DEFAULT_LENGTH` : 設定ファイルで長さ未指定時のサンプル数（既定 100, 下限 0）。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    LOG_LEVEL: str = "INFO"
    DEBUG_LINES: bool = False
    DEFAULT_LENGTH: int = 100


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。"""
    _settings.LOG_LEVEL = env_str("LINEGEN_LOG_LEVEL", "INFO").upper()
    _settings.DEBUG_LINES = env_bool("LINEGEN_DEBUG_LINES", False)
    _settings.DEFAULT_LENGTH = env_int("LINEGEN_DEFAULT_LENGTH", 100, min_value=0) or 0


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
