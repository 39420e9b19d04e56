"""
どこで: `common` パッケージ。
何を: lines/util から使う軽量基盤（BaseRegistry, 環境変数設定, ロギング初期化）。
なぜ: 生成ロジックと設定/登録の仕組みを分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry

__all__ = [
    "BaseRegistry",
]
