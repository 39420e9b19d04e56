"""
共通レジストリ基底クラス
lines/ の生成関数レジストリで使用する名前正規化付きの辞書ラッパ
"""

from __future__ import annotations

import re
from typing import Any, Callable


class BaseRegistry:
    """名前 → オブジェクトのレジストリ。

    - 文字列キーは正規化されます（大文字小文字・キャメル→スネーク・ハイフン→アンダースコア）。
    - デコレータは名前省略可。省略時は `__name__` から自動推論します。
    """

    def __init__(self) -> None:
        self._registry: dict[str, Any] = {}

    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @classmethod
    def _normalize_key(cls, name: str) -> str:
        """レジストリキーの正規化（例: "SineLine" -> "sine_line", "Sine_Line" -> "sine_line"）。"""
        if not isinstance(name, str):
            raise TypeError(f"レジストリキーは str である必要があります: got {name!r}")
        if not name:
            raise ValueError("レジストリキーは空であってはなりません")
        name = name.replace("-", "_")
        # 大文字を含む場合のみキャメル→スネーク変換
        key = cls._camel_to_snake(name) if any(c.isupper() for c in name) else name.lower()
        return re.sub(r"_+", "_", key)

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        """オブジェクトをレジストリに登録するデコレータ。同一オブジェクトの再登録は許容。"""

        def decorator(obj: Any) -> Any:
            key = self._normalize_key(name if name else obj.__name__)
            if key in self._registry and self._registry[key] is not obj:
                raise ValueError(f"'{key}' は既に登録されています")
            self._registry[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> Any:
        key = self._normalize_key(name)
        if key not in self._registry:
            raise KeyError(f"'{name}' は登録されていません")
        return self._registry[key]

    def list_all(self) -> list[str]:
        """登録されているすべての名前を取得（未ソート）。"""
        return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        return self._normalize_key(name) in self._registry

    def unregister(self, name: str) -> None:
        """レジストリから削除（名前が存在しない場合は無視）。"""
        self._registry.pop(self._normalize_key(name), None)

    def clear(self) -> None:
        self._registry.clear()

    @property
    def registry(self) -> dict[str, Any]:
        """レジストリのコピーを返す"""
        return self._registry.copy()
