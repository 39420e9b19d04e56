"""
どこで: `lines` のレジストリ層（生成関数専用）。
何を: `@generator` デコレータで Line 生成関数を登録し、取得/一覧/検査を提供。
なぜ: sine/cosine などの生成関数を名前で一貫して解決し、設定ファイルから選べるようにするため。

概要:
- API は `@generator` / `get_generator` / `list_generators` / `is_generator_registered`。
- 登録対象は「呼び出し可能なもの」のみ（`create_line_generator` の戻り値を想定）。
- デコレータは名前省略可（`@generator` / `@generator()`）と明示名指定をサポート。
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry

GeneratorFn = Callable[..., Any]

_generator_registry = BaseRegistry()


def generator(arg: Any | None = None, /, name: str | None = None):
    """生成関数をレジストリに登録するデコレータ。

    使用例:
    - `@generator` / `@generator()`                          → 関数名から自動推論。
    - `@generator("custom")` / `@generator(name="custom")`   → 明示名で登録。
    - `generator("sine")(sine_line)`                         → 既存の生成関数を登録。

    例外:
    - TypeError: 呼び出し可能でないものを登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not callable(obj) or isinstance(obj, type):
            raise TypeError(f"@generator は関数のみ登録可能です: got {obj!r}")
        return _generator_registry.register(resolved_name)(obj)

    # 直付け (@generator)
    if callable(arg) and not isinstance(arg, type) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@generator("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_generator(name: str) -> GeneratorFn:
    """登録された生成関数を取得。

    例外:
        KeyError: 登録されていない場合
    """
    return _generator_registry.get(name)


def list_generators() -> list[str]:
    return sorted(_generator_registry.list_all())


def is_generator_registered(name: str) -> bool:
    return _generator_registry.is_registered(name)


def clear_registry() -> None:
    """レジストリをクリア（テスト用）。"""
    _generator_registry.clear()


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _generator_registry.unregister(name)


def get_registry() -> Mapping[str, Any]:
    """レジストリ辞書のコピーを返す（変更しても内部状態に影響しない）。"""
    return _generator_registry.registry


__all__ = [
    "generator",
    "get_generator",
    "list_generators",
    "is_generator_registered",
    "clear_registry",
    "unregister",
    "get_registry",
]
