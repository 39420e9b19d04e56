"""共通フィクスチャ。

- シード固定の NumPy Generator
- 設定（環境変数）の隔離
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings


_LINEGEN_ENV = ("LINEGEN_LOG_LEVEL", "LINEGEN_DEBUG_LINES", "LINEGEN_DEFAULT_LENGTH")


@pytest.fixture(autouse=True)
def clean_linegen_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """外部環境の LINEGEN_* を除去し、既定値の設定で各テストを走らせる。"""
    for name in _LINEGEN_ENV:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def rng() -> np.random.Generator:
    """シード固定の乱数源。"""
    return np.random.default_rng(12345)


@pytest.fixture()
def env_debug_lines(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("LINEGEN_DEBUG_LINES", "1")
    settings.reload_from_env()
    yield
    monkeypatch.delenv("LINEGEN_DEBUG_LINES", raising=False)
    settings.reload_from_env()
