"""
どこで: `lines.line`。
何を: サンプル列と RGBA 色を持つ `Line` レコードと、その生成関数 `create_line` を提供。
なぜ: 描画層が読むだけの不変な値として、生成側（generator）と描画側の境界を単純化するため。

データモデル（不変条件）:
- `samples: float64 ndarray (N,)` — 点 index 順のサンプル列。読み取り専用。N=0 も許容。
- `color: (r, g, b, a)` — 各成分 0–1 の 4 要素タプル。`create_line` はアルファを 1.0 に固定する。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from common.settings import get as get_settings
from util.color import RGBA, normalize_color, random_rgba, to_u8_rgba

logger = logging.getLogger(__name__)


def _normalize_samples(samples: np.ndarray | Iterable[float]) -> np.ndarray:
    """`Line` 生成時の内部正規化ヘルパ。"""
    arr = np.array(samples, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"samples は 1 次元である必要があります: ndim={arr.ndim}")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Line:
    """1 本のポリライン分のデータ。

    フィールド:
    - `samples`: 点 index 順の数値列（float64, 読み取り専用）。
    - `color`: RGBA(0–1)。

    生成後に変更しない前提の値オブジェクト。所有権は呼び出し側へ完全に移る。
    """

    samples: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.float64))
    color: RGBA = (0.0, 0.0, 0.0, 1.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "samples", _normalize_samples(self.samples))
        object.__setattr__(self, "color", normalize_color(self.color))

    def __len__(self) -> int:
        return int(self.samples.shape[0])

    def __repr__(self) -> str:
        r, g, b, a = self.color
        return f"Line(n={len(self)}, color=({r:.3f}, {g:.3f}, {b:.3f}, {a:.3f}))"

    def to_u8_rgba(self) -> tuple[int, int, int, int]:
        """色を RGBA(0–255) で返す（レンダラ向け）。"""
        return to_u8_rgba(self.color)


def create_line(rng: np.random.Generator | None = None) -> Line:
    """空のサンプル列とランダムな不透明色を持つ `Line` を生成します。

    Parameters
    ----------
    rng : numpy.random.Generator, optional
        色の抽選に使う乱数源。未指定時は呼び出しごとに新しい Generator を用いる。
    """
    line = Line(color=random_rgba(rng))
    if get_settings().DEBUG_LINES:
        logger.debug("created %r", line)
    return line


__all__ = ["Line", "create_line"]
