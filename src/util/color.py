"""
どこで: `util.color`。
何を: 色指定の正規化/変換（Hex, RGBA 0–1, RGBA 0–255）とランダム不透明色の生成を一元化。
なぜ: `Line` の生成とレンダラ側で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

RGBA = tuple[float, float, float, float]


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def random_rgba(rng: np.random.Generator | None = None) -> RGBA:
    """一様乱数の RGB と固定アルファ 1.0 からなる RGBA(0–1) を返す。

    - r, g, b はそれぞれ独立に [0, 1) から抽選。
    - `rng` 未指定時は OS エントロピーで初期化した新しい Generator を使う（グローバル状態なし）。
    """
    gen = rng if rng is not None else np.random.default_rng()
    r, g, b = gen.random(3)
    return (float(r), float(g), float(b), 1.0)


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def _as_sequence(value: object) -> Sequence[float | int] | None:
    if isinstance(value, (list, tuple)):
        return value  # type: ignore[return-value]
    if isinstance(value, np.ndarray) and value.ndim == 1:
        return value.tolist()
    return None


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a]) （0–1 または 0–255）, 1 次元 ndarray
    - 返値: (r,g,b,a) （0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    seq = _as_sequence(value)
    if seq is None:
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        fseq = [float(x) for x in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(fseq) == 3:
        fseq.append(1.0)
    # 全要素が 0..1 ならそのまま（0–1 表現）
    if all(0.0 <= x <= 1.0 for x in fseq):
        r, g, b, a = fseq
        return (_clamp01(r), _clamp01(g), _clamp01(b), _clamp01(a))
    # 3 要素指定の 0–255 はアルファも 255 扱い
    if len(seq) == 3:
        fseq[3] = 255.0
    # 次に 0–255 とみなし、整数丸め → 0–1 へスケール
    u8 = [max(0, min(255, int(round(x)))) for x in fseq]
    return (u8[0] / 255.0, u8[1] / 255.0, u8[2] / 255.0, u8[3] / 255.0)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


__all__ = [
    "RGBA",
    "random_rgba",
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
]
