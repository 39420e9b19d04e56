"""
どこで: `lines.generator`。
何を: スカラー関数 `fn` から「整数 index × multiplier で標本化した `Line`」を返す生成関数を作る。
なぜ: sin/cos などの特殊化を名前付きの再利用可能な値として保持しつつ、標本化ループを 1 箇所に集約するため。

概要:
- `create_line_generator(fn)` は `fn` を閉包に持つ生成関数を返す（高階関数）。
- 生成関数は `create_line` で新しい `Line`（空サンプル・ランダム色）を得てから、
  `i = 0..length-1` の順に `fn(i * multiplier)` を評価してサンプル列とする。
- `fn` が送出した例外はそのまま呼び出し元へ伝播する（部分結果は返さない）。
"""

from __future__ import annotations

import logging
import math
import numbers
import operator
from dataclasses import replace
from typing import Callable, Protocol

import numpy as np

from common.settings import get as get_settings

from .line import Line, create_line

logger = logging.getLogger(__name__)

ScalarFn = Callable[[float], float]


class LineGenerator(Protocol):
    fn: ScalarFn

    def __call__(
        self,
        length: int,
        multiplier: float = 1.0,
        *,
        rng: np.random.Generator | None = None,
    ) -> Line: ...


def _validate_length(length: object) -> int:
    if isinstance(length, bool):
        raise TypeError(f"length は整数である必要があります: got {length!r}")
    try:
        n = operator.index(length)  # type: ignore[arg-type]
    except TypeError as e:
        raise TypeError(f"length は整数である必要があります: got {length!r}") from e
    if n < 0:
        raise ValueError(f"length は 0 以上である必要があります: got {n}")
    return n


def _validate_multiplier(multiplier: object) -> float:
    if isinstance(multiplier, bool) or not isinstance(multiplier, numbers.Real):
        raise TypeError(f"multiplier は実数である必要があります: got {multiplier!r}")
    return float(multiplier)


def create_line_generator(fn: ScalarFn) -> LineGenerator:
    """スカラー関数 `fn` を標本化する `Line` 生成関数を返します。

    Parameters
    ----------
    fn : Callable[[float], float]
        1 引数の数値関数。要求される全ての `i * multiplier` で定義されている必要がある。

    Returns
    -------
    LineGenerator
        `(length, multiplier=1.0, *, rng=None) -> Line`。

    例外:
    - TypeError: `fn` が呼び出し可能でない場合。
    """
    if not callable(fn):
        raise TypeError(f"fn は呼び出し可能である必要があります: got {fn!r}")

    def generate(
        length: int,
        multiplier: float = 1.0,
        *,
        rng: np.random.Generator | None = None,
    ) -> Line:
        n = _validate_length(length)
        m = _validate_multiplier(multiplier)
        line = create_line(rng)
        samples = np.fromiter((fn(i * m) for i in range(n)), dtype=np.float64, count=n)
        out = replace(line, samples=samples)
        if get_settings().DEBUG_LINES:
            logger.debug("%s: generated %d samples (multiplier=%g)", generate.__name__, n, m)
        return out

    fn_name = getattr(fn, "__name__", type(fn).__name__)
    generate.__name__ = f"{fn_name}_line"
    generate.__qualname__ = generate.__name__
    generate.__doc__ = f"`{fn_name}(i * multiplier)` を i = 0..length-1 で標本化した `Line` を返す。"
    generate.fn = fn  # type: ignore[attr-defined]
    logger.debug("built line generator for %s", fn_name)
    return generate  # type: ignore[return-value]


sine_line = create_line_generator(math.sin)
cosine_line = create_line_generator(math.cos)


__all__ = [
    "ScalarFn",
    "LineGenerator",
    "create_line_generator",
    "sine_line",
    "cosine_line",
]
