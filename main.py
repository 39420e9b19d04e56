from __future__ import annotations

import logging
from typing import Any, Mapping

import numpy as np

from common.logging import setup_default_logging
from common.settings import get as get_settings
from lines import Line, get_generator
from util.utils import load_config

logger = logging.getLogger(__name__)


def build_lines(cfg: Mapping[str, Any]) -> list[Line]:
    """設定辞書の `lines` エントリごとに生成関数を解決して `Line` を返す。"""
    seed = cfg.get("seed")
    rng = np.random.default_rng(seed) if seed is not None else None
    default_length = get_settings().DEFAULT_LENGTH
    out: list[Line] = []
    for entry in cfg.get("lines") or []:
        gen = get_generator(str(entry["generator"]))
        # 型検査は生成関数側に任せる（暗黙の int/float 変換はしない）
        length = entry.get("length", default_length)
        multiplier = entry.get("multiplier", 1.0)
        out.append(gen(length, multiplier, rng=rng))
    return out


def main() -> None:
    setup_default_logging()
    cfg = load_config()
    for i, line in enumerate(build_lines(cfg)):
        lo = float(line.samples.min()) if len(line) else float("nan")
        hi = float(line.samples.max()) if len(line) else float("nan")
        logger.info("line %d: n=%d color=%s range=[%.4f, %.4f]", i, len(line), line.to_u8_rgba(), lo, hi)


if __name__ == "__main__":
    main()
