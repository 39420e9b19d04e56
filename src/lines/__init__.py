"""
どこで: `lines` パッケージ。
何を: `Line` と生成関数を公開し、ビルトイン生成関数（sine/cosine）をレジストリへ登録する。
なぜ: 呼び出し側が `from lines import sine_line` や `get_generator("sine")` のどちらでも解決できるようにするため。
"""

from .generator import LineGenerator, ScalarFn, cosine_line, create_line_generator, sine_line
from .line import Line, create_line
from .registry import generator, get_generator, is_generator_registered, list_generators

# ビルトイン生成関数の登録（副作用）
generator("sine")(sine_line)
generator("cosine")(cosine_line)

__all__ = [
    "Line",
    "LineGenerator",
    "ScalarFn",
    "create_line",
    "create_line_generator",
    "sine_line",
    "cosine_line",
    "generator",
    "get_generator",
    "list_generators",
    "is_generator_registered",
]
