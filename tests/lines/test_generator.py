from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from lines import Line, cosine_line, create_line_generator, sine_line


def test_sine_line_default_multiplier() -> None:
    line = sine_line(4)
    assert isinstance(line, Line)
    np.testing.assert_allclose(line.samples, [0.0, 0.8415, 0.9093, 0.1411], atol=1e-4)


def test_cosine_line_with_multiplier() -> None:
    line = cosine_line(3, 2)
    np.testing.assert_allclose(line.samples, [1.0, -0.4161, -0.6536], atol=1e-4)


def test_custom_square_generator() -> None:
    square_line = create_line_generator(lambda x: x * x)
    line = square_line(5, 1)
    assert line.samples.tolist() == [0.0, 1.0, 4.0, 9.0, 16.0]


def test_samples_match_fn_at_scaled_index() -> None:
    gen = create_line_generator(math.exp)
    line = gen(10, 0.25)
    assert len(line) == 10
    for i, v in enumerate(line.samples):
        assert v == math.exp(i * 0.25)


def test_fn_is_called_in_ascending_index_order() -> None:
    seen: list[float] = []

    def record(x: float) -> float:
        seen.append(x)
        return x

    create_line_generator(record)(4, 0.5)
    assert seen == [0.0, 0.5, 1.0, 1.5]


def test_zero_length_yields_empty_line_with_color() -> None:
    line = sine_line(0)
    assert len(line) == 0
    assert len(line.color) == 4 and line.color[3] == 1.0


def test_generator_color_is_opaque_and_in_range() -> None:
    for _ in range(5):
        r, g, b, a = cosine_line(3).color
        assert all(0.0 <= c < 1.0 for c in (r, g, b))
        assert a == 1.0


def test_generator_with_seeded_rng_is_reproducible() -> None:
    a = sine_line(3, rng=np.random.default_rng(1))
    b = sine_line(3, rng=np.random.default_rng(1))
    assert a.color == b.color
    np.testing.assert_array_equal(a.samples, b.samples)


def test_generator_accepts_numpy_integer_length() -> None:
    assert len(sine_line(np.int64(3))) == 3


def test_negative_length_raises_value_error() -> None:
    with pytest.raises(ValueError):
        sine_line(-1)


@pytest.mark.parametrize("length", [2.5, "3", None, True])
def test_non_integral_length_raises_type_error(length: object) -> None:
    with pytest.raises(TypeError):
        sine_line(length)  # type: ignore[arg-type]


def test_fn_error_propagates_unchanged() -> None:
    class Boom(Exception):
        pass

    def fail_at_two(x: float) -> float:
        if x >= 2:
            raise Boom("x too large")
        return x

    gen = create_line_generator(fail_at_two)
    assert gen(2).samples.tolist() == [0.0, 1.0]
    with pytest.raises(Boom, match="x too large"):
        gen(3)


def test_domain_error_from_math_propagates() -> None:
    log_line = create_line_generator(math.log)
    # log(0) は定義外
    with pytest.raises(ValueError):
        log_line(2)


def test_non_callable_fn_rejected() -> None:
    with pytest.raises(TypeError):
        create_line_generator(3.0)  # type: ignore[arg-type]


def test_generator_exposes_fn_and_name() -> None:
    assert sine_line.fn is math.sin
    assert cosine_line.fn is math.cos
    assert sine_line.__name__ == "sin_line"
    assert cosine_line.__name__ == "cos_line"


def test_each_call_returns_independent_line() -> None:
    a = sine_line(3)
    b = sine_line(3)
    assert a is not b
    assert a.samples is not b.samples


def test_debug_log_when_enabled(env_debug_lines: None, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="lines"):
        sine_line(2)
    assert any("generated 2 samples" in r.getMessage() for r in caplog.records)


def test_no_debug_log_by_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="lines"):
        sine_line(2)
    assert not any("generated" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("multiplier", ["2", True, None, 1j])
def test_non_real_multiplier_raises_type_error(multiplier: object) -> None:
    with pytest.raises(TypeError):
        sine_line(3, multiplier)  # type: ignore[arg-type]


def test_numpy_scalar_multiplier_accepted() -> None:
    line = cosine_line(3, np.float32(2.0))
    np.testing.assert_allclose(line.samples, [1.0, math.cos(2.0), math.cos(4.0)])
