import numpy as np
import pytest

from sliderpref.core.slider import (
    SliderConfig,
    clamp_value,
    position_table,
    position_to_value,
    round_significant,
    value_to_position,
)


def test_linear_examples():
    cfg = SliderConfig(min=0.0, max=100.0)
    assert position_to_value(0, cfg) == 0.0
    assert position_to_value(50, cfg) == pytest.approx(50.0)
    assert position_to_value(100, cfg) == 100.0


def test_log_scale_examples():
    cfg = SliderConfig(min=1.0, max=1000.0, log_scale=True)
    assert position_to_value(0, cfg) == pytest.approx(1.0)
    assert position_to_value(100, cfg) == pytest.approx(1000.0)
    assert position_to_value(50, cfg) == pytest.approx(31.6, abs=0.5)


@pytest.mark.parametrize(
    "lo,hi",
    [(0.0, 100.0), (0.0, 1.0), (-50.0, 50.0), (0.0, 1000.0)],
)
def test_position_roundtrip_without_step(lo, hi):
    cfg = SliderConfig(min=lo, max=hi)
    for p in range(101):
        assert abs(value_to_position(position_to_value(p, cfg), cfg) - p) <= 1


@pytest.mark.parametrize("v", [0.0, 12.5, 33.0, 50.0, 99.9, 100.0])
def test_value_roundtrip_without_step(v):
    cfg = SliderConfig(min=0.0, max=100.0)
    back = position_to_value(value_to_position(v, cfg), cfg)
    # 位置分解能（span / 100 の半分）以内に戻る。
    assert back == pytest.approx(v, abs=0.5)


def test_step_quantizes_offset_from_min():
    cfg = SliderConfig(min=0.0, max=1.0, step=0.05)
    for p in range(101):
        v = position_to_value(p, cfg)
        k = (v - cfg.min) / cfg.step
        assert k == pytest.approx(round(k), abs=1e-9)


def test_integer_step_on_offset_range():
    cfg = SliderConfig(min=5.0, max=25.0, step=1.0)
    values = {position_to_value(p, cfg) for p in range(101)}
    assert values == {float(x) for x in range(5, 26)}


def test_step_rounds_half_up():
    cfg = SliderConfig(min=0.0, max=1.0, step=0.3)
    # delta=0.5 -> 0.5/0.3=1.67 -> 2 steps
    assert position_to_value(50, cfg) == pytest.approx(0.6)
    # delta=0.45 -> 1.5 steps -> 2 steps
    assert position_to_value(45, cfg) == pytest.approx(0.6)


def test_log_scale_ignores_step():
    with_step = SliderConfig(min=1.0, max=1000.0, step=10.0, log_scale=True)
    without = SliderConfig(min=1.0, max=1000.0, log_scale=True)
    for p in (0, 13, 50, 77, 100):
        assert position_to_value(p, with_step) == position_to_value(p, without)


def test_log_scale_is_monotonic():
    cfg = SliderConfig(min=1.0, max=1000.0, log_scale=True)

    precise = position_table(cfg, digits=6)
    assert np.all(np.diff(precise) > 0)

    # 2 桁丸めでは隣接位置が同値になり得るが、逆転はしない。
    rounded = position_table(cfg)
    assert np.all(np.diff(rounded) >= 0)
    assert rounded[0] < rounded[50] < rounded[100]


def test_position_table_matches_scalar_mapping():
    cfg = SliderConfig(min=0.0, max=100.0)
    table = position_table(cfg)
    assert table.dtype == np.float64
    assert table.shape == (101,)
    np.testing.assert_array_equal(table, np.arange(101, dtype=np.float64))


def test_position_is_clamped():
    cfg = SliderConfig(min=0.0, max=100.0)
    assert position_to_value(150, cfg) == 100.0
    assert position_to_value(-3, cfg) == 0.0


def test_value_to_position_clamps_out_of_range_values():
    cfg = SliderConfig(min=0.0, max=100.0)
    assert value_to_position(-5.0, cfg) == 0
    assert value_to_position(500.0, cfg) == 100

    log_cfg = SliderConfig(min=1.0, max=1000.0, log_scale=True)
    assert value_to_position(0.5, log_cfg) == 0
    assert value_to_position(31.6, log_cfg) == 50


def test_value_to_position_rounds_to_nearest():
    cfg = SliderConfig(min=0.0, max=1.0)
    assert value_to_position(0.374, cfg) == 37
    assert value_to_position(0.376, cfg) == 38


def test_round_significant():
    assert round_significant(0.256) == 0.26
    assert round_significant(1234.0) == 1200.0
    assert round_significant(0.0) == 0.0
    assert round_significant(-0.0456) == -0.046
    assert round_significant(3.14159, 4) == 3.142
    with pytest.raises(ValueError):
        round_significant(1.0, 0)


def test_clamp_value():
    cfg = SliderConfig(min=0.5, max=2.0)
    assert clamp_value(0.1, cfg) == 0.5
    assert clamp_value(3.0, cfg) == 2.0
    assert clamp_value(1.25, cfg) == 1.25
