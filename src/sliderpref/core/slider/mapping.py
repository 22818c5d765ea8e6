# どこで: `src/sliderpref/core/slider/mapping.py`。
# 何を: UI 位置（0..100 の整数）とドメイン値の相互変換（線形/対数・刻み量子化・有効桁丸め）を提供する。
# なぜ: スライダーの数値規約を UI 実装から切り離し、純粋関数として単体テスト可能に保つため。

from __future__ import annotations

import math

import numpy as np

from .config import SliderConfig

POSITION_MIN = 0
POSITION_MAX = 100

# 変換結果そのものを丸める有効桁数（表示の安定化用）。
DISPLAY_SIGNIFICANT_DIGITS = 2


def round_half_up(x: float) -> int:
    """x を四捨五入（0.5 は +∞ 方向）した整数を返す。"""

    return int(math.floor(float(x) + 0.5))


def round_significant(value: float, digits: int = DISPLAY_SIGNIFICANT_DIGITS) -> float:
    """value を有効桁 digits 桁へ丸めて返す。

    `"%.{digits}g"` による文字列化を経由するため、ロケールに依存しない。
    """

    if digits < 1:
        raise ValueError(f"digits は 1 以上である必要があります: got={digits}")
    return float(f"{float(value):.{int(digits)}g}")


def clamp_value(value: float, config: SliderConfig) -> float:
    """value を [config.min, config.max] にクランプして返す。"""

    return max(config.min, min(config.max, float(value)))


def _clamp_position(position: int) -> int:
    return max(POSITION_MIN, min(POSITION_MAX, int(position)))


def _linear_value(position: int, lo: float, hi: float, step: float) -> float:
    delta = position * (hi - lo) / POSITION_MAX
    if step != 0.0:
        delta = round_half_up(delta / step) * step
    return lo + delta


def position_to_value(
    position: int,
    config: SliderConfig,
    *,
    digits: int = DISPLAY_SIGNIFICANT_DIGITS,
) -> float:
    """UI 位置をドメイン値へ変換して返す。

    Parameters
    ----------
    position : int
        スライダー位置。0..100 の外側はクランプする。
    config : SliderConfig
        スライダー設定。
    digits : int
        戻り値そのものに適用する有効桁数。

    Notes
    -----
    - log_scale では (ln min, ln max) 上で刻みなしの線形変換を行い、exp で戻す。
    - 有効桁丸めは表示文字列ではなく戻り値に適用する（往復で値がドリフトしないように）。
    - 丸めの結果、境界付近で [min, max] をわずかに外れる場合がある。永続化前のクランプは呼び出し側の責務。
    - log_scale の単調性は丸め後は非減少にとどまる（既定の 2 桁では隣接位置が同値になり得る）。
      狭義単調増加が必要なら digits を増やす。
    """

    p = _clamp_position(position)
    if config.log_scale:
        value = math.exp(_linear_value(p, math.log(config.min), math.log(config.max), 0.0))
    else:
        value = _linear_value(p, config.min, config.max, config.step)
    return round_significant(value, digits)


def value_to_position(value: float, config: SliderConfig) -> int:
    """ドメイン値を UI 位置（0..100）へ変換して返す。

    レンジ外の value は [min, max] へクランプしてから変換する
    （スライダー描画の失敗に UI 側が対処できないため、例外にはしない）。
    """

    v = clamp_value(value, config)
    if config.log_scale:
        lo, hi, x = math.log(config.min), math.log(config.max), math.log(v)
    else:
        lo, hi, x = config.min, config.max, v
    position = round_half_up(POSITION_MAX * (x - lo) / (hi - lo))
    return _clamp_position(position)


def position_table(
    config: SliderConfig,
    *,
    digits: int = DISPLAY_SIGNIFICANT_DIGITS,
) -> np.ndarray:
    """位置 0..100 それぞれに対応するドメイン値を float64 配列で返す。"""

    positions = np.arange(POSITION_MIN, POSITION_MAX + 1)
    return np.fromiter(
        (position_to_value(int(p), config, digits=digits) for p in positions),
        dtype=np.float64,
        count=positions.size,
    )


__all__ = [
    "DISPLAY_SIGNIFICANT_DIGITS",
    "POSITION_MAX",
    "POSITION_MIN",
    "clamp_value",
    "position_table",
    "position_to_value",
    "round_half_up",
    "round_significant",
    "value_to_position",
]
