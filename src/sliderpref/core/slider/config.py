# どこで: `src/sliderpref/core/slider/config.py`。
# 何を: SliderConfig（スライダーのレンジ/刻み/スケール/表示形式）と dict spec からの正規化を提供する。
# なぜ: 不正な設定を呼び出し時ではなく構築時に拒否し、変換関数を全域関数に保つため。

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

_ALLOWED_CONFIG_SPEC_KEYS = {
    "min",
    "max",
    "step",
    "log_scale",
    "as_percent",
    "display_format",
}


@dataclass(frozen=True, slots=True)
class SliderConfig:
    """float スライダー 1 本分の不変設定。

    Notes
    -----
    - step=0 は連続値（量子化しない）を意味する。
    - log_scale=True の場合、UI 位置は log(value) に線形対応する（min/max は正である必要がある）。
    - as_percent は表示専用で、display_format より優先される。
    """

    min: float = 0.0
    max: float = 100.0
    step: float = 0.0
    log_scale: bool = False
    as_percent: bool = False
    display_format: str | None = None

    def __post_init__(self) -> None:
        for name in ("min", "max", "step"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} は数値である必要があります: got={value!r}")
            if not math.isfinite(float(value)):
                raise ValueError(f"{name} は有限値である必要があります: got={value!r}")
            object.__setattr__(self, name, float(value))

        if not self.min < self.max:
            raise ValueError(f"min < max である必要があります: min={self.min}, max={self.max}")
        if self.step < 0.0:
            raise ValueError(f"step は 0 以上である必要があります: got={self.step}")
        if self.log_scale and (self.min <= 0.0 or self.max <= 0.0):
            raise ValueError(
                f"log_scale には正の min/max が必要です: min={self.min}, max={self.max}"
            )

        if self.display_format is not None:
            if not isinstance(self.display_format, str):
                raise TypeError(
                    f"display_format は str である必要があります: got={self.display_format!r}"
                )
            try:
                self.display_format % 1.0
            except (TypeError, ValueError) as exc:
                raise ValueError(
                    f"display_format が float 1 個を受け取れません: {self.display_format!r}"
                ) from exc

    @property
    def span(self) -> float:
        """max - min を返す。"""

        return self.max - self.min


def _as_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "1", "on", "yes"}:
            return True
        if lowered in {"false", "0", "off", "no"}:
            return False
    raise TypeError(f"slider spec の {key!r} は bool である必要があります: got={value!r}")


def _as_number(value: object, *, key: str) -> float:
    if isinstance(value, bool):
        raise TypeError(f"slider spec の {key!r} は数値である必要があります: got={value!r}")
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise TypeError(f"slider spec の {key!r} は数値である必要があります: got={value!r}") from exc


def slider_config_from_spec(spec: SliderConfig | Mapping[str, object]) -> SliderConfig:
    """dict spec または `SliderConfig` から `SliderConfig` を返す。

    Parameters
    ----------
    spec : SliderConfig | Mapping[str, object]
        `SliderConfig` または dict spec。

        dict spec の形式（すべて任意）:
        - min/max/step: 数値
        - log_scale/as_percent: bool
        - display_format: str | None（printf 形式。例: ``"%.0f ms"``）

    Raises
    ------
    TypeError
        spec の型が不正な場合。
    ValueError
        未知キーやレンジ不正など、spec の内容が不正な場合。
    """

    if isinstance(spec, SliderConfig):
        return spec
    if not isinstance(spec, Mapping):
        raise TypeError("slider spec は SliderConfig または dict である必要があります")

    unknown = set(spec.keys()) - _ALLOWED_CONFIG_SPEC_KEYS
    if unknown:
        names = ", ".join(sorted(str(k) for k in unknown))
        raise ValueError(f"slider spec に未知キーがあります: {names}")

    kwargs: dict[str, object] = {}
    for key in ("min", "max", "step"):
        if spec.get(key) is not None:
            kwargs[key] = _as_number(spec[key], key=key)
    for key in ("log_scale", "as_percent"):
        if spec.get(key) is not None:
            kwargs[key] = _as_bool(spec[key], key=key)
    display_format = spec.get("display_format")
    if display_format is not None:
        kwargs["display_format"] = display_format

    return SliderConfig(**kwargs)  # type: ignore[arg-type]


__all__ = ["SliderConfig", "slider_config_from_spec"]
