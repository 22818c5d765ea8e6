# どこで: `src/sliderpref/core/slider/display.py`。
# 何を: ドメイン値を表示用文字列へ整形する純粋関数を提供する。
# なぜ: ロケールに依存しない表示規約（percent/書式/既定）を 1 箇所に閉じるため。

from __future__ import annotations

from .config import SliderConfig
from .mapping import round_half_up


def format_display(value: float, config: SliderConfig) -> str:
    """value を config の表示規約で文字列化して返す。

    - as_percent: ``value * 100`` を四捨五入した整数 + ``"%"``（例: 0.256 -> ``"26%"``）
    - display_format: printf 形式テンプレートへ value を埋め込む
    - それ以外: float の標準的な 10 進表記
    """

    if config.as_percent:
        return f"{round_half_up(float(value) * 100.0)}%"
    if config.display_format is not None:
        return config.display_format % float(value)
    return str(float(value))


__all__ = ["format_display"]
