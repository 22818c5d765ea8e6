# どこで: `src/sliderpref/__init__.py`。
# 何を: ルート `sliderpref` パッケージを定義する。
# なぜ: import 起点を `sliderpref` に統一するため。

from __future__ import annotations

from sliderpref.core.slider import (
    SliderConfig,
    SliderPreference,
    SliderScreen,
    SliderState,
    format_display,
    position_to_value,
    value_to_position,
)

__all__ = [
    "SliderConfig",
    "SliderPreference",
    "SliderScreen",
    "SliderState",
    "format_display",
    "position_to_value",
    "value_to_position",
]
