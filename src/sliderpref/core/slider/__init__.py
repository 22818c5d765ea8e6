# どこで: `src/sliderpref/core/slider/__init__.py`。
# 何を: スライダー値変換・状態・永続化の公開エイリアスをまとめる。
# なぜ: 呼び出し側から最小インポートで使えるようにするため。

from .catalog import SliderSpec, load_slider_catalog, slider_spec_from_entry
from .config import SliderConfig, slider_config_from_spec
from .display import format_display
from .mapping import (
    clamp_value,
    position_table,
    position_to_value,
    round_significant,
    value_to_position,
)
from .persistence import (
    JsonPreferenceStore,
    PreferenceStore,
    StringPreferenceAdapter,
    float_from_string,
)
from .preference import SliderPreference
from .screen import SliderScreen
from .state import ChangeObserver, SliderState

__all__ = [
    "ChangeObserver",
    "JsonPreferenceStore",
    "PreferenceStore",
    "SliderConfig",
    "SliderPreference",
    "SliderScreen",
    "SliderSpec",
    "SliderState",
    "StringPreferenceAdapter",
    "clamp_value",
    "float_from_string",
    "format_display",
    "load_slider_catalog",
    "position_table",
    "position_to_value",
    "round_significant",
    "slider_config_from_spec",
    "slider_spec_from_entry",
    "value_to_position",
]
