# どこで: `src/sliderpref/core/slider/preference.py`。
# 何を: キー・設定・状態・保存先を束ねた SliderPreference（初期値の復元と summary）を提供する。
# なぜ: 「保存値があれば復元、無ければ既定値」の初期化規約を 1 箇所へ閉じるため。

from __future__ import annotations

from .config import SliderConfig
from .display import format_display
from .persistence import PreferenceStore, float_from_string
from .state import ChangeObserver, SliderState


def default_value_from_spec(value: object) -> float:
    """既定値 spec を float にして返す（旧形式の ``"50 ms"`` のような文字列も受け付ける）。"""

    if value is None:
        return 0.0
    if isinstance(value, str):
        return float_from_string(value.strip())
    if isinstance(value, bool):
        raise TypeError(f"既定値は数値である必要があります: got={value!r}")
    return float(value)  # type: ignore[arg-type]


class SliderPreference:
    """float 値のスライダープリファレンス 1 個。

    保存値は構築時に 1 回だけ読み込む。
    """

    def __init__(
        self,
        key: str,
        config: SliderConfig,
        *,
        store: PreferenceStore | None = None,
        default: float | str = 0.0,
        on_change: ChangeObserver | None = None,
    ) -> None:
        self.key = str(key)
        self.config = config
        self.default = default_value_from_spec(default)
        persisted = store.load(self.key) if store is not None else None
        self.state = SliderState(
            config,
            key=self.key,
            store=store,
            on_change=on_change,
            initial_value=self.default if persisted is None else persisted,
        )

    @property
    def persistent(self) -> bool:
        return self.state.persistent

    @property
    def value(self) -> float:
        return self.state.current_value

    def format(self, value: float) -> str:
        return format_display(value, self.config)

    def summary(self) -> str:
        """現在値の表示文字列（設定画面の summary 行）を返す。"""

        return self.state.display_text

    def commit(self) -> bool:
        return self.state.commit()

    def cancel(self) -> None:
        self.state.cancel()


__all__ = ["SliderPreference", "default_value_from_spec"]
