# どこで: `src/sliderpref/core/slider/state.py`。
# 何を: スライダー 1 本分の live 値 / 確定値と commit/cancel の手続きを提供する。
# なぜ: ダイアログ側から値を直接書き換えず、状態の変更経路を SliderState に集約するため。

from __future__ import annotations

import logging
from collections.abc import Callable

from .config import SliderConfig
from .display import format_display
from .mapping import clamp_value, value_to_position
from .persistence import PreferenceStore

_logger = logging.getLogger(__name__)

ChangeObserver = Callable[[float], None]


class SliderState:
    """current_value（操作中の値）と previous_value（最後に確定した値）を保持する。

    状態は Idle / Interacting の 2 つ。
    initialize/commit/cancel 後の最初の `set_live()` で Interacting になり、
    `commit()` または `cancel()` で Idle に戻る。

    Parameters
    ----------
    config
        スライダー設定。値は常に [min, max] にクランプして保持する。
    key
        永続化キー。
    store
        永続化先。None の場合は永続化しない（commit はメモリ上の確定のみ）。
    on_change
        操作中に値が実際に変わったときだけ呼ばれるコールバック。
    """

    def __init__(
        self,
        config: SliderConfig,
        *,
        key: str,
        store: PreferenceStore | None = None,
        on_change: ChangeObserver | None = None,
        initial_value: float | None = None,
    ) -> None:
        self.config = config
        self.key = str(key)
        self._store = store
        self._on_change = on_change
        self._current = 0.0
        self._previous = 0.0
        self._interacting = False
        self.initialize(config.min if initial_value is None else initial_value)

    @property
    def current_value(self) -> float:
        return self._current

    @property
    def previous_value(self) -> float:
        return self._previous

    @property
    def interacting(self) -> bool:
        """未確定の操作中なら True を返す。"""

        return self._interacting

    @property
    def persistent(self) -> bool:
        return self._store is not None

    @property
    def position(self) -> int:
        """current_value に対応するスライダー位置を返す。"""

        return value_to_position(self._current, self.config)

    @property
    def display_text(self) -> str:
        """current_value の表示文字列を返す。"""

        return format_display(self._current, self.config)

    def initialize(self, value: float) -> None:
        """current_value と previous_value を value に揃える（保存値または既定値から）。"""

        v = clamp_value(value, self.config)
        self._current = v
        self._previous = v
        self._interacting = False

    def set_live(self, value: float) -> bool:
        """操作中の値を更新する。値が変わった場合だけ通知して True を返す。

        比較対象は previous_value ではなく直前の live 値（ドラッグ中の重複通知を避ける）。
        """

        v = clamp_value(value, self.config)
        self._interacting = True
        if v == self._current:
            return False
        if self._on_change is not None:
            self._on_change(v)
        self._current = v
        return True

    def commit(self) -> bool:
        """current_value を確定する。

        永続化先があれば 1 回だけ保存し、成功した場合に限り previous_value を進める。
        保存に失敗した場合は live 値を保持したまま Interacting に留まり、False を返す。
        """

        if self._store is not None:
            ok = self._store.store(self.key, self._current)
            if not ok:
                _logger.warning(
                    "スライダー値の保存に失敗したため確定しません: key=%s value=%s",
                    self.key,
                    self._current,
                )
                return False
        self._previous = self._current
        self._interacting = False
        _logger.debug("スライダー値を確定: key=%s value=%s", self.key, self._current)
        return True

    def cancel(self) -> None:
        """未確定の操作を破棄し、previous_value に戻す。"""

        self._current = self._previous
        self._interacting = False


__all__ = ["ChangeObserver", "SliderState"]
