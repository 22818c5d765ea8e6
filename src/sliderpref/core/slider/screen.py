# どこで: `src/sliderpref/core/slider/screen.py`。
# 何を: 設定画面 1 枚分の SliderPreference 群と summary の更新を提供する。
# なぜ: 保存先リスナの登録/解除を画面の有効期間に限定し、解除漏れを防ぐため。

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable, Mapping
from typing import Iterator

from .catalog import SliderSpec
from .persistence import JsonPreferenceStore
from .preference import SliderPreference
from .state import ChangeObserver

_logger = logging.getLogger(__name__)


class SliderScreen:
    """catalog の各 SliderSpec に対応する SliderPreference を保持する。

    Parameters
    ----------
    catalog
        key -> SliderSpec。
    store
        共有の保存先。None の場合は永続化しない。
    observers
        key -> 操作中の値変更コールバック（例: 振動長のプレビュー）。
    """

    def __init__(
        self,
        catalog: Mapping[str, SliderSpec],
        *,
        store: JsonPreferenceStore | None = None,
        observers: Mapping[str, ChangeObserver] | None = None,
    ) -> None:
        self._store = store
        observers = {} if observers is None else dict(observers)
        self._preferences: dict[str, SliderPreference] = {}
        for key, spec in catalog.items():
            self._preferences[str(key)] = SliderPreference(
                spec.key,
                spec.config,
                store=spec.adapter_for(store) if store is not None else None,
                default=spec.default,
                on_change=observers.get(str(key)),
            )
        self._summaries = {k: p.summary() for k, p in self._preferences.items()}

    def keys(self) -> list[str]:
        return list(self._preferences)

    def preference(self, key: str) -> SliderPreference:
        """key の SliderPreference を返す。未知キーは KeyError。"""

        try:
            return self._preferences[str(key)]
        except KeyError:
            raise KeyError(f"未知のスライダーキーです: {key!r}") from None

    def summaries(self) -> dict[str, str]:
        """最後に反映された summary を key -> 文字列で返す。"""

        return dict(self._summaries)

    def refresh_summary(self, key: str) -> None:
        pref = self._preferences.get(str(key))
        if pref is None:
            # スライダー以外のキー変更は対象外。
            return
        self._summaries[pref.key] = pref.summary()
        _logger.debug("summary を更新: key=%s summary=%s", pref.key, self._summaries[pref.key])

    @contextlib.contextmanager
    def attached(self) -> Iterator["SliderScreen"]:
        """保存成功のたびに summary を更新するリスナを、with ブロックの間だけ登録する。"""

        if self._store is None:
            yield self
            return

        listener: Callable[[str], None] = self.refresh_summary
        with self._store.listening(listener):
            yield self


__all__ = ["SliderScreen"]
