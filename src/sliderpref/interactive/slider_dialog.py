# どこで: `src/sliderpref/interactive/slider_dialog.py`。
# 何を: スライダーダイアログのイベント（位置変更/閉じる）を SliderPreference への操作へ変換する。
# なぜ: ダイアログがプリファレンスのフィールドを直接書き換えず、状態変更を SliderState に任せるため。

from __future__ import annotations

import logging
from dataclasses import dataclass

from sliderpref.core.slider.mapping import position_to_value
from sliderpref.core.slider.preference import SliderPreference

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SliderMoved:
    """スライダー位置が変わった。from_user=False はプログラムによる変更。"""

    position: int
    from_user: bool = True


@dataclass(frozen=True, slots=True)
class DialogClosed:
    """ダイアログが閉じられた。positive=True は OK、False はキャンセル。"""

    positive: bool


SliderEvent = SliderMoved | DialogClosed


@dataclass(frozen=True, slots=True)
class DialogView:
    """ウィジェットへ流す表示内容。"""

    value_text: str
    min_text: str
    max_text: str
    position: int


class SliderDialog:
    """SliderPreference 1 個を編集するダイアログのモデル。

    ウィジェット側は `bind()` の結果で初期表示し、以降は `handle()` にイベントを渡して
    戻り値の DialogView で再描画する。
    """

    def __init__(self, preference: SliderPreference) -> None:
        self._preference = preference
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def view(self) -> DialogView:
        """現在の表示内容を返す。"""

        pref = self._preference
        return DialogView(
            value_text=pref.summary(),
            min_text=pref.format(pref.config.min),
            max_text=pref.format(pref.config.max),
            position=pref.state.position,
        )

    def bind(self) -> DialogView:
        """ダイアログ表示時の初期表示内容を返す。"""

        return self.view()

    def handle(self, event: SliderEvent) -> DialogView:
        """イベントを反映し、再描画用の DialogView を返す。

        `DialogClosed(positive=True)` で保存に失敗した場合はダイアログを閉じない
        （live 値を保持したまま、再度の確定または取消を受け付ける）。

        Raises
        ------
        RuntimeError
            閉じた後にイベントを受け取った場合。
        """

        if self._closed:
            raise RuntimeError(f"閉じたダイアログへのイベントです: key={self._preference.key}")

        if isinstance(event, SliderMoved):
            if event.from_user:
                value = position_to_value(event.position, self._preference.config)
                self._preference.state.set_live(value)
            return self.view()

        if isinstance(event, DialogClosed):
            if event.positive:
                if not self._preference.commit():
                    # 保存に失敗したら開いたままにし、再試行か取消を待つ。
                    _logger.warning("保存に失敗したためダイアログを閉じません: key=%s", self._preference.key)
                    return self.view()
            else:
                self._preference.cancel()
            self._closed = True
            return self.view()

        raise TypeError(f"未知のイベントです: {event!r}")


__all__ = ["DialogClosed", "DialogView", "SliderDialog", "SliderEvent", "SliderMoved"]
