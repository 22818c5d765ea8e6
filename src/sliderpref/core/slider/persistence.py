# どこで: `src/sliderpref/core/slider/persistence.py`。
# 何を: スライダー値の永続化アダプタ（protocol / JSON ファイル実装 / 旧形式の文字列保存）を提供する。
# なぜ: SliderState を保存先の詳細から切り離し、保存失敗を commit 側で扱えるようにするため。

from __future__ import annotations

import contextlib
import json
import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import Iterator, Protocol

import numpy as np

_logger = logging.getLogger(__name__)

PreferenceListener = Callable[[str], None]

# 旧バージョンの保存値には " ms" や "%" の接尾辞が付いていることがある。
_FLOAT_RE = re.compile(r"(-?\d+\.?\d*).*")


class PreferenceStore(Protocol):
    """スライダー値 1 個（float）をキー単位で読み書きする保存先。"""

    def load(self, key: str) -> float | None: ...

    def store(self, key: str, value: float) -> bool: ...


def float_from_string(text: object) -> float:
    """先頭の 10 進数（負号可、指数表記不可）を float として返す（接尾辞は無視、不一致なら 0.0）。"""

    m = _FLOAT_RE.fullmatch(str(text))
    if m is None:
        return 0.0
    return float(m.group(1))


class JsonPreferenceStore:
    """1 つの JSON ファイルに全プリファレンスを `{key: value}` として保持する。

    Notes
    -----
    - ファイルは最初のアクセス時に読み込む。無い/壊れている場合は空として扱う。
    - `store()` はファイル全体を書き直す。書き込み失敗は False で返す（例外にしない）。
    - 保存に成功したときだけ、登録済みリスナへ変更キーを通知する。
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._values: dict[str, object] | None = None
        self._listeners: list[PreferenceListener] = []

    @property
    def path(self) -> Path:
        """永続化ファイルのパスを返す。"""

        return self._path

    def _ensure_loaded(self) -> dict[str, object]:
        if self._values is None:
            self._values = self._read_file()
        return self._values

    def _read_file(self) -> dict[str, object]:
        try:
            payload = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError:
            _logger.warning("プリファレンスを読み込めません: path=%s", self._path)
            return {}

        try:
            data = json.loads(payload)
        except json.JSONDecodeError:
            # 破損した JSON は利便性のため無視して空から始める。
            _logger.warning("壊れたプリファレンスファイルを無視します: path=%s", self._path)
            return {}

        if not isinstance(data, dict):
            _logger.warning("プリファレンスファイルが mapping ではありません: path=%s", self._path)
            return {}
        return {str(k): v for k, v in data.items()}

    def reload(self) -> None:
        """次回アクセス時にファイルから読み直す。"""

        self._values = None

    def get_raw(self, key: str) -> object | None:
        """key の保存値をそのまま返す（無ければ None）。"""

        return self._ensure_loaded().get(str(key))

    def put_raw(self, key: str, value: object) -> bool:
        """key に value を保存してファイルへ書き出す。成功したら True を返す。"""

        values = dict(self._ensure_loaded())
        values[str(key)] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(values, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            _logger.warning(
                "プリファレンスを保存できません: key=%s path=%s (%s)", key, self._path, exc
            )
            return False

        self._values = values
        self._notify(str(key))
        return True

    def load(self, key: str) -> float | None:
        raw = self.get_raw(key)
        if raw is None or isinstance(raw, bool):
            return None
        try:
            return float(raw)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            _logger.warning("float として解釈できない保存値を無視します: key=%s value=%r", key, raw)
            return None

    def store(self, key: str, value: float) -> bool:
        return self.put_raw(key, float(value))

    def register_listener(self, listener: PreferenceListener) -> None:
        """保存成功時に呼ばれるリスナを登録する。"""

        self._listeners.append(listener)

    def unregister_listener(self, listener: PreferenceListener) -> None:
        """リスナの登録を解除する（未登録なら何もしない）。"""

        with contextlib.suppress(ValueError):
            self._listeners.remove(listener)

    @contextlib.contextmanager
    def listening(self, listener: PreferenceListener) -> Iterator[None]:
        """with ブロックの間だけ listener を登録するコンテキストマネージャ。"""

        self.register_listener(listener)
        try:
            yield
        finally:
            self.unregister_listener(listener)

    def _notify(self, key: str) -> None:
        for listener in list(self._listeners):
            listener(key)


class StringPreferenceAdapter:
    """値を 10 進文字列として保存する旧形式のアダプタ。

    型を変えるとアップグレード/ダウングレード時に読み込みが壊れるため、
    過去に文字列で保存していたキーはこのアダプタ経由で読み書きする。
    """

    def __init__(self, store: JsonPreferenceStore) -> None:
        self._store = store

    def load(self, key: str) -> float | None:
        raw = self._store.get_raw(key)
        if raw is None:
            return None
        return float_from_string(raw)

    def store(self, key: str, value: float) -> bool:
        # float_from_string は指数表記を読めないため、常に固定小数点で書く（例: 5e-05 -> "0.00005"）。
        text = np.format_float_positional(float(value), trim="0")
        return self._store.put_raw(key, text)


__all__ = [
    "JsonPreferenceStore",
    "PreferenceListener",
    "PreferenceStore",
    "StringPreferenceAdapter",
    "float_from_string",
]
