# どこで: `src/sliderpref/core/slider/catalog.py`。
# 何を: runtime config の `sliders:` 定義を SliderSpec（設定 + 既定値 + 保存形式）へ正規化する。
# なぜ: 設定画面ごとのスライダー定義を宣言的に持ち、構築時に検証するため。

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from sliderpref.core.runtime_config import RuntimeConfig, runtime_config

from .config import SliderConfig, slider_config_from_spec
from .persistence import JsonPreferenceStore, PreferenceStore, StringPreferenceAdapter
from .preference import default_value_from_spec

STORAGE_KINDS = ("float", "string")


@dataclass(frozen=True, slots=True)
class SliderSpec:
    """スライダー 1 本分の宣言。"""

    key: str
    config: SliderConfig
    default: float
    storage: str = "float"

    def adapter_for(self, store: JsonPreferenceStore) -> PreferenceStore:
        """storage に応じた永続化アダプタを返す。"""

        if self.storage == "string":
            return StringPreferenceAdapter(store)
        return store


def slider_spec_from_entry(key: str, entry: Mapping[str, object]) -> SliderSpec:
    """config.yaml の 1 エントリから SliderSpec を返す。

    Raises
    ------
    TypeError
        エントリの型が不正な場合。
    ValueError
        storage が未知、またはスライダー設定が不正な場合。
    """

    if not isinstance(entry, Mapping):
        raise TypeError(f"sliders.{key} は mapping である必要があります")

    config_spec = {k: v for k, v in entry.items() if k not in {"default", "storage"}}
    try:
        config = slider_config_from_spec(config_spec)
    except (TypeError, ValueError) as exc:
        raise type(exc)(f"sliders.{key}: {exc}") from exc

    storage = str(entry.get("storage", "float"))
    if storage not in STORAGE_KINDS:
        raise ValueError(f"sliders.{key}.storage が未知です: got={storage!r}")

    default = default_value_from_spec(entry.get("default", config.min))
    return SliderSpec(key=str(key), config=config, default=default, storage=storage)


def load_slider_catalog(cfg: RuntimeConfig | None = None) -> dict[str, SliderSpec]:
    """runtime config のスライダー定義を key -> SliderSpec として返す。"""

    cfg = runtime_config() if cfg is None else cfg
    return {
        str(key): slider_spec_from_entry(str(key), entry)
        for key, entry in cfg.sliders.items()
    }


__all__ = ["STORAGE_KINDS", "SliderSpec", "load_slider_catalog", "slider_spec_from_entry"]
