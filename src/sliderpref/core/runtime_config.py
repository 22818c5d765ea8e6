# どこで: `src/sliderpref/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 保存先やスライダー定義をユーザーが上書きできるようにするため。

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """sliderpref の実行時設定。"""

    config_path: Path | None
    preferences_file: Path
    sliders: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    p = Path(str(path)).expanduser()
    _EXPLICIT_CONFIG_PATH = p
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".sliderpref" / "config.yaml",
        home / ".config" / "sliderpref" / "config.yaml",
    )


def _as_preferences_file(value: Any) -> Path:
    """paths.preferences_file を Path にして返す（`~` と環境変数は展開する）。"""

    if value is None or not str(value).strip():
        raise RuntimeError(
            "paths.preferences_file が未設定です（同梱 default_config.yaml を確認してください）"
        )
    if not isinstance(value, str):
        raise RuntimeError(f"paths.preferences_file は文字列である必要があります: got={value!r}")
    return Path(os.path.expandvars(os.path.expanduser(value.strip())))


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        import yaml  # type: ignore[import-untyped]
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(f"PyYAML を import できません: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("sliderpref")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="sliderpref/resource/default_config.yaml")


def _merge_payload(base: dict[str, Any], override: dict[str, Any], *, source: str) -> None:
    """override を base へ後勝ちでマージする（sliders だけはキー単位でマージする）。"""

    for key, value in override.items():
        if key == "sliders":
            merged = _as_mapping(base.get("sliders"), key="sliders")
            merged.update(_as_mapping(value, key=f"sliders ({source})"))
            base["sliders"] = merged
        else:
            base[key] = value


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。"""

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        _merge_payload(payload, _load_yaml_config(discovered_path), source=str(discovered_path))
    if explicit_path is not None:
        _merge_payload(payload, _load_yaml_config(explicit_path), source=str(explicit_path))

    version = payload.get("version")
    if version is None:
        raise RuntimeError(
            "config.yaml の version が未設定です（同梱 default_config.yaml を確認してください）"
        )
    try:
        version_i = int(version)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    paths = _as_mapping(payload.get("paths"), key="paths")
    preferences_file = _as_preferences_file(paths.get("preferences_file"))

    sliders_raw = _as_mapping(payload.get("sliders"), key="sliders")
    sliders: dict[str, Mapping[str, Any]] = {}
    for name, entry in sliders_raw.items():
        sliders[str(name)] = _as_mapping(entry, key=f"sliders.{name}")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        preferences_file=preferences_file,
        sliders=sliders,
    )
    _CONFIG_CACHE = cfg
    return cfg


def preferences_path() -> Path:
    """プリファレンス JSON の既定保存パスを返す。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.sliderpref/config.yaml` / `~/.config/sliderpref/config.yaml`
    3) `set_config_path(...)` の明示パス
    """

    cfg = runtime_config()
    return Path(cfg.preferences_file)


__all__ = ["RuntimeConfig", "preferences_path", "runtime_config", "set_config_path"]
