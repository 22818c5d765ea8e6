import json
from pathlib import Path

import pytest

from sliderpref.core.slider import (
    JsonPreferenceStore,
    SliderConfig,
    SliderPreference,
    StringPreferenceAdapter,
)
from sliderpref.core.slider.preference import default_value_from_spec

_VIBRATE = SliderConfig(min=5.0, max=100.0, step=1.0, display_format="%.0f ms")


def test_persisted_value_wins_over_default(tmp_path: Path):
    store = JsonPreferenceStore(tmp_path / "prefs.json")
    store.store("vibrate_len", 70.0)

    pref = SliderPreference("vibrate_len", _VIBRATE, store=store, default=40.0)
    assert pref.value == 70.0
    assert pref.state.previous_value == 70.0
    assert pref.summary() == "70 ms"


def test_default_is_used_without_persisted_value(tmp_path: Path):
    store = JsonPreferenceStore(tmp_path / "prefs.json")
    pref = SliderPreference("vibrate_len", _VIBRATE, store=store, default="40 ms")
    assert pref.value == 40.0
    assert pref.persistent is True


def test_non_persistent_preference():
    pref = SliderPreference("vibrate_len", _VIBRATE, default=25)
    assert pref.persistent is False
    assert pref.value == 25.0


def test_persisted_value_out_of_range_is_clamped(tmp_path: Path):
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"vibrate_len": "500 ms"}), encoding="utf-8")

    adapter = StringPreferenceAdapter(JsonPreferenceStore(path))
    pref = SliderPreference("vibrate_len", _VIBRATE, store=adapter, default=40.0)
    assert pref.value == 100.0


def test_on_change_hook_previews_live_values():
    previews: list[int] = []
    pref = SliderPreference(
        "vibrate_len",
        _VIBRATE,
        default=40.0,
        on_change=lambda v: previews.append(int(v)),
    )
    pref.state.set_live(60.0)
    pref.state.set_live(60.0)
    pref.cancel()
    assert previews == [60]
    assert pref.value == 40.0


def test_commit_persists_through_string_adapter(tmp_path: Path):
    path = tmp_path / "prefs.json"
    adapter = StringPreferenceAdapter(JsonPreferenceStore(path))
    pref = SliderPreference("vibrate_len", _VIBRATE, store=adapter, default=40.0)

    pref.state.set_live(55.0)
    assert pref.commit() is True
    assert json.loads(path.read_text(encoding="utf-8")) == {"vibrate_len": "55.0"}


def test_format_uses_config():
    pref = SliderPreference("vibrate_len", _VIBRATE, default=40.0)
    assert pref.format(5.0) == "5 ms"


@pytest.mark.parametrize(
    "spec,expected",
    [(None, 0.0), (1, 1.0), ("0.5", 0.5), ("40 ms", 40.0), ("  80% ", 80.0)],
)
def test_default_value_from_spec(spec, expected):
    assert default_value_from_spec(spec) == expected


def test_default_value_from_spec_rejects_bool():
    with pytest.raises(TypeError):
        default_value_from_spec(True)
