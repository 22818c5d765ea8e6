from pathlib import Path

import pytest

from sliderpref.core.slider import JsonPreferenceStore, SliderScreen, slider_spec_from_entry


def _catalog():
    return {
        "vibrate_len": slider_spec_from_entry(
            "vibrate_len",
            {
                "min": 5,
                "max": 100,
                "step": 1,
                "display_format": "%.0f ms",
                "default": "40 ms",
                "storage": "string",
            },
        ),
        "pref_click_volume": slider_spec_from_entry(
            "pref_click_volume",
            {"min": 0.0, "max": 1.0, "step": 0.01, "as_percent": True, "default": 0.2},
        ),
    }


def test_initial_summaries(tmp_path: Path):
    screen = SliderScreen(_catalog(), store=JsonPreferenceStore(tmp_path / "prefs.json"))
    assert screen.keys() == ["vibrate_len", "pref_click_volume"]
    assert screen.summaries() == {"vibrate_len": "40 ms", "pref_click_volume": "20%"}


def test_attached_screen_refreshes_summary_on_commit(tmp_path: Path):
    store = JsonPreferenceStore(tmp_path / "prefs.json")
    screen = SliderScreen(_catalog(), store=store)

    with screen.attached():
        pref = screen.preference("vibrate_len")
        pref.state.set_live(65.0)
        assert screen.summaries()["vibrate_len"] == "40 ms"
        pref.commit()
        assert screen.summaries()["vibrate_len"] == "65 ms"
        # スライダー以外のキー変更は無視する。
        store.put_raw("voice_mode", "off")

    # detach 後は更新されない。
    pref.state.set_live(70.0)
    pref.commit()
    assert screen.summaries()["vibrate_len"] == "65 ms"


def test_attached_unregisters_on_error(tmp_path: Path):
    store = JsonPreferenceStore(tmp_path / "prefs.json")
    screen = SliderScreen(_catalog(), store=store)

    with pytest.raises(RuntimeError):
        with screen.attached():
            raise RuntimeError("teardown")

    pref = screen.preference("pref_click_volume")
    pref.state.set_live(0.5)
    pref.commit()
    assert screen.summaries()["pref_click_volume"] == "20%"


def test_observers_are_routed_by_key():
    previews: list[float] = []
    screen = SliderScreen(_catalog(), observers={"vibrate_len": previews.append})
    screen.preference("vibrate_len").state.set_live(30.0)
    screen.preference("pref_click_volume").state.set_live(0.9)
    assert previews == [30.0]


def test_screen_without_store_is_not_persistent():
    screen = SliderScreen(_catalog())
    assert screen.preference("vibrate_len").persistent is False
    with screen.attached() as attached:
        assert attached is screen


def test_unknown_key_raises_key_error():
    screen = SliderScreen(_catalog())
    with pytest.raises(KeyError):
        screen.preference("missing")
