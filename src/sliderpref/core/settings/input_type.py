# どこで: `src/sliderpref/core/settings/input_type.py`。
# 何を: エディタの input type ビットマスクを "TEXT.URI|AUTO_CORRECT" 形式の説明文字列へ変換する。
# なぜ: 設定画面の接続情報 summary を、(mask, label) の順序付き表だけで組み立てるため。

from __future__ import annotations

MASK_CLASS = 0x0000000F
MASK_VARIATION = 0x00000FF0
MASK_FLAGS = 0x00FFF000

TYPE_CLASS_NULL = 0x00000000
TYPE_CLASS_TEXT = 0x00000001
TYPE_CLASS_NUMBER = 0x00000002
TYPE_CLASS_PHONE = 0x00000003
TYPE_CLASS_DATETIME = 0x00000004

INPUT_CLASSES: dict[int, str] = {
    TYPE_CLASS_NULL: "NULL",
    TYPE_CLASS_TEXT: "TEXT",
    TYPE_CLASS_NUMBER: "NUMBER",
    TYPE_CLASS_PHONE: "PHONE",
    TYPE_CLASS_DATETIME: "DATETIME",
}

TEXT_VARIATIONS: dict[int, str] = {
    0x10: "URI",
    0x20: "EMAIL_ADDRESS",
    0x30: "EMAIL_SUBJECT",
    0x40: "SHORT_MESSAGE",
    0x50: "LONG_MESSAGE",
    0x60: "PERSON_NAME",
    0x70: "POSTAL_ADDRESS",
    0x80: "PASSWORD",
    0x90: "VISIBLE_PASSWORD",
    0xA0: "WEB_EDIT_TEXT",
    0xB0: "FILTER",
    0xC0: "PHONETIC",
    0xD0: "WEB_EMAIL_ADDRESS",
    0xE0: "WEB_PASSWORD",
}

NUMBER_VARIATIONS: dict[int, str] = {0x10: "PASSWORD"}

DATETIME_VARIATIONS: dict[int, str] = {0x10: "DATE", 0x20: "TIME"}

# フラグは表示順（優先順）に並べる。
TEXT_FLAGS: tuple[tuple[int, str], ...] = (
    (0x00010000, "AUTO_COMPLETE"),
    (0x00008000, "AUTO_CORRECT"),
    (0x00001000, "CAP_CHARACTERS"),
    (0x00004000, "CAP_SENTENCES"),
    (0x00002000, "CAP_WORDS"),
    (0x00040000, "IME_MULTI_LINE"),
    (0x00020000, "MULTI_LINE"),
    (0x00080000, "NO_SUGGESTIONS"),
)

NUMBER_FLAGS: tuple[tuple[int, str], ...] = (
    (0x00002000, "DECIMAL"),
    (0x00001000, "SIGNED"),
)

_VARIATIONS_BY_CLASS: dict[int, dict[int, str]] = {
    TYPE_CLASS_TEXT: TEXT_VARIATIONS,
    TYPE_CLASS_NUMBER: NUMBER_VARIATIONS,
    TYPE_CLASS_DATETIME: DATETIME_VARIATIONS,
}

_FLAGS_BY_CLASS: dict[int, tuple[tuple[int, str], ...]] = {
    TYPE_CLASS_TEXT: TEXT_FLAGS,
    TYPE_CLASS_NUMBER: NUMBER_FLAGS,
}


def describe_input_type(input_type: int) -> str:
    """input type を ``CLASS[.VARIATION][|FLAG...]`` 形式で返す。未知クラスは ``"?"``。"""

    t = int(input_type)
    cls = t & MASK_CLASS
    variation = t & MASK_VARIATION
    flags = t & MASK_FLAGS

    parts = [INPUT_CLASSES.get(cls, "?")]
    variation_name = _VARIATIONS_BY_CLASS.get(cls, {}).get(variation)
    if variation_name is not None:
        parts.append(f".{variation_name}")
    for mask, label in _FLAGS_BY_CLASS.get(cls, ()):
        if flags & mask:
            parts.append(f"|{label}")
    return "".join(parts)


def input_connection_summary(package_name: str | None, input_type: int) -> str:
    """接続中エディタの summary 行 ``"<package> type=<desc>"`` を返す。"""

    return f"{package_name} type={describe_input_type(input_type)}"


__all__ = [
    "INPUT_CLASSES",
    "describe_input_type",
    "input_connection_summary",
]
