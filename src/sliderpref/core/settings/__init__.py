# どこで: `src/sliderpref/core/settings/__init__.py`。
# 何を: 設定画面の summary 補助関数をまとめる。

from .input_type import describe_input_type, input_connection_summary

__all__ = ["describe_input_type", "input_connection_summary"]
