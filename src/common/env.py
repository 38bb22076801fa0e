"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパ（int/bool）を提供。
なぜ: `os.getenv` + 例外/境界ガードを settings 側で繰り返さないため。
"""

from __future__ import annotations

import os
from typing import Optional

_TRUE_WORDS = frozenset({"true", "t", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"false", "f", "no", "n", "off"})


def env_int(
    name: str,
    default: Optional[int] = None,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> Optional[int]:
    """整数環境変数を取得する。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        未設定/不正値のときに返す値（`None` 可）。
    min_value, max_value : Optional[int]
        指定時、結果をこの範囲へ丸める。

    Returns
    -------
    Optional[int]
        取得した整数値。未設定/空文字/不正値は `default`。
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    if max_value is not None and val > max_value:
        val = max_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（数値 0/1 と true/false 系の語を受理）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = raw.strip().lower()
    try:
        return int(s) != 0
    except ValueError:
        pass
    if s in _TRUE_WORDS:
        return True
    if s in _FALSE_WORDS:
        return False
    return bool(default)


__all__ = ["env_int", "env_bool"]
