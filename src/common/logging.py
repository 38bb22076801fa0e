"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- アプリ側に設定が無い場合のみ、最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> bool:
    """ルートロガーが未設定なら `basicConfig` を適用する。

    Returns
    -------
    bool
        設定を適用したら True。既存ハンドラがあり何もしなかった場合は False。

    Examples
    --------
    >>> setup_default_logging("DEBUG")  # スクリプト/ランナーの先頭で 1 度呼ぶ
    """
    root = logging.getLogger()
    if root.handlers:
        return False
    logging.basicConfig(level=_resolve_level(level), format=_FORMAT)
    return True


__all__ = ["setup_default_logging"]
