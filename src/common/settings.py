"""
どこで: `common.settings`
何を: PXD_* 環境変数を型付きで一元管理し、import 時に読み込む。
なぜ: IdentityStore などが個別に `os.getenv` を呼ばずに済むようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int

# `2 << shift` の shift 範囲（0..9 → 2..1024）
SEED_SHIFT_MAX = 9


@dataclass
class _Settings:
    # IdentityStore
    IDENTITY_STORE_SEED_SHIFT: int | None = None  # None なら乱数
    IDENTITY_STORE_WARN_SIZE: int = 1024  # 0 で無効
    DEBUG_IDENTITY_STORE: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込する（範囲外は丸める）。"""
    _settings.IDENTITY_STORE_SEED_SHIFT = env_int(
        "PXD_IDENTITY_STORE_SEED_SHIFT", None, min_value=0, max_value=SEED_SHIFT_MAX
    )
    _settings.IDENTITY_STORE_WARN_SIZE = (
        env_int("PXD_IDENTITY_STORE_WARN_SIZE", 1024, min_value=0) or 0
    )
    _settings.DEBUG_IDENTITY_STORE = env_bool("PXD_DEBUG_IDENTITY_STORE", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "SEED_SHIFT_MAX"]
