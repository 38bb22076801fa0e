"""
どこで: `common` パッケージ。
何を: 値型/描画層から使う軽量基盤（IdentityStore・設定・ロギング）。
なぜ: 依存の少ない場所に置き、上位層からの依存の向きを単純化するため。
"""

from .identity_store import IdentityStore

__all__ = [
    "IdentityStore",
]
