"""
どこで: `common.identity_store`
何を: 任意オブジェクトを「同一性（`is`）」で比較するキーとして値を保持する `IdentityStore`。
なぜ: dict は `__eq__`/`__hash__` で比較するため、構造的に等しい別オブジェクトや
      unhashable なオブジェクト（dict/list など）をキーにできない。エンジン内部の
      小さな付帯情報テーブル用に、文字列キーの表 2 本で同一性キーを実現する。

設計メモ:
- 内部キー（合成キー）は `"key_<n>"`。`n` は単調増加し再利用しない。外部には出さない。
- 2 本の表（合成キー→元キー / 合成キー→値）は常に同時に更新する。
- `put` は既存キーを確認しない（同一キーで複数エントリを許す）。`get`/`remove` は
  挿入順で最初に見つかったエントリのみを対象にする。
- 検索は線形走査（O(n)）。件数が `IDENTITY_STORE_WARN_SIZE` を超えると 1 度だけ警告する。
- スレッドセーフではない（呼び出し側で直列化すること）。
"""

from __future__ import annotations

import logging
import random
from typing import Any, Iterable, Iterator

from . import settings as _settings_mod

logger = logging.getLogger(__name__)

_KEY_PREFIX = "key_"


def _initial_counter() -> int:
    """カウンタ初期値 `2 << r`（r は 0..9）を返す。

    `PXD_IDENTITY_STORE_SEED_SHIFT` 指定時は r を固定する（再現用）。
    """
    shift = _settings_mod.get().IDENTITY_STORE_SEED_SHIFT
    if shift is None:
        shift = random.randrange(_settings_mod.SEED_SHIFT_MAX + 1)
    return 2 << shift


class IdentityStore:
    """同一性比較のキーで値を保持する連想コンテナ。

    Examples
    --------
    >>> s = IdentityStore()
    >>> a, b = {}, {}
    >>> s.put(10, a); s.put(20, b)
    >>> s.get(a), s.get(b)
    (10, 20)
    >>> s.remove(a); s.count()
    1
    """

    __slots__ = ("_key_table", "_value_table", "_counter", "_size_warned")

    def __init__(self) -> None:
        self._key_table: dict[str, Any] = {}
        self._value_table: dict[str, Any] = {}
        self._counter: int = _initial_counter()
        self._size_warned = False

    # === 内部ユーティリティ ===
    def _mint_key(self) -> str:
        self._counter += 1
        return f"{_KEY_PREFIX}{self._counter}"

    def _find(self, key: Any) -> str | None:
        """`key` と同一のオブジェクトを保持する最初の合成キーを返す。"""
        for synthetic, stored in self._key_table.items():
            if stored is key:
                return synthetic
        return None

    def _debug_ignored(self, op: str, reason: str) -> None:
        if _settings_mod.get().DEBUG_IDENTITY_STORE:
            logger.debug("[identity_store] %s ignored: %s", op, reason)

    def _check_size(self) -> None:
        limit = _settings_mod.get().IDENTITY_STORE_WARN_SIZE
        if self._size_warned or limit <= 0 or len(self._key_table) <= limit:
            return
        self._size_warned = True
        logger.warning(
            "IdentityStore holds %d entries (> %d); lookups are linear scans",
            len(self._key_table),
            limit,
        )

    # === 公開 API ===
    def put(self, value: Any, key: Any) -> None:
        """`key` に `value` を対応付ける（`key is None` は無視）。

        既存エントリの確認は行わない。同じ `key` で再度呼ぶと独立したエントリが増える。
        """
        if key is None:
            self._debug_ignored("put", "key is None")
            return
        synthetic = self._mint_key()
        self._key_table[synthetic] = key
        self._value_table[synthetic] = value
        self._check_size()

    def get(self, key: Any) -> Any:
        """`key` と同一のキーに対応する値を返す（無ければ None）。"""
        if key is None:
            return None
        synthetic = self._find(key)
        if synthetic is None:
            return None
        return self._value_table[synthetic]

    def value_for_key(self, key: Any) -> Any:
        """`get` の別名。"""
        return self.get(key)

    def remove(self, key: Any) -> None:
        """`key` と同一の最初のエントリを削除する（無ければ何もしない）。"""
        if key is None:
            self._debug_ignored("remove", "key is None")
            return
        synthetic = self._find(key)
        if synthetic is None:
            return
        del self._value_table[synthetic]
        del self._key_table[synthetic]

    def remove_batch(self, keys: Iterable[Any] | None) -> None:
        """`keys` の各要素に順に `remove` を適用する。

        None や反復不能な値は何もしない。
        """
        if keys is None:
            return
        try:
            items = list(keys)
        except TypeError:
            self._debug_ignored("remove_batch", f"not iterable: {type(keys).__name__}")
            return
        for key in items:
            self.remove(key)

    def all_keys(self) -> list[Any]:
        """保持している元キーを挿入順の新しいリストで返す。"""
        return list(self._key_table.values())

    def clear(self) -> None:
        """全エントリを破棄する（カウンタは戻さない）。"""
        self._key_table = {}
        self._value_table = {}
        self._size_warned = False

    def count(self) -> int:
        """エントリ数（`all_keys()` の長さ）。"""
        return len(self.all_keys())

    # === コンテナプロトコル ===
    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        return key is not None and self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        # スナップショットを回すので反復中の変更は安全
        return iter(self.all_keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count()})"


__all__ = ["IdentityStore"]
