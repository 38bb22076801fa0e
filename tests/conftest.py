"""共通フィクスチャ。

- 乱数シード固定
- PXD_* 環境変数を変更したテスト後に設定を再読込
"""

from __future__ import annotations

import random
from typing import Iterator

import numpy as np
import pytest

from common import settings
from common.identity_store import IdentityStore


@pytest.fixture(scope="session", autouse=True)
def rng_seed() -> None:
    """random / NumPy の乱数を固定。"""
    random.seed(12345)
    np.random.seed(12345)


@pytest.fixture()
def reload_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """env を書き換えてから `settings.reload_from_env()` を呼ぶためのフィクスチャ。

    終了時は monkeypatch の巻き戻し後に再読込して既定値へ戻す。
    """
    with monkeypatch.context() as mp:
        yield mp
    settings.reload_from_env()


@pytest.fixture()
def store() -> IdentityStore:
    return IdentityStore()
