from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """`pyproject.toml` / `.git` / `configs/` を持つ最も近い上位ディレクトリを返す。

    見つからない場合は `<repo>/src/util/utils.py` を想定して `start.parent.parent`。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / "pyproject.toml").exists()
            or (parent / ".git").exists()
            or (parent / "configs").exists()
        ):
            return parent
    return cur.parent.parent


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（トップレベルのみ上書き）

    いずれも無い/不正なら空辞書。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}
    for path in (project_root / "configs" / "default.yaml", project_root / "config.yaml"):
        if path.exists():
            base.update(_safe_load_yaml(path))
    return base


def config_section(name: str, root: Path | None = None) -> Dict[str, Any]:
    """`load_config()` のトップレベル辞書セクションを返す（dict 以外は空辞書）。"""
    section = load_config(root).get(name)
    return section if isinstance(section, dict) else {}
