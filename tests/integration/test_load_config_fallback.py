from __future__ import annotations

from pathlib import Path

import pytest

from engine.render.types import default_font_definition
from util.utils import _find_project_root, config_section, load_config


@pytest.mark.integration
# configs/default.yaml (base) に font セクションがあり、既定フォントへ反映される
def test_repo_default_config_provides_font_section():
    cfg = load_config()
    assert isinstance(cfg.get("font"), dict)
    fd = default_font_definition()
    assert fd.font_name == cfg["font"].get("name", "Arial")


def test_root_config_overrides_top_level(tmp_path: Path):
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "font:\n  name: Arial\n  size: 12\nother: 1\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("font:\n  name: Mono\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    # トップレベル単位の上書き（ディープマージしない）
    assert cfg["font"] == {"name": "Mono"}
    assert cfg["other"] == 1
    assert config_section("font", tmp_path) == {"name": "Mono"}


def test_broken_yaml_and_non_dict_are_ignored(tmp_path: Path):
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("font: [unclosed\n", encoding="utf-8")
    (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == {}
    assert config_section("font", tmp_path) == {}


def test_project_root_marker_and_fallback(tmp_path: Path):
    # マーカー（configs/）があればその階層、無ければ start.parent.parent
    nested = tmp_path / "repo" / "src" / "util"
    nested.mkdir(parents=True)
    nested = nested.resolve()
    assert _find_project_root(nested) == nested.parent.parent

    (nested.parent / "configs").mkdir()
    assert _find_project_root(nested) == nested.parent
