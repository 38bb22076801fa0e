"""
どこで: `engine.render` 型定義。
何を: 描画層が受け渡す軽量な値型（ブレンド係数・フォント定義・頂点・テクスチャ座標・加速度）。
なぜ: 名前付きフィールドと既定値だけを持つ値オブジェクトを 1 箇所に集め、
      描画/入力層が同じ既定値と色の受理仕様を共有するため。

注: ブレンド係数やアライメントの定数/列挙は定義しない（係数は不透明な int として保持）。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Sequence

import numpy as np

from common.types import RGBA, Vec2, Vec3
from util.color import color, normalize_color
from util.utils import config_section

logger = logging.getLogger(__name__)

TEXT_ALIGNS = ("left", "center", "right")
VERTICAL_ALIGNS = ("top", "center", "bottom")
_WHITE: RGBA = color(255, 255, 255, 255)
_NUMERIC_FONT_FIELDS = (
    "font_size",
    "bounding_width",
    "bounding_height",
    "line_width",
    "shadow_offset_x",
    "shadow_offset_y",
    "shadow_blur",
    "shadow_opacity",
)


def _num(v: float | str | None) -> float:
    """None を 0 とみなして float 化する（数値文字列も受理）。"""
    return 0.0 if v is None else float(v)


def _line_height(v: float | str | None) -> float | str:
    """数値（数値文字列含む）は float、それ以外の文字列は CSS 値のまま。None は "normal"。"""
    if v is None:
        return "normal"
    if isinstance(v, str):
        try:
            return float(v)
        except ValueError:
            return v
    return float(v)


def _camel_to_snake(name: str) -> str:
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


@dataclass
class Acceleration:
    """加速度センサのサンプル（各軸 g 単位）。"""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    timestamp: float = 0.0

    def __post_init__(self) -> None:
        self.x, self.y, self.z = _num(self.x), _num(self.y), _num(self.z)
        self.timestamp = _num(self.timestamp)


@dataclass
class BlendFunc:
    """テクスチャ描画用のブレンド関数（src/dst 係数の組）。"""

    src: int
    dst: int


@dataclass
class Vertex2F:
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x, self.y = _num(self.x), _num(self.y)

    def as_tuple(self) -> Vec2:
        return (self.x, self.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float32)


@dataclass
class Vertex3F:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x, self.y, self.z = _num(self.x), _num(self.y), _num(self.z)

    def as_tuple(self) -> Vec3:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float32)


@dataclass
class Tex2F:
    """テクスチャ座標 (u, v)。"""

    u: float = 0.0
    v: float = 0.0

    def __post_init__(self) -> None:
        self.u, self.v = _num(self.u), _num(self.v)

    def as_array(self) -> np.ndarray:
        return np.array([self.u, self.v], dtype=np.float32)


def vertex2(x: float = 0.0, y: float = 0.0) -> Vertex2F:
    return Vertex2F(x, y)


def vertex3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Vertex3F:
    return Vertex3F(x, y, z)


def tex2(u: float = 0.0, v: float = 0.0) -> Tex2F:
    return Tex2F(u, v)


def vertices_to_array(vertices: Sequence[Vertex2F | Vertex3F]) -> np.ndarray:
    """頂点列を `(N, 3)` float32 配列へ詰める（Vertex2F は z=0）。

    Raises
    ------
    TypeError
        Vertex2F/Vertex3F 以外が含まれる場合。
    """
    out = np.zeros((len(vertices), 3), dtype=np.float32)
    for i, v in enumerate(vertices):
        if isinstance(v, Vertex3F):
            out[i] = (v.x, v.y, v.z)
        elif isinstance(v, Vertex2F):
            out[i, :2] = (v.x, v.y)
        else:
            raise TypeError(f"vertex must be Vertex2F or Vertex3F: {type(v)!r}")
    return out


@dataclass
class FontDefinition:
    """テキスト描画のフォント定義。

    - 色（`fill_style` / `stroke_style`）は Hex・0–1・0–255 を受理し RGBA(0–1) に正規化。
    - `text_align` は `left|center|right`、`vertical_align` は `top|center|bottom`。
    - `line_height` は数値（px）または CSS 文字列（既定 "normal"）。
    """

    font_name: str = "Arial"
    font_size: float = 12
    text_align: str = "center"
    vertical_align: str = "top"
    fill_style: RGBA = field(default=_WHITE)
    bounding_width: float = 0
    bounding_height: float = 0

    stroke_enabled: bool = False
    stroke_style: RGBA = field(default=_WHITE)
    line_width: float = 1
    line_height: float | str = "normal"
    font_style: str = "normal"
    font_weight: str = "normal"

    shadow_enabled: bool = False
    shadow_offset_x: float = 0
    shadow_offset_y: float = 0
    shadow_blur: float = 0
    shadow_opacity: float = 1.0

    def __post_init__(self) -> None:
        if self.text_align not in TEXT_ALIGNS:
            raise ValueError(
                f"text_align must be one of {TEXT_ALIGNS}: {self.text_align!r}"
            )
        if self.vertical_align not in VERTICAL_ALIGNS:
            raise ValueError(
                f"vertical_align must be one of {VERTICAL_ALIGNS}: {self.vertical_align!r}"
            )
        self.fill_style = normalize_color(self.fill_style)
        self.stroke_style = normalize_color(self.stroke_style)
        for name in _NUMERIC_FONT_FIELDS:
            setattr(self, name, _num(getattr(self, name)))
        self.line_height = _line_height(self.line_height)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, properties: Mapping[str, Any] | None) -> "FontDefinition":
        """マッピングからインライン生成する（`fontName` 等の camelCase も受理）。

        任意のキーを属性として受け入れることはせず、未知のキーは ValueError とする。
        """
        if not properties:
            return cls()
        known = cls.field_names()
        kwargs: dict[str, Any] = {}
        unknown: list[str] = []
        for raw_key, value in properties.items():
            key = _camel_to_snake(str(raw_key))
            if key in known:
                kwargs[key] = value
            else:
                unknown.append(str(raw_key))
        if unknown:
            raise ValueError(f"unknown FontDefinition properties: {sorted(unknown)}")
        return cls(**kwargs)

    def css_font(self) -> str:
        """Canvas/CSS の font 省略記法（例: `normal normal 12px/normal 'Arial'`）。"""
        lh = self.line_height
        line_height = lh if isinstance(lh, str) else f"{lh:g}px"
        return (
            f"{self.font_style} {self.font_weight} {self.font_size:g}px/"
            f"{line_height} '{self.font_name}'"
        )


def default_font_definition() -> FontDefinition:
    """構成ファイルの `font` セクションを既定値へ上書きした FontDefinition を返す。

    `name`/`size` は `font_name`/`font_size` の短縮名として扱う。
    構成が不正な場合は警告を出して素の既定値を返す。
    """
    section = dict(config_section("font"))
    for short, full in (("name", "font_name"), ("size", "font_size")):
        if short in section:
            section.setdefault(full, section.pop(short))
    try:
        return FontDefinition.from_mapping(section)
    except ValueError as e:
        logger.warning("invalid font config ignored: %s", e)
        return FontDefinition()


__all__ = [
    "Acceleration",
    "BlendFunc",
    "FontDefinition",
    "Tex2F",
    "Vertex2F",
    "Vertex3F",
    "TEXT_ALIGNS",
    "VERTICAL_ALIGNS",
    "default_font_definition",
    "tex2",
    "vertex2",
    "vertex3",
    "vertices_to_array",
]
