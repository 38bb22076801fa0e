"""
どこで: `util.color`。
何を: 値型が受け取る色指定（Hex, RGBA 0–1, RGBA 0–255）を RGBA(0–1) に正規化。
なぜ: FontDefinition の fill/stroke などで同一の受理仕様とエラーメッセージを使うため。
"""

from __future__ import annotations

from common.types import RGBA


def _channel01(x: float) -> float:
    return min(1.0, max(0.0, float(x)))


def _channel_u8(x: float) -> int:
    return min(255, max(0, int(round(float(x)))))


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列を RGBA(0–1) に変換する。

    受理: `#RRGGBB[AA]`, `0xRRGGBB[AA]`, `RRGGBB[AA]`（大文字/小文字不問）。
    """
    body = s.strip()
    if body.startswith("#"):
        body = body[1:]
    elif body[:2].lower() == "0x":
        body = body[2:]
    if len(body) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    if len(body) == 6:
        body += "ff"
    try:
        channels = [int(body[i : i + 2], 16) for i in range(0, 8, 2)]
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    r, g, b, a = (c / 255.0 for c in channels)
    return (r, g, b, a)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) に正規化する。

    - str は Hex として解釈
    - 長さ 3/4 の tuple/list: 全要素が 0..1 ならそのまま、それ以外は 0–255 とみなす
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(value) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        comps = [float(c) for c in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if all(0.0 <= c <= 1.0 for c in comps):
        if len(comps) == 3:
            comps.append(1.0)
        r, g, b, a = (_channel01(c) for c in comps)
        return (r, g, b, a)
    if len(comps) == 3:
        comps.append(255.0)
    r, g, b, a = (_channel_u8(c) / 255.0 for c in comps)
    return (r, g, b, a)


def color(r: float = 255, g: float = 255, b: float = 255, a: float = 255) -> RGBA:
    """0–255 のチャネル指定から RGBA(0–1) を作る（既定は不透明の白）。"""
    return (
        _channel_u8(r) / 255.0,
        _channel_u8(g) / 255.0,
        _channel_u8(b) / 255.0,
        _channel_u8(a) / 255.0,
    )


__all__ = [
    "parse_hex_color_str",
    "normalize_color",
    "color",
]
