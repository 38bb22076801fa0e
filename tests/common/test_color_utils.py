from __future__ import annotations

import pytest

from util.color import color, normalize_color, parse_hex_color_str


def _approx_tuple(t):
    return tuple(round(v, 6) for v in t)


def test_parse_hex_color_prefix_variants() -> None:
    expected = _approx_tuple((0x11 / 255.0, 0x22 / 255.0, 0x33 / 255.0, 1.0))
    for s in ("#112233", "0x112233", "112233", "  #112233  "):
        assert _approx_tuple(parse_hex_color_str(s)) == expected
    assert _approx_tuple(parse_hex_color_str("0X112233cc"))[3] == round(0xCC / 255.0, 6)


@pytest.mark.parametrize("bad", ["#123", "not-a-color", "#GG0000"])
def test_parse_hex_color_invalid(bad: str) -> None:
    with pytest.raises(ValueError):
        parse_hex_color_str(bad)


def test_normalize_color_01_and_255() -> None:
    assert _approx_tuple(normalize_color((0.1, 0.2, 0.3))) == (0.1, 0.2, 0.3, 1.0)
    assert normalize_color([255, 0, 0]) == (1.0, 0.0, 0.0, 1.0)
    # 1 を超える要素があれば全体を 0–255 とみなす
    assert _approx_tuple(normalize_color((255, 128, 0, 64))) == _approx_tuple(
        (1.0, 128 / 255.0, 0.0, 64 / 255.0)
    )


@pytest.mark.parametrize("bad", [None, 3, (1, 2), (1, 2, 3, 4, 5), ("a", "b", "c")])
def test_normalize_color_rejects(bad) -> None:
    with pytest.raises(ValueError):
        normalize_color(bad)


def test_color_constructor_defaults_and_clamp() -> None:
    assert color() == (1.0, 1.0, 1.0, 1.0)
    assert color(0, 0, 0, 0) == (0.0, 0.0, 0.0, 0.0)
    assert color(300, -5, 255) == (1.0, 0.0, 1.0, 1.0)
