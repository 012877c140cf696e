from __future__ import annotations

import pytest

from util.color import normalize_color, parse_hex_color_str


def _approx_tuple(t):  # noqa: ANN001, ANN202
    return tuple(round(v, 6) for v in t)


def test_parse_hex_color_valid_variants() -> None:
    expected = (round(0x11 / 255.0, 6), round(0x22 / 255.0, 6), round(0x33 / 255.0, 6))
    assert _approx_tuple(parse_hex_color_str("#112233")) == expected + (1.0,)
    assert _approx_tuple(parse_hex_color_str("112233")) == expected + (1.0,)
    assert _approx_tuple(parse_hex_color_str("0x112233CC")) == expected + (round(0xCC / 255.0, 6),)


def test_parse_hex_color_invalid() -> None:
    with pytest.raises(ValueError):
        parse_hex_color_str("#123")
    with pytest.raises(ValueError):
        parse_hex_color_str("#GGGGGG")


def test_normalize_color_from_tuple_01() -> None:
    assert _approx_tuple(normalize_color((0.1, 0.2, 0.3))) == (0.1, 0.2, 0.3, 1.0)
    assert normalize_color([0.0, 0.0, 0.0, 1.0]) == (0.0, 0.0, 0.0, 1.0)


def test_normalize_color_from_tuple_255() -> None:
    assert _approx_tuple(normalize_color((255, 128, 0, 64))) == (
        1.0,
        round(128 / 255.0, 6),
        0.0,
        round(64 / 255.0, 6),
    )
    # 範囲外は 0..255 にクランプ
    assert normalize_color((300, -5, 0)) == (1.0, 0.0, 0.0, 1.0)


@pytest.mark.parametrize("bad", [None, 3, (1, 2), (1, 2, 3, 4, 5), ("a", "b", "c")])
def test_normalize_color_rejects(bad: object) -> None:
    with pytest.raises(ValueError):
        normalize_color(bad)
