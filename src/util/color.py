"""
どこで: `util.color`。
何を: 背景色/クアッド色の指定（Hex 文字列, RGB(A) 0–1, RGB(A) 0–255）を RGBA(0–1) に正規化。
なぜ: 設定ファイル・引数のどちらから来た色も同じ受理仕様で GL の clear/uniform に渡すため。
"""

from __future__ import annotations

from typing import Sequence

RGBA = tuple[float, float, float, float]


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA"（接頭辞なしも可）。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        channels = [int(t[i : i + 2], 16) for i in range(0, len(t), 2)]
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = (c / 255.0 for c in channels)
    return (r, g, b, a)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 文字列は Hex として解釈する。
    - 3/4 要素の list/tuple は、全要素が 0..1 ならそのまま、そうでなければ 0–255 とみなす。
    - アルファ省略時は不透明。
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    seq: Sequence[object] = value
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        comps = [float(v) for v in seq]  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if all(0.0 <= c <= 1.0 for c in comps):
        if len(comps) == 3:
            comps.append(1.0)
        r, g, b, a = comps
        return (r, g, b, a)
    # 0–255 とみなして丸め・クランプ
    u8 = [max(0, min(255, int(round(c)))) for c in comps]
    if len(u8) == 3:
        u8.append(255)
    r8, g8, b8, a8 = u8
    return (r8 / 255.0, g8 / 255.0, b8 / 255.0, a8 / 255.0)


__all__ = ["RGBA", "parse_hex_color_str", "normalize_color"]
