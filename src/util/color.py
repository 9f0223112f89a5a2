"""
どこで: `util.color`。
何を: ユーザー入力の色文字列を、`ramp` が受理する `#rrggbb`（小文字）へ正規化する。
なぜ: コア側は `#` 付き 6 桁のみを受理するため、入力の揺れはホスト側でここに集約する。
"""

from __future__ import annotations

import string


def normalize_hex_input(s: str) -> str:
    """Hex 文字列を `#rrggbb` へ正規化する。

    受理形式: "#RRGGBB", "0xRRGGBB", "RRGGBB", "#RGB", "RGB"。
    大文字/小文字は不問。前後の空白は無視する。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) == 3:
        t = "".join(ch * 2 for ch in t)
    if len(t) != 6:
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RGB)")
    if any(ch not in string.hexdigits for ch in t):
        raise ValueError(f"invalid hex color: '{s}'")
    return "#" + t.lower()


def to_u8_rgb(hex_str: str) -> tuple[int, int, int]:
    """`#rrggbb` を RGB(0–255) へ変換する。"""
    t = normalize_hex_input(hex_str)
    return (int(t[1:3], 16), int(t[3:5], 16), int(t[5:7], 16))


__all__ = [
    "normalize_hex_input",
    "to_u8_rgb",
]
