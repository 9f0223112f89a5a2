from __future__ import annotations

"""Named color conversions used by the ramp engine.

Only the conversions the engine needs are exposed here. Hex strings are
``#rrggbb`` (case-insensitive on input, lowercase on output); hue is always
in degrees; HSL/HSV saturation, lightness and value are in [0, 1].
"""

import colorsys
import math
import re

from . import engine
from .color_types import Hsl, Hsv, Lch, Oklch, Rgb


_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


# --- hex / sRGB ---
def hex_to_rgb(hex_str: str) -> Rgb:
    """Parse ``#rrggbb`` into sRGB in [0, 1].

    Raises ``ValueError`` for anything else (a leading ``#`` is required).
    """
    if not isinstance(hex_str, str) or not _HEX_RE.fullmatch(hex_str):
        raise ValueError(f"invalid hex color: {hex_str!r} (expected #rrggbb)")
    return Rgb(
        int(hex_str[1:3], 16) / 255.0,
        int(hex_str[3:5], 16) / 255.0,
        int(hex_str[5:7], 16) / 255.0,
    )


def rgb_to_hex(rgb: Rgb) -> str:
    if not all(math.isfinite(v) for v in rgb):
        raise ValueError(f"cannot encode non-finite color: {rgb!r}")
    r_i = int(round(_clamp01(rgb[0]) * 255))
    g_i = int(round(_clamp01(rgb[1]) * 255))
    b_i = int(round(_clamp01(rgb[2]) * 255))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


# --- OKLCH ---
def rgb_to_oklch(rgb: Rgb) -> Oklch:
    L, a, b = engine.srgb_to_oklab(*rgb)
    C, h = engine.to_polar(a, b)
    return Oklch(L, C, h)


def oklch_to_rgb(color: Oklch) -> Rgb:
    """Convert OKLCH to *unclamped* sRGB."""
    a, b = engine.from_polar(color.c, color.h)
    return Rgb(*engine.oklab_to_srgb(color.l, a, b))


def hex_to_oklch(hex_str: str) -> Oklch:
    return rgb_to_oklch(hex_to_rgb(hex_str))


def oklch_to_hex(color: Oklch) -> str:
    """Encode OKLCH as hex, clipping out-of-gamut channels."""
    if not all(math.isfinite(v) for v in color):
        raise ValueError(f"cannot encode non-finite color: {color!r}")
    return rgb_to_hex(oklch_to_rgb(color))


# --- HSL / HSV (colorsys works with hue in [0, 1)) ---
def rgb_to_hsl(rgb: Rgb) -> Hsl:
    h, l, s = colorsys.rgb_to_hls(*rgb)
    return Hsl(h * 360.0, s, l)


def hsl_to_rgb(hsl: Hsl) -> Rgb:
    return Rgb(*colorsys.hls_to_rgb((hsl.h / 360.0) % 1.0, hsl.l, hsl.s))


def rgb_to_hsv(rgb: Rgb) -> Hsv:
    h, s, v = colorsys.rgb_to_hsv(*rgb)
    return Hsv(h * 360.0, s, v)


def hsv_to_rgb(hsv: Hsv) -> Rgb:
    return Rgb(*colorsys.hsv_to_rgb((hsv.h / 360.0) % 1.0, hsv.s, hsv.v))


def hex_to_hsl(hex_str: str) -> Hsl:
    return rgb_to_hsl(hex_to_rgb(hex_str))


def hsl_to_hex(hsl: Hsl) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))


def hex_to_hsv(hex_str: str) -> Hsv:
    return rgb_to_hsv(hex_to_rgb(hex_str))


def hsv_to_hex(hsv: Hsv) -> str:
    return rgb_to_hex(hsv_to_rgb(hsv))


# --- CIE LCh (D50) ---
def rgb_to_lch(rgb: Rgb) -> Lch:
    L, a, b = engine.srgb_to_lab_d50(*rgb)
    C, h = engine.to_polar(a, b)
    return Lch(L, C, h)


def lch_to_rgb(lch: Lch) -> Rgb:
    a, b = engine.from_polar(lch.c, lch.h)
    return Rgb(*engine.lab_d50_to_srgb(lch.l, a, b))


def hex_to_lch(hex_str: str) -> Lch:
    return rgb_to_lch(hex_to_rgb(hex_str))


def lch_to_hex(lch: Lch) -> str:
    return rgb_to_hex(lch_to_rgb(lch))


__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_oklch",
    "oklch_to_rgb",
    "hex_to_oklch",
    "oklch_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "hex_to_hsv",
    "hsv_to_hex",
    "rgb_to_lch",
    "lch_to_rgb",
    "hex_to_lch",
    "lch_to_hex",
]
