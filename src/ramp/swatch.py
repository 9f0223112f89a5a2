from __future__ import annotations

"""Helpers shared by both generators for building swatch lists."""

from typing import List, Optional

from .color_types import Lch, Oklch, SwatchResult
from .convert import hex_to_lch, oklch_to_hex
from .gamut import to_gamut


def build_swatch(stop: int, color: Oklch, *, is_original: bool = False) -> SwatchResult:
    """Gamut-map ``color`` and encode it as a swatch.

    The ``lch`` report is read back from the hex so that it matches what is
    actually displayed.
    """
    mapped = to_gamut(color)
    hex_value = oklch_to_hex(mapped)
    return SwatchResult(
        stop=stop,
        hex=hex_value,
        lch=hex_to_lch(hex_value),
        oklch=mapped,
        is_original=is_original,
    )


def mark_anchor(swatches: List[SwatchResult], anchor_stop: int) -> Optional[SwatchResult]:
    """Flag exactly one swatch as the anchor.

    Prefers the swatch whose stop equals ``anchor_stop``; falls back to the
    center of the list. Original-color swatches are never the anchor.
    """
    candidates = [s for s in swatches if not s.is_original]
    if not candidates:
        return None
    for s in swatches:
        s.is_anchor = False
    anchor = next((s for s in candidates if s.stop == anchor_stop), None)
    if anchor is None:
        anchor = candidates[len(candidates) // 2]
    anchor.is_anchor = True
    return anchor


def report_lch(hex_value: str, lightness: float, hue: float) -> Lch:
    """Report record with a fixed lightness and hue, chroma read from the hex."""
    return Lch(lightness * 100.0, hex_to_lch(hex_value).c, hue)


__all__ = ["build_swatch", "mark_anchor", "report_lch"]
