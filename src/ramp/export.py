from __future__ import annotations

"""Helpers for handing generated ramps to a host application.

This module exposes a color naming helper for display names and
:func:`build_export_payload`, which bundles a ramp with per-swatch contrast
against the theme background.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .color_types import Rgb, SwatchResult
from .contrast import AA_THRESHOLD, contrast
from .convert import hex_to_rgb, rgb_to_hsl
from .palette import PaletteMode, Theme


# --- naming ---
_NAMED_COLORS: Tuple[Tuple[str, Rgb], ...] = (
    ("Red", Rgb(1.0, 0.0, 0.0)),
    ("Orange", Rgb(1.0, 0.5, 0.0)),
    ("Yellow", Rgb(1.0, 1.0, 0.0)),
    ("Lime", Rgb(0.5, 1.0, 0.0)),
    ("Green", Rgb(0.0, 1.0, 0.0)),
    ("Teal", Rgb(0.0, 0.5, 0.5)),
    ("Cyan", Rgb(0.0, 1.0, 1.0)),
    ("Blue", Rgb(0.0, 0.0, 1.0)),
    ("Indigo", Rgb(0.29, 0.0, 0.51)),
    ("Purple", Rgb(0.5, 0.0, 0.5)),
    ("Pink", Rgb(1.0, 0.75, 0.8)),
    ("Rose", Rgb(1.0, 0.0, 0.5)),
    ("Gray", Rgb(0.5, 0.5, 0.5)),
    ("White", Rgb(1.0, 1.0, 1.0)),
    ("Black", Rgb(0.0, 0.0, 0.0)),
)

# (upper bound exclusive, name); anything at or above the last bound is Red.
_HUE_BANDS: Tuple[Tuple[float, str], ...] = (
    (15.0, "Red"),
    (45.0, "Orange"),
    (75.0, "Yellow"),
    (150.0, "Green"),
    (190.0, "Teal"),
    (260.0, "Blue"),
    (300.0, "Indigo"),
    (345.0, "Purple"),
)

NEUTRAL_SATURATION = 0.20


def color_name_for_rgb(rgb: Rgb) -> str:
    """Coarse English name for an sRGB color.

    Low-saturation colors collapse to White, Black or Gray; everything else
    takes the nearest entry of a small named-color table.
    """
    hsl = rgb_to_hsl(rgb)
    if hsl.s < NEUTRAL_SATURATION:
        if hsl.l > 0.96:
            return "White"
        if hsl.l < 0.12:
            return "Black"
        return "Gray"
    best = "Gray"
    best_dist = float("inf")
    for name, ref in _NAMED_COLORS:
        d = math.dist(rgb, ref)
        if d < best_dist:
            best_dist = d
            best = name
    return best


def color_name_for_hue(hue: float) -> str:
    """Name of the OKLCH hue band ``hue`` falls into."""
    h = hue % 360.0
    for bound, name in _HUE_BANDS:
        if h < bound:
            return name
    return "Red"


# --- payload ---
@dataclass
class ExportSwatch:
    stop: int
    hex: str
    color: Rgb
    contrast: float
    is_pass: bool
    is_anchor: bool
    is_original: bool = False


@dataclass
class ExportPayload:
    """Everything a host needs to create color variables or frames."""

    name: str
    create_variables: bool
    swatches: List[ExportSwatch] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "createVariables": self.create_variables,
            "swatches": [
                {
                    "stop": s.stop,
                    "hex": s.hex,
                    "color": {"r": s.color.r, "g": s.color.g, "b": s.color.b},
                    "contrast": s.contrast,
                    "isPass": s.is_pass,
                    "isAnchor": s.is_anchor,
                    "isOriginal": s.is_original,
                }
                for s in self.swatches
            ],
        }


_EXTREMES = ("#ffffff", "#000000")


def build_export_payload(
    swatches: Sequence[SwatchResult],
    *,
    theme: Theme | str = Theme.LIGHT,
    mode: PaletteMode | str = PaletteMode.LEGACY,
    hue: Optional[float] = None,
    name: Optional[str] = None,
    create_variables: bool = False,
    threshold: float = AA_THRESHOLD,
) -> ExportPayload:
    """Bundle ``swatches`` for the host.

    Pure white and pure black swatches are dropped. The display name is
    ``name`` when given, else derived from ``hue`` in OKLCH mode or from the
    anchor color otherwise.
    """
    background = Theme(theme).background
    kept = [s for s in swatches if s.hex.lower() not in _EXTREMES]

    if name is None:
        if PaletteMode(mode) is PaletteMode.OKLCH and hue is not None:
            name = color_name_for_hue(hue)
        elif kept:
            anchor = next((s for s in kept if s.is_anchor), kept[len(kept) // 2])
            name = color_name_for_rgb(hex_to_rgb(anchor.hex))
        else:
            name = "Gray"

    out: List[ExportSwatch] = []
    for s in kept:
        ratio = contrast(s.hex, background)
        out.append(
            ExportSwatch(
                stop=s.stop,
                hex=s.hex,
                color=hex_to_rgb(s.hex),
                contrast=ratio,
                is_pass=ratio >= threshold,
                is_anchor=s.is_anchor,
                is_original=s.is_original,
            )
        )
    return ExportPayload(name=name, create_variables=create_variables, swatches=out)


__all__ = [
    "color_name_for_rgb",
    "color_name_for_hue",
    "ExportSwatch",
    "ExportPayload",
    "build_export_payload",
]
