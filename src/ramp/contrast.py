from __future__ import annotations

"""WCAG relative-luminance contrast.

Used to annotate adjacent stops, to flag stops against a theme background,
and by the legacy generator's anchor search.
"""

from typing import List

import numpy as np

from .color_types import SwatchResult
from .convert import hex_to_rgb


AA_THRESHOLD = 4.5

_LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def _channel_to_linear(v: float) -> float:
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color: str) -> float:
    """Relative luminance of ``#rrggbb`` in [0, 1]."""
    lin = [_channel_to_linear(v) for v in hex_to_rgb(hex_color)]
    return float(np.dot(_LUMA_WEIGHTS, lin))


def contrast(hex_a: str, hex_b: str) -> float:
    """Contrast ratio between two colors, in [1, 21]. Order does not matter."""
    la = relative_luminance(hex_a)
    lb = relative_luminance(hex_b)
    lighter, darker = (la, lb) if la >= lb else (lb, la)
    return (lighter + 0.05) / (darker + 0.05)


def passes(hex_color: str, background: str, threshold: float = AA_THRESHOLD) -> bool:
    return contrast(hex_color, background) >= threshold


def annotate_adjacent(swatches: List[SwatchResult]) -> List[SwatchResult]:
    """Fill ``contrast_with_next`` for each swatch; the last one gets 0."""
    for i, swatch in enumerate(swatches):
        if i + 1 < len(swatches):
            swatch.contrast_with_next = contrast(swatch.hex, swatches[i + 1].hex)
        else:
            swatch.contrast_with_next = 0.0
    return swatches


__all__ = ["AA_THRESHOLD", "relative_luminance", "contrast", "passes", "annotate_adjacent"]
