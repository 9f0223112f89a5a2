from __future__ import annotations

"""Perceptual (OKLCH mode) ramp generator.

Every stop gets a lightness from a fixed, stop-indexed curve and the largest
chroma sRGB can show at that lightness and the requested hue, scaled by a
vividness factor. The hue is identical for every stop.
"""

import logging
from typing import List, Sequence

from .color_types import Oklch, SwatchResult
from .contrast import annotate_adjacent
from .convert import oklch_to_hex
from .gamut import find_max_chroma
from .palette import DEFAULT_ANCHOR_STOP, DEFAULT_STOPS, sorted_unique_stops
from .swatch import mark_anchor, report_lch

logger = logging.getLogger(__name__)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def stop_lightness(stop: float) -> float:
    """OKLCH lightness for ``stop``; 500 is pinned to 0.45.

    Segments: 0-100 white to light, 100-500 light range, 500-900 dark range,
    900-1000 dark to black. Stops outside [0, 1000] extend the nearest
    segment linearly before clamping to [0, 1].
    """
    if stop < 100:
        L = 1.00 - (stop / 100) * 0.10
    elif stop < 500:
        L = 0.90 - ((stop - 100) / 400) * 0.35
    elif stop == 500:
        L = 0.45
    elif stop <= 900:
        L = 0.40 - ((stop - 600) / 300) * 0.30
    else:
        L = 0.10 - ((stop - 900) / 100) * 0.10
    return _clamp01(L)


def generate_perceptual(
    hue: float,
    stops: Sequence[int] = DEFAULT_STOPS,
    vividness: float = 1.0,
) -> List[SwatchResult]:
    """Generate a constant-hue ramp in OKLCH.

    Parameters
    ----------
    hue:
        OKLCH hue in degrees. Reported back unchanged on every swatch.
    stops:
        Stop numbers; sorted ascending (duplicates dropped) before use.
    vividness:
        Fraction of the gamut-maximum chroma to use, clamped to [0, 1].

    Returns
    -------
    list[SwatchResult]
        One swatch per stop, lightest first, with stop 500 as the anchor.
    """
    vivid = _clamp01(vividness)
    swatches: List[SwatchResult] = []
    for stop in sorted_unique_stops(stops):
        L = stop_lightness(stop)
        C = find_max_chroma(L, hue) * vivid
        color = Oklch(L, C, hue)
        hex_value = oklch_to_hex(color)
        swatches.append(
            SwatchResult(
                stop=stop,
                hex=hex_value,
                lch=report_lch(hex_value, L, hue),
                oklch=color,
            )
        )

    mark_anchor(swatches, DEFAULT_ANCHOR_STOP)
    annotate_adjacent(swatches)
    logger.debug(
        "perceptual ramp: hue=%s vividness=%.3f stops=%d", hue, vivid, len(swatches)
    )
    return swatches


__all__ = ["stop_lightness", "generate_perceptual"]
