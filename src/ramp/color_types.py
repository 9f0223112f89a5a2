from __future__ import annotations

"""Core color types used by the ramp engine.

This module defines small, explicit value types for each color model the
engine works with, and the :class:`SwatchResult` record returned by both
generators.
"""

from dataclasses import dataclass
from typing import NamedTuple


class Oklch(NamedTuple):
    """OKLCH color. ``l`` in [0, 1], ``c`` >= 0, ``h`` in degrees."""

    l: float
    c: float
    h: float


class Rgb(NamedTuple):
    """sRGB color with channels in [0, 1] (may exceed the range before clamping)."""

    r: float
    g: float
    b: float


class Hsl(NamedTuple):
    h: float
    s: float
    l: float


class Hsv(NamedTuple):
    h: float
    s: float
    v: float


class Lch(NamedTuple):
    """CIE LCh (D50). ``l`` in [0, 100], ``c`` roughly in [0, 150]."""

    l: float
    c: float
    h: float


@dataclass
class SwatchResult:
    """One generated stop of a palette ramp.

    Attributes
    ----------
    stop:
        Stop number (e.g. 500).
    hex:
        Resulting color as lowercase ``#rrggbb``.
    lch:
        Report values (l, c on a 0-100 scale, h in degrees) for display.
    oklch:
        The final in-gamut OKLCH color the hex was encoded from.
    contrast_with_next:
        WCAG contrast against the next (darker) stop; 0 for the last stop.
    is_anchor:
        True for the single reference stop of the ramp.
    is_original:
        True when this swatch is the unsnapped seed color.
    """

    stop: int
    hex: str
    lch: Lch
    oklch: Oklch
    contrast_with_next: float = 0.0
    is_anchor: bool = False
    is_original: bool = False
