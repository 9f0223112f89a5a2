from __future__ import annotations

"""sRGB gamut handling utilities for OKLCH colors.

Two helpers live here: :func:`to_gamut` pulls an arbitrary OKLCH color into
sRGB by shrinking chroma in fixed steps, and :func:`find_max_chroma` finds
the largest in-gamut chroma for a lightness/hue pair by bisection. Neither
ever changes lightness or hue.
"""

from .color_types import Oklch
from .convert import oklch_to_rgb


CHROMA_STEP = 0.005
MAX_ATTEMPTS = 50

MAX_CHROMA = 0.4
CHROMA_TOLERANCE = 0.001

# Slack for the 10-digit OKLab matrices; far below one 8-bit step.
GAMUT_EPSILON = 1e-6


def in_gamut(color: Oklch) -> bool:
    """Return True if the unclamped sRGB channels of ``color`` lie in [0, 1]."""
    lo = -GAMUT_EPSILON
    hi = 1.0 + GAMUT_EPSILON
    return all(lo <= v <= hi for v in oklch_to_rgb(color))


def to_gamut(
    color: Oklch,
    step: float = CHROMA_STEP,
    max_attempts: int = MAX_ATTEMPTS,
) -> Oklch:
    """Reduce chroma by ``step`` until ``color`` fits sRGB.

    Gives up after ``max_attempts`` reductions and returns the color as it
    stands; the hex encoder clips whatever is left.
    """
    L, C, h = color
    attempts = 0
    while not in_gamut(Oklch(L, C, h)) and C > 0 and attempts < max_attempts:
        C = max(0.0, C - step)
        attempts += 1
    return Oklch(L, C, h)


def find_max_chroma(L: float, h: float) -> float:
    """Largest chroma in [0, MAX_CHROMA] for which (L, C, h) is in gamut.

    Black and white (L outside (0, 1)) carry no chroma.
    """
    if L <= 0.0 or L >= 1.0:
        return 0.0
    low = 0.0
    high = MAX_CHROMA
    while high - low > CHROMA_TOLERANCE:
        mid = (low + high) / 2
        if in_gamut(Oklch(L, mid, h)):
            low = mid
        else:
            high = mid
    return low


__all__ = ["in_gamut", "to_gamut", "find_max_chroma", "CHROMA_STEP", "MAX_ATTEMPTS"]
