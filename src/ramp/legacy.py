from __future__ import annotations

"""Legacy (seed/contrast mode) ramp generator.

The seed color contributes only its chroma and hue. The anchor stop gets the
lightness at which that chroma/hue reaches WCAG AA contrast (4.5:1) against
the theme background; every other stop steps away from the anchor
geometrically, one ``MULTIPLIER`` contrast step per 100 stop units.
"""

import logging
from typing import List, Optional

from .color_types import Oklch, SwatchResult
from .contrast import AA_THRESHOLD, annotate_adjacent, contrast
from .convert import hex_to_oklch, oklch_to_hex
from .errors import InvalidSeedColor
from .gamut import to_gamut
from .overrides import SEED, Overrides, resolve_stop
from .palette import PaletteConfig, Theme
from .swatch import build_swatch, mark_anchor

logger = logging.getLogger(__name__)


MULTIPLIER = 1.105  # MULTIPLIER**3 ~= 1.35
STOP_STEP = 100
ANCHOR_SEARCH_ITERATIONS = 15


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def parse_seed(seed: str) -> Oklch:
    """Seed hex -> OKLCH, raising :class:`InvalidSeedColor` on bad input."""
    try:
        return hex_to_oklch(seed)
    except (TypeError, ValueError) as exc:
        raise InvalidSeedColor(seed) from exc


def find_anchor_lightness(
    chroma: float,
    hue: float,
    theme: Theme = Theme.LIGHT,
    target: float = AA_THRESHOLD,
    iterations: int = ANCHOR_SEARCH_ITERATIONS,
) -> float:
    """Bisect L in [0, 1] for ``target`` contrast against the theme background.

    Against white, contrast falls as L rises, so the lightest passing L is
    kept. Against black it is the other way round and the darkest passing L
    is kept. Either way the returned lightness passes.
    """
    background = theme.background
    low, high = 0.0, 1.0
    for _ in range(iterations):
        mid = (low + high) / 2
        candidate = oklch_to_hex(to_gamut(Oklch(mid, chroma, hue)))
        ok = contrast(candidate, background) >= target
        if theme is Theme.LIGHT:
            if ok:
                low = mid
            else:
                high = mid
        else:
            if ok:
                high = mid
            else:
                low = mid
    return low if theme is Theme.LIGHT else high


def stepped_lightness(stop: float, anchor_stop: float, anchor_l: float) -> float:
    """Lightness ``(stop - anchor_stop) / 100`` contrast steps away from the anchor."""
    steps = (stop - anchor_stop) / STOP_STEP
    if steps < 0:
        L = (anchor_l + 0.05) * MULTIPLIER ** abs(steps) - 0.05
    elif steps > 0:
        L = (anchor_l + 0.05) / MULTIPLIER**steps - 0.05
    else:
        L = anchor_l
    return _clamp01(L)


def _original_swatch(
    seed: Oklch, anchor_stop: int, overrides: Optional[Overrides]
) -> SwatchResult:
    color = resolve_stop(SEED, seed.l, seed.c, seed.h, overrides)
    return build_swatch(anchor_stop, color, is_original=True)


def _insert_by_lightness(swatches: List[SwatchResult], swatch: SwatchResult) -> None:
    for i, s in enumerate(swatches):
        if s.oklch.l < swatch.oklch.l:
            swatches.insert(i, swatch)
            return
    swatches.append(swatch)


def generate_legacy(config: PaletteConfig) -> List[SwatchResult]:
    """Generate a seed-based ramp.

    Raises
    ------
    InvalidSeedColor
        If ``config.seed`` is not a ``#rrggbb`` color. Nothing is generated.
    """
    seed = parse_seed(config.seed)
    theme = Theme(config.anchor_theme)
    anchor_stop = config.anchor_stop

    anchor_l = find_anchor_lightness(seed.c, seed.h, theme)
    logger.debug(
        "legacy ramp: seed=%s anchor_stop=%s theme=%s anchor_l=%.4f",
        config.seed,
        anchor_stop,
        theme.value,
        anchor_l,
    )

    swatches: List[SwatchResult] = []
    for stop in config.sorted_stops():
        L = stepped_lightness(stop, anchor_stop, anchor_l)
        color = resolve_stop(stop, L, seed.c, seed.h, config.overrides)
        swatches.append(build_swatch(stop, color))

    mark_anchor(swatches, anchor_stop)
    if config.show_original:
        _insert_by_lightness(swatches, _original_swatch(seed, anchor_stop, config.overrides))
    annotate_adjacent(swatches)
    return swatches


__all__ = [
    "MULTIPLIER",
    "parse_seed",
    "find_anchor_lightness",
    "stepped_lightness",
    "generate_legacy",
]
