from __future__ import annotations

"""High-level entry point for generating ramps.

:func:`generate` dispatches a :class:`ramp.palette.PaletteConfig` to the
perceptual or the legacy generator according to its ``palette_mode``.
"""

from typing import List

from .color_types import SwatchResult
from .legacy import generate_legacy
from .palette import PaletteConfig, PaletteMode
from .perceptual import generate_perceptual


def generate(config: PaletteConfig) -> List[SwatchResult]:
    """Generate a ramp for ``config``.

    In OKLCH mode only ``oklch_hue``, ``oklch_vividness`` and ``stops`` are
    used; the seed is not parsed. In legacy mode an unparsable seed raises
    :class:`ramp.errors.InvalidSeedColor`.
    """
    mode = PaletteMode(config.palette_mode)
    if mode is PaletteMode.OKLCH:
        return generate_perceptual(config.oklch_hue, config.stops, config.oklch_vividness)
    if mode is PaletteMode.LEGACY:
        return generate_legacy(config)
    raise ValueError(f"Unsupported PaletteMode: {mode}")


__all__ = ["generate"]
