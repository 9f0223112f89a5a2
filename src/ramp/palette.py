from __future__ import annotations

"""Generation inputs shared by the ramp generators.

This module defines :class:`PaletteConfig`, the input record of the legacy
(seed/contrast) generator, together with the theme and mode enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence

from .overrides import Override, StopKey


DEFAULT_STOPS: tuple[int, ...] = (100, 200, 300, 400, 500, 600, 700, 800, 900)
DEFAULT_ANCHOR_STOP = 500


class Theme(str, Enum):
    """Background the anchor color must contrast against."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def background(self) -> str:
        return "#ffffff" if self is Theme.LIGHT else "#000000"


class PaletteMode(str, Enum):
    """Which generator builds the ramp."""

    LEGACY = "legacy"
    OKLCH = "oklch"


@dataclass
class PaletteConfig:
    """Input to the legacy generator (and to :func:`ramp.api.generate`).

    Attributes
    ----------
    seed:
        Seed color as ``#rrggbb``.
    stops:
        Stop numbers to generate. Duplicates are dropped and the result is
        sorted ascending before use.
    overrides:
        Per-stop overrides keyed by stop number or :data:`ramp.overrides.SEED`.
    anchor_stop:
        Stop that receives the contrast-derived anchor lightness.
    anchor_theme:
        ``light`` targets contrast against white, ``dark`` against black.
    show_original:
        Insert the unsnapped seed color as an extra swatch.
    palette_mode, oklch_hue, oklch_vividness:
        Used by :func:`ramp.api.generate` to pick the perceptual generator.
    """

    seed: str
    stops: Sequence[int] = DEFAULT_STOPS
    overrides: Dict[StopKey, Override] = field(default_factory=dict)
    anchor_stop: int = DEFAULT_ANCHOR_STOP
    anchor_theme: Theme = Theme.LIGHT
    show_original: bool = False
    palette_mode: PaletteMode = PaletteMode.LEGACY
    oklch_hue: float = 0.0
    oklch_vividness: float = 1.0

    def sorted_stops(self) -> List[int]:
        return sorted_unique_stops(self.stops)


def sorted_unique_stops(stops: Sequence[int]) -> List[int]:
    return sorted({int(s) for s in stops})


__all__ = [
    "DEFAULT_STOPS",
    "DEFAULT_ANCHOR_STOP",
    "Theme",
    "PaletteMode",
    "PaletteConfig",
    "sorted_unique_stops",
]
