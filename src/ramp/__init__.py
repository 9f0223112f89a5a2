"""Public entrypoint for the ramp palette engine.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``ramp`` instead of individual
submodules.
"""

from .api import generate
from .color_types import Hsl, Hsv, Lch, Oklch, Rgb, SwatchResult
from .contrast import AA_THRESHOLD, contrast, relative_luminance
from .errors import InvalidSeedColor, RampError
from .export import ExportPayload, build_export_payload
from .gamut import find_max_chroma, in_gamut, to_gamut
from .legacy import generate_legacy
from .overrides import (
    SEED,
    HsbOverride,
    HslOverride,
    LchOverride,
    RgbOverride,
    apply_override,
    overrides_from_mapping,
)
from .palette import DEFAULT_STOPS, PaletteConfig, PaletteMode, Theme
from .perceptual import generate_perceptual

__all__ = [
    "generate",
    "generate_perceptual",
    "generate_legacy",
    "PaletteConfig",
    "PaletteMode",
    "Theme",
    "DEFAULT_STOPS",
    "SwatchResult",
    "Oklch",
    "Rgb",
    "Hsl",
    "Hsv",
    "Lch",
    "SEED",
    "LchOverride",
    "HslOverride",
    "RgbOverride",
    "HsbOverride",
    "apply_override",
    "overrides_from_mapping",
    "to_gamut",
    "in_gamut",
    "find_max_chroma",
    "contrast",
    "relative_luminance",
    "AA_THRESHOLD",
    "InvalidSeedColor",
    "RampError",
    "ExportPayload",
    "build_export_payload",
]
