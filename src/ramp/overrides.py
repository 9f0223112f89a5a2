from __future__ import annotations

"""Per-stop user overrides and their resolution.

An override is one of four frozen dataclasses, one per color model. Every
channel is optional; unset channels are filled from the color the generator
would otherwise have produced. Overrides live in a single mapping keyed by
stop number or by :data:`SEED` (the original input color).
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .color_types import Hsl, Hsv, Oklch, Rgb
from .convert import (
    hex_to_hsl,
    hex_to_hsv,
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    oklch_to_hex,
    rgb_to_oklch,
)

logger = logging.getLogger(__name__)


class OverrideKey(Enum):
    """Non-numeric override keys."""

    SEED = "seed"


SEED = OverrideKey.SEED

StopKey = Union[int, OverrideKey]


@dataclass(frozen=True)
class LchOverride:
    """OKLCH channel edits. ``lightness`` is 0-100, ``chroma`` in OKLCH units."""

    hue: Optional[float] = None
    chroma: Optional[float] = None
    lightness: Optional[float] = None


@dataclass(frozen=True)
class HslOverride:
    hue: Optional[float] = None
    saturation: Optional[float] = None
    lightness: Optional[float] = None


@dataclass(frozen=True)
class RgbOverride:
    r: Optional[float] = None
    g: Optional[float] = None
    b: Optional[float] = None


@dataclass(frozen=True)
class HsbOverride:
    hue: Optional[float] = None
    saturation: Optional[float] = None
    brightness: Optional[float] = None


Override = Union[LchOverride, HslOverride, RgbOverride, HsbOverride]
_OVERRIDE_TYPES = (LchOverride, HslOverride, RgbOverride, HsbOverride)
Overrides = Mapping[StopKey, Override]


def _pick(value: Optional[float], fallback: float) -> float:
    return fallback if value is None else float(value)


def _current_hex(color: Oklch) -> Optional[str]:
    try:
        return oklch_to_hex(color)
    except ValueError:
        logger.debug("override: cannot encode current color %r", color)
        return None


def _back_to_oklch(rgb: Rgb) -> Oklch:
    if not all(math.isfinite(v) for v in rgb):
        return Oklch(0.0, 0.0, 0.0)
    return rgb_to_oklch(rgb)


def apply_override(base: Oklch, override: Optional[Override]) -> Oklch:
    """Apply ``override`` on top of ``base`` and return the new OKLCH color.

    LCH edits write OKLCH channels directly. HSL, HSB and RGB edits convert
    the current color (as rendered, i.e. through its hex) into that model,
    overlay the given channels and convert back.
    """
    if override is None:
        return base

    if isinstance(override, LchOverride):
        return Oklch(
            override.lightness / 100.0 if override.lightness is not None else base.l,
            _pick(override.chroma, base.c),
            _pick(override.hue, base.h),
        )

    current = _current_hex(base)

    if isinstance(override, HslOverride):
        cur = hex_to_hsl(current) if current is not None else Hsl(0.0, 0.0, 0.0)
        new = Hsl(
            _pick(override.hue, cur.h),
            _pick(override.saturation, cur.s),
            _pick(override.lightness, cur.l),
        )
        return _back_to_oklch(hsl_to_rgb(new))

    if isinstance(override, HsbOverride):
        cur_v = hex_to_hsv(current) if current is not None else Hsv(0.0, 0.0, 0.0)
        new_v = Hsv(
            _pick(override.hue, cur_v.h),
            _pick(override.saturation, cur_v.s),
            _pick(override.brightness, cur_v.v),
        )
        return _back_to_oklch(hsv_to_rgb(new_v))

    if isinstance(override, RgbOverride):
        cur_rgb = hex_to_rgb(current) if current is not None else Rgb(0.0, 0.0, 0.0)
        new_rgb = Rgb(
            _pick(override.r, cur_rgb.r),
            _pick(override.g, cur_rgb.g),
            _pick(override.b, cur_rgb.b),
        )
        return _back_to_oklch(new_rgb)

    raise TypeError(f"Unsupported override type: {type(override).__name__}")


def resolve_stop(
    key: StopKey,
    base_l: float,
    base_c: float,
    base_h: float,
    overrides: Optional[Overrides] = None,
) -> Oklch:
    """Look up the override for ``key`` and apply it to the base color."""
    base = Oklch(base_l, base_c, base_h)
    override = overrides.get(key) if overrides else None
    if override is not None:
        logger.debug("override: stop=%s kind=%s", key, type(override).__name__)
    return apply_override(base, override)


# --- host-shaped input ---
_MODE_FIELDS: Dict[str, Tuple[type, Dict[str, str]]] = {
    "lch": (LchOverride, {"hue": "hue", "chroma": "chroma", "lightness": "lightness"}),
    "hsl": (HslOverride, {"hue": "hue", "s": "saturation", "lightness": "lightness"}),
    "rgb": (RgbOverride, {"r": "r", "g": "g", "b": "b"}),
    "hsb": (HsbOverride, {"hue": "hue", "s": "saturation", "v": "brightness"}),
}


def override_from_dict(data: Mapping[str, Any]) -> Override:
    """Build an override from the host's ``{"mode": ..., <channels>}`` shape.

    A missing ``mode`` means ``lch``. Channels not meaningful for the mode are
    ignored.
    """
    mode = str(data.get("mode") or "lch").lower()
    if mode == "hsv":
        mode = "hsb"
    if mode not in _MODE_FIELDS:
        raise ValueError(f"Unknown override mode: {mode}")
    cls, fields = _MODE_FIELDS[mode]
    kwargs = {
        attr: float(data[src]) for src, attr in fields.items() if data.get(src) is not None
    }
    return cls(**kwargs)


def parse_override_key(key: object) -> StopKey:
    """Return an int stop or :data:`SEED` for a host-supplied map key."""
    if isinstance(key, OverrideKey):
        return key
    if isinstance(key, bool):
        raise ValueError(f"Invalid override key: {key!r}")
    if isinstance(key, int):
        return key
    if isinstance(key, str):
        s = key.strip()
        if s.lower() == SEED.value:
            return SEED
        try:
            return int(s)
        except ValueError as exc:
            raise ValueError(f"Invalid override key: {key!r}") from exc
    raise ValueError(f"Invalid override key: {key!r}")


def overrides_from_mapping(data: Mapping[object, Any]) -> Dict[StopKey, Override]:
    """Convert a host override map (mixed str/int keys, dict values)."""
    out: Dict[StopKey, Override] = {}
    for key, value in data.items():
        parsed = value if isinstance(value, _OVERRIDE_TYPES) else override_from_dict(value)
        out[parse_override_key(key)] = parsed
    return out


__all__ = [
    "OverrideKey",
    "SEED",
    "StopKey",
    "LchOverride",
    "HslOverride",
    "RgbOverride",
    "HsbOverride",
    "Override",
    "Overrides",
    "apply_override",
    "resolve_stop",
    "override_from_dict",
    "parse_override_key",
    "overrides_from_mapping",
]
