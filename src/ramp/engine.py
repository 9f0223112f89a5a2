from __future__ import annotations

"""Low-level color math for sRGB, OKLab and CIE Lab (D50).

This module holds the matrices and transfer functions shared by
:mod:`ramp.convert`. Every function works on plain floats and returns plain
floats; sRGB values are *not* clamped here so that callers can use them for
gamut tests.
"""

import math
from typing import Tuple

import numpy as np


Triple = Tuple[float, float, float]

# Linear sRGB -> LMS -> OKLab (Björn Ottosson, 2020)
_LRGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
# OKLab -> LMS -> linear sRGB, published inverse set. Its first column is
# exactly 1, so (L, 0, 0) maps to an exact gray.
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)
_LMS_TO_LRGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)

# Linear sRGB -> XYZ, Bradford-adapted to D50
_LRGB_TO_XYZ_D50 = np.array(
    [
        [0.436065742824811, 0.3851514688337912, 0.14307845442264197],
        [0.22249319175623702, 0.7168870538238823, 0.06061979053986387],
        [0.013923904500943465, 0.09708128566574634, 0.7140993584005155],
    ]
)
_XYZ_D50_TO_LRGB = np.linalg.inv(_LRGB_TO_XYZ_D50)

_D50_WHITE = np.array([0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585])
_LAB_E = 216.0 / 24389.0
_LAB_K = 24389.0 / 27.0

_ACHROMATIC_EPS = 1e-6


def _apply(matrix: np.ndarray, v: Triple) -> Triple:
    out = matrix @ np.asarray(v, dtype=np.float64)
    return (float(out[0]), float(out[1]), float(out[2]))


def normalize_hue(h: float) -> float:
    """Normalize hue angle into [0, 360)."""
    return (h % 360.0 + 360.0) % 360.0


def srgb_to_linear(c: float) -> float:
    a = abs(c)
    if a <= 0.04045:
        return c / 12.92
    return math.copysign(((a + 0.055) / 1.055) ** 2.4, c)


def linear_to_srgb(c: float) -> float:
    a = abs(c)
    if a <= 0.0031308:
        return 12.92 * c
    return math.copysign(1.055 * (a ** (1 / 2.4)) - 0.055, c)


def to_polar(a: float, b: float) -> Tuple[float, float]:
    """Return (chroma, hue) for Cartesian a/b.

    Achromatic input (chroma below 1e-6) snaps to (0, 0) so that grays
    convert back without a spurious tint.
    """
    C = math.hypot(a, b)
    if C < _ACHROMATIC_EPS:
        return 0.0, 0.0
    return C, normalize_hue(math.degrees(math.atan2(b, a)))


def from_polar(C: float, h: float) -> Tuple[float, float]:
    h_rad = math.radians(h)
    return C * math.cos(h_rad), C * math.sin(h_rad)


def srgb_to_oklab(r: float, g: float, b: float) -> Triple:
    lin = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    lms = np.cbrt(_LRGB_TO_LMS @ np.asarray(lin, dtype=np.float64))
    out = _LMS_TO_OKLAB @ lms
    return (float(out[0]), float(out[1]), float(out[2]))


def oklab_to_srgb(L: float, a: float, b: float) -> Triple:
    """Convert OKLab to *unclamped* sRGB."""
    lms = (_OKLAB_TO_LMS @ np.asarray((L, a, b), dtype=np.float64)) ** 3
    rl, gl, bl = _apply(_LMS_TO_LRGB, (float(lms[0]), float(lms[1]), float(lms[2])))
    return (linear_to_srgb(rl), linear_to_srgb(gl), linear_to_srgb(bl))


def _lab_f(t: float) -> float:
    return float(np.cbrt(t)) if t > _LAB_E else (_LAB_K * t + 16.0) / 116.0


def _lab_f_inv(f: float) -> float:
    t = f ** 3
    return t if t > _LAB_E else (116.0 * f - 16.0) / _LAB_K


def srgb_to_lab_d50(r: float, g: float, b: float) -> Triple:
    """Convert sRGB to CIE Lab under a D50 white point."""
    lin = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    x, y, z = _apply(_LRGB_TO_XYZ_D50, lin)
    fx = _lab_f(x / float(_D50_WHITE[0]))
    fy = _lab_f(y / float(_D50_WHITE[1]))
    fz = _lab_f(z / float(_D50_WHITE[2]))
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def lab_d50_to_srgb(L: float, a: float, b: float) -> Triple:
    """Convert CIE Lab (D50) to *unclamped* sRGB."""
    fy = (L + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    xyz = (
        _lab_f_inv(fx) * float(_D50_WHITE[0]),
        _lab_f_inv(fy) * float(_D50_WHITE[1]),
        _lab_f_inv(fz) * float(_D50_WHITE[2]),
    )
    rl, gl, bl = _apply(_XYZ_D50_TO_LRGB, xyz)
    return (linear_to_srgb(rl), linear_to_srgb(gl), linear_to_srgb(bl))
