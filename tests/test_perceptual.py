from __future__ import annotations

"""OKLCH モード（知覚均等パレット）のテスト。"""

import pytest

from ramp import generate_perceptual
from ramp.convert import hex_to_oklch
from ramp.gamut import in_gamut
from ramp.perceptual import stop_lightness

from tests._utils.samples import HEX_RE, STANDARD_STOPS


@pytest.mark.parametrize(
    "stop, expected",
    [
        (0, 1.0),
        (50, 0.95),
        (100, 0.90),
        (300, 0.725),
        (499, 0.90 - (399 / 400) * 0.35),
        (500, 0.45),
        (600, 0.40),
        (750, 0.25),
        (900, 0.10),
        (950, 0.05),
        (1000, 0.0),
    ],
)
def test_stop_lightness_curve(stop: int, expected: float) -> None:
    assert stop_lightness(stop) == pytest.approx(expected, abs=1e-12)


def test_stop_lightness_clamps_outside_range() -> None:
    assert stop_lightness(-100) == 1.0
    assert stop_lightness(1200) == 0.0


def test_nine_standard_stops() -> None:
    swatches = generate_perceptual(210)
    assert len(swatches) == 9
    assert [s.stop for s in swatches] == STANDARD_STOPS
    assert swatches[0].lch.l > swatches[8].lch.l
    anchor = next(s for s in swatches if s.stop == 500)
    assert anchor.is_anchor
    assert sum(s.is_anchor for s in swatches) == 1


@pytest.mark.parametrize("hue", [0, 60, 120, 210, 297, 359.5])
def test_hue_is_reported_exactly(hue: float) -> None:
    for s in generate_perceptual(hue):
        assert s.lch.h == hue
        assert s.oklch.h == hue
        assert HEX_RE.match(s.hex)


def test_boundary_stops_are_white_and_black() -> None:
    white, black = generate_perceptual(210, [0, 1000])
    assert white.stop == 0 and black.stop == 1000
    assert white.lch.l == 100
    assert black.lch.l == 0
    assert white.hex == "#ffffff"
    assert black.hex == "#000000"


def test_stops_are_sorted_and_deduplicated() -> None:
    swatches = generate_perceptual(210, [900, 100, 500, 100])
    assert [s.stop for s in swatches] == [100, 500, 900]


def test_lightness_is_monotonic_over_hundreds() -> None:
    stops = list(range(0, 1001, 100))
    swatches = generate_perceptual(40, stops)
    ls = [s.lch.l for s in swatches]
    assert all(a >= b for a, b in zip(ls, ls[1:]))


def test_contrast_with_next() -> None:
    swatches = generate_perceptual(210)
    for s in swatches[:-1]:
        assert s.contrast_with_next > 1.0
    assert swatches[-1].contrast_with_next == 0.0


def test_vividness_zero_gives_neutral_ramp() -> None:
    for s in generate_perceptual(30, vividness=0.0):
        assert s.oklch.c == 0.0
        assert s.lch.c == pytest.approx(0.0, abs=0.5)


def test_vividness_is_clamped() -> None:
    full = [s.hex for s in generate_perceptual(150, vividness=1.0)]
    assert [s.hex for s in generate_perceptual(150, vividness=3.0)] == full
    none = [s.hex for s in generate_perceptual(150, vividness=0.0)]
    assert [s.hex for s in generate_perceptual(150, vividness=-1.0)] == none


def test_lower_vividness_reduces_chroma() -> None:
    full = generate_perceptual(150, vividness=1.0)
    half = generate_perceptual(150, vividness=0.5)
    for a, b in zip(full, half):
        assert b.oklch.c == pytest.approx(a.oklch.c * 0.5)


def test_anchor_falls_back_to_center_without_500() -> None:
    swatches = generate_perceptual(210, [100, 200, 300])
    anchors = [s for s in swatches if s.is_anchor]
    assert [s.stop for s in anchors] == [200]


def test_output_hex_is_in_gamut() -> None:
    for s in generate_perceptual(60):
        assert in_gamut(hex_to_oklch(s.hex))


def test_empty_stops() -> None:
    assert generate_perceptual(210, []) == []
