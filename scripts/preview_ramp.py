"""
Print a generated ramp to stdout.

Usage:
    python scripts/preview_ramp.py --seed "#18A0FB"
    python scripts/preview_ramp.py --mode oklch --hue 210 --vividness 0.8
    python scripts/preview_ramp.py --seed 9600ff --theme dark --json

Defaults for stops, anchor stop, theme and mode come from
configs/default.yaml (overridable by a root config.yaml).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from common import settings
from common.logging import setup_default_logging
from ramp import InvalidSeedColor, PaletteMode, Theme, build_export_payload, generate
from ramp.defaults import GenerationDefaults
from util.color import normalize_hex_input
from util.config import load_config

logger = logging.getLogger(__name__)


def _parse_stops(text: str) -> List[int]:
    return [int(part) for part in text.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Preview a perceptual palette ramp.")
    p.add_argument("--seed", default="#9600ff", help="seed color (legacy mode)")
    p.add_argument("--mode", choices=[m.value for m in PaletteMode], default=None)
    p.add_argument("--hue", type=float, default=None, help="OKLCH hue (oklch mode)")
    p.add_argument("--vividness", type=float, default=None)
    p.add_argument("--stops", type=_parse_stops, default=None, help="e.g. 100,200,500")
    p.add_argument("--anchor-stop", type=int, default=None)
    p.add_argument("--theme", choices=[t.value for t in Theme], default=None)
    p.add_argument("--show-original", action="store_true")
    p.add_argument("--json", action="store_true", help="print the host export payload")
    p.add_argument("--log-level", default=None)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    # precedence: CLI flag > config file > RAMP_* environment
    env = settings.get()
    base = GenerationDefaults(
        anchor_theme=Theme(env.DEFAULT_THEME), pass_threshold=env.PASS_THRESHOLD
    )
    defaults = GenerationDefaults.from_config(load_config(), base=base)
    changes: dict = {"show_original": args.show_original}
    if args.theme is not None:
        changes["anchor_theme"] = Theme(args.theme)
    if args.mode is not None:
        changes["palette_mode"] = PaletteMode(args.mode)
    if args.hue is not None:
        changes["oklch_hue"] = args.hue
    if args.vividness is not None:
        changes["oklch_vividness"] = args.vividness
    if args.stops is not None:
        changes["stops"] = args.stops
    if args.anchor_stop is not None:
        changes["anchor_stop"] = args.anchor_stop

    try:
        seed = normalize_hex_input(args.seed)
    except ValueError:
        # Let the generator reject it with its own error.
        seed = args.seed
    config = defaults.palette_config(seed, **changes)

    try:
        swatches = generate(config)
    except InvalidSeedColor as exc:
        logger.error("%s", exc)
        return 2

    if args.json:
        payload = build_export_payload(
            swatches,
            theme=config.anchor_theme,
            mode=config.palette_mode,
            hue=config.oklch_hue,
            threshold=defaults.pass_threshold,
        )
        json.dump(payload.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 0

    for s in swatches:
        flags = ("*" if s.is_anchor else " ") + ("o" if s.is_original else " ")
        print(
            f"{s.stop:>5} {flags} {s.hex}  L={s.lch.l:6.2f} C={s.lch.c:6.2f} "
            f"H={s.lch.h:6.2f}  next={s.contrast_with_next:5.2f}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
