from __future__ import annotations

"""Generation defaults read from the project configuration.

The generators never read configuration themselves. Callers that want the
configured defaults build a :class:`GenerationDefaults` from
:func:`util.config.load_config` output and pass values explicitly.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional

from .contrast import AA_THRESHOLD
from .overrides import overrides_from_mapping
from .palette import (
    DEFAULT_ANCHOR_STOP,
    DEFAULT_STOPS,
    PaletteConfig,
    PaletteMode,
    Theme,
    sorted_unique_stops,
)

logger = logging.getLogger(__name__)


@dataclass
class GenerationDefaults:
    stops: List[int] = field(default_factory=lambda: list(DEFAULT_STOPS))
    anchor_stop: int = DEFAULT_ANCHOR_STOP
    anchor_theme: Theme = Theme.LIGHT
    palette_mode: PaletteMode = PaletteMode.LEGACY
    oklch_hue: float = 0.0
    oklch_vividness: float = 1.0
    pass_threshold: float = AA_THRESHOLD

    @classmethod
    def from_config(
        cls,
        cfg: Mapping[str, Any] | None,
        base: Optional["GenerationDefaults"] = None,
    ) -> "GenerationDefaults":
        """Build defaults from the ``ramp`` section of a config dict.

        Values missing from the section come from ``base`` (built-in defaults
        when omitted). Invalid entries are logged and left at that value.
        """
        out = replace(base) if base is not None else cls()
        section = (cfg or {}).get("ramp")
        if not isinstance(section, Mapping):
            return out

        def _read(key: str, conv, current):
            if key not in section:
                return current
            try:
                return conv(section[key])
            except (TypeError, ValueError):
                logger.warning("config: ignoring invalid ramp.%s=%r", key, section[key])
                return current

        out.stops = _read("stops", sorted_unique_stops, out.stops)
        out.anchor_stop = _read("anchor_stop", int, out.anchor_stop)
        out.anchor_theme = _read("anchor_theme", Theme, out.anchor_theme)
        out.palette_mode = _read("palette_mode", PaletteMode, out.palette_mode)
        out.oklch_hue = _read("oklch_hue", float, out.oklch_hue)
        out.oklch_vividness = _read("oklch_vividness", float, out.oklch_vividness)
        out.pass_threshold = _read("pass_threshold", float, out.pass_threshold)
        return out

    def palette_config(
        self,
        seed: str,
        overrides: Optional[Mapping[object, Any]] = None,
        **changes: Any,
    ) -> PaletteConfig:
        """Return a :class:`PaletteConfig` seeded with these defaults."""
        values: Dict[str, Any] = dict(
            seed=seed,
            stops=list(self.stops),
            overrides=overrides_from_mapping(overrides or {}),
            anchor_stop=self.anchor_stop,
            anchor_theme=self.anchor_theme,
            palette_mode=self.palette_mode,
            oklch_hue=self.oklch_hue,
            oklch_vividness=self.oklch_vividness,
        )
        values.update(changes)
        return PaletteConfig(**values)


__all__ = ["GenerationDefaults"]
