from __future__ import annotations

"""Exceptions raised at the ramp engine boundary."""


class RampError(ValueError):
    """Base class for errors raised by the ramp engine."""


class InvalidSeedColor(RampError):
    """The seed color of a legacy palette could not be parsed."""

    def __init__(self, seed: object) -> None:
        super().__init__(f"invalid seed color: {seed!r}")
        self.seed = seed


__all__ = ["RampError", "InvalidSeedColor"]
