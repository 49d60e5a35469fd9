"""Versioned instrument configuration.

An :class:`InstrumentConfig` is the single value handed to the geometry
kernel. It is immutable; use :meth:`InstrumentConfig.replace` to derive a
changed copy.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fanfret.config.units import UNITS, Units, convert
from fanfret.geometry.constants import (
    DEFAULT_ANCHOR_FRET,
    DEFAULT_EXPONENT,
    DEFAULT_FRETS,
    DEFAULT_GUIDE_PERCENT,
    DEFAULT_MARKER_GAPS,
    DEFAULT_MARKER_SIZE,
    DEFAULT_OVERHANG,
    DEFAULT_SCALE_BASS,
    DEFAULT_SCALE_TREBLE,
    DEFAULT_SPAN_BRIDGE,
    DEFAULT_SPAN_NUT,
    DEFAULT_STRINGS,
    MAX_MARKER_SIZE,
    MIN_EXPONENT,
    MIN_MARKER_SIZE,
    MIN_SCALE,
)

CONFIG_VERSION = 1

# Fields holding a length; these follow ``units``. Marker size is always mm.
LENGTH_FIELDS = (
    "scale_treble",
    "scale_bass",
    "span_nut",
    "span_bridge",
    "overhang",
)


class ConfigError(ValueError):
    """Raised when a configuration mapping cannot be turned into a config."""


def _finite(value: float, default: float) -> float:
    value = float(value)
    return value if math.isfinite(value) else default


def _count(value: float, default: int) -> int:
    return int(_finite(value, default))


@dataclass(frozen=True)
class InstrumentConfig:
    """Every parameter the fingerboard geometry depends on."""

    strings: int = DEFAULT_STRINGS
    frets: int = DEFAULT_FRETS
    scale_treble: float = DEFAULT_SCALE_TREBLE
    scale_bass: float = DEFAULT_SCALE_BASS
    anchor_fret: int = DEFAULT_ANCHOR_FRET
    exponent: float = DEFAULT_EXPONENT
    span_nut: float = DEFAULT_SPAN_NUT
    span_bridge: float = DEFAULT_SPAN_BRIDGE
    overhang: float = DEFAULT_OVERHANG
    units: Units = "mm"
    marker_gaps: tuple[int, ...] = field(default=DEFAULT_MARKER_GAPS)
    guide_percent: float = DEFAULT_GUIDE_PERCENT
    marker_size: float = DEFAULT_MARKER_SIZE
    version: int = CONFIG_VERSION

    def replace(self, **changes: Any) -> InstrumentConfig:
        return dataclasses.replace(self, **changes)

    def clamped(self) -> InstrumentConfig:
        """Copy with degenerate values pulled back into range.

        Non-finite numbers fall back to the field default; out-of-range
        gaps are dropped.
        """
        marker_size = _finite(self.marker_size, DEFAULT_MARKER_SIZE)
        return self.replace(
            strings=max(1, _count(self.strings, DEFAULT_STRINGS)),
            frets=max(0, _count(self.frets, DEFAULT_FRETS)),
            anchor_fret=max(0, _count(self.anchor_fret, DEFAULT_ANCHOR_FRET)),
            scale_treble=max(MIN_SCALE, _finite(self.scale_treble, DEFAULT_SCALE_TREBLE)),
            scale_bass=max(MIN_SCALE, _finite(self.scale_bass, DEFAULT_SCALE_BASS)),
            exponent=max(MIN_EXPONENT, _finite(self.exponent, DEFAULT_EXPONENT)),
            span_nut=max(0.0, _finite(self.span_nut, DEFAULT_SPAN_NUT)),
            span_bridge=max(0.0, _finite(self.span_bridge, DEFAULT_SPAN_BRIDGE)),
            overhang=max(0.0, _finite(self.overhang, DEFAULT_OVERHANG)),
            guide_percent=min(
                100.0, max(0.0, _finite(self.guide_percent, DEFAULT_GUIDE_PERCENT))
            ),
            marker_size=min(MAX_MARKER_SIZE, max(MIN_MARKER_SIZE, marker_size)),
            marker_gaps=tuple(
                int(g) for g in self.marker_gaps if math.isfinite(float(g))
            ),
        )

    def in_units(self, units: Units) -> InstrumentConfig:
        """Copy with every length converted to ``units``."""
        if units == self.units:
            return self
        converted = {
            name: convert(getattr(self, name), self.units, units) for name in LENGTH_FIELDS
        }
        return self.replace(units=units, **converted)

    def in_millimeters(self) -> InstrumentConfig:
        return self.in_units("mm")

    def to_dict(self) -> dict[str, Any]:
        data = dataclasses.asdict(self)
        data["marker_gaps"] = list(self.marker_gaps)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> InstrumentConfig:
        """Build a config from a plain mapping (e.g. parsed JSON).

        Missing keys fall back to defaults. Unknown keys, an unsupported
        ``version`` or a non-numeric value raise :class:`ConfigError`.
        """
        version = data.get("version", CONFIG_VERSION)
        if version != CONFIG_VERSION:
            raise ConfigError(
                f"Unsupported config version {version!r} (expected {CONFIG_VERSION})"
            )

        known = {f.name: f for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        units = data.get("units", "mm")
        if units not in UNITS:
            raise ConfigError(f"Unknown units {units!r}; expected one of {', '.join(UNITS)}")

        kwargs: dict[str, Any] = {"units": units, "version": version}
        try:
            for name in ("strings", "frets", "anchor_fret"):
                if name in data:
                    kwargs[name] = int(data[name])
            for name in (*LENGTH_FIELDS, "exponent", "guide_percent", "marker_size"):
                if name in data:
                    kwargs[name] = float(data[name])
            if "marker_gaps" in data:
                kwargs["marker_gaps"] = tuple(int(g) for g in data["marker_gaps"])
        except (TypeError, ValueError, OverflowError) as e:
            raise ConfigError(f"Invalid config value: {e}") from e

        for name, value in kwargs.items():
            if isinstance(value, float) and not math.isfinite(value):
                raise ConfigError(f"Non-finite value for {name}: {value!r}")

        return cls(**kwargs)
