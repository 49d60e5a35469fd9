"""Instrument presets.

Equal-scale instruments use the same value for both scales; the fan then
collapses and every fret is straight.
"""

from __future__ import annotations

from dataclasses import dataclass

from fanfret.config.instrument import InstrumentConfig


@dataclass(frozen=True)
class Preset:
    """A named instrument configuration."""

    id: str
    name: str
    config: InstrumentConfig


def _inch_preset(
    preset_id: str,
    name: str,
    strings: int,
    frets: int,
    scale_treble: float,
    scale_bass: float,
    width_nut: float,
    width_bridge: float,
    overhang: float = 0.12,
) -> Preset:
    # Catalogue widths are full board widths; the config wants string spans
    config = InstrumentConfig(
        strings=strings,
        frets=frets,
        scale_treble=scale_treble,
        scale_bass=scale_bass,
        span_nut=width_nut - 2 * overhang,
        span_bridge=width_bridge - 2 * overhang,
        overhang=overhang,
        units="in",
    )
    return Preset(id=preset_id, name=name, config=config.in_millimeters())


PRESETS: dict[str, Preset] = {
    p.id: p
    for p in (
        _inch_preset("strat-25-5", "Guitar - Strat-style 25.5in", 6, 22, 25.5, 25.5, 1.65, 2.20),
        _inch_preset("lespaul-24-75", "Guitar - LP-style 24.75in", 6, 22, 24.75, 24.75, 1.69, 2.16),
        _inch_preset(
            "rgms7-25-5-27", "FanFret - 7-string 25.5-27in", 7, 24, 25.5, 27.0, 1.89, 2.64,
        ),
        _inch_preset(
            "boden8-26-5-28", "FanFret - 8-string 26.5-28in", 8, 24, 26.5, 28.0, 2.17, 2.95,
        ),
        _inch_preset("bass-34", "Bass - 34in", 4, 20, 34.0, 34.0, 1.65, 2.36),
        Preset(
            id="curved-demo",
            name="Curved - 6-string demo (anchor @ 12)",
            config=InstrumentConfig(
                strings=6,
                frets=24,
                scale_treble=648.0,
                scale_bass=648.0,
                span_nut=36.0,
                span_bridge=50.0,
                overhang=3.0,
            ),
        ),
        Preset(
            id="default",
            name="Default - 6-string 25.5-26in fan",
            config=InstrumentConfig(),
        ),
    )
}


def get_preset(preset_id: str) -> Preset | None:
    return PRESETS.get(preset_id)
