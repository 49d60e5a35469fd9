"""Instrument configuration, presets and units."""

from fanfret.config.instrument import CONFIG_VERSION, ConfigError, InstrumentConfig
from fanfret.config.presets import PRESETS, Preset, get_preset

__all__ = [
    "CONFIG_VERSION",
    "ConfigError",
    "InstrumentConfig",
    "PRESETS",
    "Preset",
    "get_preset",
]
