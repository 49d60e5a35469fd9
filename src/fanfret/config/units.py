"""Length unit conversion (millimeters and inches)."""

from __future__ import annotations

import math
from typing import Literal

Units = Literal["mm", "in"]

UNITS: tuple[str, ...] = ("mm", "in")
MM_PER_INCH: float = 25.4


def convert(value: float, from_unit: Units, to_unit: Units) -> float:
    """Convert a length; non-finite values pass through untouched."""
    if from_unit not in UNITS or to_unit not in UNITS:
        raise ValueError(f"Unsupported unit conversion: {from_unit} -> {to_unit}")
    if from_unit == to_unit or not math.isfinite(value):
        return value
    return value * MM_PER_INCH if from_unit == "in" else value / MM_PER_INCH
