"""Monotone curve fitting for fret rows and nut/bridge curves."""

from fanfret.curves.path import curve_to_path, segments_to_path
from fanfret.curves.pchip import fit_curve, y_at_x

__all__ = ["curve_to_path", "fit_curve", "segments_to_path", "y_at_x"]
