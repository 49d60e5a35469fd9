"""fanfret: geometry of multi-scale (fanned-fret) fingerboards."""

__version__ = "0.1.0"
