"""Geometry constants used across the fingerboard kernel.

Centralizes tolerances and instrument defaults from strings.py, scales.py,
common.py, markers.py and the config layer.
"""

# ---------------------------------------------------------------------------
# Equal temperament
# ---------------------------------------------------------------------------
SEMITONES_PER_OCTAVE: float = 12.0
"""Frets per doubling of frequency (12-TET)."""

# ---------------------------------------------------------------------------
# Numeric tolerances
# ---------------------------------------------------------------------------
PARALLEL_EPS: float = 1e-9
"""Denominator magnitude below which two lines are treated as parallel."""

SEGMENT_EPS: float = 1e-9
"""Slack on segment parameters so hits exactly at an endpoint are kept."""

MIN_EXPONENT: float = 0.01
"""Lower clamp for the fan exponent."""

MIN_SCALE: float = 1e-6
"""Lower clamp for scale lengths so log-space blending stays finite."""

# ---------------------------------------------------------------------------
# Instrument defaults (millimeters)
# ---------------------------------------------------------------------------
DEFAULT_STRINGS: int = 6
DEFAULT_FRETS: int = 22

DEFAULT_SCALE_TREBLE: float = 647.7
"""25.5 in treble-side scale length."""

DEFAULT_SCALE_BASS: float = 660.4
"""26.0 in bass-side scale length."""

DEFAULT_ANCHOR_FRET: int = 12
"""Typical straight fret for a multi-scale fan."""

DEFAULT_EXPONENT: float = 1.0
"""Baseline fan exponent (pure log-linear blend)."""

DEFAULT_SPAN_NUT: float = 35.814
DEFAULT_SPAN_BRIDGE: float = 49.784
DEFAULT_OVERHANG: float = 3.048

# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------
DEFAULT_MARKER_GAPS: tuple[int, ...] = (2, 4, 6, 8, 11, 14, 16, 18, 20)
"""Gap indices that carry an inlay marker (gap n sits between frets n and n+1)."""

DEFAULT_GUIDE_PERCENT: float = 50.0
"""Guide line position across the board, 0 = bass edge, 100 = treble edge."""

DEFAULT_MARKER_SIZE: float = 6.0
"""Marker diameter."""

MIN_MARKER_SIZE: float = 1.0
MAX_MARKER_SIZE: float = 30.0
