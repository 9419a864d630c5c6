"""
Harmonic synthesis, extrema finding and subordinate-station offsets.
"""

from tide_predictor.harmonics.interpolation import (
    ExtremeOffsets,
    build_keyframes,
    cosine_ease,
    map_hours,
    normalize_offsets,
)
from tide_predictor.harmonics.prediction import (
    Prediction,
    get_water_level_at_time,
    predict,
    resolve_constituents,
)
from tide_predictor.harmonics.records import (
    Extreme,
    HarmonicConstituent,
    TimelinePoint,
    coerce_constituents,
    to_dataframe,
)
from tide_predictor.harmonics.timeline import get_timeline

__all__ = [
    # Records
    'HarmonicConstituent',
    'TimelinePoint',
    'Extreme',
    'coerce_constituents',
    'to_dataframe',
    # Synthesis
    'Prediction',
    'predict',
    'get_water_level_at_time',
    'resolve_constituents',
    'get_timeline',
    # Subordinate stations
    'ExtremeOffsets',
    'normalize_offsets',
    'build_keyframes',
    'map_hours',
    'cosine_ease',
]
