"""
tide_predictor

Harmonic tide prediction from station constituents:

- Astronomical arguments (Meeus / Schureman)
- Constituent registry with IHO Annex B compound decomposition
- IHO and Schureman nodal corrections, composed for compounds
- Timeline and high/low water prediction
- Subordinate-station time and height offsets
"""

from tide_predictor.astronomy import AstroArgument, AstroData, astro
from tide_predictor.config import PredictionConfig, load_prediction_config
from tide_predictor.constants import d2r, r2d
from tide_predictor.constituents import (
    Constituent,
    ConstituentMember,
    Registry,
    build_registry,
    decompose_compound,
    default_registry,
    define_constituent,
    parse_name,
    resolve_signs,
)
from tide_predictor.errors import (
    CompoundParseError,
    InvalidTimeSpanError,
    RegistryError,
    TidePredictorError,
    UnknownStrategyError,
)
from tide_predictor.harmonics import (
    Extreme,
    ExtremeOffsets,
    HarmonicConstituent,
    Prediction,
    TimelinePoint,
    get_water_level_at_time,
    predict,
    to_dataframe,
)
from tide_predictor.node_corrections import (
    NodalCorrection,
    Strategy,
    resolve_nodal_strategy,
)
from tide_predictor.predictor import TidePredictor, create_tide_predictor

__version__ = '0.1.0'

__all__ = [
    # Astronomy
    'astro',
    'AstroArgument',
    'AstroData',
    'd2r',
    'r2d',
    # Constituents
    'Constituent',
    'ConstituentMember',
    'define_constituent',
    'parse_name',
    'resolve_signs',
    'decompose_compound',
    'Registry',
    'build_registry',
    'default_registry',
    # Nodal corrections
    'NodalCorrection',
    'Strategy',
    'resolve_nodal_strategy',
    # Prediction
    'HarmonicConstituent',
    'TimelinePoint',
    'Extreme',
    'ExtremeOffsets',
    'Prediction',
    'predict',
    'get_water_level_at_time',
    'to_dataframe',
    'TidePredictor',
    'create_tide_predictor',
    # Configuration
    'PredictionConfig',
    'load_prediction_config',
    # Errors
    'TidePredictorError',
    'CompoundParseError',
    'UnknownStrategyError',
    'InvalidTimeSpanError',
    'RegistryError',
]
