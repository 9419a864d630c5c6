"""
Tidal constituents: definitions, compound decomposition and the registry.
"""

from tide_predictor.constituents.compound import (
    compound_member_keys,
    decompose_compound,
    parse_name,
    resolve_signs,
)
from tide_predictor.constituents.data import CONSTITUENT_DATA
from tide_predictor.constituents.definition import (
    Constituent,
    ConstituentMember,
    compute_v0,
    define_constituent,
    xdo_to_coefficients,
)
from tide_predictor.constituents.registry import (
    Registry,
    build_registry,
    default_registry,
)

__all__ = [
    # Definitions
    'Constituent',
    'ConstituentMember',
    'define_constituent',
    'compute_v0',
    'xdo_to_coefficients',
    # Compound decomposition
    'parse_name',
    'resolve_signs',
    'compound_member_keys',
    'decompose_compound',
    # Registry
    'CONSTITUENT_DATA',
    'Registry',
    'build_registry',
    'default_registry',
]
