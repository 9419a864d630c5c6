"""
Nodal correction strategies (IHO and Schureman).
"""

from tide_predictor.errors import UnknownStrategyError
from tide_predictor.node_corrections.iho import IHO_FUNDAMENTALS, iho_strategy
from tide_predictor.node_corrections.schureman import (
    SCHUREMAN_FUNDAMENTALS,
    schureman_strategy,
)
from tide_predictor.node_corrections.strategy import (
    UNITY,
    NodalCorrection,
    Strategy,
    from_sin_cos,
)

STRATEGIES = {
    'iho': iho_strategy,
    'schureman': schureman_strategy,
}
"""Available strategies by name."""


def resolve_nodal_strategy(name=None) -> Strategy:
    """
    Look up a nodal correction strategy.

    Parameters
    ----------
    name : str or Strategy, optional
        ``'iho'`` (default when ``None`` or empty) or ``'schureman'``,
        case-insensitive.  A :class:`Strategy` instance is returned
        unchanged.

    Raises
    ------
    UnknownStrategyError
        For any other name.
    """
    if isinstance(name, Strategy):
        return name
    if not name:
        return iho_strategy
    strategy = STRATEGIES.get(str(name).strip().lower())
    if strategy is None:
        raise UnknownStrategyError(name)
    return strategy


__all__ = [
    'NodalCorrection',
    'UNITY',
    'Strategy',
    'from_sin_cos',
    'IHO_FUNDAMENTALS',
    'SCHUREMAN_FUNDAMENTALS',
    'iho_strategy',
    'schureman_strategy',
    'STRATEGIES',
    'resolve_nodal_strategy',
]
