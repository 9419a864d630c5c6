"""
Input and output records of the prediction engine.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, Mapping, Sequence, Union

import pandas as pd


@dataclass(frozen=True)
class HarmonicConstituent:
    """One station constituent: amplitude and phase lag (degrees)."""

    name: str
    amplitude: float
    phase: float = 0.0


@dataclass(frozen=True)
class TimelinePoint:
    """Predicted water level at one instant."""

    time: pd.Timestamp
    hour: float
    level: float


@dataclass(frozen=True)
class Extreme:
    """A high or low water.  ``high`` is always ``not low``."""

    time: pd.Timestamp
    hour: float
    level: float
    high: bool
    low: bool
    label: str


ConstituentInput = Union[HarmonicConstituent, Mapping]


def coerce_constituents(
    constituents: Sequence[ConstituentInput],
) -> list[HarmonicConstituent]:
    """
    Normalize station constituents to :class:`HarmonicConstituent`.

    Parameters
    ----------
    constituents : list or tuple
        :class:`HarmonicConstituent` instances or mappings with ``name``,
        ``amplitude`` and ``phase`` keys (``phase`` defaults to 0).

    Returns
    -------
    list of HarmonicConstituent

    Raises
    ------
    ValueError
        If *constituents* is not a list or tuple, or an entry has no
        name.
    """
    if not isinstance(constituents, (list, tuple)):
        raise ValueError('Harmonic constituents are not an array')

    result = []
    for entry in constituents:
        if isinstance(entry, HarmonicConstituent):
            result.append(entry)
            continue
        if not isinstance(entry, Mapping) or not entry.get('name'):
            raise ValueError('Harmonic constituents must have a name property')
        result.append(HarmonicConstituent(
            name=str(entry['name']),
            amplitude=float(entry.get('amplitude', 0.0)),
            phase=float(entry.get('phase', 0.0)),
        ))
    return result


def to_dataframe(points: Iterable[Union[TimelinePoint, Extreme]]) -> pd.DataFrame:
    """
    Tabulate timeline points or extremes.

    Returns
    -------
    pd.DataFrame
        Indexed by ``time``; columns are the remaining record fields.
    """
    rows = [asdict(p) for p in points]
    if not rows:
        return pd.DataFrame(
            columns=['hour', 'level'],
            index=pd.DatetimeIndex([], tz='UTC', name='time'),
        )
    return pd.DataFrame(rows).set_index('time')
