"""
Harmonic synthesis and extrema finder.

Implements the harmonic prediction formula::

    h(t) = sum{ f * H * cos[a*t + (V0 + u) - kappa] }

for a time span.  V0 is evaluated once at the span start; f and u are
re-evaluated at the midpoint of each 24-hour chunk.  Each active
constituent folds into a flat triple::

    A = H * f,  w = a (rad/h),  phi = V0 + u - kappa (rad)

Extrema are the zeros of::

    h'(t)  = -sum{ A * w * sin(w*t + phi) }

bracketed on a grid of a quarter period of the fastest constituent and
refined by bisection to one second.  The sign of::

    h''(t) = -sum{ A * w**2 * cos(w*t + phi) }

classifies each root as high (negative) or low water.

Time inside the engine is hours since the span start.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

import numpy as np
import pandas as pd
from scipy.optimize import bisect

from ..astronomy import astro
from ..config import PredictionConfig
from ..constants import d2r
from ..constituents import Registry, default_registry
from ..constituents.definition import Constituent
from ..errors import InvalidTimeSpanError
from ..node_corrections import Strategy, resolve_nodal_strategy
from ..utils import to_timestamp
from .interpolation import (
    ExtremeOffsets,
    build_keyframes,
    map_hours,
    normalize_offsets,
)
from .records import (
    ConstituentInput,
    Extreme,
    HarmonicConstituent,
    TimelinePoint,
    coerce_constituents,
)
from .timeline import get_timeline

logger = logging.getLogger(__name__)

TOLERANCE_HOURS: float = 1.0 / 3600.0
"""Bisection tolerance: one second."""


@dataclass(frozen=True)
class ActiveConstituent:
    """A station constituent matched to the registry."""

    constituent: Constituent
    amplitude: float
    phase: float


@dataclass(frozen=True)
class ChunkParams:
    """Folded synthesis parameters valid over one correction chunk."""

    amplitude: np.ndarray
    speed: np.ndarray
    phase: np.ndarray


def resolve_constituents(
    constituents: Sequence[ConstituentInput],
    registry: Registry,
    offset=None,
    logger: logging.Logger | None = None,
) -> list[ActiveConstituent]:
    """
    Match station constituents against *registry*.

    Constituents with zero amplitude are dropped and unknown names are
    skipped.  A numeric *offset* (anything but ``None``/``False``) adds a
    ``Z0`` term with that amplitude.

    Raises
    ------
    ValueError
        If *constituents* is malformed; see
        :func:`~tide_predictor.harmonics.records.coerce_constituents`.
    """
    _log = logger or logging.getLogger(__name__)

    station = coerce_constituents(constituents)
    if offset is not None and offset is not False:
        station.append(HarmonicConstituent('Z0', float(offset), 0.0))

    active = []
    for item in station:
        constituent = registry.get(item.name)
        if constituent is None:
            _log.debug('Skipping unknown constituent %s.', item.name)
            continue
        if item.amplitude == 0:
            continue
        active.append(ActiveConstituent(constituent, item.amplitude, item.phase))
    _log.debug(
        'Resolved %d of %d station constituents.', len(active), len(station),
    )
    return active


def _evaluate(kind: str, t: np.ndarray, params: ChunkParams) -> np.ndarray:
    arg = np.outer(t, params.speed) + params.phase
    if kind == 'h':
        return (params.amplitude * np.cos(arg)).sum(axis=1)
    if kind == 'dh':
        return -(params.amplitude * params.speed * np.sin(arg)).sum(axis=1)
    return -(params.amplitude * params.speed ** 2 * np.cos(arg)).sum(axis=1)


class Prediction:
    """
    Predictions for one set of station constituents over one span.

    Use :func:`predict` to create instances.
    """

    def __init__(
        self,
        active: Sequence[ActiveConstituent],
        start: pd.Timestamp,
        end: pd.Timestamp,
        strategy: Strategy,
        time_fidelity: int,
        config: PredictionConfig,
        logger: logging.Logger | None = None,
    ):
        self._log = logger or logging.getLogger(__name__)
        self.active = tuple(active)
        self.start = start
        self.end = end
        self.strategy = strategy
        self.time_fidelity = time_fidelity
        self.config = config
        self.interval = config.correction_interval_hours
        self.span_hours = (end - start) / pd.Timedelta(hours=1)

        reference = astro(start)
        self._v0 = np.array(
            [a.constituent.value(reference) for a in self.active], dtype=float,
        )
        self._speeds = np.array(
            [a.constituent.speed * d2r for a in self.active], dtype=float,
        )
        self._chunks: dict[int, ChunkParams] = {}

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    @property
    def max_speed(self) -> float:
        """Fastest active angular speed (rad/h), 0 with no constituents."""
        return float(self._speeds.max()) if len(self._speeds) else 0.0

    def chunk_index(self, hours) -> np.ndarray:
        return np.floor(np.asarray(hours, dtype=float) / self.interval).astype(int)

    def chunk_params(self, k: int) -> ChunkParams:
        """Parameters with f/u evaluated at the middle of chunk *k*."""
        k = int(k)
        params = self._chunks.get(k)
        if params is not None:
            return params

        midpoint = self.start + pd.Timedelta(hours=(k + 0.5) * self.interval)
        at = astro(midpoint)
        corrections = [self.strategy.compute(a.constituent, at) for a in self.active]
        params = ChunkParams(
            amplitude=np.array(
                [a.amplitude * c.f for a, c in zip(self.active, corrections)],
                dtype=float,
            ),
            speed=self._speeds,
            phase=np.array(
                [
                    ((v0 + c.u - a.phase) % 360.0) * d2r
                    for v0, a, c in zip(self._v0, self.active, corrections)
                ],
                dtype=float,
            ),
        )
        self._chunks[k] = params
        return params

    def _by_chunk(self, kind: str, hours: np.ndarray, chunks: np.ndarray) -> np.ndarray:
        out = np.zeros(len(hours), dtype=float)
        if not self.active:
            return out
        for k in np.unique(chunks):
            mask = chunks == k
            out[mask] = _evaluate(kind, hours[mask], self.chunk_params(k))
        return out

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def levels(self, hours) -> np.ndarray:
        """Water level at each hour (relative to the span start)."""
        hours = np.atleast_1d(np.asarray(hours, dtype=float))
        return self._by_chunk('h', hours, self.chunk_index(hours))

    def level_at(self, hour: float) -> float:
        return float(self.levels([hour])[0])

    def derivative(self, hour: float) -> float:
        """h'(t) in units per hour."""
        return float(self._by_chunk('dh', np.array([hour]), self.chunk_index([hour]))[0])

    def second_derivative(self, hour: float) -> float:
        return float(self._by_chunk('d2h', np.array([hour]), self.chunk_index([hour]))[0])

    def find_extremes(self, lo: float, hi: float) -> list[tuple[float, float, bool]]:
        """
        Extrema with hours in ``[lo, hi]``.

        Brackets lie on a fixed grid ``k * pi / (2 * max_speed)`` anchored
        at the span start, so a given extreme is found identically for
        any search range containing it.  Both ends of a bracket use the
        parameters of the chunk holding its left end.

        Returns
        -------
        list of (hour, level, high)
        """
        w_max = self.max_speed
        if not self.active or w_max <= 0:
            return []

        step = math.pi / (2.0 * w_max)
        k0 = math.floor(lo / step)
        k1 = math.ceil(hi / step)
        grid = np.arange(k0, k1 + 1, dtype=float) * step
        left, right = grid[:-1], grid[1:]
        chunks = self.chunk_index(left)
        d_left = self._by_chunk('dh', left, chunks)
        d_right = self._by_chunk('dh', right, chunks)

        extremes = []
        candidates = np.nonzero((d_left != 0) & (d_right != 0)
                                & (np.sign(d_left) != np.sign(d_right)))[0]
        for idx in candidates:
            params = self.chunk_params(chunks[idx])
            root = bisect(
                lambda t: float(_evaluate('dh', np.array([t]), params)[0]),
                left[idx], right[idx], xtol=TOLERANCE_HOURS,
            )
            if root < lo or root > hi:
                continue
            level = self.level_at(root)
            high = self.second_derivative(root) < 0
            extremes.append((root, level, high))

        self._log.debug(
            'Found %d extrema in %d brackets (step %.4f h).',
            len(extremes), len(left), step,
        )
        return extremes

    # ------------------------------------------------------------------
    # Public outputs
    # ------------------------------------------------------------------

    def _time_of(self, hour: float) -> pd.Timestamp:
        return self.start + pd.to_timedelta(hour, unit='h')

    def get_timeline_prediction(self, offsets=None) -> list[TimelinePoint]:
        """
        Water levels every ``time_fidelity`` seconds from ``start`` to ``end``.

        Parameters
        ----------
        offsets : mapping or ExtremeOffsets, optional
            Subordinate-station offsets; see
            :func:`~tide_predictor.harmonics.interpolation.normalize_offsets`.

        Returns
        -------
        list of TimelinePoint
        """
        times, hours = get_timeline(self.start, self.end, self.time_fidelity)
        subordinate = normalize_offsets(offsets)
        if subordinate is None:
            levels = self.levels(hours)
        else:
            levels = self._subordinate_levels(hours, subordinate)
        self._log.debug('Timeline prediction: %d points.', len(times))
        return [
            TimelinePoint(time=t, hour=float(h), level=float(v))
            for t, h, v in zip(times, hours, levels)
        ]

    def _buffered_extremes(self) -> list[tuple[float, float, bool]]:
        buffer = self.config.extremes_buffer_hours
        return self.find_extremes(-buffer, self.span_hours + buffer)

    def _subordinate_levels(
        self, hours: np.ndarray, offsets: ExtremeOffsets,
    ) -> np.ndarray:
        reference = [(h, high) for h, _, high in self._buffered_extremes()]
        keyframes = build_keyframes(reference, offsets)
        ref_hours, adjustments = map_hours(hours, keyframes, offsets)
        return offsets.adjust(self.levels(ref_hours), adjustments)

    def get_extremes_prediction(
        self,
        labels: Optional[Mapping[str, str]] = None,
        offsets=None,
    ) -> list[Extreme]:
        """
        High and low waters within the span.

        Parameters
        ----------
        labels : mapping, optional
            ``{'high': ..., 'low': ...}``; missing keys fall back to
            ``'High'`` / ``'Low'``.
        offsets : mapping or ExtremeOffsets, optional
            Subordinate-station offsets.  Reference extrema are searched
            over a buffered range, shifted and adjusted, then kept when
            their shifted time falls inside the span.

        Returns
        -------
        list of Extreme
            In time order.
        """
        names = {
            'high': self.config.high_label,
            'low': self.config.low_label,
        }
        names.update(labels or {})
        subordinate = normalize_offsets(offsets)

        if subordinate is None:
            found = self.find_extremes(0.0, self.span_hours)
        else:
            found = []
            for hour, level, high in self._buffered_extremes():
                shifted = hour + subordinate.minutes(high) / 60.0
                if shifted < 0.0 or shifted > self.span_hours:
                    continue
                found.append(
                    (shifted, subordinate.adjust(level, subordinate.height(high)), high)
                )
            found.sort(key=lambda e: e[0])

        return [
            Extreme(
                time=self._time_of(hour),
                hour=float(hour),
                level=float(level),
                high=bool(high),
                low=not high,
                label=names['high'] if high else names['low'],
            )
            for hour, level, high in found
        ]


def predict(
    constituents: Sequence[ConstituentInput],
    start,
    end,
    *,
    time_fidelity: Optional[int] = None,
    strategy=None,
    offset=None,
    registry: Optional[Registry] = None,
    config: Optional[PredictionConfig] = None,
    logger: logging.Logger | None = None,
) -> Prediction:
    """
    Prepare predictions for station constituents over ``[start, end]``.

    Parameters
    ----------
    constituents : list of HarmonicConstituent or mapping
        Station constituents (``name``, ``amplitude``, ``phase``).
    start, end : datetime-like or float
        Span; see :func:`tide_predictor.utils.to_timestamp`.
    time_fidelity : int, optional
        Timeline grid interval in seconds (default from *config*, 600).
    strategy : str or Strategy, optional
        Nodal correction strategy (default ``'iho'``).
    offset : float, optional
        Mean level added as a ``Z0`` term.
    registry : Registry, optional
        Constituent registry (default: the bundled dataset).
    config : PredictionConfig, optional
        Engine defaults.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    Prediction

    Raises
    ------
    InvalidTimeSpanError
        If *end* is not after *start*.
    UnknownStrategyError
        If *strategy* names no known strategy.
    ValueError
        If *constituents* is malformed or an instant cannot be parsed.
    """
    _log = logger or logging.getLogger(__name__)
    config = config or PredictionConfig()

    start_ts = to_timestamp(start)
    end_ts = to_timestamp(end)
    if end_ts <= start_ts:
        raise InvalidTimeSpanError(
            f"Start time must be before end time (start={start_ts}, end={end_ts})"
        )

    chosen = resolve_nodal_strategy(strategy or config.node_corrections)
    active = resolve_constituents(
        constituents, registry or default_registry(), offset=offset, logger=_log,
    )
    _log.info(
        'Predicting %d constituents from %s to %s (%s nodal corrections).',
        len(active), start_ts, end_ts, chosen.name,
    )
    return Prediction(
        active,
        start_ts,
        end_ts,
        chosen,
        time_fidelity or config.time_fidelity,
        config,
        logger=_log,
    )


def get_water_level_at_time(
    constituents: Sequence[ConstituentInput],
    instant,
    strategy=None,
    *,
    offset=None,
    registry: Optional[Registry] = None,
    config: Optional[PredictionConfig] = None,
    logger: logging.Logger | None = None,
) -> TimelinePoint:
    """
    Water level at a single instant.

    Returns
    -------
    TimelinePoint
        ``hour`` is 0; the level is evaluated exactly at *instant*.
    """
    start = to_timestamp(instant)
    prediction = predict(
        constituents,
        start,
        start + pd.Timedelta(minutes=10),
        strategy=strategy,
        offset=offset,
        registry=registry,
        config=config,
        logger=logger,
    )
    return TimelinePoint(time=start, hour=0.0, level=prediction.level_at(0.0))
