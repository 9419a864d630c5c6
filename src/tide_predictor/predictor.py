"""
Station-level facade over :func:`~tide_predictor.harmonics.predict`.

:func:`create_tide_predictor` validates a station's constituents once and
returns a :class:`TidePredictor` answering timeline, extremes and
single-instant queries for any span.
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from .config import PredictionConfig, load_prediction_config
from .constituents import Registry, default_registry
from .harmonics import (
    Extreme,
    HarmonicConstituent,
    TimelinePoint,
    coerce_constituents,
    get_water_level_at_time,
    predict,
)
from .node_corrections import resolve_nodal_strategy

logger = logging.getLogger(__name__)


class TidePredictor:
    """
    Predictor bound to one station's harmonic constituents.

    Parameters
    ----------
    constituents : list of HarmonicConstituent or mapping
        Station constituents.
    offset : float, optional
        Mean level added as a ``Z0`` term.
    node_corrections : str, optional
        ``'iho'`` or ``'schureman'``; default from *config*.
    registry : Registry, optional
        Constituent registry (default: the bundled dataset).
    config : PredictionConfig, optional
        Engine defaults; loaded from ``conf/tide_predictor.conf`` when
        omitted.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Raises
    ------
    ValueError
        If *constituents* is malformed.
    UnknownStrategyError
        If *node_corrections* names no known strategy.
    """

    def __init__(
        self,
        constituents: Sequence,
        offset=None,
        node_corrections: Optional[str] = None,
        registry: Optional[Registry] = None,
        config: Optional[PredictionConfig] = None,
        logger: logging.Logger | None = None,
    ):
        self._log = logger or logging.getLogger(__name__)
        self.config = config or load_prediction_config(logger=self._log)
        self.constituents: list[HarmonicConstituent] = coerce_constituents(
            constituents
        )
        self.offset = offset
        self.strategy = resolve_nodal_strategy(
            node_corrections or self.config.node_corrections
        )
        self.registry = registry or default_registry()

        unknown = [c.name for c in self.constituents if c.name not in self.registry]
        if unknown:
            self._log.warning(
                'Ignoring %d unknown constituents: %s',
                len(unknown), ', '.join(unknown),
            )

    def _predict(self, start, end, time_fidelity=None):
        return predict(
            self.constituents,
            start,
            end,
            time_fidelity=time_fidelity,
            strategy=self.strategy,
            offset=self.offset,
            registry=self.registry,
            config=self.config,
            logger=self._log,
        )

    def get_timeline_prediction(
        self,
        start,
        end,
        time_fidelity: Optional[int] = None,
        offsets=None,
    ) -> list[TimelinePoint]:
        """Water levels from *start* to *end* every *time_fidelity* seconds."""
        return self._predict(start, end, time_fidelity).get_timeline_prediction(
            offsets=offsets,
        )

    def get_extremes_prediction(
        self,
        start,
        end,
        labels: Optional[Mapping[str, str]] = None,
        offsets=None,
        time_fidelity: Optional[int] = None,
    ) -> list[Extreme]:
        """High and low waters from *start* to *end*."""
        return self._predict(start, end, time_fidelity).get_extremes_prediction(
            labels=labels, offsets=offsets,
        )

    def get_water_level_at_time(self, time) -> TimelinePoint:
        return get_water_level_at_time(
            self.constituents,
            time,
            self.strategy,
            offset=self.offset,
            registry=self.registry,
            config=self.config,
            logger=self._log,
        )


def create_tide_predictor(
    constituents: Sequence,
    *,
    offset=None,
    node_corrections: Optional[str] = None,
    registry: Optional[Registry] = None,
    config: Optional[PredictionConfig] = None,
    logger: logging.Logger | None = None,
) -> TidePredictor:
    """Build a :class:`TidePredictor`; see its parameters."""
    return TidePredictor(
        constituents,
        offset=offset,
        node_corrections=node_corrections,
        registry=registry,
        config=config,
        logger=logger,
    )
