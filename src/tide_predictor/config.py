"""
Prediction defaults loaded from ``conf/tide_predictor.conf``.

The file is optional; anything missing falls back to the built-in
defaults below.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .utils import Utils

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PredictionConfig:
    """Engine defaults."""

    time_fidelity: int = 600
    """Timeline sampling interval in seconds."""
    node_corrections: str = 'iho'
    """Default nodal correction strategy name."""
    extremes_buffer_hours: float = 36.0
    """Extra search range around a subordinate-station span."""
    correction_interval_hours: float = 24.0
    """Width of the chunks at whose midpoint f/u are recomputed."""
    high_label: str = 'High'
    low_label: str = 'Low'


def load_prediction_config(
    config_file=None,
    logger: logging.Logger | None = None,
) -> PredictionConfig:
    """
    Read the ``[prediction]`` and ``[labels]`` sections.

    Parameters
    ----------
    config_file : str or path-like, optional
        Explicit INI file.  Defaults to ``$TIDE_PREDICTOR_CONFIG`` or
        ``conf/tide_predictor.conf``.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    PredictionConfig

    Raises
    ------
    ValueError
        If a numeric option cannot be parsed or is not positive.
    """
    _log = logger or logging.getLogger(__name__)
    utils = Utils(config_file)
    prediction = utils.read_config_section('prediction', _log)
    labels = utils.read_config_section('labels', _log)
    defaults = PredictionConfig()

    def _positive(key, cast, default):
        raw = prediction.get(key)
        if raw is None:
            return default
        try:
            value = cast(raw)
        except ValueError as ex:
            raise ValueError(f"Invalid [prediction] {key}: {raw!r}") from ex
        if value <= 0:
            raise ValueError(f"[prediction] {key} must be positive, got {raw!r}")
        return value

    config = PredictionConfig(
        time_fidelity=_positive('time_fidelity', int, defaults.time_fidelity),
        node_corrections=prediction.get(
            'node_corrections', defaults.node_corrections,
        ).strip().lower(),
        extremes_buffer_hours=_positive(
            'extremes_buffer_hours', float, defaults.extremes_buffer_hours,
        ),
        correction_interval_hours=_positive(
            'correction_interval_hours', float,
            defaults.correction_interval_hours,
        ),
        high_label=labels.get('high', defaults.high_label),
        low_label=labels.get('low', defaults.low_label),
    )
    _log.debug('Prediction config: %s', config)
    return config
