"""
Sampling grid for timeline predictions.
"""
from __future__ import annotations

import numpy as np
import pandas as pd


def get_timeline(
    start: pd.Timestamp,
    end: pd.Timestamp,
    time_fidelity: int = 600,
) -> tuple[pd.DatetimeIndex, np.ndarray]:
    """
    Sample instants within ``[start, end]``.

    The grid starts exactly at *start* and steps by *time_fidelity*; the
    last instant is the final step at or before *end*.

    Parameters
    ----------
    start, end : pd.Timestamp
        UTC span.
    time_fidelity : int, optional
        Grid interval in seconds (default 600).

    Returns
    -------
    times : pd.DatetimeIndex
        Grid instants (UTC).
    hours : np.ndarray
        Hours of each instant relative to *start*, ``k * time_fidelity
        / 3600``.

    Raises
    ------
    ValueError
        If *time_fidelity* is not positive.
    """
    if time_fidelity <= 0:
        raise ValueError(f"time_fidelity must be positive, got {time_fidelity}")

    freq = pd.Timedelta(seconds=time_fidelity)
    steps = max((end - start) // freq, -1)
    times = pd.date_range(start, periods=steps + 1, freq=freq)
    hours = np.arange(steps + 1) * (time_fidelity / 3600.0)
    return times, hours
