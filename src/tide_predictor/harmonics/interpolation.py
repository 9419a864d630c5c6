"""
Subordinate-station offsets.

A subordinate station is predicted from a reference station's curve and
a fixed set of offsets: times of high and low water are shifted by
minutes, and heights are scaled (``ratio``) or shifted (``fixed``).

Between reference extrema, the time mapping is interpolated linearly and
the height adjustment with a cosine ease, so the adjustment passes
smoothly from the high-water value to the low-water value over each half
cycle.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class ExtremeOffsets:
    """Normalized subordinate-station offsets."""

    height_high: float = 1.0
    height_low: float = 1.0
    height_type: str = 'ratio'
    time_high: float = 0.0
    """Minutes added to the time of high water."""
    time_low: float = 0.0
    """Minutes added to the time of low water."""

    @property
    def fixed(self) -> bool:
        return self.height_type == 'fixed'

    def height(self, high: bool) -> float:
        return self.height_high if high else self.height_low

    def minutes(self, high: bool) -> float:
        return self.time_high if high else self.time_low

    def adjust(self, level, adjustment):
        """Apply a height adjustment: ``fixed`` adds, ``ratio`` multiplies."""
        if self.fixed:
            return level + adjustment
        return level * adjustment


def normalize_offsets(offsets) -> Optional[ExtremeOffsets]:
    """
    Build :class:`ExtremeOffsets` from a station ``offsets`` mapping.

    Parameters
    ----------
    offsets : mapping, ExtremeOffsets or None
        ``{'height': {'high', 'low', 'type'}, 'time': {'high', 'low'}}``.
        Missing heights default to 1 for ``ratio`` and 0 for ``fixed``;
        missing times default to 0 minutes.

    Returns
    -------
    ExtremeOffsets or None
        ``None`` when *offsets* is falsy.

    Raises
    ------
    ValueError
        If the height type is neither ``'ratio'`` nor ``'fixed'``.
    """
    if not offsets:
        return None
    if isinstance(offsets, ExtremeOffsets):
        return offsets

    height = offsets.get('height') or {}
    time = offsets.get('time') or {}
    height_type = height.get('type') or 'ratio'
    if height_type not in ('ratio', 'fixed'):
        raise ValueError(
            f"Offset height type must be 'ratio' or 'fixed', got {height_type!r}"
        )
    neutral = 0.0 if height_type == 'fixed' else 1.0

    def _value(section: Mapping, key: str, default: float) -> float:
        value = section.get(key)
        return default if value is None else float(value)

    return ExtremeOffsets(
        height_high=_value(height, 'high', neutral),
        height_low=_value(height, 'low', neutral),
        height_type=height_type,
        time_high=_value(time, 'high', 0.0),
        time_low=_value(time, 'low', 0.0),
    )


@dataclass(frozen=True)
class Keyframes:
    """Subordinate-time keyframes built from reference extrema (hours)."""

    sub_hours: np.ndarray
    time_offsets: np.ndarray
    adjustments: np.ndarray

    def __len__(self) -> int:
        return len(self.sub_hours)


def build_keyframes(
    reference: Sequence[tuple[float, bool]],
    offsets: ExtremeOffsets,
) -> Keyframes:
    """
    Keyframes from reference extrema.

    Parameters
    ----------
    reference : sequence of (hour, high)
        Reference extrema in time order.
    offsets : ExtremeOffsets

    Returns
    -------
    Keyframes
        ``sub_hours`` is each reference hour plus its time offset;
        ``time_offsets`` are in hours.
    """
    time_offsets = np.array(
        [offsets.minutes(high) / 60.0 for _, high in reference], dtype=float,
    )
    ref_hours = np.array([hour for hour, _ in reference], dtype=float)
    adjustments = np.array(
        [offsets.height(high) for _, high in reference], dtype=float,
    )
    sub_hours = ref_hours + time_offsets
    order = np.argsort(sub_hours, kind='stable')
    return Keyframes(
        sub_hours=sub_hours[order],
        time_offsets=time_offsets[order],
        adjustments=adjustments[order],
    )


def cosine_ease(fraction: float) -> float:
    """Smooth 0 to 1 ramp with zero slope at both ends."""
    return (1.0 - math.cos(math.pi * fraction)) / 2.0


def map_hours(
    hours: np.ndarray,
    keyframes: Keyframes,
    offsets: ExtremeOffsets,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Map subordinate hours to reference hours and height adjustments.

    *hours* must be sorted ascending.  A cursor advances through the
    keyframes; between a bracketing pair the time offset is interpolated
    linearly and the height adjustment with :func:`cosine_ease`.
    Outside the keyframe range the nearest keyframe applies.  With no
    keyframes at all, the mean of the high and low adjustments and time
    offsets is used.

    Returns
    -------
    ref_hours : np.ndarray
    adjustments : np.ndarray
    """
    hours = np.asarray(hours, dtype=float)
    ref_hours = np.empty_like(hours)
    adjustments = np.empty_like(hours)

    n = len(keyframes)
    if n == 0:
        shift = (offsets.time_high + offsets.time_low) / 2.0 / 60.0
        ref_hours[:] = hours - shift
        adjustments[:] = (offsets.height_high + offsets.height_low) / 2.0
        return ref_hours, adjustments

    sub = keyframes.sub_hours
    toff = keyframes.time_offsets
    adj = keyframes.adjustments

    cursor = 0
    for idx, t in enumerate(hours):
        while cursor < n - 1 and sub[cursor + 1] <= t:
            cursor += 1

        if t <= sub[0]:
            offset, adjustment = toff[0], adj[0]
        elif cursor >= n - 1:
            offset, adjustment = toff[-1], adj[-1]
        else:
            span = sub[cursor + 1] - sub[cursor]
            fraction = (t - sub[cursor]) / span if span > 0 else 0.0
            offset = toff[cursor] + (toff[cursor + 1] - toff[cursor]) * fraction
            eased = cosine_ease(fraction)
            adjustment = adj[cursor] + (adj[cursor + 1] - adj[cursor]) * eased

        ref_hours[idx] = t - offset
        adjustments[idx] = adjustment

    return ref_hours, adjustments
