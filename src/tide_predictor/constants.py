"""
Numeric constants shared across the prediction engine.

Angles are carried in degrees at the public boundary and in radians
inside the synthesis loops; ``d2r`` / ``r2d`` convert between the two.
"""
from __future__ import annotations

import math

d2r: float = math.pi / 180.0
"""Degrees to radians."""

r2d: float = 180.0 / math.pi
"""Radians to degrees."""

HOURS_PER_CENTURY: float = 876600.0
"""Hours in a Julian century (36525 days)."""

J2000_JD: float = 2451545.0
"""Julian date of the J2000.0 epoch (2000-01-01T12:00 TT)."""

UNIX_EPOCH_JD: float = 2440587.5
"""Julian date of 1970-01-01T00:00 UTC."""
