"""
Astronomical arguments for harmonic tide prediction.

Computes the fundamental arguments (mean longitudes of the Moon, Sun,
lunar perigee, lunar node and solar perigee, plus the obliquity of the
ecliptic) at an instant, each paired with its rate of change in degrees
per hour.  The derived Schureman quantities ``I``, ``xi``, ``nu``,
``nup``, ``nupp`` and ``P`` used by the nodal corrections are computed
from those.

References
----------
* Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., chapters 21,
  22 and 47.
* Schureman, P. (1958). *Manual of Harmonic Analysis and Prediction of
  Tides*, Special Publication No. 98, equations 191-204.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

import pandas as pd

from .constants import HOURS_PER_CENTURY, J2000_JD, UNIX_EPOCH_JD, d2r, r2d
from .utils import to_timestamp


@dataclass(frozen=True)
class AstroArgument:
    """An astronomical argument: value in degrees and speed in deg/hour."""

    value: float
    speed: Optional[float]


# ---------------------------------------------------------------------------
# Polynomial coefficients in Julian centuries since J2000.0 (degrees).
# ---------------------------------------------------------------------------

def _arcsec(degrees: float, minutes: float, seconds: float) -> float:
    return degrees + minutes / 60.0 + seconds / 3600.0


LUNAR_LONGITUDE: tuple[float, ...] = (
    218.3164591, 481267.88134236, -0.0013268, 1 / 538841.0,
    -1 / 65194000.0,
)
"""Mean longitude of the Moon, *s* (Meeus 47.1)."""

SOLAR_LONGITUDE: tuple[float, ...] = (280.46645, 36000.76983, 0.0003032)
"""Mean longitude of the Sun, *h* (Meeus 25.2)."""

LUNAR_PERIGEE: tuple[float, ...] = (
    83.353243, 4069.0137111, -0.0103238, -1 / 80053.0, 1 / 18999000.0,
)
"""Longitude of the lunar perigee, *p*."""

LUNAR_NODE: tuple[float, ...] = (
    125.044555, -1934.1361849, 0.0020762, 1 / 467410.0,
    -1 / 60616000.0,
)
"""Longitude of the Moon's ascending node, *N*."""

SOLAR_PERIGEE: tuple[float, ...] = (
    280.46645 - 357.5291,
    36000.76932 - 35999.0503,
    0.0003032 + 0.0001559,
    0.00000048,
)
"""Longitude of the solar perigee, *p'* (mean longitude minus anomaly)."""

OBLIQUITY: tuple[float, ...] = (
    _arcsec(23, 26, 21.448),
    -4680.93 / 3600.0,
    -1.55 / 3600.0,
    1999.25 / 3600.0,
    -51.38 / 3600.0,
    -249.67 / 3600.0,
    -39.05 / 3600.0,
    7.12 / 3600.0,
    27.87 / 3600.0,
    5.79 / 3600.0,
    2.45 / 3600.0,
)
"""Mean obliquity of the ecliptic, in units of 10,000 Julian years
(Meeus 22.3, Laskar)."""

LUNAR_INCLINATION: float = 5.145
"""Inclination of the lunar orbit to the ecliptic (degrees)."""


def polynomial(coefficients: Sequence[float], argument: float) -> float:
    """Evaluate ``sum(c_i * x**i)``."""
    return sum(c * argument ** i for i, c in enumerate(coefficients))


def derivative_polynomial(
    coefficients: Sequence[float], argument: float,
) -> float:
    """Evaluate the analytic derivative of :func:`polynomial`."""
    return sum(
        i * c * argument ** (i - 1)
        for i, c in enumerate(coefficients)
        if i > 0
    )


def julian_date(instant: pd.Timestamp) -> float:
    """Julian date of a UTC timestamp."""
    return instant.value / 1e9 / 86400.0 + UNIX_EPOCH_JD


def julian_centuries(instant: pd.Timestamp) -> float:
    """Julian centuries since J2000.0."""
    return (julian_date(instant) - J2000_JD) / 36525.0


# ---------------------------------------------------------------------------
# Schureman's derived quantities (all arguments in degrees).
# ---------------------------------------------------------------------------

def _node_terms(N: float, i: float, omega: float) -> tuple[float, float]:
    N, i, omega = d2r * N, d2r * i, d2r * omega
    half_n = math.tan(0.5 * N)
    e1 = math.cos(0.5 * (omega - i)) / math.cos(0.5 * (omega + i)) * half_n
    e2 = math.sin(0.5 * (omega - i)) / math.sin(0.5 * (omega + i)) * half_n
    return math.atan(e1) - 0.5 * N, math.atan(e2) - 0.5 * N


def lunar_inclination_to_equator(N: float, i: float, omega: float) -> float:
    """Obliquity of the lunar orbit with respect to the equator, *I*."""
    N, i, omega = d2r * N, d2r * i, d2r * omega
    cos_i = math.cos(i) * math.cos(omega) - (
        math.sin(i) * math.sin(omega) * math.cos(N)
    )
    return r2d * math.acos(max(-1.0, min(1.0, cos_i)))


def xi(N: float, i: float, omega: float) -> float:
    """Longitude in the Moon's orbit of the lunar intersection, *xi*."""
    e1, e2 = _node_terms(N, i, omega)
    return -(e1 + e2) * r2d


def nu(N: float, i: float, omega: float) -> float:
    """Right ascension of the lunar intersection, *nu*."""
    e1, e2 = _node_terms(N, i, omega)
    return (e1 - e2) * r2d


def nu_prime(N: float, i: float, omega: float) -> float:
    """Term in the argument of the lunisolar K1 constituent, *nu'*."""
    big_i = d2r * lunar_inclination_to_equator(N, i, omega)
    n = d2r * nu(N, i, omega)
    return r2d * math.atan(
        math.sin(2 * big_i) * math.sin(n)
        / (math.sin(2 * big_i) * math.cos(n) + 0.3347)
    )


def nu_second(N: float, i: float, omega: float) -> float:
    """Term in the argument of the lunisolar K2 constituent, *nu''*."""
    big_i = d2r * lunar_inclination_to_equator(N, i, omega)
    n = d2r * nu(N, i, omega)
    tan_2nupp = (math.sin(big_i) ** 2 * math.sin(2 * n)) / (
        math.sin(big_i) ** 2 * math.cos(2 * n) + 0.0727
    )
    return r2d * 0.5 * math.atan(tan_2nupp)


# ---------------------------------------------------------------------------
# AstroData
# ---------------------------------------------------------------------------

ASTRO_KEYS: tuple[str, ...] = (
    'T+h-s', 's', 'h', 'p', 'N', 'pp', '90',
    'omega', 'i', 'I', 'xi', 'nu', 'nup', 'nupp', 'P',
)
"""Names of every argument carried by :class:`AstroData`."""


@dataclass(frozen=True)
class AstroData(Mapping[str, AstroArgument]):
    """
    Immutable set of astronomical arguments at one instant.

    Supports both attribute access (``astro.s``) and mapping access
    (``astro['T+h-s']``); the equilibrium argument is also exposed as
    :attr:`tau`.
    """

    time: pd.Timestamp
    tau: AstroArgument
    s: AstroArgument
    h: AstroArgument
    p: AstroArgument
    N: AstroArgument
    pp: AstroArgument
    ninety: AstroArgument
    omega: AstroArgument
    i: AstroArgument
    I: AstroArgument  # noqa: E741
    xi: AstroArgument
    nu: AstroArgument
    nup: AstroArgument
    nupp: AstroArgument
    P: AstroArgument

    def __getitem__(self, key: str) -> AstroArgument:
        if key == 'T+h-s':
            return self.tau
        if key == '90':
            return self.ninety
        if key in ASTRO_KEYS:
            return getattr(self, key)
        raise KeyError(key)

    def __iter__(self):
        return iter(ASTRO_KEYS)

    def __len__(self) -> int:
        return len(ASTRO_KEYS)

    def v0_arguments(self) -> tuple[float, ...]:
        """Values multiplied by Doodson coefficients (N enters as N' = -N)."""
        return (
            self.tau.value, self.s.value, self.h.value, self.p.value,
            -self.N.value, self.pp.value, 90.0,
        )

    def v0_speeds(self) -> tuple[float, ...]:
        return (
            self.tau.speed, self.s.speed, self.h.speed, self.p.speed,
            -self.N.speed, self.pp.speed, 0.0,
        )


def _argument(coefficients: Sequence[float], T: float) -> AstroArgument:
    return AstroArgument(
        value=polynomial(coefficients, T) % 360.0,
        speed=derivative_polynomial(coefficients, T) / HOURS_PER_CENTURY,
    )


def astro(instant) -> AstroData:
    """
    Compute the astronomical arguments at *instant*.

    Parameters
    ----------
    instant : datetime-like or float
        Anything accepted by :func:`tide_predictor.utils.to_timestamp`
        (``datetime``, ``pandas.Timestamp``, ``numpy.datetime64``, ISO
        string or epoch seconds).  Naive datetimes are taken as UTC.

    Returns
    -------
    AstroData
        Values are in degrees, reduced to ``[0, 360)`` for the polynomial
        arguments; speeds are in degrees per hour.  Derived quantities
        (``I``, ``xi``, ``nu``, ``nup``, ``nupp``, ``P``) have no speed.
    """
    time = to_timestamp(instant)
    T = julian_centuries(time)

    s = _argument(LUNAR_LONGITUDE, T)
    h = _argument(SOLAR_LONGITUDE, T)
    p = _argument(LUNAR_PERIGEE, T)
    N = _argument(LUNAR_NODE, T)
    pp = _argument(SOLAR_PERIGEE, T)

    # Obliquity polynomial is in units of 100 centuries
    U = T / 100.0
    omega = AstroArgument(
        value=polynomial(OBLIQUITY, U) % 360.0,
        speed=derivative_polynomial(OBLIQUITY, U) / 100.0 / HOURS_PER_CENTURY,
    )
    inclination = AstroArgument(LUNAR_INCLINATION, 0.0)

    # Equilibrium argument of the mean Sun relative to the Moon
    hours = (
        time.hour + time.minute / 60.0 + time.second / 3600.0
        + (time.microsecond + time.nanosecond / 1000.0) / 3.6e9
    )
    tau = AstroArgument(
        value=(hours * 15.0 + h.value - s.value) % 360.0,
        speed=15.0 + h.speed - s.speed,
    )

    args = (N.value, inclination.value, omega.value)
    xi_value = xi(*args)

    return AstroData(
        time=time,
        tau=tau,
        s=s,
        h=h,
        p=p,
        N=N,
        pp=pp,
        ninety=AstroArgument(90.0, 0.0),
        omega=omega,
        i=inclination,
        I=AstroArgument(lunar_inclination_to_equator(*args), None),
        xi=AstroArgument(xi_value, None),
        nu=AstroArgument(nu(*args), None),
        nup=AstroArgument(nu_prime(*args), None),
        nupp=AstroArgument(nu_second(*args), None),
        P=AstroArgument((p.value - xi_value) % 360.0, None),
    )
