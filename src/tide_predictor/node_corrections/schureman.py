"""
Schureman nodal corrections.

Node factors *f* and phase corrections *u* from Schureman (1958),
*Manual of Harmonic Analysis and Prediction of Tides*, Special
Publication No. 98.  The formulas work from the obliquity of the
ecliptic (omega), the inclination of the lunar orbit (i), and the
derived quantities I, nu, nu', nu'', xi and P carried by
:class:`~tide_predictor.astronomy.AstroData`.  Equation numbers refer to
SP98.
"""
from __future__ import annotations

import math

from ..astronomy import AstroData
from ..constants import d2r, r2d
from .strategy import NodalCorrection, Strategy


def _angles(a: AstroData) -> tuple[float, float, float]:
    return d2r * a.omega.value, d2r * a.i.value, d2r * a.I.value


# ---------------------------------------------------------------------------
# Node factors
# ---------------------------------------------------------------------------

def f_mm(a: AstroData) -> float:
    """Equations 73, 65."""
    omega, i, I = _angles(a)
    mean = (2 / 3.0 - math.sin(omega) ** 2) * (1 - 1.5 * math.sin(i) ** 2)
    return (2 / 3.0 - math.sin(I) ** 2) / mean


def f_mf(a: AstroData) -> float:
    """Equations 74, 66."""
    omega, i, I = _angles(a)
    mean = math.sin(omega) ** 2 * math.cos(0.5 * i) ** 4
    return math.sin(I) ** 2 / mean


def f_o1(a: AstroData) -> float:
    """Equations 75, 67."""
    omega, i, I = _angles(a)
    mean = (
        math.sin(omega) * math.cos(0.5 * omega) ** 2
        * math.cos(0.5 * i) ** 4
    )
    return math.sin(I) * math.cos(0.5 * I) ** 2 / mean


def f_j1(a: AstroData) -> float:
    """Equations 76, 68."""
    omega, i, I = _angles(a)
    mean = math.sin(2 * omega) * (1 - 1.5 * math.sin(i) ** 2)
    return math.sin(2 * I) / mean


def f_oo1(a: AstroData) -> float:
    """Equations 77, 69."""
    omega, i, I = _angles(a)
    mean = (
        math.sin(omega) * math.sin(0.5 * omega) ** 2
        * math.cos(0.5 * i) ** 4
    )
    return math.sin(I) * math.sin(0.5 * I) ** 2 / mean


def f_m2(a: AstroData) -> float:
    """Equations 78, 70."""
    omega, i, I = _angles(a)
    mean = math.cos(0.5 * omega) ** 4 * math.cos(0.5 * i) ** 4
    return math.cos(0.5 * I) ** 4 / mean


def f_k1(a: AstroData) -> float:
    """Equations 227, 226, 68."""
    omega, i, I = _angles(a)
    nu = d2r * a.nu.value
    sin2i_cosnu_mean = math.sin(2 * omega) * (1 - 1.5 * math.sin(i) ** 2)
    mean = 0.5023 * sin2i_cosnu_mean + 0.1681
    return (
        0.2523 * math.sin(2 * I) ** 2
        + 0.1689 * math.sin(2 * I) * math.cos(nu)
        + 0.0283
    ) ** 0.5 / mean


def f_l2(a: AstroData) -> float:
    """Equations 215, 213, 204."""
    P = d2r * a.P.value
    I = d2r * a.I.value
    tan_half = math.tan(0.5 * I)
    r_a_inv = (
        1 - 12 * tan_half ** 2 * math.cos(2 * P) + 36 * tan_half ** 4
    ) ** 0.5
    return f_m2(a) * r_a_inv


def f_k2(a: AstroData) -> float:
    """Equations 235, 234, 71."""
    omega, i, I = _angles(a)
    nu = d2r * a.nu.value
    sinsq_i_cos2nu_mean = math.sin(omega) ** 2 * (1 - 1.5 * math.sin(i) ** 2)
    mean = 0.5023 * sinsq_i_cos2nu_mean + 0.0365
    return (
        0.2523 * math.sin(I) ** 4
        + 0.0367 * math.sin(I) ** 2 * math.cos(2 * nu)
        + 0.0013
    ) ** 0.5 / mean


def f_m1(a: AstroData) -> float:
    """Equations 206, 207, 195."""
    P = d2r * a.P.value
    I = d2r * a.I.value
    q_a_inv = (
        0.25
        + 1.5 * math.cos(I) * math.cos(2 * P) * math.cos(0.5 * I) ** -0.5
        + 2.25 * math.cos(I) ** 2 * math.cos(0.5 * I) ** -4
    ) ** 0.5
    return f_o1(a) * q_a_inv


def f_modd(a: AstroData, n: int) -> float:
    """Equation 149: lunar terms of species *n*."""
    return f_m2(a) ** (n / 2.0)


# ---------------------------------------------------------------------------
# Phase corrections
# ---------------------------------------------------------------------------

def u_mf(a: AstroData) -> float:
    return -2.0 * a.xi.value


def u_o1(a: AstroData) -> float:
    return 2.0 * a.xi.value - a.nu.value


def u_j1(a: AstroData) -> float:
    return -a.nu.value


def u_oo1(a: AstroData) -> float:
    return -2.0 * a.xi.value - a.nu.value


def u_m2(a: AstroData) -> float:
    return 2.0 * a.xi.value - 2.0 * a.nu.value


def u_k1(a: AstroData) -> float:
    return -a.nup.value


def u_l2(a: AstroData) -> float:
    """Equation 214."""
    I = d2r * a.I.value
    P = d2r * a.P.value
    R = r2d * math.atan(
        math.sin(2 * P)
        / ((1 / 6.0) * math.tan(0.5 * I) ** -2 - math.cos(2 * P))
    )
    return 2.0 * a.xi.value - 2.0 * a.nu.value - R


def u_k2(a: AstroData) -> float:
    return -2.0 * a.nupp.value


def u_m1(a: AstroData) -> float:
    """Equation 202."""
    I = d2r * a.I.value
    P = d2r * a.P.value
    Q = r2d * math.atan(
        (5 * math.cos(I) - 1) / (7 * math.cos(I) + 1) * math.tan(P)
    )
    return a.xi.value - a.nu.value + Q


def u_modd(a: AstroData, n: int) -> float:
    return (n / 2.0) * u_m2(a)


SCHUREMAN_FUNDAMENTALS = {
    'Mm': lambda a: NodalCorrection(f_mm(a), 0.0),
    'Mf': lambda a: NodalCorrection(f_mf(a), u_mf(a)),
    'O1': lambda a: NodalCorrection(f_o1(a), u_o1(a)),
    'K1': lambda a: NodalCorrection(f_k1(a), u_k1(a)),
    'J1': lambda a: NodalCorrection(f_j1(a), u_j1(a)),
    'OO1': lambda a: NodalCorrection(f_oo1(a), u_oo1(a)),
    'M2': lambda a: NodalCorrection(f_m2(a), u_m2(a)),
    'K2': lambda a: NodalCorrection(f_k2(a), u_k2(a)),
    'L2': lambda a: NodalCorrection(f_l2(a), u_l2(a)),
    'M1': lambda a: NodalCorrection(f_m1(a), u_m1(a)),
    'M3': lambda a: NodalCorrection(f_modd(a, 3), u_modd(a, 3)),
}
"""Schureman formulas keyed by fundamental constituent name."""

schureman_strategy = Strategy('schureman', SCHUREMAN_FUNDAMENTALS)
