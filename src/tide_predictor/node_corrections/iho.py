"""
IHO nodal corrections.

Closed-form f and u for the fundamental constituents, as tabulated in
Annex A of the IHO Tidal and Water Level Working Group constituent list.
All formulas take the longitudes of the lunar node *N*, lunar perigee
*p* and solar perigee *p'*.
"""
from __future__ import annotations

import math

from ..astronomy import AstroData
from ..constants import d2r
from .strategy import NodalCorrection, Strategy, from_sin_cos

sin = math.sin
cos = math.cos


def corr_mm(N: float, p: float) -> NodalCorrection:
    return NodalCorrection(
        f=1 - 0.1311 * cos(N) + 0.0538 * cos(2 * p) + 0.0205 * cos(2 * p - N),
        u=0.0,
    )


def corr_mf(N: float) -> NodalCorrection:
    return NodalCorrection(
        f=1.084 + 0.415 * cos(N) + 0.039 * cos(2 * N),
        u=-23.7 * sin(N) + 2.7 * sin(2 * N) - 0.4 * sin(3 * N),
    )


def corr_o1(N: float) -> NodalCorrection:
    return NodalCorrection(
        f=1.0176 + 0.1871 * cos(N) - 0.0147 * cos(2 * N),
        u=10.8 * sin(N) - 1.34 * sin(2 * N) + 0.19 * sin(3 * N),
    )


def corr_k1(N: float) -> NodalCorrection:
    return NodalCorrection(
        f=1.006 + 0.115 * cos(N) - 0.0088 * cos(2 * N) + 0.0006 * cos(3 * N),
        u=-8.86 * sin(N) + 0.68 * sin(2 * N) - 0.07 * sin(3 * N),
    )


def corr_j1(N: float) -> NodalCorrection:
    return NodalCorrection(
        f=1.1029 + 0.1676 * cos(N) - 0.017 * cos(2 * N) + 0.0016 * cos(3 * N),
        u=-12.94 * sin(N) + 1.34 * sin(2 * N) - 0.19 * sin(3 * N),
    )


def corr_m2(N: float) -> NodalCorrection:
    return NodalCorrection(
        f=1.0007 - 0.0373 * cos(N) + 0.0002 * cos(2 * N),
        u=-2.14 * sin(N),
    )


def corr_k2(N: float) -> NodalCorrection:
    return NodalCorrection(
        f=1.0246 + 0.2863 * cos(N) + 0.0083 * cos(2 * N) - 0.0015 * cos(3 * N),
        u=-17.74 * sin(N) + 0.68 * sin(2 * N) - 0.04 * sin(3 * N),
    )


def corr_m3(N: float) -> NodalCorrection:
    return NodalCorrection(f=corr_m2(N).f ** 1.5, u=-3.21 * sin(N))


# -- f sin u / f cos u forms --

def corr_m1b(N: float, p: float) -> NodalCorrection:
    return from_sin_cos(
        2.783 * sin(2 * p) + 0.558 * sin(2 * p - N) + 0.184 * sin(N),
        1 + 2.783 * cos(2 * p) + 0.558 * cos(2 * p - N) + 0.184 * cos(N),
    )


def corr_m1c(N: float, p: float) -> NodalCorrection:
    return from_sin_cos(
        sin(p) + 0.2 * sin(p - N),
        2 * (cos(p) + 0.2 * cos(p - N)),
    )


def corr_m1a(N: float, p: float) -> NodalCorrection:
    return from_sin_cos(
        -0.3593 * sin(2 * p) - 0.2 * sin(N) - 0.066 * sin(2 * p - N),
        1 + 0.3593 * cos(2 * p) + 0.2 * cos(N) + 0.066 * cos(2 * p - N),
    )


def corr_gamma2(N: float, p: float) -> NodalCorrection:
    return from_sin_cos(
        0.147 * sin(2 * (N - p)),
        1 + 0.147 * cos(2 * (N - p)),
    )


def corr_alpha2(p: float, pp: float) -> NodalCorrection:
    return from_sin_cos(
        -0.0446 * sin(p - pp),
        1 - 0.0446 * cos(p - pp),
    )


def corr_delta2(N: float) -> NodalCorrection:
    return from_sin_cos(0.477 * sin(N), 1 - 0.477 * cos(N))


def corr_xi_eta2(N: float) -> NodalCorrection:
    return from_sin_cos(-0.439 * sin(N), 1 + 0.439 * cos(N))


def corr_l2(N: float, p: float) -> NodalCorrection:
    return from_sin_cos(
        -0.2505 * sin(2 * p) - 0.1102 * sin(2 * p - N)
        - 0.0156 * sin(2 * p - 2 * N) - 0.037 * sin(N),
        1 - 0.2505 * cos(2 * p) - 0.1102 * cos(2 * p - N)
        - 0.0156 * cos(2 * p - 2 * N) - 0.037 * cos(N),
    )


def _n(a: AstroData) -> float:
    return d2r * a.N.value


def _np(a: AstroData) -> tuple[float, float]:
    return d2r * a.N.value, d2r * a.p.value


IHO_FUNDAMENTALS = {
    'Mm': lambda a: corr_mm(*_np(a)),
    'Mf': lambda a: corr_mf(_n(a)),
    'O1': lambda a: corr_o1(_n(a)),
    'K1': lambda a: corr_k1(_n(a)),
    'J1': lambda a: corr_j1(_n(a)),
    'M1B': lambda a: corr_m1b(*_np(a)),
    'M1C': lambda a: corr_m1c(*_np(a)),
    'M1': lambda a: corr_m1c(*_np(a)),
    'M1A': lambda a: corr_m1a(*_np(a)),
    'M2': lambda a: corr_m2(_n(a)),
    'K2': lambda a: corr_k2(_n(a)),
    'M3': lambda a: corr_m3(_n(a)),
    'L2': lambda a: corr_l2(*_np(a)),
    'gamma2': lambda a: corr_gamma2(*_np(a)),
    'alpha2': lambda a: corr_alpha2(d2r * a.p.value, d2r * a.pp.value),
    'delta2': lambda a: corr_delta2(_n(a)),
    'xi2': lambda a: corr_xi_eta2(_n(a)),
    'eta2': lambda a: corr_xi_eta2(_n(a)),
}
"""IHO Annex A formulas keyed by fundamental constituent name."""

iho_strategy = Strategy('iho', IHO_FUNDAMENTALS)
