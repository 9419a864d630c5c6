"""
Static constituent dataset.

Each record describes one constituent:

``name``
    Canonical name.
``speed``
    Angular speed in degrees per hour.
``coefficients``
    Doodson numbers multiplying ``(T+h-s, s, h, p, N', p', 90)`` with
    ``N' = -N`` (Schureman convention), or ``None`` for compounds whose
    equilibrium argument is derived from their members.  A record may
    instead carry ``xdo``, the IHO letter-encoded form.
``nodal_correction``
    Single-letter IHO code selecting how f/u are obtained (see
    :mod:`tide_predictor.constituents.registry`).
``aliases``
    Alternate names, mostly the upper-case forms used by NOAA CO-OPS.
``members``
    Explicit ``(name, factor)`` pairs for compounds whose names cannot be
    decomposed (long-period constituents such as ``MSm``).

Speeds are derived from the J2000 rates of the astronomical arguments
and agree with Schureman (1958) Table 2 to 1e-7 deg/hr.  Compound speeds
are the factor-weighted sums of their member speeds.  Records are
grouped by species; the shallow-water compounds taken from the IHO list
close each group.  ``3N2`` and ``3L2`` are not in the IHO list and come
last.
"""
from __future__ import annotations

CONSTITUENT_DATA: list[dict] = [
    # -- Long period --
    {
        'name': 'Z0',
        'speed': 0.0000000,
        'coefficients': (0, 0, 0, 0, 0, 0, 0),
        'nodal_correction': 'z',
    },
    {
        'name': 'Sa',
        'speed': 0.0410686,
        'coefficients': (0, 0, 1, 0, 0, 0, 0),
        'nodal_correction': 'z',
        'aliases': ['SA'],
    },
    {
        'name': 'Ssa',
        'speed': 0.0821373,
        'coefficients': (0, 0, 2, 0, 0, 0, 0),
        'nodal_correction': 'z',
        'aliases': ['SSA'],
    },
    {
        'name': 'Sta',
        'speed': 0.1232040,
        'coefficients': None,
        'nodal_correction': 'x',
        'aliases': ['STA'],
        'members': [('K2', 1), ('T2', -1)],
    },
    {
        'name': 'MSm',
        'speed': 0.4715211,
        'coefficients': None,
        'nodal_correction': 'x',
        'aliases': ['MSM'],
        'members': [('M2', 1), ('nu2', -1)],
    },
    {
        'name': 'Mm',
        'speed': 0.5443747,
        'coefficients': (0, 1, 0, -1, 0, 0, 0),
        'nodal_correction': 'y',
        'aliases': ['MM'],
    },
    {
        'name': 'MSf',
        'speed': 1.0158958,
        'coefficients': (0, 2, -2, 0, 0, 0, 0),
        'nodal_correction': 'b',
        'aliases': ['MSF'],
    },
    {
        'name': 'Mf',
        'speed': 1.0980330,
        'coefficients': (0, 2, 0, 0, 0, 0, 0),
        'nodal_correction': 'y',
        'aliases': ['MF'],
    },
    {
        'name': 'KOo',
        'speed': 1.0980330,
        'coefficients': None,
        'nodal_correction': 'x',
        'aliases': ['KOO'],
        'members': [('K1', 1), ('O1', -1)],
    },
    {
        'name': 'MKo',
        'speed': 1.0980330,
        'coefficients': None,
        'nodal_correction': 'x',
        'aliases': ['MKO'],
        'members': [('K2', 1), ('M2', -1)],
    },
    {
        'name': 'SN',
        'speed': 1.5602705,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('S2', 1), ('N2', -1)],
    },
    {
        'name': 'MStm',
        'speed': 1.5695541,
        'coefficients': None,
        'nodal_correction': 'x',
        'aliases': ['MSTM'],
        'members': [('Mf', 1), ('M2', 1), ('nu2', -1)],
    },
    {
        'name': 'MTm',
        'speed': 1.6424077,
        'coefficients': None,
        'nodal_correction': 'x',
        'aliases': ['MTM'],
        'members': [('Mf', 1), ('Mm', 1)],
    },
    {
        'name': 'MSqm',
        'speed': 2.1139288,
        'coefficients': None,
        'nodal_correction': 'x',
        'aliases': ['MSQM'],
        'members': [('Mf', 1), ('MSf', 1)],
    },
    {
        'name': '2SMN',
        'speed': 2.5761662,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('S2', 2), ('M2', -1), ('N2', -1)],
    },
    # -- Diurnal --
    {
        'name': '2Q1',
        'speed': 12.8542862,
        'coefficients': (1, -3, 0, 2, 0, 0, 1),
        'nodal_correction': 'o',
    },
    {
        'name': 'sigma1',
        'speed': 12.9271398,
        'coefficients': (1, -3, 2, 0, 0, 0, 1),
        'nodal_correction': 'o',
        'aliases': ['SIGMA1', 'SIG1', 'SGM'],
    },
    {
        'name': 'Q1',
        'speed': 13.3986609,
        'coefficients': (1, -2, 0, 1, 0, 0, 1),
        'nodal_correction': 'o',
    },
    {
        'name': 'rho1',
        'speed': 13.4715145,
        'coefficients': (1, -2, 2, -1, 0, 0, 1),
        'nodal_correction': 'o',
        'aliases': ['RHO1', 'RHO'],
    },
    {
        'name': 'O1',
        'speed': 13.9430356,
        'coefficients': (1, -1, 0, 0, 0, 0, 1),
        'nodal_correction': 'y',
    },
    {
        'name': 'MP1',
        'speed': 14.0251729,
        'coefficients': (1, -1, 2, 0, 0, 0, -1),
        'nodal_correction': 'x',
        'aliases': ['TAU1'],
    },
    {
        'name': 'M1',
        'speed': 14.4966939,
        'coefficients': (1, 0, 0, 1, 0, 0, -1),
        'nodal_correction': 'y',
        'aliases': ['NO1'],
    },
    {
        'name': 'chi1',
        'speed': 14.5695476,
        'coefficients': (1, 0, 2, -1, 0, 0, -1),
        'nodal_correction': 'j',
        'aliases': ['CHI1'],
    },
    {
        'name': 'pi1',
        'speed': 14.9178647,
        'coefficients': (1, 1, -3, 0, 0, 1, 1),
        'nodal_correction': 'z',
        'aliases': ['PI1'],
    },
    {
        'name': 'P1',
        'speed': 14.9589314,
        'coefficients': (1, 1, -2, 0, 0, 0, 1),
        'nodal_correction': 'z',
    },
    {
        'name': 'S1',
        'speed': 15.0000000,
        'coefficients': (1, 1, -1, 0, 0, 0, 0),
        'nodal_correction': 'z',
    },
    {
        'name': 'K1',
        'speed': 15.0410686,
        'coefficients': (1, 1, 0, 0, 0, 0, -1),
        'nodal_correction': 'y',
    },
    {
        'name': 'psi1',
        'speed': 15.0821353,
        'coefficients': (1, 1, 1, 0, 0, -1, -1),
        'nodal_correction': 'z',
        'aliases': ['PSI1'],
    },
    {
        'name': 'phi1',
        'speed': 15.1232059,
        'coefficients': (1, 1, 2, 0, 0, 0, -1),
        'nodal_correction': 'z',
        'aliases': ['PHI1'],
    },
    {
        'name': 'theta1',
        'speed': 15.5125897,
        'coefficients': (1, 2, -2, 1, 0, 0, -1),
        'nodal_correction': 'j',
        'aliases': ['THETA1', 'THE1'],
    },
    {
        'name': 'J1',
        'speed': 15.5854433,
        'coefficients': (1, 2, 0, -1, 0, 0, -1),
        'nodal_correction': 'y',
    },
    {
        'name': 'SO1',
        'speed': 16.0569644,
        'coefficients': (1, 3, -2, 0, 0, 0, -1),
        'nodal_correction': 'x',
    },
    {
        'name': 'OO1',
        'speed': 16.1391017,
        'coefficients': (1, 3, 0, 0, 0, 0, -1),
        'nodal_correction': 'y',
    },
    {
        'name': 'KQ1',
        'speed': 16.6834764,
        'coefficients': (1, 4, 0, -1, 0, 0, -1),
        'nodal_correction': 'd',
        'aliases': ['UPS1', 'UPSILON1'],
    },
    {
        'name': '2PO1',
        'speed': 15.9748272,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('P1', 2), ('O1', -1)],
    },
    # -- Semidiurnal --
    {
        'name': 'OQ2',
        'speed': 27.3416965,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'eps2',
        'speed': 27.4238338,
        'coefficients': (2, -3, 2, 1, 0, 0, 0),
        'nodal_correction': 'm',
        'aliases': ['EPS2', 'EP2'],
    },
    {
        'name': '2N2',
        'speed': 27.8953548,
        'coefficients': (2, -2, 0, 2, 0, 0, 0),
        'nodal_correction': 'm',
    },
    {
        'name': 'mu2',
        'speed': 27.9682085,
        'coefficients': (2, -2, 2, 0, 0, 0, 0),
        'nodal_correction': 'm',
        'aliases': ['MU2'],
    },
    {
        'name': 'N2',
        'speed': 28.4397295,
        'coefficients': (2, -1, 0, 1, 0, 0, 0),
        'nodal_correction': 'm',
    },
    {
        'name': 'nu2',
        'speed': 28.5125832,
        'coefficients': (2, -1, 2, -1, 0, 0, 0),
        'nodal_correction': 'm',
        'aliases': ['NU2'],
    },
    {
        'name': 'gamma2',
        'speed': 28.9112506,
        'coefficients': (2, 0, -2, 2, 0, 0, 2),
        'nodal_correction': 'y',
        'aliases': ['GAMMA2', 'GAM2'],
    },
    {
        'name': 'alpha2',
        'speed': 28.9430376,
        'coefficients': (2, 0, -1, 0, 0, 1, 2),
        'nodal_correction': 'y',
        'aliases': ['ALPHA2', 'ALP2'],
    },
    {
        'name': 'MA2',
        'speed': 28.9430356,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'M2',
        'speed': 28.9841042,
        'coefficients': (2, 0, 0, 0, 0, 0, 0),
        'nodal_correction': 'y',
    },
    {
        'name': 'MB2',
        'speed': 29.0251729,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'MKS2',
        'speed': 29.0662415,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'lambda2',
        'speed': 29.4556253,
        'coefficients': (2, 1, -2, 1, 0, 0, 2),
        'nodal_correction': 'm',
        'aliases': ['LAMBDA2', 'LAM2', 'LDA2'],
    },
    {
        'name': 'L2',
        'speed': 29.5284789,
        'coefficients': (2, 1, 0, -1, 0, 0, 2),
        'nodal_correction': 'y',
    },
    {
        'name': '2MN2',
        'speed': 29.5284789,
        'coefficients': (2, 1, 0, -1, 0, 0, 0),
        'nodal_correction': 'p',
    },
    {
        'name': 'NKM2',
        'speed': 29.5377626,
        'coefficients': None,
        'nodal_correction': 'q',
    },
    {
        'name': 'T2',
        'speed': 29.9589333,
        'coefficients': (2, 2, -3, 0, 0, 1, 0),
        'nodal_correction': 'z',
    },
    {
        'name': 'S2',
        'speed': 30.0000000,
        'coefficients': (2, 2, -2, 0, 0, 0, 0),
        'nodal_correction': 'z',
    },
    {
        'name': 'R2',
        'speed': 30.0410667,
        'coefficients': (2, 2, -1, 0, 0, -1, 2),
        'nodal_correction': 'z',
    },
    {
        'name': 'K2',
        'speed': 30.0821373,
        'coefficients': (2, 2, 0, 0, 0, 0, 0),
        'nodal_correction': 'y',
    },
    {
        'name': 'MSN2',
        'speed': 30.5443747,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'KJ2',
        'speed': 30.6265120,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'eta2',
        'speed': 30.6265120,
        'coefficients': (2, 3, 0, -1, 0, 0, 0),
        'nodal_correction': 'y',
        'aliases': ['ETA2'],
    },
    {
        'name': '2SM2',
        'speed': 31.0158958,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'SKM2',
        'speed': 31.0980330,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '3(SM)N2',
        'speed': 31.4874168,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '2NS2',
        'speed': 26.8794590,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('N2', 2), ('S2', -1)],
    },
    {
        'name': '3M2S2',
        'speed': 26.9523126,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 3), ('S2', -2)],
    },
    {
        'name': 'MNS2',
        'speed': 27.4238337,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 1), ('N2', 1), ('S2', -1)],
    },
    {
        'name': '2MK2',
        'speed': 27.8860711,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 2), ('K2', -1)],
    },
    {
        'name': '2MS2',
        'speed': 27.9682084,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 2), ('S2', -1)],
    },
    {
        'name': 'MSK2',
        'speed': 28.9019669,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 1), ('S2', 1), ('K2', -1)],
    },
    {
        'name': '2SK2',
        'speed': 29.9178627,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('S2', 2), ('K2', -1)],
    },
    # -- Terdiurnal --
    {
        'name': 'MO3',
        'speed': 42.9271398,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '2MK3',
        'speed': 42.9271398,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'M3',
        'speed': 43.4761564,
        'coefficients': (3, 0, 0, 0, 0, 0, 0),
        'nodal_correction': 'y',
    },
    {
        'name': 'SO3',
        'speed': 43.9430356,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'MK3',
        'speed': 44.0251729,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'SK3',
        'speed': 45.0410686,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'S3',
        'speed': 45.0000000,
        'coefficients': (3, 3, -3, 0, 0, 0, 0),
        'nodal_correction': 'z',
    },
    {
        'name': 'T3',
        'speed': 44.9384000,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'R3',
        'speed': 45.0616000,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'MQ3',
        'speed': 42.3827651,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 1), ('Q1', 1)],
    },
    {
        'name': 'NO3',
        'speed': 42.3827651,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('N2', 1), ('O1', 1)],
    },
    {
        'name': 'NK3',
        'speed': 43.4807981,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('N2', 1), ('K1', 1)],
    },
    {
        'name': 'SP3',
        'speed': 44.9589314,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('S2', 1), ('P1', 1)],
    },
    {
        'name': 'K3',
        'speed': 45.1232059,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('K2', 1), ('K1', 1)],
    },
    # -- Quarter diurnal --
    {
        'name': 'N4',
        'speed': 56.8794591,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'MN4',
        'speed': 57.4238338,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'M4',
        'speed': 57.9682085,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'MA4',
        'speed': 57.9271398,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'SN4',
        'speed': 58.4397295,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'ML4',
        'speed': 58.5125832,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'MS4',
        'speed': 58.9841042,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'MK4',
        'speed': 59.0662415,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'S4',
        'speed': 60.0000000,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'SK4',
        'speed': 60.0821373,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '3SM4',
        'speed': 61.0158958,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '2MNS4',
        'speed': 56.4079379,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 2), ('N2', 1), ('S2', -1)],
    },
    {
        'name': '3MS4',
        'speed': 56.9523126,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 3), ('S2', -1)],
    },
    {
        'name': '2MSK4',
        'speed': 57.8860711,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 2), ('S2', 1), ('K2', -1)],
    },
    {
        'name': 'NK4',
        'speed': 58.5218668,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('N2', 1), ('K2', 1)],
    },
    {
        'name': 'SL4',
        'speed': 59.5284789,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('S2', 1), ('L2', 1)],
    },
    {
        'name': 'K4',
        'speed': 60.1642746,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('K2', 2)],
    },
    # -- Fifth diurnal --
    {
        'name': '2MO5',
        'speed': 71.9112441,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '2MK5',
        'speed': 73.0092771,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'MNO5',
        'speed': 71.3668693,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 1), ('N2', 1), ('O1', 1)],
    },
    {
        'name': 'MNK5',
        'speed': 72.4649023,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 1), ('N2', 1), ('K1', 1)],
    },
    {
        'name': '2MP5',
        'speed': 72.9271398,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 2), ('P1', 1)],
    },
    {
        'name': 'MSK5',
        'speed': 74.0251728,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 1), ('S2', 1), ('K1', 1)],
    },
    {
        'name': '2SK5',
        'speed': 75.0410686,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('S2', 2), ('K1', 1)],
    },
    # -- Sixth diurnal --
    {
        'name': '2(MN)S6',
        'speed': 84.8476675,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '2MN6',
        'speed': 86.4079380,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'M6',
        'speed': 86.9523127,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '4MN6',
        'speed': 87.4966874,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '2MS6',
        'speed': 87.9682085,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '2MK6',
        'speed': 88.0503458,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '2SM6',
        'speed': 88.9841042,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'MSK6',
        'speed': 89.0662415,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': 'S6',
        'speed': 90.0000000,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '2NM6',
        'speed': 85.8635632,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('N2', 2), ('M2', 1)],
    },
    {
        'name': 'MSN6',
        'speed': 87.4238337,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 1), ('S2', 1), ('N2', 1)],
    },
    {
        'name': 'MNK6',
        'speed': 87.5059710,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 1), ('N2', 1), ('K2', 1)],
    },
    # -- Seventh diurnal --
    {
        'name': '3MK7',
        'speed': 101.9933812,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 3), ('K1', 1)],
    },
    # -- Eighth diurnal --
    {
        'name': 'M8',
        'speed': 115.9364170,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '3MS8',
        'speed': 116.9523127,
        'coefficients': None,
        'nodal_correction': 'x',
    },
    {
        'name': '2(MN)8',
        'speed': 114.8476674,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 2), ('N2', 2)],
    },
    {
        'name': '3MN8',
        'speed': 115.3920421,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 3), ('N2', 1)],
    },
    {
        'name': '2MSN8',
        'speed': 116.4079379,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 2), ('S2', 1), ('N2', 1)],
    },
    {
        'name': '3MK8',
        'speed': 117.0344499,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 3), ('K2', 1)],
    },
    {
        'name': '2(MS)8',
        'speed': 117.9682084,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 2), ('S2', 2)],
    },
    {
        'name': '2MSK8',
        'speed': 118.0503457,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 2), ('S2', 1), ('K2', 1)],
    },
    # -- Tenth diurnal --
    {
        'name': 'M10',
        'speed': 144.9205210,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 5)],
    },
    {
        'name': '4MS10',
        'speed': 145.9364168,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 4), ('S2', 1)],
    },
    {
        'name': '3M2S10',
        'speed': 146.9523126,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 3), ('S2', 2)],
    },
    # -- Twelfth diurnal --
    {
        'name': 'M12',
        'speed': 173.9046252,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 6)],
    },
    {
        'name': '5MS12',
        'speed': 174.9205210,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 5), ('S2', 1)],
    },
    {
        'name': '4M2S12',
        'speed': 175.9364168,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('M2', 4), ('S2', 2)],
    },
    # -- Supplementary --
    {
        'name': '3N2',
        'speed': 85.3191885,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('N2', 3)],
    },
    {
        'name': '3L2',
        'speed': 88.5854367,
        'coefficients': None,
        'nodal_correction': 'x',
        'members': [('L2', 3)],
    },
]
"""Ordered constituent records consumed by :func:`build_registry`."""
