"""
Constituent value objects and equilibrium-argument evaluation.

A :class:`Constituent` is immutable.  :func:`define_constituent` creates
the first-pass definition (``members`` unset); the registry finalizes it
with :func:`dataclasses.replace` once its members are resolved.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from ..astronomy import AstroData

Number = Union[int, float]

ZERO_COEFFICIENTS: tuple[int, ...] = (0, 0, 0, 0, 0, 0, 0)
"""Coefficients of a constituent with no astronomical dependence."""


@dataclass(frozen=True)
class ConstituentMember:
    """Edge of the constituent DAG: a member constituent and its factor."""

    constituent: 'Constituent'
    factor: Number


@dataclass(frozen=True, eq=False)
class Constituent:
    """
    A tidal constituent.

    Instances compare by identity: the registry holds exactly one
    instance per constituent and aliases point at it.

    Attributes
    ----------
    name : str
        Canonical name (e.g. ``'M2'``, ``'2MK3'``).
    speed : float
        Angular speed in degrees per hour.
    coefficients : tuple
        Doodson numbers for ``(T+h-s, s, h, p, N', p', 90)``.  ``None``
        only on a first-pass definition of a compound whose coefficients
        are derived from its members.
    nodal_correction : str
        IHO nodal correction code from the dataset.
    aliases : tuple of str
        Alternate names resolving to this constituent.
    members : tuple of ConstituentMember or None
        Constituents this one is built from.  ``None`` means no nodal
        correction beyond a direct fundamental lookup.
    """

    name: str
    speed: float
    coefficients: Optional[tuple[Number, ...]]
    nodal_correction: str = 'z'
    aliases: tuple[str, ...] = ()
    members: Optional[tuple[ConstituentMember, ...]] = None
    explicit_members: Optional[tuple[tuple[str, Number], ...]] = field(
        default=None, repr=False,
    )

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name,) + self.aliases

    @property
    def species(self) -> int:
        """First Doodson number; 0 when coefficients are not known yet."""
        if not self.coefficients:
            return 0
        return int(round(self.coefficients[0]))

    def value(self, astro: AstroData) -> float:
        """Equilibrium argument V0 in degrees (not reduced mod 360)."""
        return compute_v0(self.coefficients or ZERO_COEFFICIENTS, astro)

    def astro_speed(self, astro: AstroData) -> float:
        """Speed implied by the coefficients and the argument rates."""
        return sum(
            c * s for c, s in zip(
                self.coefficients or ZERO_COEFFICIENTS, astro.v0_speeds(),
            )
        )


def compute_v0(coefficients: Sequence[Number], astro: AstroData) -> float:
    """``sum(coefficient * argument)`` over ``(T+h-s, s, h, p, -N, p', 90)``."""
    return sum(c * v for c, v in zip(coefficients, astro.v0_arguments()))


def _xdo_digit(letter: str) -> int:
    if letter == 'Z':
        return 0
    if 'A' <= letter <= 'M':
        return ord(letter) - ord('A') + 1
    if 'N' <= letter <= 'Y':
        return ord(letter) - ord('Z')
    raise ValueError(f"Invalid XDO letter: {letter!r}")


def xdo_to_coefficients(xdo: str) -> tuple[int, ...]:
    """
    Convert an IHO extended Doodson number to Schureman coefficients.

    Letters encode signed digits (``Z`` = 0, ``A`` = 1, ``B`` = 2, ...,
    ``Y`` = -1, ``X`` = -2, ...).  Whitespace is ignored.  The seventh
    (90 degree) term is negated to convert from the IHO convention to the
    Schureman/NOAA convention used by published phases.

    Raises
    ------
    ValueError
        If the string does not hold exactly seven valid letters.
    """
    letters = ''.join(xdo.split()).upper()
    if len(letters) != 7:
        raise ValueError(
            f"XDO must contain 7 letters, got {len(letters)}: {xdo!r}"
        )
    digits = [_xdo_digit(letter) for letter in letters]
    digits[6] = -digits[6]
    return tuple(digits)


def define_constituent(
    name: str,
    speed: float,
    coefficients: Optional[Sequence[Number]],
    nodal_correction_code: str,
    aliases: Sequence[str] = (),
    members: Optional[Sequence[tuple[str, Number]]] = None,
) -> Constituent:
    """
    First-pass definition of a constituent.

    Parameters
    ----------
    name : str
        Canonical name.
    speed : float
        Angular speed in degrees per hour.
    coefficients : sequence of 7 numbers or None
        Doodson numbers, or ``None`` for a compound derived from members.
    nodal_correction_code : str
        Single-letter IHO code.
    aliases : sequence of str, optional
        Alternate names.
    members : sequence of (name, factor), optional
        Explicit members for names that cannot be decomposed.

    Returns
    -------
    Constituent
        With ``members`` unset; see
        :func:`tide_predictor.constituents.registry.build_registry`.

    Raises
    ------
    ValueError
        If *coefficients* is given with a length other than 7.
    """
    if coefficients is not None:
        coefficients = tuple(coefficients)
        if len(coefficients) != 7:
            raise ValueError(
                f"{name}: expected 7 coefficients, got {len(coefficients)}"
            )
    return Constituent(
        name=name,
        speed=float(speed),
        coefficients=coefficients,
        nodal_correction=nodal_correction_code,
        aliases=tuple(aliases),
        explicit_members=(
            tuple((str(n), f) for n, f in members) if members else None
        ),
    )
