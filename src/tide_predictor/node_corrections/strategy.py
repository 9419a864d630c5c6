"""
Nodal correction strategy and the recursive compound compositor.

A strategy wraps a table of fundamental formulas.  :meth:`Strategy.get`
evaluates one fundamental by name; :meth:`Strategy.compute` walks a
constituent's members and composes their corrections:

    u = sum(factor * u_member)
    f = prod(f_member ** |factor|)

f is always combined by multiplication, even for negative factors
(IHO Annex B).
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Mapping

from ..astronomy import AstroData
from ..constants import r2d


@dataclass(frozen=True)
class NodalCorrection:
    """Amplitude factor *f* and phase correction *u* (degrees)."""

    f: float = 1.0
    u: float = 0.0


UNITY = NodalCorrection(1.0, 0.0)
"""No correction."""

CorrectionFn = Callable[[AstroData], NodalCorrection]


def from_sin_cos(f_sin_u: float, f_cos_u: float) -> NodalCorrection:
    """Convert an ``f sin u`` / ``f cos u`` pair to (f, u)."""
    return NodalCorrection(
        f=math.hypot(f_sin_u, f_cos_u),
        u=r2d * math.atan2(f_sin_u, f_cos_u),
    )


@dataclass(frozen=True)
class Strategy:
    """
    A named set of fundamental nodal correction formulas.

    Parameters
    ----------
    name : str
        Strategy name (``'iho'`` or ``'schureman'``).
    fundamentals : mapping of str to callable
        ``{constituent_name: fn(astro) -> NodalCorrection}``.
    """

    name: str
    fundamentals: Mapping[str, CorrectionFn] = field(repr=False)

    def get(self, name: str, astro: AstroData) -> NodalCorrection:
        """Correction of fundamental *name*; unity when not tabulated."""
        fn = self.fundamentals.get(name)
        return fn(astro) if fn is not None else UNITY

    def compute(self, constituent, astro: AstroData) -> NodalCorrection:
        """
        Correction of any constituent.

        Tabulated fundamentals are looked up by canonical name; otherwise
        the constituent's members are composed recursively, and a
        constituent with no members gets unity.
        """
        if constituent.name in self.fundamentals:
            return self.get(constituent.name, astro)
        if constituent.members is None:
            return UNITY

        u = 0.0
        f = 1.0
        for member in constituent.members:
            correction = self.compute(member.constituent, astro)
            u += member.factor * correction.u
            f *= correction.f ** abs(member.factor)
        return NodalCorrection(f=f, u=u)
