"""
Constituent registry.

:func:`build_registry` turns the static dataset into an immutable
:class:`Registry` in two passes:

1. every record becomes a first-pass :class:`Constituent` via
   :func:`define_constituent`;
2. each record's IHO nodal correction code is resolved to member keys,
   then a post-order walk over the member graph finalizes every
   constituent after its members, deriving coefficients for compounds
   that have none.

Nodal correction codes
----------------------
``z``, ``f``
    No correction.
``y``
    Fundamental; the strategy looks it up by name.
``a``, ``m``, ``o``, ``k``, ``j``, ``e``
    Same correction as Mm, M2, O1, K1, J1, K2.
``b``, ``c``
    M2 with factor -1 and -2.
``g``
    M2 with factor species / 2.
``p``, ``d``, ``q``
    Same members as 2MN2, KQ1, NKM2.
``x``
    Explicit dataset members, else decomposition of the name.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from functools import lru_cache
from typing import Iterable, Iterator, Mapping, Optional, Sequence

from ..errors import RegistryError
from .compound import ResolvedComponent, compound_member_keys, tidy_number
from .data import CONSTITUENT_DATA
from .definition import (
    ZERO_COEFFICIENTS,
    Constituent,
    ConstituentMember,
    define_constituent,
    xdo_to_coefficients,
)

logger = logging.getLogger(__name__)

UNITY_CODES: frozenset[str] = frozenset({'z', 'f', 'y'})
"""Codes that carry no members."""

DIRECT_CODES: dict[str, str] = {
    'a': 'Mm',
    'm': 'M2',
    'o': 'O1',
    'k': 'K1',
    'j': 'J1',
    'e': 'K2',
}
"""Codes whose correction is exactly that of one fundamental."""

COMPOUND_CODES: dict[str, str] = {
    'p': '2MN2',
    'd': 'KQ1',
    'q': 'NKM2',
}
"""Codes whose members are those of a fixed compound name."""


class Registry:
    """
    Immutable lookup of constituents by name or alias.

    Iteration yields each canonical constituent once, in dataset order.
    """

    def __init__(self, constituents: Iterable[Constituent]):
        self._constituents: tuple[Constituent, ...] = tuple(constituents)
        index: dict[str, Constituent] = {}
        for constituent in self._constituents:
            for name in constituent.names:
                if name in index and index[name] is not constituent:
                    raise RegistryError(
                        f"Name {name!r} is used by both "
                        f"{index[name].name} and {constituent.name}"
                    )
                index[name] = constituent
        self._index = index

    def get(self, name: str, default=None) -> Optional[Constituent]:
        return self._index.get(name, default)

    def __getitem__(self, name: str) -> Constituent:
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"Unknown constituent: {name}") from None

    def __contains__(self, name) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Constituent]:
        return iter(self._constituents)

    def __len__(self) -> int:
        return len(self._constituents)

    def names(self) -> list[str]:
        """Canonical names in dataset order."""
        return [c.name for c in self._constituents]

    def __repr__(self) -> str:
        return f'Registry({len(self)} constituents)'


def _define(record: Mapping) -> Constituent:
    coefficients = record.get('coefficients')
    if coefficients is None and record.get('xdo'):
        coefficients = xdo_to_coefficients(record['xdo'])
    return define_constituent(
        record['name'],
        record['speed'],
        coefficients,
        record.get('nodal_correction', 'z'),
        aliases=record.get('aliases', ()),
        members=record.get('members'),
    )


def _member_keys(
    draft: Constituent, log: logging.Logger,
) -> Optional[list[ResolvedComponent]]:
    code = draft.nodal_correction
    if code in UNITY_CODES:
        return None
    if code in DIRECT_CODES:
        return [ResolvedComponent(DIRECT_CODES[code], 1)]
    if code == 'b':
        return [ResolvedComponent('M2', -1)]
    if code == 'c':
        return [ResolvedComponent('M2', -2)]
    if code == 'g':
        return [ResolvedComponent('M2', tidy_number(draft.species / 2))]
    if code in COMPOUND_CODES:
        resolved = compound_member_keys(COMPOUND_CODES[code], logger=log)
        if resolved is None:
            raise RegistryError(
                f"{draft.name}: cannot decompose {COMPOUND_CODES[code]}"
            )
        return resolved
    if code == 'x':
        if draft.explicit_members:
            return [ResolvedComponent(n, f) for n, f in draft.explicit_members]
        resolved = compound_member_keys(draft.name, draft.species, logger=log)
        if resolved is None:
            log.warning(
                'Cannot decompose compound constituent %s; '
                'no nodal correction will be applied.', draft.name,
            )
        return resolved
    raise RegistryError(
        f"{draft.name}: unknown nodal correction code {code!r}"
    )


def build_registry(
    dataset: Sequence[Mapping] = CONSTITUENT_DATA,
    logger: logging.Logger | None = None,
) -> Registry:
    """
    Build a registry from constituent records.

    Parameters
    ----------
    dataset : sequence of mapping
        Records shaped like
        :data:`tide_predictor.constituents.data.CONSTITUENT_DATA`.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    Registry

    Raises
    ------
    RegistryError
        On duplicate names, unknown codes, member keys absent from the
        dataset, or a cycle in the member graph.
    """
    _log = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Pass 1: first-pass definitions
    # ------------------------------------------------------------------
    drafts = [_define(record) for record in dataset]
    lookup = Registry(drafts)

    # ------------------------------------------------------------------
    # Pass 2: resolve codes to member keys
    # ------------------------------------------------------------------
    edges: dict[str, Optional[list[tuple[str, float]]]] = {}
    for draft in drafts:
        keys = _member_keys(draft, _log)
        if keys is None:
            edges[draft.name] = None
            continue
        decomposed = draft.nodal_correction == 'x' and not draft.explicit_members
        resolved = []
        for key, factor in keys:
            member = lookup.get(key)
            if member is None:
                if decomposed:
                    _log.warning(
                        'Compound %s resolves to %s, which is not in the '
                        'dataset; no nodal correction will be applied.',
                        draft.name, key,
                    )
                    resolved = None
                    break
                raise RegistryError(
                    f"{draft.name}: member {key} is not in the dataset"
                )
            resolved.append((member.name, factor))
        edges[draft.name] = resolved

    # ------------------------------------------------------------------
    # Finalize in post-order so members exist before their dependants
    # ------------------------------------------------------------------
    final: dict[str, Constituent] = {}
    visiting: list[str] = []

    def finalize(name: str) -> Constituent:
        if name in final:
            return final[name]
        if name in visiting:
            cycle = visiting[visiting.index(name):] + [name]
            raise RegistryError(
                f"Constituent member cycle: {' -> '.join(cycle)}"
            )
        visiting.append(name)
        draft = lookup[name]

        members = None
        if edges[name] is not None:
            members = tuple(
                ConstituentMember(finalize(member), factor)
                for member, factor in edges[name]
            )

        coefficients = draft.coefficients
        if coefficients is None:
            if members:
                coefficients = tuple(
                    tidy_number(sum(m.factor * m.constituent.coefficients[k]
                              for m in members))
                    for k in range(7)
                )
            else:
                _log.warning(
                    'Constituent %s has neither coefficients nor members.',
                    name,
                )
                coefficients = ZERO_COEFFICIENTS

        visiting.pop()
        final[name] = replace(draft, coefficients=coefficients, members=members)
        return final[name]

    registry = Registry(finalize(draft.name) for draft in drafts)
    _log.debug('Built constituent registry with %d constituents.', len(registry))
    return registry


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    """Registry of the bundled dataset, built once per process."""
    return build_registry(CONSTITUENT_DATA)
