"""
Compound constituent decomposition (IHO TWCWG Annex B).

Compound names such as ``MS4``, ``2MK3`` or ``2(MN)S6`` encode the
fundamental constituents they are built from.  Decomposition happens in
two steps:

1. :func:`parse_name` splits the name into letter tokens with integer
   multipliers plus the target species (the trailing digits).
2. :func:`resolve_signs` assigns a species to every letter (``K`` is
   ambiguous between K1 and K2) and chooses signs so that the signed
   species sum equals the target.

Annual-modulation overtides ``MA<n>`` / ``MB<n>`` bypass the parser.

References
----------
* IHO Tidal and Water Level Working Group, *Constituent list*, Annex B:
  "Compound constituents".
"""
from __future__ import annotations

import itertools
import logging
import re
from typing import NamedTuple, Optional

from ..errors import CompoundParseError
from .definition import ConstituentMember

logger = logging.getLogger(__name__)

LETTER_SPECIES: dict[str, int] = {
    'M': 2,
    'S': 2,
    'N': 2,
    'O': 1,
    'P': 1,
    'Q': 1,
    'J': 1,
    'T': 2,
    'R': 2,
    'L': 2,
    'nu': 2,
    'lambda': 2,
}
"""Species of each compound letter.  ``K`` is resolved separately."""

K_SPECIES: tuple[int, int] = (2, 1)
"""Species tried for ``K``, in order (K2 before K1)."""

_SPECIES_RE = re.compile(r'^(.+?)(\d+)$')
_ANNUAL_RE = re.compile(r'^M([AB])(\d+)$')


class Token(NamedTuple):
    """One letter of a compound name with its multiplier."""

    letter: str
    multiplier: int


class ResolvedComponent(NamedTuple):
    """A member key (letter + species, e.g. ``'N2'``) with signed factor."""

    key: str
    factor: float


def _read_letter(body: str, i: int) -> Optional[str]:
    if body.startswith('nu', i) and (
        i + 2 >= len(body) or not body[i + 2].islower()
    ):
        return 'nu'
    if body.startswith('lambda', i):
        return 'lambda'
    if 'A' <= body[i] <= 'Z':
        return body[i]
    return None


def _is_known_letter(letter: str) -> bool:
    return letter == 'K' or letter in LETTER_SPECIES


def parse_name(name: str) -> tuple[list[Token], int]:
    """
    Parse a compound constituent name.

    Format: ``[multiplier]Letter[multiplier]Letter...species``, where a
    multiplier may also precede a parenthesized group of letters, e.g.
    ``2(MN)S6``.

    Parameters
    ----------
    name : str
        Constituent name.

    Returns
    -------
    tokens : list of Token
        Letters with their multipliers, left to right.
    target_species : int
        The trailing species number.

    Raises
    ------
    CompoundParseError
        If the name has no trailing species digits, species 0, a
        multiplier with no following letter, an unrecognized character,
        an unknown letter (``A`` and ``B`` included), or an unclosed or
        empty parenthesized group.
    """
    match = _SPECIES_RE.match(name)
    if not match:
        raise CompoundParseError(name, 'no trailing species digits')

    body = match.group(1)
    target_species = int(match.group(2))
    if target_species == 0:
        raise CompoundParseError(name, 'species is 0')

    tokens: list[Token] = []
    i = 0
    while i < len(body):
        multiplier = 0
        while i < len(body) and body[i].isdigit():
            multiplier = multiplier * 10 + int(body[i])
            i += 1
        multiplier = multiplier or 1

        if i >= len(body):
            raise CompoundParseError(name, 'trailing digits with no letter')

        if body[i] == '(':
            i += 1
            group: list[str] = []
            while i < len(body) and body[i] != ')':
                letter = _read_letter(body, i)
                if letter is None:
                    raise CompoundParseError(
                        name, f'unrecognized character at position {i}',
                    )
                group.append(letter)
                i += len(letter)
            if i >= len(body):
                raise CompoundParseError(name, 'unclosed parenthesized group')
            i += 1
            if not group:
                raise CompoundParseError(name, 'empty parenthesized group')
            for letter in group:
                if not _is_known_letter(letter):
                    raise CompoundParseError(name, f'unknown letter "{letter}"')
                tokens.append(Token(letter, multiplier))
            continue

        letter = _read_letter(body, i)
        if letter is None:
            raise CompoundParseError(
                name, f'unrecognized character at position {i}',
            )
        if not _is_known_letter(letter):
            raise CompoundParseError(name, f'unknown letter "{letter}"')
        i += len(letter)
        tokens.append(Token(letter, multiplier))

    return tokens, target_species


def tidy_number(value: float):
    """Return *value* as an int when it is integral."""
    return int(value) if float(value).is_integer() else value


def _components(
    tokens: list[Token], species: list[int], signs: list[int],
) -> list[ResolvedComponent]:
    return [
        ResolvedComponent(f'{t.letter}{s}', sign * t.multiplier)
        for t, s, sign in zip(tokens, species, signs)
    ]


def _greedy(
    tokens: list[Token], species: list[int], target: int,
) -> Optional[list[int]]:
    signs = [1] * len(tokens)
    total = sum(t.multiplier * s for t, s in zip(tokens, species))
    for j in range(len(tokens) - 1, -1, -1):
        if total == target:
            break
        signs[j] = -1
        total -= 2 * tokens[j].multiplier * species[j]
    return signs if total == target else None


def resolve_signs(
    tokens: list[Token], target_species: int,
) -> Optional[list[ResolvedComponent]]:
    """
    Assign a species and a sign to every token.

    A single token whose species differs from the target is an overtide
    (``M6`` is three times M2, ``M5`` is 2.5 times M2).  Otherwise each
    K assignment is tried in turn (all K2 first) with the Annex B
    right-to-left sign flip: signs are flipped starting at the last token
    until the signed species sum hits the target.  When no assignment
    works that way, every K assignment and sign pattern is enumerated and
    the match with the fewest negative signs wins, ties going to the
    pattern whose negatives sit on later tokens.

    Parameters
    ----------
    tokens : list of Token
        From :func:`parse_name`.
    target_species : int
        Species the signed sum must reach.

    Returns
    -------
    list of ResolvedComponent or None
        ``None`` when no combination reaches the target.
    """
    if not tokens:
        return None

    k_positions = [j for j, t in enumerate(tokens) if t.letter == 'K']
    assignments = list(itertools.product(K_SPECIES, repeat=len(k_positions)))

    def species_for(assignment) -> list[int]:
        k_species = dict(zip(k_positions, assignment))
        return [
            k_species[j] if t.letter == 'K' else LETTER_SPECIES[t.letter]
            for j, t in enumerate(tokens)
        ]

    # Overtide of a single fundamental
    if len(tokens) == 1 and tokens[0].multiplier == 1:
        for assignment in assignments:
            (letter_species,) = species_for(assignment)
            if letter_species == target_species:
                return [ResolvedComponent(f'{tokens[0].letter}{letter_species}', 1)]
        letter_species = species_for(assignments[0])[0]
        factor = tidy_number(target_species / letter_species)
        return [ResolvedComponent(f'{tokens[0].letter}{letter_species}', factor)]

    for assignment in assignments:
        species = species_for(assignment)
        signs = _greedy(tokens, species, target_species)
        if signs is not None:
            return _components(tokens, species, signs)

    # Brute force over K assignments and sign masks
    best_key = None
    best = None
    n = len(tokens)
    for a_index, assignment in enumerate(assignments):
        species = species_for(assignment)
        for mask in range(1 << n):
            flips = [j for j in range(n) if mask & (1 << j)]
            total = sum(
                (-1 if j in flips else 1) * tokens[j].multiplier * species[j]
                for j in range(n)
            )
            if total != target_species:
                continue
            key = (
                len(flips),
                tuple(-j for j in sorted(flips, reverse=True)),
                a_index,
            )
            if best_key is None or key < best_key:
                best_key = key
                signs = [-1 if j in flips else 1 for j in range(n)]
                best = _components(tokens, species, signs)
    return best


def compound_member_keys(
    name: str,
    species: int = 0,
    logger: logging.Logger | None = None,
) -> Optional[list[ResolvedComponent]]:
    """
    Decompose *name* into member keys without touching a registry.

    Parameters
    ----------
    name : str
        Constituent name.
    species : int, optional
        Species from the constituent's coefficients; when positive it
        overrides the trailing digits of the name.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    list of ResolvedComponent or None
        ``None`` when the name cannot be parsed or resolved.
    """
    _log = logger or logging.getLogger(__name__)

    annual = _ANNUAL_RE.match(name)
    if annual:
        n = int(annual.group(2))
        if n == 0:
            return None
        sa_factor = -1 if annual.group(1) == 'A' else 1
        return [
            ResolvedComponent('M2', tidy_number(n / 2)),
            ResolvedComponent('Sa', sa_factor),
        ]

    try:
        tokens, parsed_species = parse_name(name)
    except CompoundParseError as ex:
        _log.debug('%s', ex)
        return None

    target = species if species > 0 else parsed_species
    resolved = resolve_signs(tokens, target)
    if resolved is None:
        _log.debug('No sign combination of %s reaches species %d.', name, target)
    return resolved


def decompose_compound(name: str, species: int, registry):
    """
    Decompose a compound name into registry members.

    Parameters
    ----------
    name : str
        Constituent name (e.g. ``'MS4'``, ``'2MK3'``, ``'MA4'``).
    species : int
        Species from the constituent's coefficients, or 0 to use the
        trailing digits of the name.
    registry : Registry
        Anything with a ``get(name)`` returning a constituent or ``None``.

    Returns
    -------
    list of ConstituentMember or None
        ``None`` when the name cannot be parsed or resolved, or when a
        resolved key (e.g. ``'N2'``) is missing from *registry*.
    """
    resolved = compound_member_keys(name, species)
    if not resolved:
        return None

    members = []
    for key, factor in resolved:
        constituent = registry.get(key)
        if constituent is None:
            return None
        members.append(ConstituentMember(constituent, factor))
    return members
