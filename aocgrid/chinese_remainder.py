"""aocgrid.chinese_remainder
=============================

The Chinese Remainder Theorem reconstructs a number ``n`` from its remainders
modulo several pairwise coprime moduli:

    n % constraints[0].modulus == constraints[0].remainder
    n % constraints[1].modulus == constraints[1].remainder
    ...

Adapted from the Rosetta Code formulation
(https://rosettacode.org/wiki/Chinese_remainder_theorem).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


def _egcd(a: int, b: int) -> Tuple[int, int, int]:
    """Extended Euclid: return ``(g, x, y)`` with ``a * x + b * y == g``."""

    if a == 0:
        return b, 0, 1
    g, x, y = _egcd(b % a, a)
    return g, y - (b // a) * x, x


def _mod_inv(x: int, n: int) -> Optional[int]:
    """Inverse of ``x`` modulo ``n`` normalised into ``[0, n)``, or ``None``."""

    g, inverse, _ = _egcd(x, n)
    if g != 1:
        return None
    return ((inverse % n) + n) % n


@dataclass(frozen=True)
class Constraint:
    """``n % modulus == remainder``."""

    modulus: int
    remainder: int

    @classmethod
    def from_pair(cls, pair: Tuple[int, int]) -> "Constraint":
        """Build from a ``(modulus, remainder)`` tuple."""

        modulus, remainder = pair
        return cls(modulus, remainder)

    @classmethod
    def new_invert_remainder(cls, modulus: int, invert_remainder: int) -> "Constraint":
        """Build from the distance short of the next multiple of ``modulus``.

        Handy when the natural statement is "``k`` steps before a cycle
        boundary": the remainder is then ``(modulus - k) % modulus``.
        """

        return cls(modulus, (modulus - invert_remainder) % modulus)


def chinese_remainder(constraints: Iterable[Constraint]) -> Optional[int]:
    """Find the ``n`` satisfying every constraint, modulo the product of moduli.

    Returns ``None`` when some modulus has no inverse against the product of
    the others, i.e. the moduli are not pairwise coprime.
    """

    constraints = list(constraints)
    product = 1
    for constraint in constraints:
        product *= constraint.modulus

    total = 0
    for constraint in constraints:
        p = product // constraint.modulus
        inverse = _mod_inv(p, constraint.modulus)
        if inverse is None:
            return None
        total += constraint.remainder * inverse * p

    return total % product


__all__ = ["Constraint", "chinese_remainder"]
