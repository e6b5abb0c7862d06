from __future__ import annotations

from enum import Enum
from typing import FrozenSet

from .belnapian import Belnapian
from .extended import EBelnapian
from .grid import parse_grid
from .laws import law
from .powerset import PowerSet


class Unknown(Enum):
    """
    The 11 ways of not knowing which Belnapian value holds.

    Each member names the values it could still be (N, F, T, B) and its value
    is the same bitmask PowerSet uses. Singletons are plain Belnapian values
    and the empty set is not an Unknown, so every member has 2 to 4 values.
    """

    NF = 3
    NT = 5
    FT = 6
    NFT = 7
    NB = 9
    FB = 10
    NFB = 11
    TB = 12
    NTB = 13
    FTB = 14
    NFTB = 15

    def members(self) -> FrozenSet[Belnapian]:
        return frozenset(b for b in Belnapian if self.value & b.mask)

    def could_be_neither(self) -> bool:
        return bool(self.value & Belnapian.NEITHER.mask)

    def could_be_false(self) -> bool:
        return bool(self.value & Belnapian.FALSE.mask)

    def could_be_true(self) -> bool:
        return bool(self.value & Belnapian.TRUE.mask)

    def could_be_both(self) -> bool:
        return bool(self.value & Belnapian.BOTH.mask)

    def is_unknown(self) -> bool:
        return True

    def is_empty(self) -> bool:
        return False

    def to_powerset(self) -> PowerSet:
        return PowerSet(self.value)

    @law(involution=True)
    def not_(self) -> Unknown:
        return _NOT[self]

    @law(commutative=True)
    def and_(self, other: Unknown) -> EBelnapian:
        return _AND[(self, other)]

    @law(commutative=True)
    def or_(self, other: Unknown) -> EBelnapian:
        return _OR[(self, other)]

    @law(commutative=True)
    def superposition(self, other: Unknown) -> EBelnapian:
        return _SUPERPOSITION[(self, other)]

    @law(commutative=True)
    def annihilation(self, other: Unknown) -> EBelnapian:
        return _ANNIHILATION[(self, other)]

    @law(commutative=True)
    def eq(self, other: Unknown) -> EBelnapian:
        # Rule order matters.
        # Disjoint sets: no pair of candidates can be equal.
        if not self.value & other.value:
            return EBelnapian.known(Belnapian.FALSE)
        # Both sets hold at least two values, so some pair always differs.
        return EBelnapian.unknown(Unknown.FT)

    def __and__(self, other):
        if not isinstance(other, Unknown):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not isinstance(other, Unknown):
            return NotImplemented
        return self.or_(other)

    def __invert__(self):
        return self.not_()


def cell_from_symbol(token: str) -> EBelnapian:
    """Decode a table cell: one letter is a known value, more is an Unknown."""
    if len(token) == 1:
        return EBelnapian.known(Belnapian(token))
    return EBelnapian.unknown(Unknown[token])


_NOT = {
    Unknown.NF: Unknown.NT,
    Unknown.NT: Unknown.NF,
    Unknown.FB: Unknown.TB,
    Unknown.TB: Unknown.FB,
    Unknown.NFB: Unknown.NTB,
    Unknown.NTB: Unknown.NFB,
    Unknown.FT: Unknown.FT,
    Unknown.NB: Unknown.NB,
    Unknown.NFT: Unknown.NFT,
    Unknown.FTB: Unknown.FTB,
    Unknown.NFTB: Unknown.NFTB,
}

# Rows are the left operand, columns the right one. Every cell is the union of
# op(x, y) over x in the row set and y in the column set, collapsed to a known
# value when that union has a single member.

_AND_TABLE = """
      NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
NF    NF    NF    NF    NF    NF    F     NF    NF    NF    NF    NF
NT    NF    NT    NFT   NFT   NFB   FB    NFB   NFTB  NFTB  NFTB  NFTB
FT    NF    NFT   FT    NFT   NFB   FB    NFB   FTB   NFTB  FTB   NFTB
NFT   NF    NFT   NFT   NFT   NFB   FB    NFB   NFTB  NFTB  NFTB  NFTB
NB    NF    NFB   NFB   NFB   NFB   FB    NFB   NFB   NFB   NFB   NFB
FB    F     FB    FB    FB    FB    FB    FB    FB    FB    FB    FB
NFB   NF    NFB   NFB   NFB   NFB   FB    NFB   NFB   NFB   NFB   NFB
TB    NF    NFTB  FTB   NFTB  NFB   FB    NFB   TB    NFTB  FTB   NFTB
NTB   NF    NFTB  NFTB  NFTB  NFB   FB    NFB   NFTB  NFTB  NFTB  NFTB
FTB   NF    NFTB  FTB   NFTB  NFB   FB    NFB   FTB   NFTB  FTB   NFTB
NFTB  NF    NFTB  NFTB  NFTB  NFB   FB    NFB   NFTB  NFTB  NFTB  NFTB
"""

_OR_TABLE = """
      NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
NF    NF    NT    NFT   NFT   NTB   NFTB  NFTB  TB    NTB   NFTB  NFTB
NT    NT    NT    NT    NT    NT    NT    NT    T     NT    NT    NT
FT    NFT   NT    FT    NFT   NTB   FTB   NFTB  TB    NTB   FTB   NFTB
NFT   NFT   NT    NFT   NFT   NTB   NFTB  NFTB  TB    NTB   NFTB  NFTB
NB    NTB   NT    NTB   NTB   NTB   NTB   NTB   TB    NTB   NTB   NTB
FB    NFTB  NT    FTB   NFTB  NTB   FB    NFTB  TB    NTB   FTB   NFTB
NFB   NFTB  NT    NFTB  NFTB  NTB   NFTB  NFTB  TB    NTB   NFTB  NFTB
TB    TB    T     TB    TB    TB    TB    TB    TB    TB    TB    TB
NTB   NTB   NT    NTB   NTB   NTB   NTB   NTB   TB    NTB   NTB   NTB
FTB   NFTB  NT    FTB   NFTB  NTB   FTB   NFTB  TB    NTB   FTB   NFTB
NFTB  NFTB  NT    NFTB  NFTB  NTB   NFTB  NFTB  TB    NTB   NFTB  NFTB
"""

_SUPERPOSITION_TABLE = """
      NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
NF    NF    NFTB  FTB   NFTB  NFB   FB    NFB   TB    NFTB  FTB   NFTB
NT    NFTB  NT    FTB   NFTB  NTB   FB    NFTB  TB    NTB   FTB   NFTB
FT    FTB   FTB   FTB   FTB   FTB   FB    FTB   TB    FTB   FTB   FTB
NFT   NFTB  NFTB  FTB   NFTB  NFTB  FB    NFTB  TB    NFTB  FTB   NFTB
NB    NFB   NTB   FTB   NFTB  NB    FB    NFB   TB    NTB   FTB   NFTB
FB    FB    FB    FB    FB    FB    FB    FB    B     FB    FB    FB
NFB   NFB   NFTB  FTB   NFTB  NFB   FB    NFB   TB    NFTB  FTB   NFTB
TB    TB    TB    TB    TB    TB    B     TB    TB    TB    TB    TB
NTB   NFTB  NTB   FTB   NFTB  NTB   FB    NFTB  TB    NTB   FTB   NFTB
FTB   FTB   FTB   FTB   FTB   FTB   FB    FTB   TB    FTB   FTB   FTB
NFTB  NFTB  NFTB  FTB   NFTB  NFTB  FB    NFTB  TB    NFTB  FTB   NFTB
"""

_ANNIHILATION_TABLE = """
      NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
NF    NF    N     NF    NF    NF    NF    NF    NF    NF    NF    NF
NT    N     NT    NT    NT    NT    NT    NT    NT    NT    NT    NT
FT    NF    NT    NFT   NFT   NFT   NFT   NFT   NFT   NFT   NFT   NFT
NFT   NF    NT    NFT   NFT   NFT   NFT   NFT   NFT   NFT   NFT   NFT
NB    NF    NT    NFT   NFT   NB    NFB   NFB   NTB   NTB   NFTB  NFTB
FB    NF    NT    NFT   NFT   NFB   FB    NFB   NFTB  NFTB  NFTB  NFTB
NFB   NF    NT    NFT   NFT   NFB   NFB   NFB   NFTB  NFTB  NFTB  NFTB
TB    NF    NT    NFT   NFT   NTB   NFTB  NFTB  TB    NTB   NFTB  NFTB
NTB   NF    NT    NFT   NFT   NTB   NFTB  NFTB  NTB   NTB   NFTB  NFTB
FTB   NF    NT    NFT   NFT   NFTB  NFTB  NFTB  NFTB  NFTB  NFTB  NFTB
NFTB  NF    NT    NFT   NFT   NFTB  NFTB  NFTB  NFTB  NFTB  NFTB  NFTB
"""


def _unknown_key(token: str) -> Unknown:
    return Unknown[token]


def _load(name: str, text: str):
    return parse_grid(name, text, _unknown_key, _unknown_key, cell_from_symbol)


_AND = _load("Unknown.and", _AND_TABLE)
_OR = _load("Unknown.or", _OR_TABLE)
_SUPERPOSITION = _load("Unknown.superposition", _SUPERPOSITION_TABLE)
_ANNIHILATION = _load("Unknown.annihilation", _ANNIHILATION_TABLE)
