"""
Operations between one known Belnapian value and one Unknown set.

A known operand can force a known result even when the other side is
uncertain (FALSE AND anything is FALSE), so these tables are denser in
known results than the Unknown x Unknown ones. All functions take the known
operand first; EBelnapian swaps operands before calling them.
"""
from __future__ import annotations

from .belnapian import Belnapian
from .extended import EBelnapian
from .grid import parse_grid
from .unknown import Unknown, cell_from_symbol


def and_known_unknown(a: Belnapian, b: Unknown) -> EBelnapian:
    return _AND[(a, b)]


def or_known_unknown(a: Belnapian, b: Unknown) -> EBelnapian:
    return _OR[(a, b)]


def superposition_known_unknown(a: Belnapian, b: Unknown) -> EBelnapian:
    return _SUPERPOSITION[(a, b)]


def annihilation_known_unknown(a: Belnapian, b: Unknown) -> EBelnapian:
    return _ANNIHILATION[(a, b)]


def eq_known_unknown(a: Belnapian, b: Unknown) -> EBelnapian:
    # Rule order matters.
    # The known value is not a candidate: every pair differs.
    if not b.value & a.mask:
        return EBelnapian.known(Belnapian.FALSE)
    # The set holds at least one other candidate, so equality stays open.
    return EBelnapian.unknown(Unknown.FT)


# Rows are the known operand, columns the Unknown one.

_AND_TABLE = """
      NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
N     NF    N     NF    NF    NF    F     NF    NF    NF    NF    NF
F     F     F     F     F     F     F     F     F     F     F     F
T     NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
B     F     FB    FB    FB    FB    FB    FB    B     FB    FB    FB
"""

_OR_TABLE = """
      NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
N     N     NT    NT    NT    NT    NT    NT    T     NT    NT    NT
F     NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
T     T     T     T     T     T     T     T     T     T     T     T
B     TB    T     TB    TB    TB    B     TB    TB    TB    TB    TB
"""

_SUPERPOSITION_TABLE = """
      NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
N     NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
F     F     FB    FB    FB    FB    FB    FB    B     FB    FB    FB
T     TB    T     TB    TB    TB    B     TB    TB    TB    TB    TB
B     B     B     B     B     B     B     B     B     B     B     B
"""

_ANNIHILATION_TABLE = """
      NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
N     N     N     N     N     N     N     N     N     N     N     N
F     NF    N     NF    NF    NF    F     NF    NF    NF    NF    NF
T     N     NT    NT    NT    NT    NT    NT    T     NT    NT    NT
B     NF    NT    FT    NFT   NB    FB    NFB   TB    NTB   FTB   NFTB
"""


def _load(name: str, text: str):
    return parse_grid(name, text, Belnapian, lambda token: Unknown[token], cell_from_symbol)


_AND = _load("Known.and.Unknown", _AND_TABLE)
_OR = _load("Known.or.Unknown", _OR_TABLE)
_SUPERPOSITION = _load("Known.superposition.Unknown", _SUPERPOSITION_TABLE)
_ANNIHILATION = _load("Known.annihilation.Unknown", _ANNIHILATION_TABLE)
