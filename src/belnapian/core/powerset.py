from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable

from .belnapian import Belnapian


class PowerSet(Enum):
    """
    Every subset of {NEITHER, FALSE, TRUE, BOTH}.

    Values are membership bitmasks (N=1, F=2, T=4, B=8). EMPTY only shows up
    when something upstream is inconsistent; combining two non-empty sets
    never produces it.
    """

    EMPTY = 0
    N = 1
    F = 2
    NF = 3
    T = 4
    NT = 5
    FT = 6
    NFT = 7
    B = 8
    NB = 9
    FB = 10
    NFB = 11
    TB = 12
    NTB = 13
    FTB = 14
    NFTB = 15

    @classmethod
    def from_members(cls, members: Iterable[Belnapian]) -> PowerSet:
        mask = 0
        for member in members:
            mask |= member.mask
        return cls(mask)

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
        return len(self.members()) >= 2

    def is_empty(self) -> bool:
        return self is PowerSet.EMPTY
