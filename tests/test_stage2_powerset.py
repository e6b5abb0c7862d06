from belnapian.core.belnapian import Belnapian
from belnapian.core.powerset import PowerSet

def test_sixteen_inhabitants():
    assert len(PowerSet) == 16
    assert sorted(p.value for p in PowerSet) == list(range(16))

def test_empty_set():
    assert PowerSet.EMPTY.is_empty()
    assert not PowerSet.EMPTY.is_unknown()
    assert PowerSet.EMPTY.members() == frozenset()
    assert PowerSet.from_members([]) is PowerSet.EMPTY

def test_singletons_are_known():
    for b in Belnapian:
        single = PowerSet.from_members([b])
        assert not single.is_unknown()
        assert not single.is_empty()
        assert single.members() == frozenset([b])
        assert single.name == b.value

def test_unknown_shaped_inhabitants():
    unknown = [p for p in PowerSet if p.is_unknown()]
    assert len(unknown) == 11
    assert all(2 <= len(p.members()) <= 4 for p in unknown)

def test_membership_predicates():
    p = PowerSet.NFB
    assert p.could_be_neither()
    assert p.could_be_false()
    assert not p.could_be_true()
    assert p.could_be_both()

    assert not PowerSet.EMPTY.could_be_neither()
    assert PowerSet.NFTB.could_be_true()

def test_from_members_is_order_insensitive():
    assert PowerSet.from_members([Belnapian.BOTH, Belnapian.FALSE]) is PowerSet.FB
    assert PowerSet.from_members([Belnapian.FALSE, Belnapian.BOTH, Belnapian.FALSE]) is PowerSet.FB
