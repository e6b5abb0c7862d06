from itertools import product

import pytest
from belnapian.core.belnapian import Belnapian
from belnapian.core.errors import NotRepresentableError
from belnapian.core.extended import EBelnapian, Tag
from belnapian.core.unknown import Unknown

N, F, T, B = Belnapian.NEITHER, Belnapian.FALSE, Belnapian.TRUE, Belnapian.BOTH

ALL = [EBelnapian.known(b) for b in Belnapian] + [EBelnapian.unknown(u) for u in Unknown]
BINARY = ["and_", "or_", "superposition", "annihilation", "eq"]

def test_fifteen_values():
    assert len(set(ALL)) == 15

def test_tags():
    assert EBelnapian.known(T).tag == Tag.KNOWN
    assert not EBelnapian.known(T).is_unknown()
    assert EBelnapian.unknown(Unknown.FT).tag == Tag.UNKNOWN
    assert EBelnapian.unknown(Unknown.FT).is_unknown()

def test_values_are_immutable():
    value = EBelnapian.known(T)
    with pytest.raises(AttributeError):
        value.value = F

def test_from_bool():
    assert EBelnapian.from_bool(True) == EBelnapian.known(T)
    assert EBelnapian.from_bool(False) == EBelnapian.known(F)

def test_to_bool():
    assert EBelnapian.known(T).to_bool() is True
    assert EBelnapian.known(F).to_bool() is False
    with pytest.raises(NotRepresentableError):
        EBelnapian.known(B).to_bool()
    with pytest.raises(NotRepresentableError):
        EBelnapian.unknown(Unknown.FT).to_bool()

def test_dispatch_known_known():
    assert EBelnapian.known(F).and_(EBelnapian.known(B)) == EBelnapian.known(F)
    assert EBelnapian.known(N).or_(EBelnapian.known(B)) == EBelnapian.known(T)
    assert EBelnapian.known(T).eq(EBelnapian.known(T)) == EBelnapian.known(T)
    assert EBelnapian.known(T).eq(EBelnapian.known(B)) == EBelnapian.known(F)

def test_dispatch_unknown_unknown():
    a, b = EBelnapian.unknown(Unknown.NF), EBelnapian.unknown(Unknown.FB)
    assert a.and_(b) == Unknown.NF.and_(Unknown.FB) == EBelnapian.known(F)

def test_dispatch_mixed_in_both_orders():
    known, unknown = EBelnapian.known(T), EBelnapian.unknown(Unknown.NFB)
    assert known.eq(unknown) == EBelnapian.known(F)
    assert unknown.eq(known) == EBelnapian.known(F)
    assert known.and_(unknown) == unknown.and_(known) == EBelnapian.unknown(Unknown.NFB)
    assert EBelnapian.unknown(Unknown.NT).or_(EBelnapian.known(B)) == EBelnapian.known(T)

def test_not_preserves_tag():
    for x in ALL:
        assert x.not_().tag == x.tag
        assert x.not_().not_() == x
        assert ~x == x.not_()
    assert EBelnapian.unknown(Unknown.NF).not_() == EBelnapian.unknown(Unknown.NT)
    assert EBelnapian.known(F).not_() == EBelnapian.known(T)

@pytest.mark.parametrize("op", BINARY)
def test_commutativity(op):
    for a, b in product(ALL, repeat=2):
        assert getattr(a, op)(b) == getattr(b, op)(a)

@pytest.mark.parametrize("op", BINARY)
def test_agrees_with_atomic_layer(op):
    for a, b in product(Belnapian, repeat=2):
        got = getattr(EBelnapian.known(a), op)(EBelnapian.known(b))
        assert got == EBelnapian.known(getattr(a, op)(b))

def test_not_agrees_with_atomic_layer():
    for a in Belnapian:
        assert EBelnapian.known(a).not_() == EBelnapian.known(a.not_())

@pytest.mark.parametrize("op", ["and_", "or_", "superposition", "annihilation"])
def test_collapse_is_sound(op):
    def members(x):
        return {x.value} if x.tag == Tag.KNOWN else x.value.members()

    for a, b in product(ALL, repeat=2):
        result = getattr(a, op)(b)
        witnesses = {getattr(x, op)(y) for x in members(a) for y in members(b)}
        if result.is_unknown():
            assert result.value.members() == witnesses
        else:
            assert witnesses == {result.value}

def test_xor_is_not_defined():
    assert not hasattr(EBelnapian, "xor")
    assert not hasattr(Unknown, "xor")

def test_rejects_foreign_operands():
    with pytest.raises(TypeError):
        EBelnapian.known(T).and_(T)
    with pytest.raises(TypeError):
        EBelnapian.known(T) & T

def test_tag_must_match_value():
    with pytest.raises(TypeError):
        EBelnapian(Tag.KNOWN, Unknown.NF)
    with pytest.raises(TypeError):
        EBelnapian(Tag.UNKNOWN, T)
    with pytest.raises(TypeError):
        EBelnapian.known(True)
    assert EBelnapian(Tag.UNKNOWN, Unknown.NF) == EBelnapian.unknown(Unknown.NF)
