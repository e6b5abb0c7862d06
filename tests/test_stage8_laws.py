from belnapian.core import conversions as conv
from belnapian.core.belnapian import Belnapian
from belnapian.core.extended import EBelnapian
from belnapian.core.laws import Law, law, laws_of, partial
from belnapian.core.ternary import TernaryValue
from belnapian.core.unknown import Unknown

def test_law_decorator():
    @law(commutative=True)
    def op(a, b):
        return a

    assert laws_of(op) == Law(commutative=True, involution=False, total=True)
    assert op(1, 2) == 1

def test_undecorated_function_has_no_law():
    def op(a):
        return a

    assert laws_of(op) is None

def test_partial_decorator():
    @partial(reason="only even numbers")
    def half(n):
        return n // 2

    assert half._partial
    assert half._partial_reason == "only even numbers"
    assert laws_of(half) == Law(total=False)

def test_declared_laws():
    for cls in (Belnapian, TernaryValue, Unknown, EBelnapian):
        assert laws_of(cls.not_).involution
        for name in ("and_", "or_", "eq"):
            assert laws_of(getattr(cls, name)).commutative

    assert laws_of(Belnapian.xor).commutative
    assert laws_of(Unknown.superposition).commutative
    assert laws_of(EBelnapian.annihilation).commutative

def test_conversion_totality():
    for func in (conv.belnapian_from_bool, conv.extended_from_ternary, conv.powerset_from_unknown):
        assert laws_of(func) is None

    for func in (conv.bool_from_belnapian, conv.ternary_from_extended, conv.unknown_from_powerset):
        assert not laws_of(func).total
        assert func._partial_reason
