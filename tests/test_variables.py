import pytest

from jagcache.variables import Varbit, VariableKind, Varp, VarpOrVarbit


def test_from_raw_sentinel_is_none():
    assert Varbit.from_raw(0xFFFF).val is None
    assert Varp.from_raw(0xFFFF).val is None
    assert Varbit.from_raw(5).val == 5
    assert Varp.from_raw(0).val == 0


def test_type_names():
    assert Varbit.from_raw(1).type == "varbit"
    assert Varp.from_raw(1).type == "varp"


def test_varbit_and_varp_differ():
    assert Varbit.from_raw(3) == Varbit(3)
    assert not (Varbit(3) == Varp(3))


def test_ordering_none_first():
    values = [Varbit(9), Varbit(None), Varbit(2)]
    assert sorted(values) == [Varbit(None), Varbit(2), Varbit(9)]


def test_from_pair_varp():
    var = VarpOrVarbit.from_pair(Varp.from_raw(7), Varbit.from_raw(0xFFFF))
    assert var == VarpOrVarbit(VariableKind.VARP, 7)


def test_from_pair_varbit():
    var = VarpOrVarbit.from_pair(Varp.from_raw(0xFFFF), Varbit.from_raw(11))
    assert var.kind is VariableKind.VARBIT
    assert var.id == 11


@pytest.mark.parametrize("varp,varbit", [(1, 2), (0xFFFF, 0xFFFF)])
def test_from_pair_invalid(varp, varbit):
    with pytest.raises(ValueError):
        VarpOrVarbit.from_pair(Varp.from_raw(varp), Varbit.from_raw(varbit))


def test_varbit_sorts_before_varp():
    a = VarpOrVarbit(VariableKind.VARP, 1)
    b = VarpOrVarbit(VariableKind.VARBIT, 50)
    c = VarpOrVarbit(VariableKind.VARBIT, 3)
    assert sorted([a, b, c]) == [c, b, a]