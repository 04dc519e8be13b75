"""支壳层描述与容量校验测试"""

import pytest

from atomterms.subshell import MAX_L, CapacityExceeded, Subshell, SubshellType, capacity


@pytest.mark.quick
@pytest.mark.parametrize("l", range(0, 21))
def test_capacity_law(l):
    """容量 = 2(2l+1)。"""
    assert capacity(l) == 2 * (2 * l + 1)
    assert SubshellType(l).capacity == capacity(l)


@pytest.mark.quick
@pytest.mark.parametrize("l", range(0, 4))
def test_construct_up_to_capacity(l):
    """0 <= n <= capacity 均可构造，n = capacity+1 失败。"""
    for n in range(capacity(l) + 1):
        sub = Subshell.new(l, n)
        assert sub.electrons == n and sub.l == l
    with pytest.raises(CapacityExceeded):
        Subshell.new(l, capacity(l) + 1)


@pytest.mark.quick
def test_capacity_exceeded_p7():
    """p^7 超出容量 6，错误信息需包含容量。"""
    with pytest.raises(CapacityExceeded) as excinfo:
        Subshell(SubshellType(1), 7)
    err = excinfo.value
    assert err.capacity == 6
    assert err.electrons == 7
    assert err.subshell_type == SubshellType(1)
    assert "6" in str(err), f"错误信息应包含容量，实际: {err}"


def test_capacity_exceeded_is_value_error():
    with pytest.raises(ValueError):
        Subshell.new(0, 3)


def test_precondition_violations():
    """负 l、过大 l 与负电子数属于前置条件错误，而非容量错误。"""
    with pytest.raises(ValueError, match="角动量量子数必须非负"):
        SubshellType(-1)
    with pytest.raises(ValueError, match="超出支持范围"):
        SubshellType(MAX_L + 1)
    with pytest.raises(ValueError, match="电子数必须非负") as excinfo:
        Subshell.new(1, -1)
    assert not isinstance(excinfo.value, CapacityExceeded)


@pytest.mark.quick
def test_subshell_display():
    assert str(SubshellType(0)) == "s"
    assert str(SubshellType(3)) == "f"
    assert str(SubshellType(6)) == "i"
    assert str(SubshellType(7)) == "(L=7)"
    assert str(Subshell.new(1, 3)) == "p^{3}"
    assert str(Subshell.new(2, 10)) == "d^{10}"


def test_mls_ascending():
    assert list(SubshellType(2).mls()) == [-2, -1, 0, 1, 2]
    assert list(SubshellType(0).mls()) == [0]
