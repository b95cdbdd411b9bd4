import pytest
from ellermaze.grid import Grid
from ellermaze.mazegen.sets import SetRegistry

def make_row(values):
    g = Grid.empty(len(values), 2)
    reg = SetRegistry(g, 1)
    for x, v in enumerate(values):
        g.set(x, 1, v)
        reg.register(v, x)
    return g, reg

def test_merge_retags_cells_in_own_row():
    g, reg = make_row([5, 7, 7, 9])
    reg.merge(5, 7)
    assert g.row(1) == [5, 5, 5, 9]
    assert g.row(0) == [0, 0, 0, 0]   # other rows untouched
    assert 7 not in reg
    assert reg.members(5) == [0, 1, 2]
    assert reg.set_ids() == [5, 9]

def test_merge_same_set_is_noop():
    g, reg = make_row([3, 3])
    reg.merge(3, 3)
    assert g.row(1) == [3, 3]
    assert len(reg) == 1

def test_merge_unknown_set_raises():
    _, reg = make_row([1, 2])
    with pytest.raises(KeyError):
        reg.merge(1, 42)
    with pytest.raises(KeyError):
        reg.merge(42, 1)

def test_register_rejects_non_positive():
    _, reg = make_row([1])
    with pytest.raises(ValueError):
        reg.register(0, 0)
