import pytest

from egg.errors import EggReferenceError
from egg.types.expression import Word
from egg.types.scope import Scope


@pytest.fixture
def chain():
    root = Scope()
    root.define("x", 1)
    root.define("y", 2)
    child = Scope(parent=root)
    child.define("y", 20)
    grandchild = Scope(parent=child)
    return root, child, grandchild


def test_lookup_nearest_binding_wins(chain):
    root, child, grandchild = chain
    assert grandchild.lookup("y") == 20
    assert grandchild.lookup("x") == 1
    assert root.lookup("y") == 2


def test_lookup_unbound_names_the_identifier(chain):
    *_, grandchild = chain
    with pytest.raises(EggReferenceError) as info:
        grandchild.lookup("zzz")
    assert "Undefined binding: zzz" in str(info.value)
    assert info.value.line is None


def test_lookup_unbound_carries_node_position():
    with pytest.raises(EggReferenceError) as info:
        Scope().lookup("nope", Word("nope", 4, 7))
    assert (info.value.line, info.value.column) == (4, 7)


def test_define_writes_own_entry_only(chain):
    root, child, grandchild = chain
    grandchild.define("x", 100)
    assert grandchild.lookup("x") == 100
    assert root.lookup("x") == 1
    assert grandchild.has_own("x")
    assert not child.has_own("x")


def test_assign_updates_nearest_owner(chain):
    root, child, grandchild = chain
    grandchild.assign("y", 99)
    assert child.vars["y"] == 99
    assert root.vars["y"] == 2
    assert not grandchild.has_own("y")

    grandchild.assign("x", 5)
    assert root.vars["x"] == 5


def test_assign_never_creates(chain):
    *_, grandchild = chain
    with pytest.raises(EggReferenceError):
        grandchild.assign("fresh", 1)
    assert "fresh" not in grandchild


def test_contains_and_root(chain):
    root, child, grandchild = chain
    assert "x" in grandchild
    assert "q" not in grandchild
    assert grandchild.root() is root
    assert grandchild.find("y") is child


def test_str_and_repr(chain):
    root, child, _ = chain
    assert str(root) == "{x: 1, y: 2}"
    assert str(child) == "{y: 20} -> ..."
    assert repr(child) == "<Scope chain: {y: 20} -> {x: 1, y: 2}>"
