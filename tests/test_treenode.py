import pytest

from ofxkit.treenode import TreeNode


@pytest.fixture
def family():
    root = TreeNode("root")
    a = root._append("a")
    b = root._append("b")
    c = root._append("c")
    a1 = a._append("a1")
    a2 = a1._append("a2")
    return root, a, b, c, a1, a2


def test_data_is_kept():
    assert TreeNode("x").data == "x"


def test_number_of_children(family):
    root, a, b, c, a1, _ = family
    assert root.number_of_children() == 3
    assert a.number_of_children() == 1
    assert b.number_of_children() == 0


def test_number_of_siblings_counts_following(family):
    _, a, b, c, _, a2 = family
    assert a.number_of_siblings() == 2
    assert b.number_of_siblings() == 1
    assert c.number_of_siblings() == 0
    assert a2.number_of_siblings() == 0


def test_child_lookup(family):
    root, a, b, c, _, _ = family
    assert root.child(0) is a
    assert root.child(2) is c


def test_child_out_of_range(family):
    root = family[0]
    with pytest.raises(IndexError):
        root.child(3)
    with pytest.raises(IndexError):
        root.child(-1)


def test_index_is_inverse_of_child(family):
    root = family[0]
    for position in range(root.number_of_children()):
        assert root.child(position).index() == position


def test_depth(family):
    root, a, _, _, a1, a2 = family
    assert root.depth() == 0
    assert a.depth() == 1
    assert a1.depth() == 2
    assert a2.depth() == 3


def test_next_and_previous_sibling(family):
    _, a, b, c, _, _ = family
    assert a.next_sibling() is b
    assert c.previous_sibling() is b
    assert c.next_sibling() is None
    assert a.previous_sibling() is None


def test_siblings_includes_self_in_order(family):
    _, a, b, c, _, _ = family
    assert b.siblings() == [a, b, c]


def test_detached_node():
    node = TreeNode(1)
    assert node.siblings() == [node]
    assert node.index() == 0
    assert node.next_sibling() is None
    assert node.number_of_siblings() == 0


def test_parent_links(family):
    root, a, _, _, a1, a2 = family
    assert a.parent is root
    assert a2.parent is a1
    assert root.parent is None


def test_unlink_removes_from_siblings(family):
    root, a, b, c, _, _ = family
    b._unlink()
    assert root.children == [a, c]
    assert b.parent is None
    assert a.next_sibling() is c


def test_link_twice_rejected(family):
    root, a, _, _, _, _ = family
    with pytest.raises(ValueError):
        a._link(root.children, root)