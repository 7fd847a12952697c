"""An ordered n-ary tree with editing operations on its nodes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional, Union

from . import traversal
from .treenode import TreeNode

_MISSING = object()

Nodes = Union[TreeNode, Iterable[TreeNode]]


def _clone(node: TreeNode) -> TreeNode:
    """Return a detached copy of ``node`` and everything below it."""
    copy = TreeNode(node.data)
    for child in node.children:
        _clone(child)._link(copy.children, copy)
    return copy


def _is_within(node: TreeNode, root: TreeNode) -> bool:
    """Tell whether ``node`` is ``root`` or lies below it."""
    current: Optional[TreeNode] = node
    while current is not None:
        if current is root:
            return True
        current = current.parent
    return False


class Tree:
    """An ordered forest of :class:`TreeNode` objects.

    Nodes are addressed by the :class:`TreeNode` objects themselves. The
    tree may hold several top-level nodes; ``set_head`` puts the first one
    into an empty tree.
    """

    def __init__(self, head: Any = _MISSING) -> None:
        """Create a tree, empty or with one top-level node.

        A :class:`TreeNode` given as ``head`` is copied with its subtree.
        """
        self._roots: List[TreeNode] = []
        if head is _MISSING:
            return
        if isinstance(head, TreeNode):
            _clone(head)._link(self._roots, None)
        else:
            self.set_head(head)

    def __repr__(self) -> str:
        return f"Tree({[node.data for node in self]!r})"

    def _check(self, node: TreeNode) -> TreeNode:
        top = node
        while top.parent is not None:
            top = top.parent
        if top._container is not self._roots:
            raise ValueError("node does not belong to this tree")
        return node

    def set_head(self, data: Any) -> TreeNode:
        """Put the first top-level node into an empty tree."""
        if self._roots:
            raise ValueError("tree already has a head")
        return TreeNode(data)._link(self._roots, None)

    def roots(self) -> List[TreeNode]:
        """Return the top-level nodes in order."""
        return list(self._roots)

    def clear(self) -> None:
        """Remove every node."""
        for root in list(self._roots):
            root._unlink()

    def __iter__(self) -> Iterator[TreeNode]:
        return traversal.pre_order(list(self._roots))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def post_order(self) -> Iterator[TreeNode]:
        """Yield every node after its children."""
        return traversal.post_order(list(self._roots))

    def fixed_depth(self, depth: int) -> List[TreeNode]:
        """Return the nodes at ``depth`` below the top level, in tree order."""
        return traversal.fixed_depth(self._roots, depth)

    def copy(self) -> Tree:
        """Return a new tree with the same structure and data."""
        other = Tree()
        for root in self._roots:
            _clone(root)._link(other._roots, None)
        return other

    def append_child(self, position: TreeNode, data: Any = None) -> TreeNode:
        """Add a node holding ``data`` as the last child of ``position``."""
        return self._check(position)._append(data)

    def append_subtree(self, position: TreeNode, source: TreeNode) -> TreeNode:
        """Add a copy of ``source`` and its subtree as the last child of ``position``."""
        self._check(position)
        return _clone(source)._link(position.children, position)

    def insert(self, position: Optional[TreeNode], data: Any) -> TreeNode:
        """Add a node as the previous sibling of ``position``.

        With ``position`` None the node goes after the last top-level node.
        """
        if position is None:
            return TreeNode(data)._link(self._roots, None)
        self._check(position)
        return TreeNode(data)._link(position._container, position.parent, position.index())

    def insert_after(self, position: TreeNode, data: Any) -> TreeNode:
        """Add a node as the next sibling of ``position``."""
        self._check(position)
        return TreeNode(data)._link(
            position._container, position.parent, position.index() + 1
        )

    def insert_subtree(self, position: Optional[TreeNode], source: TreeNode) -> TreeNode:
        """Add a copy of ``source`` with its subtree before ``position``."""
        copy = _clone(source)
        if position is None:
            return copy._link(self._roots, None)
        self._check(position)
        return copy._link(position._container, position.parent, position.index())

    def replace(self, position: TreeNode, data: Any) -> TreeNode:
        """Replace the data at ``position``, keeping its children."""
        self._check(position).data = data
        return position

    def replace_subtree(self, position: TreeNode, source: TreeNode) -> TreeNode:
        """Replace ``position`` and its subtree by a copy of ``source``."""
        self._check(position)
        copy = _clone(source)
        container, parent, index = position._container, position.parent, position.index()
        position._unlink()
        return copy._link(container, parent, index)

    def erase(self, position: TreeNode) -> Optional[TreeNode]:
        """Remove ``position`` with its subtree.

        Returns the node that follows it in pre-order once its children are
        skipped, or None at the end of the tree.
        """
        self._check(position)
        current: Optional[TreeNode] = position
        following: Optional[TreeNode] = None
        while current is not None:
            following = current.next_sibling()
            if following is not None:
                break
            current = current.parent
        position._unlink()
        return following

    def erase_children(self, position: TreeNode) -> None:
        """Remove every child of ``position``."""
        for child in list(self._check(position).children):
            child._unlink()

    def flatten(self, position: TreeNode) -> TreeNode:
        """Make the children of ``position`` into its following siblings."""
        self._check(position)
        children = list(position.children)
        container, parent = position._container, position.parent
        start = position.index() + 1
        for offset, child in enumerate(children):
            child._unlink()
            child._link(container, parent, start + offset)
        return position

    def reparent(self, position: TreeNode, nodes: Nodes) -> TreeNode:
        """Move ``nodes`` to be the last children of ``position``.

        A single node stands for all of its children. Returns the first
        node moved, or ``position`` when there was nothing to move.
        """
        self._check(position)
        moving = list(nodes.children) if isinstance(nodes, TreeNode) else list(nodes)
        if not moving:
            return position
        for node in moving:
            self._check(node)
            if _is_within(position, node):
                raise ValueError("cannot move a node below itself")
        for node in moving:
            node._unlink()
            node._link(position.children, position)
        return moving[0]

    def _detach_for_move(self, target: TreeNode, source: TreeNode) -> None:
        self._check(target)
        self._check(source)
        if _is_within(target, source):
            raise ValueError("cannot move a node next to its own descendant")
        source._unlink()

    def move_after(self, target: TreeNode, source: TreeNode) -> TreeNode:
        """Move ``source`` with its subtree to follow ``target``."""
        if target is source:
            return source
        self._detach_for_move(target, source)
        return source._link(target._container, target.parent, target.index() + 1)

    def move_before(self, target: TreeNode, source: TreeNode) -> TreeNode:
        """Move ``source`` with its subtree to precede ``target``."""
        if target is source:
            return source
        self._detach_for_move(target, source)
        return source._link(target._container, target.parent, target.index())

    def move_ontop(self, target: TreeNode, source: TreeNode) -> TreeNode:
        """Move ``source`` into the place of ``target``, erasing ``target``."""
        if target is source:
            return source
        self._check(target)
        self._check(source)
        if _is_within(source, target) or _is_within(target, source):
            raise ValueError("source and target must not contain each other")
        source._unlink()
        container, parent, index = target._container, target.parent, target.index()
        target._unlink()
        return source._link(container, parent, index)

    def swap(self, node: TreeNode) -> None:
        """Exchange ``node`` with its next sibling, if it has one."""
        self._check(node)
        following = node.next_sibling()
        if following is None:
            return
        container = node._container
        index = node.index()
        container[index], container[index + 1] = following, node

    def is_in_subtree(self, position: TreeNode, roots: Nodes) -> bool:
        """Tell whether ``position`` lies in the subtree of any of ``roots``."""
        candidates = [roots] if isinstance(roots, TreeNode) else list(roots)
        return any(_is_within(position, root) for root in candidates)

    def depth(self, position: TreeNode) -> int:
        """Return the number of ancestors of ``position``."""
        return self._check(position).depth()