"""Walks over ordered trees of :class:`~ofxkit.treenode.TreeNode` objects."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Union

from .treenode import TreeNode

Roots = Union[TreeNode, Iterable[TreeNode]]


def _as_list(roots: Roots) -> List[TreeNode]:
    if isinstance(roots, TreeNode):
        return [roots]
    return list(roots)


def pre_order(roots: Roots) -> Iterator[TreeNode]:
    """Yield each node before its children, depth first, root by root."""
    stack = list(reversed(_as_list(roots)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def post_order(roots: Roots) -> Iterator[TreeNode]:
    """Yield each node after all of its children, depth first, root by root."""
    for root in _as_list(roots):
        stack = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.children))


def _at_depth(node: TreeNode, depth: int) -> Iterator[TreeNode]:
    if depth == 0:
        yield node
        return
    for child in node.children:
        yield from _at_depth(child, depth - 1)


def fixed_depth(roots: Roots, depth: int) -> List[TreeNode]:
    """Return, in tree order, the nodes ``depth`` levels below the roots.

    Raises IndexError when no node lies that deep.
    """
    if depth < 0:
        raise ValueError("depth must not be negative")
    nodes = [found for root in _as_list(roots) for found in _at_depth(root, depth)]
    if not nodes:
        raise IndexError("tree: fixed depth out of range")
    return nodes


def _first_at_depth(node: TreeNode, depth: int) -> Optional[TreeNode]:
    return next(_at_depth(node, depth), None)


def next_at_same_depth(node: TreeNode) -> Optional[TreeNode]:
    """Return the next node in tree order at the same depth, or None."""
    sibling = node.next_sibling()
    if sibling is not None:
        return sibling
    levels = 0
    current = node
    while current.parent is not None:
        current = current.parent
        levels += 1
        sibling = current.next_sibling()
        while sibling is not None:
            found = _first_at_depth(sibling, levels)
            if found is not None:
                return found
            sibling = sibling.next_sibling()
    return None