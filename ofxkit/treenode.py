"""Nodes of an ordered n-ary tree."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional


class TreeNode:
    """A node holding a value, a link to its parent and its ordered children.

    Every attached node lives in a sibling list: its parent's ``children``,
    or the list of top-level nodes of the tree that owns it. A node that
    belongs to no list is detached and has no siblings but itself.
    """

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.parent: Optional[TreeNode] = None
        self.children: List[TreeNode] = []
        self._container: Optional[List[TreeNode]] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(list(self.children))

    def number_of_children(self) -> int:
        """Return how many direct children this node has."""
        return len(self.children)

    def number_of_siblings(self) -> int:
        """Return how many siblings follow this node."""
        if self._container is None:
            return 0
        return len(self._container) - self.index() - 1

    def child(self, index: int) -> TreeNode:
        """Return the child at ``index``, counting from zero."""
        if index < 0 or index >= len(self.children):
            raise IndexError(f"child index {index} out of range")
        return self.children[index]

    def index(self) -> int:
        """Return the position of this node among its siblings."""
        if self._container is None:
            return 0
        for position, node in enumerate(self._container):
            if node is self:
                return position
        raise LookupError("node is not present in its sibling list")

    def depth(self) -> int:
        """Return the number of ancestors above this node."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def next_sibling(self) -> Optional[TreeNode]:
        """Return the sibling after this node, or None if it is the last."""
        if self._container is None:
            return None
        position = self.index() + 1
        return self._container[position] if position < len(self._container) else None

    def previous_sibling(self) -> Optional[TreeNode]:
        """Return the sibling before this node, or None if it is the first."""
        if self._container is None:
            return None
        position = self.index()
        return self._container[position - 1] if position > 0 else None

    def siblings(self) -> List[TreeNode]:
        """Return every node in this node's sibling list, itself included."""
        if self._container is None:
            return [self]
        return list(self._container)

    def _link(
        self,
        container: List[TreeNode],
        parent: Optional[TreeNode],
        position: Optional[int] = None,
    ) -> TreeNode:
        """Place this detached node into ``container`` at ``position``."""
        if self._container is not None:
            raise ValueError("node is already attached")
        if position is None:
            container.append(self)
        else:
            container.insert(position, self)
        self._container = container
        self.parent = parent
        return self

    def _unlink(self) -> TreeNode:
        """Remove this node from its sibling list, keeping its children."""
        if self._container is not None:
            del self._container[self.index()]
        self._container = None
        self.parent = None
        return self

    def _append(self, data: Any = None) -> TreeNode:
        """Create a node holding ``data`` and add it as the last child."""
        return TreeNode(data)._link(self.children, self)