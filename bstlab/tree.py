"""Binary tree nodes with parent links and value-based queries."""

from __future__ import annotations

from typing import Iterator


def _same_value(a: Node | None, b: Node | None) -> bool:
    """True if both are absent or both hold the same value."""
    if a is None or b is None:
        return a is None and b is None
    return a.value == b.value


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.value
        return (
            f"Node(value={self.value!r}, parent={parent!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def add_left_child(self, value: int) -> Node:
        """Attach a new left child holding ``value`` and return it."""
        self.left = Node(value, parent=self)
        return self.left

    def add_right_child(self, value: int) -> Node:
        """Attach a new right child holding ``value`` and return it."""
        self.right = Node(value, parent=self)
        return self.right

    def copy(self) -> Node:
        """Return a shallow copy sharing parent and children with this node."""
        clone = Node(self.value, self.parent)
        clone.left = self.left
        clone.right = self.right
        return clone

    def get_node_by_value(self, value: int) -> Node | None:
        """Find a node holding ``value`` and return a copy of it.

        The walk follows the left child whenever there is one and only
        otherwise the right child.
        """
        node: Node | None = self
        while node is not None:
            if node.value == value:
                return node.copy()
            node = node.left if node.left is not None else node.right
        return None

    def get_node_by_full_property(self, node: Node) -> Node | None:
        """Find a node whose value, parent value and child values all match ``node``.

        Follows the same path as :meth:`get_node_by_value` and returns a copy.
        """
        current: Node | None = self
        while current is not None:
            if (
                current.value == node.value
                and _same_value(node.parent, current.parent)
                and _same_value(node.left, current.left)
                and _same_value(node.right, current.right)
            ):
                return current.copy()
            current = current.left if current.left is not None else current.right
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Cut off the subtree holding ``value``.

        The matching node loses its parent link; every node on the path
        down to it loses the child link that was followed, whether or not
        a match was found. Returns whether a match was found.
        """
        if self.value == value:
            self.parent = None
            return True
        if self.left is not None:
            found = self.left.discard_node_by_value(value)
            self.left = None
            return found
        if self.right is not None:
            found = self.right.discard_node_by_value(value)
            self.right = None
            return found
        return False

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here, this one included."""
        return 1 + sum(child.count_nodes() for child in self._children())

    def tree_depth(self) -> int:
        """Length in edges of the longest downward path from this node."""
        return max((child.tree_depth() + 1 for child in self._children()), default=0)

    def sibling(self) -> Node | None:
        """The other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left