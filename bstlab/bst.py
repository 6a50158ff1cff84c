"""Binary search tree nodes and the insert, transplant and delete operations."""

from __future__ import annotations


class BstNode:
    """A binary search tree node holding an integer key."""

    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: int, parent: BstNode | None = None) -> None:
        self.key = key
        self.parent = parent
        self.left: BstNode | None = None
        self.right: BstNode | None = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.key
        return (
            f"BstNode(key={self.key!r}, parent={parent!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def add_left_child(self, value: int) -> BstNode:
        """Attach a new left child holding ``value`` and return it."""
        self.left = BstNode(value, parent=self)
        return self.left

    def add_right_child(self, value: int) -> BstNode:
        """Attach a new right child holding ``value`` and return it."""
        self.right = BstNode(value, parent=self)
        return self.right

    def copy(self) -> BstNode:
        """Return a shallow copy sharing parent and children with this node."""
        clone = BstNode(self.key, self.parent)
        clone.left = self.left
        clone.right = self.right
        return clone

    def tree_search(self, value: int) -> BstNode | None:
        """Return a copy of the node holding ``value``, or None."""
        node: BstNode | None = self
        while node is not None:
            if node.key == value:
                return node.copy()
            if value < node.key and node.left is not None:
                node = node.left
            else:
                node = node.right
        return None

    def minimum(self) -> BstNode:
        """Return a copy of the node with the smallest key in this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node.copy()

    def maximum(self) -> BstNode:
        """Return a copy of the node with the largest key in this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node.copy()

    def root(self) -> BstNode:
        """Follow parent links up to the node that has no parent."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def tree_successor(self) -> BstNode | None:
        """The node with the next larger key, or None for the largest key."""
        if self.right is not None:
            return self.right.minimum()
        x: BstNode = self
        y = x.parent
        while y is not None:
            if y.left is not None and y.left.key == x.key:
                return y
            x, y = y, y.parent
        return None

    def tree_successor_simpler(self) -> BstNode | None:
        """Successor search that treats nodes missing a link as empty.

        Raises ValueError when the walk needs a parent that does not exist.
        """
        if not _is_nil(self.right):
            return self.right.minimum()

        if self.parent is None:
            raise ValueError(f"node {self.key} has no parent")
        x: BstNode = self
        y: BstNode | None = self.parent
        y_right = y.right
        while _is_nil(y) and _same_key(x, y_right):
            if y is None or y.parent is None:
                raise ValueError(f"node {x.key} has no parent")
            x, y = y, y.parent

        if _same_key(y, x.root()):
            return None
        if y is None:
            raise ValueError(f"node {x.key} has no parent")
        return y


def _is_nil(node: BstNode | None) -> bool:
    """True unless the node exists with a parent and both children."""
    return node is None or node.parent is None or node.left is None or node.right is None


def _same_key(a: BstNode | None, b: BstNode | None) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return a.key == b.key


def insert(root: BstNode | None, key: int) -> BstNode:
    """Insert ``key`` below ``root`` and return the root of the tree."""
    parent: BstNode | None = None
    node = root
    while node is not None:
        parent = node
        node = node.left if key < node.key else node.right

    new_node = BstNode(key, parent=parent)
    if parent is None:
        return new_node
    if key < parent.key:
        parent.left = new_node
    else:
        parent.right = new_node
    return root


def transplant(root: BstNode | None, u: BstNode, v: BstNode | None) -> BstNode | None:
    """Put ``v`` where ``u`` hangs and return the root of the tree."""
    up = u.parent
    if up is None:
        root = v
    elif up.left is not None and up.left is u:
        up.left = v
    else:
        up.right = v
    if v is not None:
        v.parent = up
    return root


def delete(root: BstNode | None, z: BstNode) -> BstNode | None:
    """Remove ``z`` from the tree and return the root of the tree."""
    z_left, z_right = z.left, z.right
    if z_left is None:
        return transplant(root, z, z_right)
    if z_right is None:
        return transplant(root, z, z_left)

    y = z_right
    while y.left is not None:
        y = y.left
    if y is not z_right:
        root = transplant(root, y, y.right)
        y.right = z_right
        z_right.parent = y
    root = transplant(root, z, y)
    y.left = z_left
    z_left.parent = y
    return root