# bstlab

Small binary tree and binary search tree structures with parent links,
plus helpers that write a tree out as a Graphviz `dot` graph.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Plain binary trees

`bstlab.tree.Node` is a binary tree node with a `value`, a `parent` and
`left` and `right` children.

```python
from bstlab.tree import Node

root = Node(5)
left = root.add_left_child(3)
root.add_right_child(7)

print(root.count_nodes())   # 3
print(root.tree_depth())    # 1, counted in edges from the node itself
print(left.sibling().value) # 7
```

Other methods:

- `copy()` returns a shallow copy that shares parent and children.
- `get_node_by_value(value)` walks down, taking the left child whenever there
  is one and otherwise the right child, and returns a copy of the first node
  holding `value`, or `None`.
- `get_node_by_full_property(node)` follows the same path and returns a copy
  of the first node whose value, parent value and child values all match
  those of `node`.
- `discard_node_by_value(value)` follows the same path, cuts every child link
  it passes through and clears the parent link of the matching node. It
  returns whether a match was found.

## Binary search trees

`bstlab.bst` holds `BstNode` together with the functions `insert`,
`transplant` and `delete`. These functions take the current root, which may
be `None`, and return the root after the change.

```python
from bstlab.bst import insert, delete

root = None
for key in (15, 10, 20, 8, 12):
    root = insert(root, key)

node = root.tree_search(12)
print(node.key)                  # 12
print(root.minimum().key)        # 8
print(root.maximum().key)        # 20

root = delete(root, root)        # remove the root node
print(root.key)                  # 20
```

`tree_search`, `minimum` and `maximum` return copies of the nodes they find.
Each node also has:

- `root()`, which follows parent links to the top of the tree;
- `tree_successor()`, which returns the node with the next larger key, or
  `None` for the largest key;
- `tree_successor_simpler()`, a variant that treats any node lacking a
  parent or a child as empty. It raises `ValueError` when its walk needs a
  parent that does not exist.

## Graphviz output

```python
from bstlab.dot import dot_text_bst, generate_dotfile_bst

print(dot_text_bst(root))
generate_dotfile_bst(root, "bst_graph.dot")
```

Every parent–child edge becomes one line like `\t20--10;` inside
`graph tree{ ... }`; a node's own edges come first, then those of its left
subtree, then those of its right subtree. `dot_text` and `generate_dotfile`
do the same for plain `Node` trees.

## Command line

```
bstlab
```

This inserts the keys 15, 10, 20, 8 and 12 into a search tree, deletes its
root, writes the result to `bst_graph.dot` and prints the results of
searches, minimum and maximum, root lookup and successor queries (using
`tree_successor_simpler`). When a successor query reaches a node without a
parent, which happens on this sample tree, the command prints an error and
exits with status 1.

Options:

- `--output PATH`: dot file for the search tree run (default `bst_graph.dot`).
- `--binary-tree`: run the plain binary tree demonstration instead, which
  prints depth, node counts and lookups and writes `prime.dot`,
  `prime_t2.dot`, `prime_t3.dot` and `prime_t4.dot`.
- `--directory DIR`: where those four files go (default `.`).

## What it does not do

The package only writes `.dot` text; it does not run Graphviz or render
images. Trees live in memory only and are not saved or loaded in any other
form.