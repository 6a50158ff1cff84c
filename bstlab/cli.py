"""Command that exercises the tree structures and writes Graphviz files."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO, Union

from bstlab.bst import delete, insert
from bstlab.dot import generate_dotfile, generate_dotfile_bst
from bstlab.tree import Node

PathLike = Union[str, "os.PathLike[str]"]


def _some(key: int) -> str:
    return f"Some({key})"


def demo_binary_search_tree(
    output_path: PathLike = "bst_graph.dot", out: TextIO | None = None
) -> None:
    """Build a search tree, delete its root, write it out and query it.

    Raises ValueError when a successor query reaches a node without a parent.
    """
    out = sys.stdout if out is None else out

    root = None
    for key in (15, 10, 20, 8, 12):
        root = insert(root, key)
    print("Tree structure has been modified after insertions.", file=out)

    root = delete(root, root)
    print("Tree structure has been modified after deletion.", file=out)
    if root is None:
        raise ValueError("tree is empty after deletion")

    generate_dotfile_bst(root, output_path)

    for key in (15, 9, 22):
        found = root.tree_search(key)
        result = "not found" if found is None else f"found -> {_some(found.key)}"
        print(f"tree search result of key {key} is {result}", file=out)

    print(f"minimum result {_some(root.minimum().key)}", file=out)
    maximum = root.maximum()
    print(f"maximum result {_some(maximum.key)}", file=out)
    print(f"root node {_some(maximum.root().key)}", file=out)

    for key in (2, 20, 15, 13, 9, 7, 22):
        node = root.tree_search(key)
        if node is None:
            print(
                f"node with key of {key} does not exist, failed to get successor",
                file=out,
            )
            continue
        print(f"successor of node ({key}) is ", end="", file=out)
        successor = node.tree_successor_simpler()
        print("not found" if successor is None else _some(successor.key), file=out)


def demo_binary_tree(directory: PathLike = ".", out: TextIO | None = None) -> None:
    """Build a plain binary tree, query it, discard a subtree and write snapshots."""
    out = sys.stdout if out is None else out
    directory = Path(directory)

    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    generate_dotfile(root, directory / "prime.dot")

    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    generate_dotfile(root, directory / "prime_t2.dot")

    print(f"Current tree depth: {root.tree_depth()}", file=out)
    print(f"Amount of nodes in current tree: {root.count_nodes()}", file=out)
    print(f"Amount of nodes in current subtree: {right.count_nodes()}", file=out)

    left.sibling()

    by_value = root.get_node_by_value(3)
    print(f"left subtree seek by value {by_value!r}", file=out)
    by_property = root.get_node_by_full_property(by_value) if by_value else None
    print(f"left subtree seek by full property {by_property!r}", file=out)

    shallow = root.copy()
    flag = shallow.discard_node_by_value(3)
    print(f"status of node deletion: {'true' if flag else 'false'}", file=out)
    generate_dotfile(shallow, directory / "prime_t3.dot")

    print(f"Depth after discard {shallow.tree_depth()}", file=out)
    print(f"Count nodes after discard {shallow.count_nodes()}", file=out)
    generate_dotfile(root, directory / "prime_t4.dot")


def main(argv: list[str] | None = None) -> int:
    """Run a demonstration and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="bstlab", description="Exercise the tree structures and write Graphviz files."
    )
    parser.add_argument(
        "--output", default="bst_graph.dot", help="dot file for the search tree demo"
    )
    parser.add_argument(
        "--binary-tree",
        action="store_true",
        help="run the plain binary tree demo instead",
    )
    parser.add_argument(
        "--directory", default=".", help="directory for the binary tree dot files"
    )
    args = parser.parse_args(argv)

    try:
        if args.binary_tree:
            demo_binary_tree(args.directory)
        else:
            demo_binary_search_tree(args.output)
    except (ValueError, OSError) as exc:
        sys.stdout.flush()
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())