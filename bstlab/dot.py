"""Graphviz output for binary trees and binary search trees."""

from __future__ import annotations

import os
from typing import Callable, Iterator, Protocol, TypeVar, Union

from bstlab.bst import BstNode
from bstlab.tree import Node

_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"

PathLike = Union[str, "os.PathLike[str]"]


class _Binary(Protocol):
    left: object
    right: object


_N = TypeVar("_N", Node, BstNode)


def _edges(root: _N, label: Callable[[_N], int]) -> Iterator[str]:
    """Yield one edge line per parent-child link.

    A node's own edges come first, then those of its left subtree,
    then those of its right subtree.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        children = [child for child in (node.left, node.right) if child is not None]
        for child in children:
            yield f"\t{label(node)}--{label(child)};\n"
        stack.extend(reversed(children))


def _render(root: _N, label: Callable[[_N], int]) -> str:
    return _PREAMBLE + "".join(_edges(root, label)) + _EPILOGUE


def dot_text(root: Node) -> str:
    """Return the Graphviz text describing the tree below ``root``."""
    return _render(root, lambda node: node.value)


def dot_text_bst(root: BstNode) -> str:
    """Return the Graphviz text describing the search tree below ``root``."""
    return _render(root, lambda node: node.key)


def generate_dotfile(root: Node, output_path: PathLike) -> None:
    """Write the Graphviz description of the tree to ``output_path``."""
    with open(output_path, "w", encoding="utf-8") as handle:
        handle.write(dot_text(root))


def generate_dotfile_bst(root: BstNode, output_path: PathLike) -> None:
    """Write the Graphviz description of the search tree to ``output_path``."""
    with open(output_path, "w", encoding="utf-8") as handle:
        handle.write(dot_text_bst(root))