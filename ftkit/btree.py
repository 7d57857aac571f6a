"""Unbalanced binary search tree built from plain nodes.

Functions take the root node (or ``None`` for an empty tree) and a
comparison callable returning a negative, zero or positive number.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional

Compare = Callable[[Any, Any], int]


@dataclass
class BTreeNode:
    """A tree node holding one item and two optional children."""

    item: Any
    left: Optional["BTreeNode"] = None
    right: Optional["BTreeNode"] = None


def insert(root: Optional[BTreeNode], item: Any, cmp: Compare) -> Optional[BTreeNode]:
    """Insert ``item`` and return the (possibly new) root.

    Items comparing less than a node go left; equal or greater go right.
    A ``None`` item is ignored.
    """
    if item is None:
        return root
    if root is None:
        return BTreeNode(item)
    current = root
    while True:
        if cmp(item, current.item) < 0:
            if current.left is None:
                current.left = BTreeNode(item)
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = BTreeNode(item)
                return root
            current = current.right


def search(root: Optional[BTreeNode], ref: Any, cmp: Compare) -> Any:
    """Return the first item comparing equal to ``ref``, or None.

    The walk descends into the left child when there is one and into the
    right child only when there is no left child.
    """
    if ref is None:
        return None
    node = root
    while node is not None:
        if cmp(ref, node.item) == 0:
            return node.item
        node = node.left if node.left is not None else node.right
    return None


def _prefix(node: Optional[BTreeNode]) -> Iterator[BTreeNode]:
    if node is None:
        return
    yield node
    yield from _prefix(node.left)
    yield from _prefix(node.right)


def _infix(node: Optional[BTreeNode]) -> Iterator[BTreeNode]:
    if node is None:
        return
    yield from _infix(node.left)
    yield node
    yield from _infix(node.right)


def _suffix(node: Optional[BTreeNode]) -> Iterator[BTreeNode]:
    if node is None:
        return
    yield from _suffix(node.left)
    yield from _suffix(node.right)
    yield node


def apply_prefix(root: Optional[BTreeNode], func: Callable[[Any], Any]) -> None:
    """Call ``func`` on each item: node, then left subtree, then right subtree."""
    for node in _prefix(root):
        func(node.item)


def apply_infix(root: Optional[BTreeNode], func: Callable[[Any], Any]) -> None:
    """Call ``func`` on each item: left subtree, node, then right subtree."""
    for node in _infix(root):
        func(node.item)


def apply_suffix(root: Optional[BTreeNode], func: Callable[[Any], Any]) -> None:
    """Call ``func`` on each item: left subtree, right subtree, then node."""
    for node in _suffix(root):
        func(node.item)


def apply_by_level(
    root: Optional[BTreeNode], func: Callable[[Any, int, bool], Any]
) -> None:
    """Call ``func(item, level, is_first)`` on every item in prefix order.

    ``is_first`` is true for the first item visited on each level.
    """
    seen_levels = set()

    def visit(node: BTreeNode, level: int) -> None:
        is_first = level not in seen_levels
        seen_levels.add(level)
        func(node.item, level, is_first)
        if node.left is not None:
            visit(node.left, level + 1)
        if node.right is not None:
            visit(node.right, level + 1)

    if root is not None:
        visit(root, 0)


def level_count(root: Optional[BTreeNode]) -> int:
    """Return the number of levels in the tree (0 for an empty tree)."""
    if root is None:
        return 0
    return 1 + max(level_count(root.left), level_count(root.right))


def render(root: Optional[BTreeNode]) -> str:
    """Draw the tree sideways: right subtree on top, ten columns per level."""
    lines: List[str] = []

    def visit(node: Optional[BTreeNode], depth: int) -> None:
        if node is None:
            return
        visit(node.right, depth + 1)
        lines.append("\n" + " " * (10 * depth) + f"{node.item}\n")
        visit(node.left, depth + 1)

    visit(root, 0)
    return "".join(lines)


def print_tree(root: Optional[BTreeNode]) -> None:
    """Write the drawing of the tree to standard output."""
    sys.stdout.write(render(root))
    sys.stdout.flush()