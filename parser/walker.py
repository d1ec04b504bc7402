from __future__ import annotations

from collections.abc import Iterator

from tree_sitter import Node, Tree


def walk_preorder(root: Node | Tree) -> Iterator[Node]:
    """
    Yield every node under root (root included) exactly once, depth-first:
    a node before its children, its children before its next sibling.

    Each call creates a fresh cursor, so the sequence can be restarted by
    calling again.
    """
    cursor = root.walk()
    climbing = False
    while True:
        if not climbing:
            yield cursor.node
            if cursor.goto_first_child():
                continue
        if cursor.goto_next_sibling():
            climbing = False
        elif cursor.goto_parent():
            climbing = True
        else:
            return
