"""Ordered, duplicate-free clue notebook backed by a binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator

_logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ClueNode:
    text: str
    left: ClueNode | None = None
    right: ClueNode | None = None


def _compare(a: str, b: str) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def insert_clue(root: ClueNode | None, text: str) -> tuple[ClueNode, bool]:
    """Insert ``text`` if absent.

    Returns the root of the tree after the call and whether a node was
    created. An existing equal key leaves the tree untouched.
    """
    if root is None:
        return ClueNode(text), True
    current = root
    while True:
        cmp = _compare(text, current.text)
        if cmp == 0:
            return root, False
        if cmp < 0:
            if current.left is None:
                current.left = ClueNode(text)
                return root, True
            current = current.left
        else:
            if current.right is None:
                current.right = ClueNode(text)
                return root, True
            current = current.right


def iter_in_order(root: ClueNode | None) -> Iterator[str]:
    stack: list[ClueNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.text
        node = node.right


def count_clues(root: ClueNode | None) -> int:
    return sum(1 for _ in iter_in_order(root))


def teardown(root: ClueNode | None) -> int:
    if root is None:
        return 0
    released = 0
    stack: list[tuple[ClueNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            node.left = None
            node.right = None
            released += 1
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))
    return released


class ClueIndex:
    def __init__(self) -> None:
        self.root: ClueNode | None = None
        self._size = 0

    def insert(self, text: str) -> bool:
        self.root, inserted = insert_clue(self.root, text)
        if inserted:
            self._size += 1
            _logger.debug("Clue added: %s", text)
        return inserted

    def __iter__(self) -> Iterator[str]:
        return iter_in_order(self.root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str):
            return False
        node = self.root
        while node is not None:
            cmp = _compare(text, node.text)
            if cmp == 0:
                return True
            node = node.left if cmp < 0 else node.right
        return False

    def teardown(self) -> int:
        released = teardown(self.root)
        self.root = None
        self._size = 0
        return released
