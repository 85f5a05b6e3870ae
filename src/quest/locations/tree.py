"""Binary tree of mansion locations."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator

from quest.domain.enums import Direction

_logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Location:
    name: str
    left: Location | None = None
    right: Location | None = None

    def child(self, direction: Direction) -> Location | None:
        if direction == Direction.LEFT:
            return self.left
        return self.right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def create_location(name: str) -> Location:
    if not name or not name.strip():
        raise ValueError("Location name must not be blank.")
    return Location(name=name)


def attach(parent: Location, direction: Direction, child: Location) -> Location:
    """Link ``child`` into an empty slot of ``parent`` and return the child."""
    if parent.child(direction) is not None:
        raise ValueError(f"{parent.name} already has a {direction} passage.")
    if direction == Direction.LEFT:
        parent.left = child
    else:
        parent.right = child
    return child


def descend(node: Location, direction: Direction) -> Location | None:
    return node.child(Direction(direction))


def iter_preorder(root: Location | None) -> Iterator[tuple[int, Location]]:
    """Yield ``(depth, node)`` pairs, parent before children, left first."""
    if root is None:
        return
    stack: list[tuple[int, Location]] = [(0, root)]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        if node.right is not None:
            stack.append((depth + 1, node.right))
        if node.left is not None:
            stack.append((depth + 1, node.left))


def teardown(root: Location | None) -> list[str]:
    """Release the tree in post-order and return the names in release order."""
    released: list[str] = []
    if root is None:
        return released
    stack: list[tuple[Location, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            node.left = None
            node.right = None
            released.append(node.name)
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))
    _logger.debug("Released %d locations", len(released))
    return released
