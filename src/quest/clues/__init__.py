"""Collected clue notebook."""

from .index import ClueIndex, ClueNode, count_clues, insert_clue, iter_in_order

__all__ = [
    "ClueIndex",
    "ClueNode",
    "count_clues",
    "insert_clue",
    "iter_in_order",
]
